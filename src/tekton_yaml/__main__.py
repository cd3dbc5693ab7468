"""Command-line utilities for querying Tekton YAML files.

Every query command reads a single YAML file, which may hold several
documents separated by ``---``, and prints the query result to
standard output.
"""

from json import dumps
from pathlib import Path
from typing import TYPE_CHECKING

from click import Choice, Context, argument, echo, group, option, pass_context
from click import Path as PathParam

from tekton_yaml.classifier import is_tekton_yaml
from tekton_yaml.documents import parse_documents
from tekton_yaml.errors import YamlParseError
from tekton_yaml.jsonschema import make_schema
from tekton_yaml.queries import (
    get_declared_resources,
    get_metadata_name,
    get_pipeline_task_names,
    get_pipeline_task_ref_names,
    get_pipeline_tasks,
    get_tekton_documents,
)
from tekton_yaml.schema import DeclaredKind
from tekton_yaml.settings import CliSettings

if TYPE_CHECKING:
    from collections.abc import Callable

if TYPE_CHECKING:
    from tekton_yaml.documents import YamlDocument

#: Exit status of a file that is not valid YAML in strict mode.
PARSE_ERROR_STATUS = 2
#: Exit status of a file with no recognized Tekton document.
NOT_RECOGNIZED_STATUS = 1

InputFilepath = PathParam(
    exists=True,
    dir_okay=False,
    readable=True,
    path_type=Path,
)

strict_option = option(
    '--strict/--lenient',
    default=None,
    help='Fail on YAML syntax errors (defaults to TEKTON_YAML_STRICT).',
)


def _load(ctx: Context, filepath: Path, strict: bool | None) -> tuple['YamlDocument', ...]:
    """Compose the documents of a file or exit on a strict-mode failure.

    Args:
        ctx: Current click context holding `CliSettings`.
        filepath: YAML file to read.
        strict: Command-line override of the strict setting.

    Returns:
        Composed documents of the file.
    """
    settings: CliSettings = ctx.obj
    if strict is None:
        strict = settings.strict

    try:
        with filepath.open('rt', encoding='utf-8') as content:
            return parse_documents(content, strict=strict)

    except YamlParseError as error:
        echo(str(error), err=True)
        ctx.exit(PARSE_ERROR_STATUS)

    return ()  # pragma: no cover


def _dump(ctx: Context, value: object) -> None:
    """Print a value as JSON using the configured indentation."""
    settings: CliSettings = ctx.obj
    echo(dumps(value, ensure_ascii=False, indent=settings.indent or None))


def query_command(name: str, help_: str) -> 'Callable':
    """Declare a query command reading a single YAML file.

    The decorated function receives the click context and the composed
    documents of the file.
    """
    def decorator(func: 'Callable[[Context, tuple[YamlDocument, ...]], None]') -> 'Callable':
        @cli.command(name=name, help=help_)
        @strict_option
        @argument('filepath', type=InputFilepath)
        @pass_context
        def command(ctx: Context, filepath: Path, strict: bool | None) -> None:
            func(ctx, _load(ctx, filepath, strict))

        return command

    return decorator


@group(help='Query Tekton pipeline YAML files.')
@pass_context
def cli(ctx: Context) -> None:
    """Root CLI group resolving settings from the environment."""
    ctx.obj = CliSettings()


@query_command('kind', 'Print the declared kind of a Tekton YAML file.')
def print_kind(ctx: Context, documents: tuple['YamlDocument', ...]) -> None:
    """Print the declared kind, or exit with status 1 if not recognized."""
    kind = is_tekton_yaml(documents)
    if kind is None:
        ctx.exit(NOT_RECOGNIZED_STATUS)

    echo(kind.value)


@query_command('tasks', 'Print the tasks declared by pipelines as JSON.')
def print_tasks(ctx: Context, documents: tuple['YamlDocument', ...]) -> None:
    """Print declared tasks of every pipeline document."""
    _dump(ctx, [
        task.model_dump(by_alias=True)
        for document in get_tekton_documents(documents, DeclaredKind.PIPELINE)
        for task in get_pipeline_tasks(document)
    ])


@query_command('task-names', 'Print the names of tasks declared by pipelines.')
def print_task_names(ctx: Context, documents: tuple['YamlDocument', ...]) -> None:  # noqa: ARG001
    """Print one task name per line."""
    for name in get_pipeline_task_names(documents):
        echo(name)


@query_command('task-refs', 'Print the names of tasks referenced by pipelines.')
def print_task_refs(ctx: Context, documents: tuple['YamlDocument', ...]) -> None:  # noqa: ARG001
    """Print one referenced task name per line."""
    for name in get_pipeline_task_ref_names(documents):
        echo(name)


@query_command('resources', 'Print the resources declared by pipelines as JSON.')
def print_resources(ctx: Context, documents: tuple['YamlDocument', ...]) -> None:
    """Print declared resources of every pipeline document."""
    _dump(ctx, [
        resource.model_dump(by_alias=True)
        for resource in get_declared_resources(documents)
    ])


@cli.command(
    name='documents',
    help='Print the metadata name of every document of a given kind.',
)
@option(
    '-k', '--kind',
    type=Choice([kind.value for kind in DeclaredKind]),
    required=True,
    help='Declared kind of documents to select.',
)
@strict_option
@argument('filepath', type=InputFilepath)
@pass_context
def print_documents(ctx: Context, filepath: Path, kind: str, strict: bool | None) -> None:
    """Print one metadata name per matching document."""
    documents = _load(ctx, filepath, strict)

    for document in get_tekton_documents(documents, DeclaredKind(kind)):
        echo(get_metadata_name(document) or '')


@cli.command(
    name='schema',
    help='Print the JSON Schema of extracted records.',
)
def print_schema() -> None:
    """Generate and print the JSON Schema."""
    echo(make_schema())


if __name__ == '__main__':
    cli()
