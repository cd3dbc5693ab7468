"""Queries over every document of a YAML source.

Each query classifies the documents of a source in order and applies
an extractor to those of the expected kind, concatenating the results.
Documents of other kinds, or that are not recognized at all, contribute
nothing. Queries never raise on malformed content.
"""

from typing import TYPE_CHECKING, TypeVar

from tekton_yaml.classifier import classify_document, get_root_mapping
from tekton_yaml.documents import as_documents
from tekton_yaml.extractors import (
    extract_resources,
    extract_task_names,
    extract_task_ref_names,
    extract_tasks,
)
from tekton_yaml.nodes import find_node_by_key, get_mapping_value
from tekton_yaml.schema import DeclaredKind

if TYPE_CHECKING:
    from collections.abc import Callable

if TYPE_CHECKING:
    from tekton_yaml.documents import Source, YamlDocument
    from tekton_yaml.schema import DeclaredResource, DeclaredTask

T = TypeVar('T')


def _collect_pipelines(source: 'Source',
                       extractor: 'Callable[[YamlDocument], list[T]]') -> list[T]:
    """Apply an extractor to every pipeline document of a source."""
    result: list[T] = []

    for document in get_tekton_documents(source, DeclaredKind.PIPELINE):
        result.extend(extractor(document))

    return result


def get_tekton_documents(source: 'Source', kind: DeclaredKind) -> list['YamlDocument']:
    """Select the documents of a source with the given declared kind.

    Args:
        source: YAML text, text stream or composed documents.
        kind: Expected declared kind.

    Returns:
        Matching document handles in source order.
    """
    return [
        document
        for document in as_documents(source)
        if classify_document(document) == kind
    ]


def get_pipeline_task_names(source: 'Source') -> list[str]:
    """List the task entry names of every pipeline in a source."""
    return _collect_pipelines(source, extract_task_names)


def get_pipeline_task_ref_names(source: 'Source') -> list[str]:
    """List the referenced task names of every pipeline in a source."""
    return _collect_pipelines(source, extract_task_ref_names)


def get_declared_resources(source: 'Source') -> list['DeclaredResource']:
    """List the resources declared by every pipeline in a source."""
    return _collect_pipelines(source, extract_resources)


def get_pipeline_tasks(document: 'YamlDocument') -> list['DeclaredTask']:
    """List the declared tasks of a single pipeline document.

    The document is expected to be a pipeline; classification is left
    to the caller (see `get_tekton_documents`).

    Args:
        document: Composed pipeline document.

    Returns:
        Declared tasks in source order.
    """
    return extract_tasks(document)


def get_metadata_name(document: 'YamlDocument') -> str | None:
    """Read `metadata.name` of a document.

    Returns:
        The name literal, or `None` if the root mapping, the `metadata`
        mapping or its scalar `name` is missing.
    """
    metadata = find_node_by_key('metadata', get_root_mapping(document))

    return get_mapping_value(metadata, 'name')
