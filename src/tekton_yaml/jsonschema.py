"""JSON Schema of extracted records."""

from functools import cache
from json import dumps

from pydantic.json_schema import models_json_schema

from tekton_yaml.schema import DeclaredResource, DeclaredTask


@cache
def make_schema(indent: int | str | None = 4) -> str:
    """Generate the JSON Schema of the records produced by queries.

    Records are described as they are serialized by the command-line
    tool, that is with YAML field names.

    Args:
        indent: Indentation level used for JSON formatting.

    Returns:
        Serialized JSON Schema string.
    """
    _, definitions = models_json_schema(
        [
            (DeclaredTask, 'serialization'),
            (DeclaredResource, 'serialization'),
        ],
        by_alias=True,
        title='tekton-yaml',
        description='Records extracted from Tekton pipeline documents',
    )

    return dumps(
        definitions,
        ensure_ascii=False,
        sort_keys=True,
        indent=indent,
    )
