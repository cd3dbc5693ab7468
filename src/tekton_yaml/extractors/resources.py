"""Pipeline resources extraction."""

from typing import TYPE_CHECKING

from yaml.nodes import MappingNode, ScalarNode

from tekton_yaml.classifier import get_root_mapping
from tekton_yaml.nodes import as_sequence, find_path
from tekton_yaml.schema import DeclaredResource

if TYPE_CHECKING:
    from tekton_yaml.documents import YamlDocument


def read_declared_resource(resource: MappingNode) -> DeclaredResource | None:
    """Read a resource declaration from a `spec.resources` item.

    Every entry of the mapping is scanned; when `name` or `type` is
    repeated the last scalar occurrence wins. A value that is not a
    scalar leaves the attribute unset.

    Args:
        resource: Mapping node of a single resource item.

    Returns:
        The declared resource, or `None` when the mapping has neither
        a `name` nor a `type` entry.
    """
    fields: dict[str, str | None] = {}

    for key_node, value_node in resource.value:
        if not isinstance(key_node, ScalarNode) or key_node.value not in {'name', 'type'}:
            continue
        fields[key_node.value] = value_node.value if isinstance(value_node, ScalarNode) else None

    if not fields:
        return None

    return DeclaredResource(**fields)


def extract_resources(document: 'YamlDocument') -> list[DeclaredResource]:
    """Extract resources declared under `spec.resources`.

    Args:
        document: Composed pipeline document.

    Returns:
        Declared resources in document order. Items that are not
        mappings are skipped; a missing `spec` or `resources` section
        yields an empty list.
    """
    resources = as_sequence(find_path(get_root_mapping(document), 'spec', 'resources'))
    if resources is None:
        return []

    result = []
    for item in resources.value:
        if not isinstance(item, MappingNode):
            continue
        if (resource := read_declared_resource(item)) is not None:
            result.append(resource)

    return result
