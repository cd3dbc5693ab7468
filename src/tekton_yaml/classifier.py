"""Recognition of Tekton documents.

A document is recognized when the first mapping in its node list carries
an `apiVersion` equal to `TEKTON_API_VERSION`; its `kind` literal then
selects the declared kind. Documents that are not recognized are ignored
by every extractor.
"""

from typing import TYPE_CHECKING

from yaml.nodes import MappingNode

from tekton_yaml.documents import as_documents
from tekton_yaml.nodes import get_mapping_value
from tekton_yaml.schema import TEKTON_API_VERSION, DeclaredKind

if TYPE_CHECKING:
    from tekton_yaml.documents import Source, YamlDocument


def get_root_mapping(document: 'YamlDocument') -> MappingNode | None:
    """Return the first mapping node of a document.

    Only the flat node list is scanned in document order; there is
    exactly one candidate.
    """
    return next((
        node
        for node in document.nodes
        if isinstance(node, MappingNode)
    ), None)


def _read_header(root: MappingNode) -> tuple[str | None, str | None]:
    """Read the `apiVersion` and `kind` literals of a root mapping."""
    return get_mapping_value(root, 'apiVersion'), get_mapping_value(root, 'kind')


def classify_document(document: 'YamlDocument') -> DeclaredKind | None:
    """Determine the declared kind of a single document.

    Args:
        document: Composed YAML document.

    Returns:
        The declared kind, or `None` if the document has no root mapping,
        its `apiVersion` is absent or differs from the recognized one, or
        its `kind` is not a recognized literal.
    """
    root = get_root_mapping(document)
    if root is None:
        return None

    api_version, kind = _read_header(root)
    if api_version != TEKTON_API_VERSION:
        return None

    return DeclaredKind.from_literal(kind)


def is_tekton_yaml(source: 'Source') -> DeclaredKind | None:
    """Determine the declared kind of a whole YAML source.

    Documents are scanned in order and the first one carrying the
    recognized `apiVersion` decides the result, even when its `kind`
    is not recognized.

    Args:
        source: YAML text, text stream or composed documents.

    Returns:
        The declared kind of the first recognized document, or `None`.
    """
    for document in as_documents(source):
        root = get_root_mapping(document)
        if root is None:
            continue

        api_version, kind = _read_header(root)
        if api_version == TEKTON_API_VERSION:
            return DeclaredKind.from_literal(kind)

    return None
