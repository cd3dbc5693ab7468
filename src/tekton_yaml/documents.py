"""YAML document handles and stream composition.

A source text may hold several independent YAML documents separated by
``---``. Each is represented by a `YamlDocument`: its root node plus the
flat list of every node reachable from it.

Composition stops at the YAML node graph (`yaml.compose_all`); no Python
objects are constructed, so unknown tags never fail and scalars keep
their raw literals.
"""

from collections.abc import Sequence
from io import TextIOBase
from typing import TYPE_CHECKING, TypeAlias
from warnings import warn

from pydantic import Field
from yaml import SafeLoader, YAMLError, compose_all
from yaml.nodes import Node

from tekton_yaml.errors import ParseWarning, YamlParseError
from tekton_yaml.models import SchemaModel
from tekton_yaml.nodes import iter_nodes

if TYPE_CHECKING:
    from yaml import BaseLoader


class YamlDocument(SchemaModel):
    """Handle of a single composed YAML document.

    The handle only borrows the node graph; nothing in this package
    mutates it.
    """

    root: Node | None = Field(
        default=None,
        title='Root node',
        description='Top node of the document, or none for an absent document.',
    )

    nodes: tuple[Node, ...] = Field(
        default=(),
        title='Document nodes',
        description='Every node reachable from the root, in document order.',
    )

    @classmethod
    def from_root(cls, root: Node | None) -> 'YamlDocument':
        """Build a document handle from a composed root node.

        Args:
            root: Root node produced by the YAML composer.

        Returns:
            A document handle with the flat node list populated.
        """
        return cls(root=root, nodes=tuple(iter_nodes(root)))


#: Anything the document-set queries accept as their input: YAML text,
#: an open text stream, or documents that were already composed.
Source: TypeAlias = str | TextIOBase | Sequence[YamlDocument]


def parse_documents(content: TextIOBase | str, *,
                    loader: type['BaseLoader'] = SafeLoader,
                    strict: bool = False) -> tuple[YamlDocument, ...]:
    """Compose every document of a YAML stream.

    Args:
        content: YAML content as a string or file-like object.
        loader: YAML loader class used for scanning and composition.
        strict: Whether a YAML syntax error raises instead of emitting
            a warning.

    Returns:
        Document handles in stream order. In lenient mode the documents
        composed before a syntax error are returned.

    Raises:
        YamlParseError: If the stream is not valid YAML in strict mode.
    """
    documents: list[YamlDocument] = []

    try:
        for root in compose_all(content, Loader=loader):
            documents.append(YamlDocument.from_root(root))

    except YAMLError as base:
        error = YamlParseError.from_yaml_error(base)
        if strict:
            raise error from base
        warn(str(error), category=ParseWarning, stacklevel=2)

    return tuple(documents)


def as_documents(source: Source) -> tuple[YamlDocument, ...]:
    """Normalize a query source into document handles.

    Text and streams are composed leniently so that a document being
    edited never makes a query fail. Already composed documents are
    used as is.
    """
    if isinstance(source, Sequence) and not isinstance(source, str):
        return tuple(source)

    return parse_documents(source)
