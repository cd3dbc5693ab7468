"""Primitive lookups over composed YAML nodes.

The YAML tree is PyYAML's composed node graph: a closed set of three
variants (`MappingNode`, `SequenceNode`, `ScalarNode`). Composition never
constructs Python objects, so scalar values are the raw literals captured
by the parser (`version: 1.0` stays the string ``'1.0'``).

Every helper here accepts an absent node (``None``) or a node of the
wrong variant and answers ``None`` or nothing, so lookups can be chained
without checking each level.
"""

from enum import IntEnum
from typing import TYPE_CHECKING

from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

if TYPE_CHECKING:
    from collections.abc import Iterator


class StringComparison(IntEnum):
    """Key comparison modes for mapping lookups."""

    #: Exact, case-sensitive comparison.
    ORDINAL = 0
    #: Case-insensitive comparison.
    ORDINAL_IGNORE_CASE = 1


def equal_ignore_case(a: object, b: object) -> bool:
    """Test whether two strings are equal ignoring case.

    Both operands must be strings; anything else compares unequal.
    """
    return isinstance(a, str) and isinstance(b, str) and a.lower() == b.lower()


def _keys_equal(key: str, candidate: Node,
                comparison: StringComparison) -> bool:
    """Compare a lookup key with a mapping key node."""
    if not isinstance(candidate, ScalarNode):
        return False

    if comparison == StringComparison.ORDINAL_IGNORE_CASE:
        return equal_ignore_case(key, candidate.value)

    return key == candidate.value


def as_mapping(node: Node | None) -> MappingNode | None:
    """Return the node if it is a mapping, otherwise `None`."""
    return node if isinstance(node, MappingNode) else None


def as_sequence(node: Node | None) -> SequenceNode | None:
    """Return the node if it is a sequence, otherwise `None`."""
    return node if isinstance(node, SequenceNode) else None


def as_scalar(node: Node | None) -> ScalarNode | None:
    """Return the node if it is a scalar, otherwise `None`."""
    return node if isinstance(node, ScalarNode) else None


def find_node_by_key(key: str | None, mapping: Node | None,
                     comparison: StringComparison = StringComparison.ORDINAL) -> Node | None:
    """Find the value node of a mapping entry by its key.

    Entries are scanned in document order and the first match wins, so
    later duplicate keys are shadowed.

    Args:
        key: Key literal to look for. An empty key never matches.
        mapping: Mapping node to search. Any other node, or `None`,
            yields no match.
        comparison: Key comparison mode.

    Returns:
        The value node of the first matching entry, or `None`.
    """
    if not key or not isinstance(mapping, MappingNode):
        return None

    for key_node, value_node in mapping.value:
        if _keys_equal(key, key_node, comparison):
            return value_node

    return None


def get_mapping_value(mapping: Node | None, key: str | None,
                      comparison: StringComparison = StringComparison.ORDINAL) -> str | None:
    """Get the literal value of a key in a mapping node.

    For example, on the following YAML this returns ``'value1'``
    for key ``'key1'``::

        key1: value1
        key2: value2

    Args:
        mapping: Mapping node to search.
        key: Key literal to look for.
        comparison: Key comparison mode.

    Returns:
        The raw literal of the first matching entry if its value is
        a scalar, otherwise `None`.
    """
    if scalar := as_scalar(find_node_by_key(key, mapping, comparison)):
        return scalar.value

    return None


def find_path(node: Node | None, *keys: str,
              comparison: StringComparison = StringComparison.ORDINAL) -> Node | None:
    """Follow a chain of mapping keys.

    Args:
        node: Starting node.
        keys: Keys to descend through, outermost first.
        comparison: Key comparison mode applied at every level.

    Returns:
        The node at the end of the chain, or `None` as soon as any
        link is missing or is not a mapping.
    """
    for key in keys:
        node = find_node_by_key(key, node, comparison)
        if node is None:
            return None

    return node


def iter_scalar_values(sequence: Node | None) -> 'Iterator[str]':
    """Iterate over literal values of the scalar items of a sequence.

    Non-scalar items are skipped. A missing node or a node that is not
    a sequence yields nothing.
    """
    if not isinstance(sequence, SequenceNode):
        return

    for item in sequence.value:
        if isinstance(item, ScalarNode):
            yield item.value


def iter_nodes(root: Node | None) -> 'Iterator[Node]':
    """Walk every node reachable from a root in document order.

    The walk is pre-order: a mapping is followed by the key and value
    of each entry, a sequence by each item. Nodes shared through YAML
    aliases are visited once, so recursive aliases terminate.
    """
    if root is None:
        return

    seen: set[int] = set()
    stack: list[Node] = [root]

    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))

        yield node

        if isinstance(node, MappingNode):
            for key_node, value_node in reversed(node.value):
                stack.append(value_node)
                stack.append(key_node)
        elif isinstance(node, SequenceNode):
            stack.extend(reversed(node.value))
