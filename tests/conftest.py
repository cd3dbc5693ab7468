"""Tests configurations and fixtures."""

from typing import TYPE_CHECKING

import pytest
import yaml

from tekton_yaml.documents import parse_documents

if TYPE_CHECKING:
    from collections.abc import Callable

if TYPE_CHECKING:
    from yaml.nodes import Node

if TYPE_CHECKING:
    from tekton_yaml.documents import YamlDocument


@pytest.fixture
def loader() -> type[yaml.SafeLoader]:
    """Provide an isolated YAML SafeLoader class for tests.

    A dedicated subclass keeps anything registered on the loader during
    a test from leaking into other tests.
    """
    class Loader(yaml.SafeLoader):
        pass

    return Loader


@pytest.fixture
def compose(loader: type[yaml.SafeLoader]) -> 'Callable[[str], tuple[YamlDocument, ...]]':
    """Provide a factory composing YAML text into document handles.

    Composition is strict, so malformed test content fails loudly
    instead of producing fewer documents.
    """
    def factory(content: str) -> tuple['YamlDocument', ...]:
        return parse_documents(content, loader=loader, strict=True)

    return factory


@pytest.fixture
def node(loader: type[yaml.SafeLoader]) -> 'Callable[[str], Node]':
    """Provide a factory composing a single YAML document into its root node."""
    def factory(content: str) -> 'Node':
        return yaml.compose(content, Loader=loader)

    return factory
