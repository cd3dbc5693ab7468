"""Tests for pipeline tasks extraction."""

from typing import TYPE_CHECKING

import pytest

from tekton_yaml.extractors import (
    extract_task_names,
    extract_task_ref_names,
    extract_tasks,
    get_run_after,
    iter_task_nodes,
)
from tekton_yaml.schema import CLUSTER_TASK_KIND, TASK_KIND, DeclaredTask
from tests.examples.pipelines import HEADER, PIPELINE

if TYPE_CHECKING:
    from collections.abc import Callable

if TYPE_CHECKING:
    from yaml.nodes import Node

if TYPE_CHECKING:
    from tekton_yaml.documents import YamlDocument


def test_declared_tasks(compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Extract tasks with references, kinds and dependencies."""
    document, = compose(PIPELINE)

    assert extract_tasks(document) == [
        DeclaredTask(
            name='build',
            task_ref='build-task',
            kind=TASK_KIND,
            run_after=[],
        ),
        DeclaredTask(
            name='deploy',
            task_ref='deploy-task',
            kind=CLUSTER_TASK_KIND,
            run_after=['build', 'lint'],
        ),
    ]


def test_tasks_source_order(compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Return one record per task entry in source order."""
    entries = ''.join(
        f'    - name: task-{index}\n      taskRef:\n        name: ref-{index}\n'
        for index in range(5)
    )
    document, = compose(f'{HEADER}spec:\n  tasks:\n{entries}')

    tasks = extract_tasks(document)

    assert [task.name for task in tasks] == [f'task-{index}' for index in range(5)]
    assert [task.task_ref for task in tasks] == [f'ref-{index}' for index in range(5)]


@pytest.mark.parametrize('task, expected', (
    pytest.param(
        'runAfter: [a, b]\n',
        ['a', 'b'],
        id='explicit only',
    ),
    pytest.param(
        'resources:\n  inputs:\n    - from: [a]\n    - from: [b, c]\n',
        ['a', 'b', 'c'],
        id='inputs only',
    ),
    pytest.param(
        'resources:\n  inputs:\n    - from: [c]\nrunAfter: [a, b]\n',
        ['a', 'b', 'c'],
        id='explicit before inputs',
    ),
    pytest.param(
        'runAfter: [a]\nresources:\n  inputs:\n    - from: [a]\n',
        ['a', 'a'],
        id='duplicates kept',
    ),
    pytest.param(
        'runAfter: [a, {b: c}, [d]]\n',
        ['a'],
        id='non-scalar entries',
    ),
    pytest.param(
        'runAfter: a\nresources:\n  inputs:\n    - from: b\n',
        [],
        id='scalars instead of sequences',
    ),
    pytest.param(
        'resources:\n  inputs:\n    - source\n    - from: [a]\n    - name: image\n',
        ['a'],
        id='inputs without from',
    ),
    pytest.param(
        'resources:\n  outputs:\n    - from: [a]\n',
        [],
        id='outputs ignored',
    ),
    pytest.param(
        'name: lonely\n',
        [],
        id='no dependencies',
    ),
))
def test_run_after(task: str, expected: list[str], node: 'Callable[[str], Node]') -> None:
    """Order explicit dependencies before resource-inferred ones."""
    assert get_run_after(node(task)) == expected


@pytest.mark.parametrize('task_ref, expected_ref, expected_kind', (
    pytest.param('{name: build-task}', 'build-task', TASK_KIND, id='default kind'),
    pytest.param('{name: build-task, kind: ClusterTask}', 'build-task', CLUSTER_TASK_KIND, id='cluster task'),
    pytest.param('{name: build-task, kind: Custom}', 'build-task', 'Custom', id='custom kind'),
    pytest.param('{kind: ClusterTask}', None, CLUSTER_TASK_KIND, id='no name'),
    pytest.param('{}', None, TASK_KIND, id='empty reference'),
    pytest.param('build-task', None, None, id='scalar reference'),
    pytest.param('[build-task]', None, None, id='sequence reference'),
))
def test_task_reference(task_ref: str, expected_ref: str | None, expected_kind: str | None,
                        compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Read task references and default their kind."""
    document, = compose(f'{HEADER}spec:\n  tasks:\n    - name: build\n      taskRef: {task_ref}\n')

    task, = extract_tasks(document)

    assert task.name == 'build'
    assert task.task_ref == expected_ref
    assert task.kind == expected_kind


def test_task_without_reference(compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Leave reference fields unset for entries without a reference."""
    document, = compose(f'{HEADER}spec:\n  tasks:\n    - runAfter: [init]\n')

    assert extract_tasks(document) == [DeclaredTask(run_after=['init'])]


@pytest.mark.parametrize('content', (
    pytest.param(HEADER, id='no spec'),
    pytest.param(f'{HEADER}spec: text\n', id='spec not mapping'),
    pytest.param(f'{HEADER}spec:\n  resources: []\n', id='no tasks'),
    pytest.param(f'{HEADER}spec:\n  tasks: build\n', id='tasks not sequence'),
    pytest.param(f'{HEADER}spec:\n  tasks: []\n', id='empty tasks'),
))
def test_missing_tasks(content: str,
                       compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Short-circuit to empty lists on any missing section."""
    document, = compose(content)

    assert extract_tasks(document) == []
    assert extract_task_names(document) == []
    assert extract_task_ref_names(document) == []


def test_non_mapping_entries(compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Skip task entries that are not mappings without placeholders."""
    document, = compose(
        f'{HEADER}spec:\n  tasks:\n'
        '    - build\n'
        '    - [lint]\n'
        '    - name: deploy\n',
    )

    assert len(list(iter_task_nodes(document))) == 1
    assert extract_tasks(document) == [DeclaredTask(name='deploy')]


def test_task_projections(compose: 'Callable[..., tuple[YamlDocument, ...]]') -> None:
    """Project names and references of entries that declare them."""
    document, = compose(
        f'{HEADER}spec:\n  tasks:\n'
        '    - name: build\n'
        '      taskRef: {name: build-task}\n'
        '    - taskRef: {name: anonymous-task}\n'
        '    - name: unreferenced\n'
        '    - name: broken\n'
        '      taskRef: {kind: ClusterTask}\n',
    )

    assert extract_task_names(document) == ['build', 'unreferenced', 'broken']
    assert extract_task_ref_names(document) == ['build-task', 'anonymous-task']
