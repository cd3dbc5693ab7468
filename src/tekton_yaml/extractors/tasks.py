"""Pipeline tasks extraction.

Reads the entries of `spec.tasks` into `DeclaredTask` records. Each
entry contributes its own name, the name and kind of the referenced
task, and the names of the tasks it must run after.
"""

from typing import TYPE_CHECKING

from yaml.nodes import MappingNode

from tekton_yaml.classifier import get_root_mapping
from tekton_yaml.nodes import (
    as_mapping,
    as_sequence,
    find_node_by_key,
    find_path,
    get_mapping_value,
    iter_scalar_values,
)
from tekton_yaml.schema import TASK_KIND, DeclaredTask

if TYPE_CHECKING:
    from collections.abc import Iterator

if TYPE_CHECKING:
    from tekton_yaml.documents import YamlDocument


def iter_task_nodes(document: 'YamlDocument') -> 'Iterator[MappingNode]':
    """Iterate over the mapping entries of `spec.tasks`.

    Entries that are not mappings are skipped without a placeholder.
    """
    tasks = as_sequence(find_path(get_root_mapping(document), 'spec', 'tasks'))
    if tasks is None:
        return

    for item in tasks.value:
        if isinstance(item, MappingNode):
            yield item


def get_run_after(task: MappingNode) -> list[str]:
    """Collect the names of tasks an entry must run after.

    Explicit `runAfter` entries come first, followed by every task named
    in `resources.inputs[*].from`, across all inputs in order. Duplicates
    are kept.

    Args:
        task: Mapping node of a single task entry.

    Returns:
        Ordered task names.
    """
    result = list(iter_scalar_values(find_node_by_key('runAfter', task)))

    inputs = as_sequence(find_path(task, 'resources', 'inputs'))
    if inputs is not None:
        for resource in inputs.value:
            result.extend(iter_scalar_values(find_node_by_key('from', resource)))

    return result


def read_declared_task(task: MappingNode) -> DeclaredTask:
    """Read a task declaration from a `spec.tasks` entry.

    A `taskRef` block without a `name` leaves the reference unset while
    the other fields are still populated.

    Args:
        task: Mapping node of a single task entry.

    Returns:
        The declared task.
    """
    task_ref = kind = None

    if (ref_node := as_mapping(find_node_by_key('taskRef', task))) is not None:
        task_ref = get_mapping_value(ref_node, 'name')
        kind = get_mapping_value(ref_node, 'kind')
        if kind is None:
            kind = TASK_KIND

    return DeclaredTask(
        name=get_mapping_value(task, 'name'),
        task_ref=task_ref,
        kind=kind,
        run_after=get_run_after(task),
    )


def extract_tasks(document: 'YamlDocument') -> list[DeclaredTask]:
    """Extract the tasks of a pipeline document in source order."""
    return [read_declared_task(task) for task in iter_task_nodes(document)]


def extract_task_names(document: 'YamlDocument') -> list[str]:
    """Extract the names of task entries that declare one."""
    return [
        name
        for task in iter_task_nodes(document)
        if (name := get_mapping_value(task, 'name')) is not None
    ]


def extract_task_ref_names(document: 'YamlDocument') -> list[str]:
    """Extract the names of referenced tasks.

    Entries without a `taskRef` block, or whose block has no name,
    contribute nothing.
    """
    return [
        name
        for task in iter_task_nodes(document)
        if (name := get_mapping_value(find_node_by_key('taskRef', task), 'name')) is not None
    ]
