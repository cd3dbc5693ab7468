"""Extraction of structured records from single pipeline documents.

Extractors assume the document was already classified as a `Pipeline`
but tolerate any shape: a missing `spec`, a `tasks` value that is not a
sequence or an entry that is not a mapping yields fewer records, never
an error.
"""

from .resources import extract_resources, read_declared_resource
from .tasks import (
    extract_task_names,
    extract_task_ref_names,
    extract_tasks,
    get_run_after,
    iter_task_nodes,
    read_declared_task,
)

__all__ = (
    'extract_resources',
    'extract_task_names',
    'extract_task_ref_names',
    'extract_tasks',
    'get_run_after',
    'iter_task_nodes',
    'read_declared_resource',
    'read_declared_task',
)
