"""Declared pipeline task record."""

from pydantic import Field

from tekton_yaml.models import SchemaModel

#: Kind assumed for a task reference without an explicit `kind`.
TASK_KIND = 'Task'

#: Kind of a cluster-scoped task reference.
CLUSTER_TASK_KIND = 'ClusterTask'


class DeclaredTask(SchemaModel):
    """Task entry declared under `spec.tasks` of a pipeline.

    The record is serialized with the field names used in YAML
    (`taskRef`, `runAfter`) when dumped by alias.
    """

    name: str | None = Field(
        default=None,
        title='Task name',
        description='Name of the task entry within the pipeline.',
        examples=['build'],
    )

    task_ref: str | None = Field(
        default=None,
        serialization_alias='taskRef',
        title='Referenced task',
        description=(
            'Name of the referenced `Task` or `ClusterTask`. '
            'Unset when the entry has no `taskRef` block or the block has no name.'
        ),
        examples=['build-task'],
    )

    kind: str | None = Field(
        default=None,
        title='Referenced task kind',
        description=(
            f'Kind of the referenced task. Defaults to `{TASK_KIND}` '
            'when a `taskRef` block is present without an explicit kind; '
            'unset when there is no `taskRef` block.'
        ),
        examples=[TASK_KIND, CLUSTER_TASK_KIND],
    )

    run_after: list[str] = Field(
        default_factory=list,
        serialization_alias='runAfter',
        title='Run after',
        description=(
            'Names of tasks that must complete first: explicit `runAfter` '
            'entries followed by tasks referenced from input resources `from`.'
        ),
        examples=[['build']],
    )
