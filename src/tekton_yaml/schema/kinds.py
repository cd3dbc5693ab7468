"""Recognized API version and document kinds."""

from enum import StrEnum

#: The only `apiVersion` literal recognized by every classifier and
#: extractor. Any other value, including an absent one, disqualifies
#: a document.
TEKTON_API_VERSION = 'tekton.dev/v1alpha1'


class DeclaredKind(StrEnum):
    """Kind of a recognized Tekton document."""

    TASK = 'Task'
    TASK_RUN = 'TaskRun'
    PIPELINE = 'Pipeline'
    PIPELINE_RUN = 'PipelineRun'
    PIPELINE_RESOURCE = 'PipelineResource'

    @classmethod
    def from_literal(cls, value: str | None) -> 'DeclaredKind | None':
        """Map a `kind` literal onto a declared kind.

        The match is exact and case-sensitive.

        Args:
            value: Raw literal of the document `kind` field.

        Returns:
            The matching kind, or `None` for an absent or unknown literal.
        """
        if value is None:
            return None

        try:
            return cls(value)
        except ValueError:
            return None
