"""Declared kinds and extracted records of Tekton pipeline documents.

Defines the recognized document kinds and immutable Pydantic models for
the structured values extracted from pipeline documents. Records carry
no reference to the YAML tree they were read from.
"""

from .kinds import TEKTON_API_VERSION, DeclaredKind
from .resources import DeclaredResource
from .tasks import CLUSTER_TASK_KIND, TASK_KIND, DeclaredTask

__all__ = (
    'CLUSTER_TASK_KIND',
    'TASK_KIND',
    'TEKTON_API_VERSION',
    'DeclaredKind',
    'DeclaredResource',
    'DeclaredTask',
)
