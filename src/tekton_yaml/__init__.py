"""Schema-aware queries over Tekton pipeline YAML documents.

The `tekton_yaml` package reads composed YAML node trees and answers
questions about Tekton documents of API version `tekton.dev/v1alpha1`:

- which declared kind a document is (`Task`, `Pipeline`, ...);
- which tasks a pipeline declares, with their references and
  run-order dependencies;
- which resources a pipeline declares.

Queries are best-effort readers rather than validators: a document
being edited may be incomplete at any point, and missing or misshapen
sections simply produce less data.
"""

from .classifier import classify_document, get_root_mapping, is_tekton_yaml
from .documents import YamlDocument, parse_documents
from .nodes import StringComparison, equal_ignore_case, find_node_by_key, get_mapping_value
from .queries import (
    get_declared_resources,
    get_metadata_name,
    get_pipeline_task_names,
    get_pipeline_task_ref_names,
    get_pipeline_tasks,
    get_tekton_documents,
)
from .schema import TEKTON_API_VERSION, DeclaredKind, DeclaredResource, DeclaredTask

__all__ = (
    'TEKTON_API_VERSION',
    'DeclaredKind',
    'DeclaredResource',
    'DeclaredTask',
    'StringComparison',
    'YamlDocument',
    'classify_document',
    'equal_ignore_case',
    'find_node_by_key',
    'get_declared_resources',
    'get_mapping_value',
    'get_metadata_name',
    'get_pipeline_task_names',
    'get_pipeline_task_ref_names',
    'get_pipeline_tasks',
    'get_root_mapping',
    'get_tekton_documents',
    'is_tekton_yaml',
    'parse_documents',
)
