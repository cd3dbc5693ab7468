"""Declared pipeline resource record."""

from pydantic import Field

from tekton_yaml.models import SchemaModel


class DeclaredResource(SchemaModel):
    """Resource declared under `spec.resources` of a pipeline.

    Either attribute may be missing from the document, in which case
    it stays unset rather than making the record invalid.
    """

    name: str | None = Field(
        default=None,
        title='Resource name',
        description='Name under which pipeline tasks refer to the resource.',
        examples=['source-repo'],
    )

    type: str | None = Field(
        default=None,
        title='Resource type',
        description='Type of the resource, for example `git` or `image`.',
        examples=['git', 'image'],
    )
