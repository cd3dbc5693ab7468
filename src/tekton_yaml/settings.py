"""Command-line runtime settings.

Settings are resolved from environment variables prefixed with
``TEKTON_YAML_`` (for example, ``TEKTON_YAML_STRICT=1``). Command-line
options take precedence over them.
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tekton_yaml.models import SettingsModel


class CliSettings(SettingsModel):
    """Settings of the `tekton-yaml` command-line tool."""

    model_config = SettingsConfigDict(
        env_prefix='TEKTON_YAML_',
        frozen=True,
        extra='ignore',
    )

    strict: bool = Field(
        default=False,
        title='Strict parsing',
        description=(
            'Fail on YAML syntax errors instead of warning and '
            'querying the documents parsed before the error.'
        ),
    )

    indent: int = Field(
        default=2,
        ge=0,
        title='JSON indentation',
        description='Indentation of JSON output.',
    )
