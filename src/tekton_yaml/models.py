"""Base Pydantic models for extracted records and settings.

This module defines the foundational model classes used by all result
structures. Extracted records are derived values: they are built once
from the YAML tree and never modified afterwards.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all extracted records.

    Design principles enforced by this model:
        - Immutability: records cannot be modified after creation,
          so a result may be shared between callers without copying.
        - Strict schema: unknown or extra fields are rejected.

    All result records must inherit from this class.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for runtime settings.

    Settings are resolved from the environment. Unknown variables are
    ignored so that the surrounding environment may contain unrelated
    values without breaking configuration resolution.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
