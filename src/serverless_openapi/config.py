"""Definition config models.

The generator validates caller configuration into these models from a deep
copy, so a generation never aliases or mutates caller-owned structures.
"""

import copy
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from serverless_openapi.errors import ConfigError


class TypeSchemaRef(BaseModel):
    """Reference to a source type from which a JSON Schema is derived."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")
    type_name: str = Field(alias="typeName")


class ModelConfig(BaseModel):
    """A named, reusable schema declared in the documentation config."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    schema_: dict | None = Field(default=None, alias="schema")
    type_schema: TypeSchemaRef | None = Field(
        default=None,
        validation_alias=AliasChoices("typeSchema", "tsSchema", "type_schema"),
    )
    examples: Any = None


class SecurityDefinition(BaseModel):
    """A named security scheme. Scheme fields (type, scheme, in, ...) pass through."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    authorizer_name: str | None = Field(default=None, alias="authorizerName")

    def to_scheme(self) -> dict:
        """The public scheme object, without the authorizer linkage field."""
        return self.model_dump(by_alias=True, exclude={"authorizer_name"})


class DefinitionConfig(BaseModel):
    """Top-level documentation config: info, servers, security and models."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    title: str = ""
    description: str = ""
    version: str | None = None
    servers: list[dict] = []
    security: list[SecurityDefinition] = []
    models: list[ModelConfig] = []

    @field_validator("servers", "security", "models", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


def snapshot_config(config: DefinitionConfig | dict) -> DefinitionConfig:
    """Validate ``config`` into a private copy the caller cannot reach."""
    if isinstance(config, DefinitionConfig):
        return config.model_copy(deep=True)
    try:
        return DefinitionConfig.model_validate(copy.deepcopy(config))
    except ValidationError as e:
        raise ConfigError(f"Invalid documentation config: {e}") from e
