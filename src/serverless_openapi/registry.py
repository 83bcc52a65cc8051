"""Registry snapshot produced by the first generation phase."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from serverless_openapi.builder.security import build_security_schemes
from serverless_openapi.config import DefinitionConfig, ModelConfig, SecurityDefinition
from serverless_openapi.errors import UnresolvedModelError
from serverless_openapi.schema.resolver import Dereferencer, SchemaDeriver, resolve_model_schema

logger = logging.getLogger(__name__)

SCHEMA_REF_PREFIX = "#/components/schemas/"


@dataclass(frozen=True)
class Registry:
    """Resolved schemas and security schemes, read-only once built."""

    schemas: Mapping[str, dict]
    security_schemes: Mapping[str, dict]
    models: Mapping[str, ModelConfig]
    security: tuple[SecurityDefinition, ...] = ()
    strict: bool = False

    def find_model(self, name: str, where: str) -> ModelConfig | None:
        """Look up a declared model by name.

        An unknown name yields ``None`` (and a warning), or raises
        ``UnresolvedModelError`` in strict mode.
        """
        model = self.models.get(name)
        if model is None:
            if self.strict:
                raise UnresolvedModelError(name, where)
            logger.warning("Model '%s' referenced by %s is not declared; skipping", name, where)
        return model

    @staticmethod
    def schema_ref(name: str) -> dict:
        return {"$ref": f"{SCHEMA_REF_PREFIX}{name}"}


def build_registry(
    config: DefinitionConfig,
    *,
    deriver: SchemaDeriver,
    dereferencer: Dereferencer,
    strict: bool = False,
) -> Registry:
    schemas: dict[str, dict] = {}
    for model in config.models:
        schema = resolve_model_schema(model, deriver, dereferencer)
        if schema is None:
            logger.debug("Model %s declares no schema; not registered", model.name)
            continue
        schemas[model.name] = schema

    logger.info("Registered %d schemas and %d security schemes", len(schemas), len(config.security))

    return Registry(
        schemas=MappingProxyType(schemas),
        security_schemes=MappingProxyType(build_security_schemes(config.security)),
        models=MappingProxyType({model.name: model for model in config.models}),
        security=tuple(config.security),
        strict=strict,
    )
