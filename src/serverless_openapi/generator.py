"""OpenAPI 3.0.0 definition generator.

Generation runs in two phases: ``parse()`` resolves models and security
schemes into a read-only ``Registry``; ``read_functions()`` then builds one
operation per documented HTTP event and merges it into ``paths``.
"""

import logging
import uuid
from collections.abc import Callable, Iterable

from serverless_openapi.builder.paths import build_paths
from serverless_openapi.config import DefinitionConfig, snapshot_config
from serverless_openapi.errors import GeneratorStateError
from serverless_openapi.events import FunctionConfig, load_functions
from serverless_openapi.merge import deep_merge
from serverless_openapi.registry import Registry, build_registry
from serverless_openapi.schema.deref import dereference
from serverless_openapi.schema.deriver import derive_schema
from serverless_openapi.schema.resolver import Dereferencer, SchemaDeriver

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"


def _uuid_version() -> str:
    return str(uuid.uuid4())


class DefinitionGenerator:
    """Builds an OpenAPI document from a documentation config and function configs."""

    version = OPENAPI_VERSION

    def __init__(
        self,
        config: DefinitionConfig | dict,
        *,
        schema_deriver: SchemaDeriver = derive_schema,
        dereferencer: Dereferencer = dereference,
        version_factory: Callable[[], str] = _uuid_version,
        strict: bool = False,
    ):
        self.config = snapshot_config(config)
        self.definition: dict = {"openapi": self.version, "components": {}}
        self.registry: Registry | None = None
        self._schema_deriver = schema_deriver
        self._dereferencer = dereferencer
        self._version_factory = version_factory
        self._strict = strict

    def parse(self) -> "DefinitionGenerator":
        """Seed info, servers and components. Returns ``self`` for chaining."""
        config = self.config
        version = config.version if config.version is not None else self._version_factory()

        self.registry = build_registry(
            config,
            deriver=self._schema_deriver,
            dereferencer=self._dereferencer,
            strict=self._strict,
        )
        self.definition = deep_merge(self.definition, {
            "openapi": self.version,
            "info": {"title": config.title, "description": config.description, "version": version},
            "servers": config.servers,
            "paths": {},
            "components": {
                "schemas": dict(self.registry.schemas),
                "securitySchemes": dict(self.registry.security_schemes),
            },
        })
        return self

    def read_functions(self, function_configs: Iterable[FunctionConfig | dict]) -> None:
        """Merge the operations of every documented HTTP event into ``paths``."""
        if self.registry is None:
            raise GeneratorStateError("parse() must complete before read_functions()")

        functions = load_functions(function_configs)
        paths = build_paths(functions, self.registry)
        logger.info("Documented %d paths from %d functions", len(paths), len(functions))
        self.definition = deep_merge(self.definition, {"paths": paths})

    def generate(self, function_configs: Iterable[FunctionConfig | dict]) -> dict:
        """Run both phases and return the finished document."""
        self.parse().read_functions(function_configs)
        return self.definition
