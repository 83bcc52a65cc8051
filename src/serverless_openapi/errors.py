"""Exceptions raised while generating an OpenAPI document."""


class DocumentationError(Exception):
    """Base class for every generation failure."""


class ConfigError(DocumentationError):
    """The input configuration could not be read or validated."""


class GeneratorStateError(DocumentationError):
    """Generator phases were invoked out of order."""


class MissingRequestModelsError(DocumentationError):
    """A request body is documented without a ``requestModels`` mapping."""

    def __init__(self, operation_id: str, documentation: dict):
        self.operation_id = operation_id
        self.documentation = documentation
        super().__init__(
            f"Required requestModels for documented request body in operation '{operation_id}'"
        )


class UnresolvedModelError(DocumentationError):
    """A documented model name has no matching declared model (strict mode only)."""

    def __init__(self, model_name: str, where: str):
        self.model_name = model_name
        self.where = where
        super().__init__(f"Unknown model '{model_name}' referenced by {where}")


class SchemaReferenceError(DocumentationError):
    """A ``$ref`` inside a schema cannot be inlined."""


class TypeSchemaError(DocumentationError):
    """A schema could not be derived from a source type."""
