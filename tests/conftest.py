import pytest

from serverless_openapi.config import DefinitionConfig
from serverless_openapi.registry import build_registry
from serverless_openapi.schema.deref import dereference
from serverless_openapi.schema.deriver import derive_schema

PETSTORE_CONFIG = {
    "title": "Petstore",
    "description": "Pets as a service",
    "version": "1.0.0",
    "servers": [{"url": "https://api.example.com"}],
    "security": [
        {"name": "ApiKeyAuth", "type": "apiKey", "in": "header", "authorizerName": "apiKeyAuthorizer"},
        {"name": "BearerAuth", "type": "http", "scheme": "bearer", "authorizerName": "jwtAuthorizer"},
    ],
    "models": [
        {
            "name": "Pet",
            "schema": {
                "$schema": "http://json-schema.org/draft-07/schema#",
                "type": "object",
                "properties": {"name": {"type": "string"}},
            },
        },
        {
            "name": "NewPet",
            "schema": {"type": "object", "properties": {"name": {"type": "string"}}},
            "examples": {"fido": {"value": {"name": "Fido"}}},
        },
        {"name": "Error", "schema": {"type": "object", "properties": {"message": {"type": "string"}}}},
    ],
}


@pytest.fixture
def petstore_config() -> dict:
    return PETSTORE_CONFIG


@pytest.fixture
def registry():
    config = DefinitionConfig.model_validate(PETSTORE_CONFIG)
    return build_registry(config, deriver=derive_schema, dereferencer=dereference)


@pytest.fixture
def strict_registry():
    config = DefinitionConfig.model_validate(PETSTORE_CONFIG)
    return build_registry(config, deriver=derive_schema, dereferencer=dereference, strict=True)
