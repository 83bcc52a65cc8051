"""Compose one OpenAPI Operation object from a normalized HTTP event.

https://github.com/OAI/OpenAPI-Specification/blob/3.0.0/versions/3.0.0.md#operationObject
"""

from serverless_openapi.builder.bodies import build_request_body, build_responses
from serverless_openapi.builder.parameters import build_parameters
from serverless_openapi.builder.security import resolve_security
from serverless_openapi.events import HttpEvent
from serverless_openapi.registry import Registry


def build_operation(operation_id: str, event: HttpEvent, registry: Registry) -> dict:
    documentation = event.documentation
    operation: dict = {"operationId": operation_id}

    if documentation.summary:
        operation["summary"] = documentation.summary
    if documentation.description:
        operation["description"] = documentation.description
    if documentation.tags is not None:
        operation["tags"] = documentation.tags
    if documentation.deprecated:
        operation["deprecated"] = True

    if documentation.request_models is not None or documentation.request_body is not None:
        operation["requestBody"] = build_request_body(documentation, operation_id, registry)

    operation["parameters"] = build_parameters(documentation)
    operation["responses"] = build_responses(documentation, operation_id, registry)

    security = resolve_security(registry.security, event.authorizer_name, documentation.security)
    if security is not None:
        operation["security"] = security

    return operation
