"""Request body and response objects joined against the model registry."""

import copy

from serverless_openapi.errors import MissingRequestModelsError
from serverless_openapi.events import EventDocumentation, MethodResponse
from serverless_openapi.merge import deep_merge
from serverless_openapi.registry import Registry
from serverless_openapi.schema.resolver import clean_schema


def build_content(models: dict[str, str], registry: Registry, where: str) -> dict:
    """Content map (content type -> media type object) for documented model names.

    Content types whose model is not declared contribute nothing.
    """
    content: dict = {}
    for content_type, model_name in models.items():
        model = registry.find_model(model_name, where)
        if model is None:
            continue

        media = {"schema": registry.schema_ref(model_name)}
        if model.examples is not None:
            media = deep_merge(media, {"examples": copy.deepcopy(model.examples)})

        content = deep_merge(content, {content_type: media})
    return content


def build_request_body(documentation: EventDocumentation, operation_id: str, registry: Registry) -> dict:
    if documentation.request_models is None:
        raise MissingRequestModelsError(
            operation_id, documentation.model_dump(by_alias=True, exclude_unset=True)
        )

    request_body = {
        "content": build_content(
            documentation.request_models, registry, f"request body of '{operation_id}'"
        ),
    }

    body = documentation.request_body
    if body is not None and "description" in body.model_fields_set:
        request_body["description"] = body.description

    return request_body


def build_responses(documentation: EventDocumentation, operation_id: str, registry: Registry) -> dict:
    """Responses object keyed by status code."""
    responses: dict = {}
    for response in documentation.method_responses or []:
        responses = deep_merge(
            responses,
            {str(response.status_code): build_response(response, operation_id, registry)},
        )
    return responses


def build_response(response: MethodResponse, operation_id: str, registry: Registry) -> dict:
    body = response.response_body
    if body is not None and "description" in body.model_fields_set:
        description = body.description
    else:
        description = f"Status {response.status_code} Response"

    result = {
        "description": description,
        "content": build_content(
            response.response_models,
            registry,
            f"{response.status_code} response of '{operation_id}'",
        ),
    }

    if response.response_headers is not None:
        headers = {}
        for header in response.response_headers:
            headers[header.name] = {"description": header.description or f"{header.name} header"}
            if header.schema_ is not None:
                headers[header.name]["schema"] = clean_schema(header.schema_)
        result["headers"] = headers

    return result
