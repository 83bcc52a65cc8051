"""Function, event and documentation models.

``http`` and ``httpApi`` events are normalized here into a single
``HttpEvent`` value so nothing downstream branches on the event shape.
"""

import copy
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from serverless_openapi.errors import ConfigError


class _Camel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ParameterConfig(_Camel):
    """One documented request parameter (path, query, header or cookie)."""

    name: str
    description: str | None = None
    required: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    allow_reserved: bool | None = Field(default=None, alias="allowReserved")
    deprecated: bool | None = None
    style: str | None = None  # form / simple / label / matrix / spaceDelimited / ...
    explode: bool | None = None
    schema_: dict | None = Field(default=None, alias="schema")
    examples: Any = None
    content: dict | None = None


class BodyDescription(_Camel):
    description: str | None = None


class ResponseHeader(_Camel):
    name: str
    description: str | None = None
    schema_: dict | None = Field(default=None, alias="schema")


class MethodResponse(_Camel):
    """One documented response, keyed by status code in the output."""

    status_code: int | str = Field(alias="statusCode")
    response_body: BodyDescription | None = Field(default=None, alias="responseBody")
    response_models: dict[str, str] = Field(default={}, alias="responseModels")
    response_headers: list[ResponseHeader] | None = Field(default=None, alias="responseHeaders")

    @field_validator("response_models", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return {} if value is None else value


class EventDocumentation(_Camel):
    """Documentation block attached to one http/httpApi event."""

    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    deprecated: bool | None = None
    operation_id: str | None = Field(default=None, alias="operationId")
    path_params: list[ParameterConfig] | None = Field(default=None, alias="pathParams")
    query_params: list[ParameterConfig] | None = Field(default=None, alias="queryParams")
    request_headers: list[ParameterConfig] | None = Field(default=None, alias="requestHeaders")
    cookie_params: list[ParameterConfig] | None = Field(default=None, alias="cookieParams")
    request_models: dict[str, str] | None = Field(default=None, alias="requestModels")
    request_body: BodyDescription | None = Field(default=None, alias="requestBody")
    method_responses: list[MethodResponse] | None = Field(default=None, alias="methodResponses")
    security: list[str] | None = None


class HttpEventConfig(_Camel):
    path: str
    method: str
    authorizer: str | dict | None = None
    documentation: EventDocumentation | None = None


class FunctionEvent(_Camel):
    http: HttpEventConfig | None = None
    http_api: HttpEventConfig | None = Field(default=None, alias="httpApi")

    @field_validator("http", "http_api", mode="before")
    @classmethod
    def _expand_shorthand(cls, value):
        # "GET pets/{id}" shorthand
        if isinstance(value, str):
            method, _, path = value.strip().partition(" ")
            return {"method": method, "path": path.strip()}
        return value


class FunctionConfig(BaseModel):
    """One deployable function and its triggering events."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, validation_alias=AliasChoices("_functionName", "name"))
    events: list[FunctionEvent] = []

    @field_validator("events", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


@dataclass(frozen=True)
class HttpEvent:
    """An http or httpApi event after normalization."""

    kind: Literal["http", "httpApi"]
    path: str
    method: str
    authorizer_name: str | None = None
    documentation: EventDocumentation | None = None


def normalize_event(event: FunctionEvent) -> HttpEvent | None:
    """Collapse an event into an ``HttpEvent``; ``None`` for non-HTTP events."""
    if event.http is not None:
        kind, config = "http", event.http
    elif event.http_api is not None:
        kind, config = "httpApi", event.http_api
    else:
        return None

    authorizer = config.authorizer
    if isinstance(authorizer, dict):
        authorizer = authorizer.get("name")

    return HttpEvent(
        kind=kind,
        path=config.path,
        method=config.method,
        authorizer_name=authorizer or None,
        documentation=config.documentation,
    )


def load_functions(function_configs) -> list[FunctionConfig]:
    """Validate function configs (dicts or models) into private copies."""
    functions = []
    for item in function_configs:
        if isinstance(item, FunctionConfig):
            functions.append(item.model_copy(deep=True))
            continue
        try:
            functions.append(FunctionConfig.model_validate(copy.deepcopy(item)))
        except ValidationError as e:
            raise ConfigError(f"Invalid function config: {e}") from e
    return functions
