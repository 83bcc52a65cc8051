"""Derive OpenAPI parameter objects from event documentation."""

from serverless_openapi.events import EventDocumentation, ParameterConfig
from serverless_openapi.schema.resolver import clean_schema

# (location, documentation field), in output order
PARAMETER_SOURCES = (
    ("path", "path_params"),
    ("query", "query_params"),
    ("header", "request_headers"),
    ("cookie", "cookie_params"),
)


def build_parameters(documentation: EventDocumentation) -> list[dict]:
    parameters = []
    for location, attr in PARAMETER_SOURCES:
        block = getattr(documentation, attr)
        if block is None:
            continue
        for parameter in block:
            parameters.append(build_parameter(location, parameter))
    return parameters


def build_parameter(location: str, parameter: ParameterConfig) -> dict:
    """Build one parameter object, applying the defaults of its location."""
    declared = parameter.model_fields_set
    result = {
        "name": parameter.name,
        "in": location,
        "description": parameter.description or "",
        "required": parameter.required or False,
    }

    # path parameters must always be required
    if location == "path":
        result["required"] = True
    elif location == "query":
        result["allowEmptyValue"] = parameter.allow_empty_value or False
        if "allow_reserved" in declared:
            result["allowReserved"] = parameter.allow_reserved or False

    if "deprecated" in declared:
        result["deprecated"] = parameter.deprecated

    if "style" in declared:
        result["style"] = parameter.style
        if "explode" in declared and parameter.explode is not None:
            result["explode"] = parameter.explode
        else:
            result["explode"] = parameter.style == "form"

    if parameter.schema_ is not None:
        result["schema"] = clean_schema(parameter.schema_)

    if isinstance(parameter.examples, list):
        result["examples"] = parameter.examples

    if parameter.content is not None:
        result["content"] = parameter.content

    return result
