"""Resolve declared models into OpenAPI component schemas."""

import copy
import logging
from collections.abc import Callable

from serverless_openapi.config import ModelConfig

logger = logging.getLogger(__name__)

SchemaDeriver = Callable[..., dict]
Dereferencer = Callable[[dict], dict]


def clean_schema(schema: dict) -> dict:
    """Copy of ``schema`` without the ``$schema`` meta-key."""
    cleaned = copy.deepcopy(schema)
    cleaned.pop("$schema", None)
    return cleaned


def resolve_model_schema(
    model: ModelConfig,
    deriver: SchemaDeriver,
    dereferencer: Dereferencer,
) -> dict | None:
    """Component schema for ``model``, or ``None`` when it declares no schema."""
    if model.type_schema is not None:
        ref = model.type_schema
        logger.debug("Deriving schema for model %s from %s:%s", model.name, ref.file_path, ref.type_name)
        schema = deriver([ref.file_path], ref.type_name, no_extra_props=True, required=True)
    elif model.schema_ is not None:
        schema = model.schema_
    else:
        return None

    return clean_schema(dereferencer(schema))
