"""Derive JSON Schema from pydantic models declared in Python source files."""

import importlib.util
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from serverless_openapi.errors import TypeSchemaError

JSON_SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"


def derive_schema(
    source_files: Sequence[str | Path],
    type_name: str,
    *,
    no_extra_props: bool = True,
    required: bool = True,
) -> dict:
    """Build the JSON Schema of ``type_name``, looked up in ``source_files``.

    With ``required`` every object property is listed as required; with
    ``no_extra_props`` object schemas get ``additionalProperties: false``.
    """
    target = None
    for source in source_files:
        module = _load_module(Path(source).resolve())
        target = getattr(module, type_name, None)
        if target is not None:
            break

    if target is None:
        raise TypeSchemaError(f"Type '{type_name}' not found in {', '.join(map(str, source_files))}")
    if not (isinstance(target, type) and issubclass(target, BaseModel)):
        raise TypeSchemaError(f"'{type_name}' is not a pydantic model")

    schema = {"$schema": JSON_SCHEMA_DIALECT, **target.model_json_schema()}
    _apply_options(schema, no_extra_props=no_extra_props, required=required)
    return schema


def _load_module(path: Path):
    if not path.is_file():
        raise TypeSchemaError(f"Schema source file not found: {path}")

    module_name = f"_serverless_openapi_types.{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise TypeSchemaError(f"Cannot import schema source file: {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise TypeSchemaError(f"Failed to import {path}: {e}") from e
    return module


def _apply_options(node, *, no_extra_props: bool, required: bool) -> None:
    if isinstance(node, list):
        for item in node:
            _apply_options(item, no_extra_props=no_extra_props, required=required)
        return
    if not isinstance(node, dict):
        return

    properties = node.get("properties")
    if isinstance(properties, dict):
        if required:
            node["required"] = list(properties)
        if no_extra_props:
            node["additionalProperties"] = False

    for value in node.values():
        _apply_options(value, no_extra_props=no_extra_props, required=required)
