"""Inline internal ``$ref`` pointers of a JSON Schema document."""

import copy
from typing import Any

from serverless_openapi.errors import SchemaReferenceError

DEFINITION_KEYS = ("$defs", "definitions")


def dereference(schema: dict) -> dict:
    """Return a copy of ``schema`` with every ``#/...`` reference inlined.

    References to other documents are kept verbatim. Once inlined, the
    ``$defs`` / ``definitions`` containers are dropped.
    """
    root = copy.deepcopy(schema)
    result = _inline(root, root, ())
    if isinstance(result, dict):
        for key in DEFINITION_KEYS:
            result.pop(key, None)
    return result


def _inline(node: Any, root: dict, seen: tuple[str, ...]) -> Any:
    if isinstance(node, list):
        return [_inline(item, root, seen) for item in node]
    if not isinstance(node, dict):
        return node

    ref = node.get("$ref")
    if isinstance(ref, str) and ref.startswith("#"):
        if ref in seen:
            raise SchemaReferenceError(f"Circular reference '{ref}' cannot be inlined")
        target = _inline(_resolve_pointer(root, ref[1:]), root, seen + (ref,))
        siblings = {k: _inline(v, root, seen) for k, v in node.items() if k != "$ref"}
        if not siblings:
            return copy.deepcopy(target)
        if not isinstance(target, dict):
            raise SchemaReferenceError(f"Reference '{ref}' does not point to a schema object")
        return {**copy.deepcopy(target), **siblings}

    return {k: _inline(v, root, seen) for k, v in node.items()}


def _resolve_pointer(doc: Any, pointer: str) -> Any:
    """Resolve a JSON Pointer fragment (without '#') against ``doc``."""
    if pointer == "":
        return doc
    if not pointer.startswith("/"):
        raise SchemaReferenceError(f"Unsupported JSON pointer '#{pointer}'")

    current = doc
    for raw_token in pointer[1:].split("/"):
        # RFC 6901 escaping
        token = raw_token.replace("~1", "/").replace("~0", "~")
        if isinstance(current, list):
            try:
                current = current[int(token)]
            except (ValueError, IndexError) as e:
                raise SchemaReferenceError(f"Cannot resolve '#{pointer}'") from e
        elif isinstance(current, dict) and token in current:
            current = current[token]
        else:
            raise SchemaReferenceError(f"Cannot resolve '#{pointer}'")
    return current
