"""Deep structural merge used to compose every part of the document.

Law: for two dicts sharing a key, the values are merged key-by-key
recursively; a key present on only one side is kept; scalar and list
leaves from the later argument replace the earlier ones.
"""

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``update`` merged over ``base``.

    Neither argument is mutated and the result shares no containers with them.
    """
    result = copy.deepcopy(dict(base))
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def merge_all(*fragments: Mapping[str, Any]) -> dict[str, Any]:
    """Fold ``deep_merge`` over ``fragments`` from left to right."""
    result: dict[str, Any] = {}
    for fragment in fragments:
        result = deep_merge(result, fragment)
    return result
