"""Read documentation and function configs from a YAML or JSON file.

Accepted layouts:

- ``documentation:`` and ``functions:`` at the top level, or
- a serverless.yml shape with ``custom.documentation`` and ``functions``.

``functions`` is either a list of ``{name, events}`` or a mapping of
function name to ``{events}``.
"""

from pathlib import Path

import yaml

from serverless_openapi.errors import ConfigError


def load_config_file(file_path: Path) -> tuple[dict, list[dict]]:
    """Return ``(documentation_config, function_configs)`` from ``file_path``."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {file_path}: {e}") from e

    # YAML is a superset of JSON, so one loader covers both
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{file_path} must contain a mapping at the top level")

    documentation = data.get("documentation")
    if documentation is None:
        documentation = (data.get("custom") or {}).get("documentation")
    if not isinstance(documentation, dict):
        raise ConfigError(f"{file_path} has no 'documentation' (or 'custom.documentation') section")

    return documentation, _function_list(data.get("functions"))


def _function_list(functions) -> list[dict]:
    if functions is None:
        return []
    if isinstance(functions, list):
        return functions
    if isinstance(functions, dict):
        result = []
        for name, config in functions.items():
            config = dict(config or {})
            config.setdefault("_functionName", name)
            result.append(config)
        return result
    raise ConfigError("'functions' must be a list or a mapping")
