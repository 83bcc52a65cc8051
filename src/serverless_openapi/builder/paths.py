"""Compose path fragments from function configs."""

import logging
from collections.abc import Iterable

from serverless_openapi.builder.operation import build_operation
from serverless_openapi.events import FunctionConfig, HttpEvent, normalize_event
from serverless_openapi.merge import deep_merge
from serverless_openapi.registry import Registry

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def http_events(function: FunctionConfig) -> list[HttpEvent]:
    events = (normalize_event(event) for event in function.events)
    return [event for event in events if event is not None]


def build_path_fragment(function: FunctionConfig, event: HttpEvent, registry: Registry) -> dict:
    """``{path: {method: operation}}`` for one documented event."""
    operation_id = event.documentation.operation_id or function.name
    return {
        normalize_path(event.path): {
            event.method.lower(): build_operation(operation_id, event, registry),
        }
    }


def build_paths(functions: Iterable[FunctionConfig], registry: Registry) -> dict:
    """Paths object accumulated over every documented HTTP event."""
    paths: dict = {}
    for function in functions:
        for event in http_events(function):
            if event.documentation is None:
                logger.debug("Skipping undocumented %s event %s %s of %s",
                             event.kind, event.method, event.path, function.name)
                continue
            paths = deep_merge(paths, build_path_fragment(function, event, registry))
    return paths
