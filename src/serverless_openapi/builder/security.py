"""Security scheme registration and per-operation security requirements."""

import logging
from collections.abc import Sequence

from serverless_openapi.config import SecurityDefinition

logger = logging.getLogger(__name__)


def build_security_schemes(definitions: Sequence[SecurityDefinition]) -> dict[str, dict]:
    """Map each definition name to its public scheme object."""
    return {definition.name: definition.to_scheme() for definition in definitions}


def resolve_security(
    definitions: Sequence[SecurityDefinition],
    authorizer_name: str | None = None,
    documented: Sequence[str] | None = None,
) -> list[dict] | None:
    """Security requirement list for one operation, or ``None`` when nothing applies.

    A documented ``security`` list replaces whatever the event authorizer resolved to.
    """
    requirement = None

    if authorizer_name and definitions:
        match = next((d for d in definitions if d.authorizer_name == authorizer_name), None)
        if match is not None:
            requirement = [{match.name: []}]
        else:
            logger.debug("No security definition linked to authorizer '%s'", authorizer_name)

    if documented:
        matches = [d for d in definitions if d.name in documented]
        if matches:
            requirement = [{d.name: []} for d in matches]
        else:
            logger.debug("None of the documented security names %s are declared", list(documented))

    return requirement
