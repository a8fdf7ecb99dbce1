"""Grant decisions over a built role graph."""
from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from authz.assertion import Assertion
from authz.errors import AuthorizationCheckError
from authz.graph import RoleGraph
from authz.metrics import AUTHORIZATION_DECISIONS


def _is_blank(value: Any) -> bool:
    # Same rule as role-name validation: whitespace-only counts as missing.
    return not value or (isinstance(value, str) and not value.strip())


class Authorizer:
    def __init__(self, graph: RoleGraph, assertion: Optional[Assertion] = None):
        self.graph = graph
        self.assertion = assertion

    def is_granted(
        self,
        role: Optional[str] = None,
        resource: Optional[str] = None,
        context: Any = None,
    ) -> bool:
        """Return True if ``role`` may access ``resource``.

        A missing role or resource is denied without consulting the graph.
        When an assertion is configured it must also agree, and it is only
        asked once the role is known to hold the permission.

        Raises:
            AuthorizationCheckError: the graph or the assertion failed, e.g.
                the role is not registered.
        """
        if _is_blank(role) or _is_blank(resource):
            logger.warning(
                f"Authorization check skipped (role={role!r}, resource={resource!r}); denying"
            )
            AUTHORIZATION_DECISIONS.labels(outcome="denied").inc()
            return False

        try:
            granted = self.graph.has_permission(role, resource)
            if granted and self.assertion is not None:
                granted = bool(self.assertion.evaluate(role, resource, context))
        except Exception as e:
            logger.warning(f"Could not check '{resource}' for role '{role}': {e}")
            AUTHORIZATION_DECISIONS.labels(outcome="error").inc()
            raise AuthorizationCheckError() from e

        outcome = "granted" if granted else "denied"
        AUTHORIZATION_DECISIONS.labels(outcome=outcome).inc()
        logger.debug(f"Role '{role}' {outcome} '{resource}'")
        return granted
