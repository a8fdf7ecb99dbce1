"""FastAPI dependency that guards a route behind a permission.

The role comes from a request header (``X-Role`` unless configured
otherwise); identity is established upstream. The request itself is passed
to the authorizer as the check context so assertions can inspect it.
"""
from __future__ import annotations

from typing import Callable, Optional

from fastapi import HTTPException, Request
from loguru import logger

from authz.errors import AuthorizationCheckError


def require_permission(resource: str) -> Callable[[Request], Optional[str]]:
    def dependency(request: Request) -> Optional[str]:
        authorizer = getattr(request.app.state, "authorizer", None)
        if authorizer is None:
            raise HTTPException(status_code=503, detail="Authorization not configured")

        header = getattr(request.app.state, "role_header", "X-Role")
        role = request.headers.get(header)
        try:
            granted = authorizer.is_granted(role, resource, context=request)
        except AuthorizationCheckError as e:
            logger.error(f"Authorization check for '{resource}' failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        if not granted:
            raise HTTPException(status_code=403, detail="Forbidden")
        return role

    return dependency
