"""Exception hierarchy for role graph construction and authorization checks.

A denied check is never an exception: ``Authorizer.is_granted`` returns
``False`` for that. Exceptions are reserved for broken configuration and for
checks that could not be answered at all.
"""
from __future__ import annotations

from typing import Any


class RbacError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfigError(RbacError):
    """Missing or malformed construction configuration."""


class InvalidRoleNameError(InvalidConfigError):
    def __init__(self, name: Any):
        super().__init__(f"Role must be a non-empty string, got {name!r}")
        self.name = name


class InvalidPermissionError(InvalidConfigError):
    def __init__(self, permission: Any):
        super().__init__(f"Permission must be a non-empty string, got {permission!r}")
        self.permission = permission


class RoleCycleError(InvalidConfigError):
    def __init__(self, role: str, parent: str):
        super().__init__(
            f'Adding parent "{parent}" to role "{role}" would create an inheritance cycle'
        )
        self.role = role
        self.parent = parent


class UnknownRoleError(RbacError):
    def __init__(self, role: str):
        super().__init__(f'No role with name "{role}" could be found')
        self.role = role


class UnknownParentError(UnknownRoleError):
    def __init__(self, role: str, parent: str):
        RbacError.__init__(
            self, f'Parent role "{parent}" of role "{role}" could not be found'
        )
        self.role = parent
        self.child = role


class AuthorizationCheckError(RbacError):
    """Raised when a check could not be answered (never for plain denial)."""

    def __init__(self, message: str = "Could not check Authorization"):
        super().__init__(message)
