"""Immutable role value produced by ``RoleGraphBuilder.build``."""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Tuple

from authz.errors import InvalidRoleNameError


def validate_role_name(name: Any) -> str:
    """Return ``name`` if it is a usable role identity, else raise."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidRoleNameError(name)
    return name


class Role:
    __slots__ = ("_name", "_parents", "_permissions")

    def __init__(
        self,
        name: str,
        parents: Iterable[str] = (),
        permissions: Iterable[str] = (),
    ):
        self._name = validate_role_name(name)
        self._parents: Tuple[str, ...] = tuple(parents)
        self._permissions: FrozenSet[str] = frozenset(permissions)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parents(self) -> Tuple[str, ...]:
        return self._parents

    @property
    def permissions(self) -> FrozenSet[str]:
        return self._permissions

    def has_direct_permission(self, permission: str) -> bool:
        return permission in self._permissions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return (
            self._name == other._name
            and self._parents == other._parents
            and self._permissions == other._permissions
        )

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self):
        return f"<Role {self._name} parents={list(self._parents)}>"
