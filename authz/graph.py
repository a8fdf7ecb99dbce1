"""Role hierarchy: a mutable builder and the read-only graph it produces.

Roles inherit every permission reachable through their parents. The builder
owns all construction state; ``build()`` returns a ``RoleGraph`` snapshot
that is never mutated afterwards, so it can be queried from any number of
threads without locking.
"""
from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
)

from loguru import logger

from authz.errors import (
    InvalidConfigError,
    InvalidPermissionError,
    RoleCycleError,
    UnknownParentError,
    UnknownRoleError,
)
from authz.role import Role, validate_role_name

ParentSpec = Union[None, str, Iterable[str]]


def _walk(start: str, parents_of: Callable[[str], Iterable[str]]) -> Iterator[str]:
    """Breadth-first walk from ``start`` up the parent relation.

    Each role is yielded once, so diamonds (two parents sharing an ancestor)
    are visited a single time.
    """
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        yield current
        for parent in parents_of(current):
            if parent not in seen:
                seen.add(parent)
                queue.append(parent)


def _normalize_parents(parents: ParentSpec) -> List[str]:
    if parents is None:
        return []
    if isinstance(parents, str):
        parents = [parents]
    names: List[str] = []
    for parent in parents:
        parent = validate_role_name(parent)
        if parent not in names:
            names.append(parent)
    return names


class RoleGraphBuilder:
    def __init__(self, create_missing_roles: bool = False):
        self.create_missing_roles = create_missing_roles
        self._parents: Dict[str, List[str]] = {}
        self._permissions: Dict[str, Set[str]] = {}

    def has_role(self, name: Any) -> bool:
        return name in self._parents

    def add_role(self, name: Any, parents: ParentSpec = None) -> None:
        """Register ``name`` with the given parents.

        Re-adding a known role replaces its parent set and keeps the
        permissions already attached to it.
        """
        name = validate_role_name(name)
        parent_names = _normalize_parents(parents)

        if name in parent_names:
            raise RoleCycleError(name, name)

        missing = [p for p in parent_names if p not in self._parents]
        if missing and not self.create_missing_roles:
            raise UnknownParentError(name, missing[0])

        # Only an already registered role can be reached from its new parents.
        if name in self._parents:
            for parent in parent_names:
                if parent in self._parents and name in _walk(parent, self._parents.__getitem__):
                    raise RoleCycleError(name, parent)

        for parent in missing:
            logger.debug(f"Creating missing parent role '{parent}' for '{name}'")
            self._parents[parent] = []
            self._permissions[parent] = set()

        self._parents[name] = parent_names
        self._permissions.setdefault(name, set())

    def add_permission(self, role: Any, permission: Any) -> None:
        if not isinstance(role, str) or role not in self._parents:
            raise UnknownRoleError(role)
        if not isinstance(permission, str) or not permission:
            raise InvalidPermissionError(permission)
        self._permissions[role].add(permission)

    def build(self) -> "RoleGraph":
        roles = {
            name: Role(name, parents, self._permissions[name])
            for name, parents in self._parents.items()
        }
        return RoleGraph(roles)


class RoleGraph:
    """Read-only view over a fully constructed role hierarchy."""

    def __init__(self, roles: Mapping[str, Role]):
        roles = dict(roles)
        for name, role in roles.items():
            if not isinstance(role, Role) or role.name != name:
                raise InvalidConfigError(f'Graph entry "{name}" does not hold a role named "{name}"')
            for parent in role.parents:
                if parent not in roles:
                    raise UnknownParentError(name, parent)
        for name, role in roles.items():
            for parent in role.parents:
                if name in _walk(parent, lambda current: roles[current].parents):
                    raise RoleCycleError(name, parent)
        self._roles: Mapping[str, Role] = MappingProxyType(roles)

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __iter__(self) -> Iterator[str]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    @property
    def roles(self) -> Tuple[str, ...]:
        return tuple(self._roles)

    def has_role(self, name: Any) -> bool:
        return name in self._roles

    def get_role(self, name: Any) -> Role:
        try:
            return self._roles[name]
        except (KeyError, TypeError):
            raise UnknownRoleError(name) from None

    def _parents_of(self, name: str) -> Tuple[str, ...]:
        return self._roles[name].parents

    def has_permission(self, role: Any, permission: str) -> bool:
        """Return True if ``permission`` is held by ``role`` or any ancestor."""
        self.get_role(role)
        for name in _walk(role, self._parents_of):
            if self._roles[name].has_direct_permission(permission):
                return True
        return False

    def ancestors(self, name: Any) -> Tuple[str, ...]:
        self.get_role(name)
        walk = _walk(name, self._parents_of)
        next(walk)
        return tuple(walk)

    def effective_permissions(self, name: Any) -> FrozenSet[str]:
        self.get_role(name)
        permissions: Set[str] = set()
        for current in _walk(name, self._parents_of):
            permissions |= self._roles[current].permissions
        return frozenset(permissions)

    def __repr__(self):
        return f"<RoleGraph roles={len(self._roles)}>"


def graph_from_mapping(
    roles: Mapping[str, ParentSpec],
    permissions: Optional[Mapping[str, Iterable[str]]] = None,
    create_missing_roles: bool = False,
) -> RoleGraph:
    """Build a graph from ``role -> parents`` and ``role -> permissions`` maps."""
    builder = RoleGraphBuilder(create_missing_roles=create_missing_roles)
    for name, parents in roles.items():
        builder.add_role(name, parents)
    for name, granted in (permissions or {}).items():
        for permission in granted:
            builder.add_permission(name, permission)
    return builder.build()
