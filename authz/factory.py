"""Build an ``Authorizer`` from the application's configuration map."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from loguru import logger

from authz.assertion import Assertion
from authz.authorizer import Authorizer
from authz.config import CONFIG_KEY, load_config_file
from authz.errors import InvalidConfigError, RbacError
from authz.graph import RoleGraphBuilder
from authz.metrics import AUTHORIZERS_BUILT


class AuthorizerFactory:
    """Turn the ``authorization-rbac`` config section into an Authorizer.

    Expected shape::

        {
            "authorization-rbac": {
                "roles": {"administrator": [], "editor": ["administrator"]},
                "permissions": {"editor": ["admin.publish"]},
            }
        }

    Parents that are referenced but never declared are created as empty
    roles. Every construction problem surfaces as ``InvalidConfigError``.
    """

    def __init__(self, assertion: Optional[Assertion] = None):
        self.assertion = assertion

    def __call__(self, config: Optional[Mapping]) -> Authorizer:
        if config is not None and not isinstance(config, Mapping):
            raise InvalidConfigError(
                f"Cannot create Authorizer instance; config must be a mapping, got {type(config).__name__}"
            )
        section = (config or {}).get(CONFIG_KEY)
        if section is None:
            raise InvalidConfigError(
                f'Cannot create Authorizer instance; no "{CONFIG_KEY}" config key present'
            )
        if not isinstance(section, Mapping):
            raise InvalidConfigError(f'The "{CONFIG_KEY}" config key must hold a mapping')
        if section.get("roles") is None:
            raise InvalidConfigError(
                f"Cannot create Authorizer instance; no {CONFIG_KEY}.roles configured"
            )
        if section.get("permissions") is None:
            raise InvalidConfigError(
                f"Cannot create Authorizer instance; no {CONFIG_KEY}.permissions configured"
            )

        builder = RoleGraphBuilder(create_missing_roles=True)
        self._inject_roles(builder, section["roles"])
        self._inject_permissions(builder, section["permissions"])
        graph = builder.build()

        AUTHORIZERS_BUILT.inc()
        logger.info(f"Authorizer built with {len(graph)} roles")
        return Authorizer(graph, self.assertion)

    def _inject_roles(self, builder: RoleGraphBuilder, roles: Any) -> None:
        if not isinstance(roles, Mapping):
            raise InvalidConfigError(f"{CONFIG_KEY}.roles must be a mapping of role -> parents")
        for role, parents in roles.items():
            if parents is not None and not isinstance(parents, (list, tuple, str)):
                raise InvalidConfigError(
                    f"{CONFIG_KEY}.roles.{role} must be a list of parent roles"
                )
            try:
                builder.add_role(role, parents)
            except RbacError as e:
                raise InvalidConfigError(str(e)) from e

    def _inject_permissions(self, builder: RoleGraphBuilder, specification: Any) -> None:
        if not isinstance(specification, Mapping):
            raise InvalidConfigError(
                f"{CONFIG_KEY}.permissions must be a mapping of role -> permissions"
            )
        for role, permissions in specification.items():
            if not isinstance(permissions, (list, tuple)):
                raise InvalidConfigError(
                    f"{CONFIG_KEY}.permissions.{role} must be a list of permissions"
                )
            for permission in permissions:
                try:
                    builder.add_permission(role, permission)
                except RbacError as e:
                    raise InvalidConfigError(str(e)) from e


def build_authorizer(config: Optional[Mapping], assertion: Optional[Assertion] = None) -> Authorizer:
    return AuthorizerFactory(assertion)(config)


def authorizer_from_file(path, assertion: Optional[Assertion] = None) -> Authorizer:
    return build_authorizer(load_config_file(path), assertion)
