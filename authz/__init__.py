"""Role hierarchy resolution and grant decisions."""
from authz.assertion import Assertion, FunctionAssertion
from authz.authorizer import Authorizer
from authz.errors import (
    AuthorizationCheckError,
    InvalidConfigError,
    InvalidPermissionError,
    InvalidRoleNameError,
    RbacError,
    RoleCycleError,
    UnknownParentError,
    UnknownRoleError,
)
from authz.factory import AuthorizerFactory, authorizer_from_file, build_authorizer
from authz.graph import RoleGraph, RoleGraphBuilder, graph_from_mapping
from authz.role import Role

__all__ = [
    "Assertion",
    "AuthorizationCheckError",
    "Authorizer",
    "AuthorizerFactory",
    "FunctionAssertion",
    "InvalidConfigError",
    "InvalidPermissionError",
    "InvalidRoleNameError",
    "RbacError",
    "Role",
    "RoleCycleError",
    "RoleGraph",
    "RoleGraphBuilder",
    "UnknownParentError",
    "UnknownRoleError",
    "authorizer_from_file",
    "build_authorizer",
    "graph_from_mapping",
]
