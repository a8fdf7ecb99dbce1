import pytest

from authz.errors import InvalidRoleNameError
from authz.role import Role, validate_role_name


def test_role_is_read_only():
    role = Role("editor", ["admin"], ["publish"])
    assert role.name == "editor"
    assert role.parents == ("admin",)
    assert role.permissions == frozenset({"publish"})
    with pytest.raises(AttributeError):
        role.name = "other"


def test_direct_permission():
    role = Role("editor", permissions=["publish"])
    assert role.has_direct_permission("publish")
    assert not role.has_direct_permission("settings")


def test_equality_and_hash():
    assert Role("a", ["b"], ["x"]) == Role("a", ["b"], ["x"])
    assert Role("a") != Role("a", permissions=["x"])
    assert len({Role("a"), Role("a")}) == 1


def test_validate_role_name():
    assert validate_role_name("admin") == "admin"
    with pytest.raises(InvalidRoleNameError):
        validate_role_name(1)
