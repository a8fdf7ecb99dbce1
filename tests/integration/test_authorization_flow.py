"""End-to-end: config file -> authorizer -> HTTP-guarded routes."""
import json

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from authz.assertion import FunctionAssertion
from authz.config import Settings
from authz.factory import AuthorizerFactory, authorizer_from_file
from authz_api.middleware.authorization import require_permission
from authz_api.server import create_app


@pytest.mark.parametrize(
    "role,resource,expected",
    [
        ("contributor", "admin.settings", True),
        ("contributor", "admin.publish", True),
        ("contributor", "admin.dashboard", True),
        ("editor", "admin.settings", True),
        ("editor", "admin.posts", False),
        ("administrator", "admin.dashboard", False),
        ("administrator", "admin.settings", True),
        ("", "resource", False),
        ("role", "", False),
    ],
)
def test_blog_scenario(config_file, role, resource, expected):
    authorizer = authorizer_from_file(config_file)
    assert authorizer.is_granted(role, resource, None) is expected


def test_always_false_assertion_denies(rbac_config):
    authorizer = AuthorizerFactory(FunctionAssertion(lambda *args: False))(rbac_config)
    assert authorizer.graph.has_permission("contributor", "admin.settings")
    assert authorizer.is_granted("contributor", "admin.settings") is False


def test_guarded_routes_from_env(tmp_path, monkeypatch, rbac_config):
    path = tmp_path / "app.json"
    path.write_text(json.dumps(rbac_config))
    monkeypatch.setenv("RBAC_CONFIG_FILE", str(path))
    monkeypatch.setenv("RBAC_ENABLE_METRICS", "false")

    app = create_app()

    @app.post("/posts")
    def create_post(role: str = Depends(require_permission("admin.posts"))):
        return {"created_by": role}

    @app.get("/settings")
    def read_settings(role: str = Depends(require_permission("admin.settings"))):
        return {"role": role}

    with TestClient(app) as client:
        assert client.post("/posts", headers={"X-Role": "contributor"}).status_code == 200
        assert client.post("/posts", headers={"X-Role": "editor"}).status_code == 403
        assert client.get("/settings", headers={"X-Role": "editor"}).status_code == 200
        assert client.get("/settings").status_code == 403


def test_startup_fails_on_bad_config(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"authorization-rbac": {"roles": {}}}))
    app = create_app(settings=Settings(config_file=str(path), enable_metrics=False))

    from authz.errors import InvalidConfigError

    with pytest.raises(InvalidConfigError, match="permissions"):
        with TestClient(app):
            pass
