# tests/conftest.py
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from authz.factory import build_authorizer  # noqa: E402


# ---------------------------------------------------------------------------
# Shared RBAC configuration
# ---------------------------------------------------------------------------
@pytest.fixture
def rbac_config():
    """administrator <- editor <- contributor, each with its own permissions."""
    return {
        "authorization-rbac": {
            "roles": {
                "administrator": [],
                "editor": ["administrator"],
                "contributor": ["editor"],
            },
            "permissions": {
                "contributor": ["admin.dashboard", "admin.posts"],
                "editor": ["admin.publish"],
                "administrator": ["admin.settings"],
            },
        }
    }


@pytest.fixture
def authorizer(rbac_config):
    return build_authorizer(rbac_config)


@pytest.fixture
def config_file(tmp_path, rbac_config):
    path = tmp_path / "rbac.json"
    path.write_text(json.dumps(rbac_config))
    return path


# ---------------------------------------------------------------------------
# Keep the developer's environment out of the settings under test
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_rbac_env(monkeypatch):
    for name in ("RBAC_CONFIG_FILE", "RBAC_ROLE_HEADER", "RBAC_ENABLE_METRICS"):
        monkeypatch.delenv(name, raising=False)
    yield
