"""Runtime settings read from the environment (and a local ``.env``)."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel

from authz.errors import InvalidConfigError

try:
    load_dotenv()
except Exception as e:  # pragma: no cover
    logger.warning(f"Failed to load .env file: {e}")

CONFIG_KEY = "authorization-rbac"


class Settings(BaseModel):
    config_file: Optional[str] = None
    role_header: str = "X-Role"
    enable_metrics: bool = True


def get_settings() -> Settings:
    return Settings(
        config_file=os.getenv("RBAC_CONFIG_FILE") or None,
        role_header=os.getenv("RBAC_ROLE_HEADER", "X-Role"),
        enable_metrics=os.getenv("RBAC_ENABLE_METRICS", "true").lower() == "true",
    )


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read the application config from a JSON file.

    The file holds the whole application config; the RBAC section lives
    under ``CONFIG_KEY``.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise InvalidConfigError(f"Could not read {CONFIG_KEY} config") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Could not read {CONFIG_KEY} config; top level of {path} must be an object"
        )
    return data
