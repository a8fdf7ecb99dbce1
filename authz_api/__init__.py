# authz_api/__init__.py
import importlib
from typing import Any

__all__ = ["server", "middleware"]


def __getattr__(name: str) -> Any:
    """
    Lazy import submodules on attribute access, e.g. `from authz_api import server`.
    Importing the server builds the module-level app, so defer it until asked for.
    """
    if name in ("server", "middleware"):
        mod = importlib.import_module(f"authz_api.{name}")
        globals()[name] = mod
        return mod
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
