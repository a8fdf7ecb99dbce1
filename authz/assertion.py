"""Contextual assertions consulted after the static permission check."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Assertion(ABC):
    """Predicate that may veto a permission the role already holds.

    The request context is handed to every call instead of being stored on
    the instance, so one assertion can serve concurrent checks.
    """

    @abstractmethod
    def evaluate(self, role: str, resource: str, context: Any = None) -> bool:
        raise NotImplementedError


class FunctionAssertion(Assertion):
    """Wrap a plain ``(role, resource, context) -> bool`` callable."""

    def __init__(self, func: Callable[[str, str, Any], bool]):
        if not callable(func):
            raise TypeError("FunctionAssertion expects a callable")
        self.func = func

    def evaluate(self, role: str, resource: str, context: Any = None) -> bool:
        return bool(self.func(role, resource, context))

    def __repr__(self):
        name = getattr(self.func, "__name__", repr(self.func))
        return f"<FunctionAssertion {name}>"
