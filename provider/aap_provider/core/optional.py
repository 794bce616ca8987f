"""Tri-state attribute values used by resource state.

A declared attribute is in exactly one of three states:

- ``Unknown``: declared but not resolved yet (only legal at plan time)
- ``Null``: deliberately absent
- ``Known(value)``: a concrete value

Operations that talk to the remote API require every input to be either
``Null`` or ``Known``; reaching them with an ``Unknown`` is a caller error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from .errors import PreconditionViolation

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Unknown:
    """Value not resolved yet."""

    @property
    def is_unknown(self) -> bool:
        return True

    @property
    def is_null(self) -> bool:
        return False

    @property
    def is_known(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Null:
    """Value deliberately absent."""

    @property
    def is_unknown(self) -> bool:
        return False

    @property
    def is_null(self) -> bool:
        return True

    @property
    def is_known(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Known(Generic[T]):
    """Concrete value."""

    value: T

    @property
    def is_unknown(self) -> bool:
        return False

    @property
    def is_null(self) -> bool:
        return False

    @property
    def is_known(self) -> bool:
        return True


AttrValue = Union[Unknown, Null, Known[T]]

UNKNOWN = Unknown()
NULL = Null()


def known_or_null(value: Optional[T]) -> AttrValue[T]:
    """Wrap a plain value, mapping ``None`` to ``NULL``."""

    if value is None:
        return NULL
    return Known(value)


def value_or_none(attr: AttrValue[T], name: str) -> Optional[T]:
    """Unwrap an attribute that must already be resolved.

    Raises:
        PreconditionViolation: if ``attr`` is ``Unknown``.
    """

    if isinstance(attr, Unknown):
        raise PreconditionViolation(
            f"Attribute '{name}' is unknown; it must be resolved before apply"
        )
    if isinstance(attr, Known):
        return attr.value
    return None


def require_known(attr: AttrValue[T], name: str) -> T:
    """Unwrap an attribute that must hold a concrete value."""

    if not isinstance(attr, Known):
        state = "unknown" if isinstance(attr, Unknown) else "null"
        raise PreconditionViolation(f"Attribute '{name}' is required but {state}")
    return attr.value


def known_text(attr: AttrValue[Any]) -> Optional[str]:
    """Return the string value of ``attr`` if it is Known and non-empty."""

    if isinstance(attr, Known) and attr.value not in (None, ""):
        return str(attr.value)
    return None


__all__ = [
    "AttrValue",
    "Known",
    "NULL",
    "Null",
    "UNKNOWN",
    "Unknown",
    "known_or_null",
    "known_text",
    "require_known",
    "value_or_none",
]
