"""Attribute model: flag attributes and key/value attributes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from .errors import MalformedBuilderInput

BARE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
HYPHENATED_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:-[A-Za-z_][A-Za-z0-9_]*)+\Z")


def _require_name(value: Any, what: str) -> None:
    if not isinstance(value, str) or not value:
        raise MalformedBuilderInput(f"{what} must be a non-empty string, got {value!r}")


@dataclass(frozen=True)
class Flag:
    """Presence-only attribute such as ``hidden``."""

    name: str

    def __post_init__(self) -> None:
        _require_name(self.name, "flag name")

    def render(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class KeyValue:
    """``key="value"`` attribute. The value is emitted without escaping."""

    key: str
    value: str

    def __post_init__(self) -> None:
        _require_name(self.key, "attribute key")
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))

    def render(self) -> str:
        return f'{self.key}="{self.value}"'

    def __str__(self) -> str:
        return self.render()


Attribute = Union[Flag, KeyValue]


def is_attribute(value: Any) -> bool:
    return isinstance(value, (Flag, KeyValue))


def render_attribute(attribute: Attribute) -> str:
    return attribute.render()


def attribute(key: str, *value: Any) -> Attribute:
    """Build one attribute: ``attribute("hidden")`` or ``attribute("http-equiv", "X-UA-Compatible")``.

    Keys are bare names or dash-joined bare names.
    """
    if len(value) > 1:
        raise MalformedBuilderInput(f"attribute() takes a key and at most one value, got {len(value)} values")
    if not isinstance(key, str) or not (BARE_NAME.match(key) or HYPHENATED_NAME.match(key)):
        raise MalformedBuilderInput(f"not a valid attribute name: {key!r}")
    if not value:
        return Flag(key)
    return KeyValue(key, str(value[0]))


__all__ = [
    "Attribute",
    "BARE_NAME",
    "Flag",
    "HYPHENATED_NAME",
    "KeyValue",
    "attribute",
    "is_attribute",
    "render_attribute",
]
