"""Exception types raised by topus."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union


class TopusError(Exception):
    """Base class for topus errors."""


class MalformedBuilderInput(TopusError, ValueError):
    """A builder argument matched none of the recognised item shapes."""

    def __init__(self, message: str, *, item: Any = None, position: int | None = None):
        if position is not None:
            message = f"item {position} ({item!r}): {message}"
        super().__init__(message)
        self.item = item
        self.position = position


class IOFailure(TopusError, OSError):
    """Rendered output could not be written to its destination."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        super().__init__(f"couldn't write to {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


__all__ = ["IOFailure", "MalformedBuilderInput", "TopusError"]
