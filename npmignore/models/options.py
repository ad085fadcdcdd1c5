from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..utils.text import as_lines


@dataclass(frozen=True)
class MergeOptions:
    """Overrides applied while merging.

    unignore: lines removed from both zones.
    ignore: lines appended to the preserved zone.
    keepdest: treat all existing `.npmignore` content as preserved.
    """

    unignore: tuple[str, ...] = ()
    ignore: tuple[str, ...] = ()
    keepdest: bool = False

    def __post_init__(self) -> None:
        # Allow a single line or any sequence; store tuples.
        object.__setattr__(self, "unignore", tuple(as_lines(self.unignore)))
        object.__setattr__(self, "ignore", tuple(as_lines(self.ignore)))
        object.__setattr__(self, "keepdest", bool(self.keepdest))

    @classmethod
    def from_value(cls, value: MergeOptions | Mapping[str, Any] | None) -> MergeOptions:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(
                unignore=value.get("unignore"),
                ignore=value.get("ignore"),
                keepdest=value.get("keepdest", False),
            )
        raise TypeError(f"Unsupported merge options: {type(value).__name__}")
