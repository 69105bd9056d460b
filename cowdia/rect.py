"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    left: float = 0
    top: float = 0
    width: float = 0
    height: float = 0

    @classmethod
    def from_size(cls, width: float, height: float) -> Rect:
        """Return a rectangle of the given size at the origin."""
        return cls(0, 0, width, height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height