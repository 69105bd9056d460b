"""32-bit RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A colour packed as ``0xRRGGBBAA``. The default is opaque white."""

    value: int = 0xFFFFFFFF

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & 0xFFFFFFFF)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a colour from 8-bit channels; alpha defaults to opaque."""
        return cls(
            ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)
        )

    @property
    def r(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def g(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def b(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def a(self) -> int:
        return self.value & 0xFF

    @property
    def rgba(self) -> int:
        return self.value