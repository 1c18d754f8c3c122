"""RGBA colour values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An immutable RGBA colour with float components; alpha defaults to opaque."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_rgb(self) -> tuple[float, float, float]:
        """Return the red, green and blue components, dropping alpha."""
        return (self.r, self.g, self.b)