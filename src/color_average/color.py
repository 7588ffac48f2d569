from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from coloraide import Color

Hue = float
Percent = float


def _channel(v: int) -> int:
    if isinstance(v, bool) or int(v) != v:
        raise ValueError(f"channel must be an integer, got {v!r}")
    v = int(v)
    if not 0 <= v <= 255:
        raise ValueError(f"channel out of range: {v}")
    return v


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    @classmethod
    def from_hex(cls, s: str) -> RGB:
        """Parse '#rgb' or '#rrggbb' (leading '#' optional)."""
        raw = (s or "").strip().lstrip("#")
        if len(raw) == 3 and all(c in string.hexdigits for c in raw):
            raw = "".join(ch * 2 for ch in raw)
        if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
            raise ValueError(f"invalid hex: {s!r}")
        return cls(*(int(raw[i : i + 2], 16) for i in (0, 2, 4)))

    @classmethod
    def from_unit(cls, coords: Sequence[float]) -> RGB:
        """sRGB triplet in [0-1] to 8-bit, round-to-nearest."""
        u8 = np.round(np.clip(np.asarray(coords[:3], dtype=np.float64), 0.0, 1.0) * 255.0)
        return cls(*(int(v) for v in u8))

    def unit(self) -> list[float]:
        return [self.r / 255.0, self.g / 255.0, self.b / 255.0]

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_color(self) -> Color:
        return Color("srgb", self.unit())

    def to_hsl(self) -> HSL:
        h, s, l = self.to_color().convert("hsl").coords()
        # achromatic colors carry an undefined (NaN) hue
        if math.isnan(h):
            h = 0.0
        return HSL(h % 360.0, s * 100.0, l * 100.0)


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness as percentages."""

    h: Hue
    s: Percent
    l: Percent

    def to_rgb(self) -> RGB:
        c = Color("hsl", [self.h, self.s / 100.0, self.l / 100.0]).convert("srgb")
        return RGB.from_unit(c.coords())


BLACK = RGB(0, 0, 0)


def random_color(rng: np.random.Generator) -> RGB:
    r, g, b = rng.integers(0, 256, size=3)
    return RGB(int(r), int(g), int(b))


__all__ = ["BLACK", "HSL", "RGB", "random_color"]
