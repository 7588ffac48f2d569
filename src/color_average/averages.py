"""Three ways of averaging a set of colors.

Every aggregate returns an :class:`Outcome` instead of raising, so a caller
averaging many sets can decide per set what to do with a failure.

rgb_mean           – per-channel integer mean of the 8-bit channels.
blend_mix          – left fold of pairwise sRGB mixes, running result weighted
                     by 1/N (LESS ``mix()`` semantics for opaque colors).
hsl_circular_mean  – arithmetic mean of saturation and lightness, circular
                     mean of hue via atan2 of the summed unit vectors.
"""

from __future__ import annotations

import enum
import functools
import math
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import numpy as np

from .color import BLACK, HSL, RGB

# magnitude below which the summed hue vectors are treated as cancelling out
HUE_EPSILON = 1e-9
# hue used when the circular mean is undefined, e.g. for hues {0, 180}
FALLBACK_HUE = 0.0
# slack for float noise in HSL percentages (white converts to 100.00000000000001)
_PCT_SLACK = 1e-9


class AverageError(enum.Enum):
    EMPTY_INPUT = "empty input"
    OUT_OF_RANGE = "average out of range"
    ANGLE_OUT_OF_RANGE = "angle out of range"
    RATIO_OUT_OF_RANGE = "ratio out of range"
    UNEXPECTED = "unexpected fault"


@dataclass(frozen=True)
class Outcome:
    color: RGB | None = None
    error: AverageError | None = None
    detail: str = ""

    @classmethod
    def success(cls, color: RGB) -> Outcome:
        return cls(color=color)

    @classmethod
    def failure(cls, error: AverageError, detail: str = "") -> Outcome:
        return cls(error=error, detail=detail or error.value)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: RGB = BLACK) -> RGB:
        return self.color if self.color is not None else default


Aggregate = Callable[[Sequence[RGB]], Outcome]


def _guarded(fn: Aggregate) -> Aggregate:
    """Report any fault raised while averaging as an ``UNEXPECTED`` outcome."""

    @functools.wraps(fn)
    def wrapper(colors: Sequence[RGB]) -> Outcome:
        try:
            return fn(colors)
        except Exception as exc:
            return Outcome.failure(
                AverageError.UNEXPECTED, f"{type(exc).__name__}: {exc}"
            )

    return wrapper


@_guarded
def rgb_mean(colors: Sequence[RGB]) -> Outcome:
    if len(colors) == 0:
        return Outcome.failure(AverageError.EMPTY_INPUT)
    channels = np.array([(c.r, c.g, c.b) for c in colors], dtype=np.uint64)
    avg = channels.sum(axis=0) // np.uint64(len(colors))
    # cannot trigger for 8-bit inputs; kept so a bad sum never wraps silently
    if np.any(avg > 255):
        return Outcome.failure(
            AverageError.OUT_OF_RANGE, f"channel mean {avg.tolist()} exceeds 255"
        )
    return Outcome.success(RGB(*(int(v) for v in avg)))


def mix_ratio(n: int) -> float:
    """Weight of the running result: whole percent of 1/n, truncated."""
    return int(100.0 / n) / 100.0


@_guarded
def blend_mix(colors: Sequence[RGB]) -> Outcome:
    n = len(colors)
    if n == 0:
        return Outcome.failure(AverageError.EMPTY_INPUT)
    ratio = mix_ratio(n)
    # 1/n for n >= 1 always lands in [0, 1]; kept as a guard on mix_ratio
    if not 0.0 <= ratio <= 1.0:
        return Outcome.failure(AverageError.RATIO_OUT_OF_RANGE, f"ratio {ratio}")

    acc = colors[0]
    for c in colors[1:]:
        # ColorAide's percent is the share of the *second* color
        mixed = acc.to_color().mix(c.to_color(), 1.0 - ratio, space="srgb")
        acc = RGB.from_unit(mixed.convert("srgb").coords())
    return Outcome.success(acc)


def circular_mean(hues: Sequence[float]) -> float | None:
    """Mean angle in degrees within [0, 360), or None when undefined."""
    sin_sum = sum(math.sin(math.radians(h)) for h in hues)
    cos_sum = sum(math.cos(math.radians(h)) for h in hues)
    if math.hypot(sin_sum, cos_sum) < HUE_EPSILON:
        return None
    h = math.degrees(math.atan2(sin_sum, cos_sum)) % 360.0
    # a tiny negative angle wraps to exactly 360.0
    return 0.0 if h >= 360.0 else h


@_guarded
def hsl_circular_mean(colors: Sequence[RGB]) -> Outcome:
    n = len(colors)
    if n == 0:
        return Outcome.failure(AverageError.EMPTY_INPUT)
    hsl = [c.to_hsl() for c in colors]
    s_avg = sum(x.s for x in hsl) / n
    l_avg = sum(x.l for x in hsl) / n
    for name, v in (("saturation", s_avg), ("lightness", l_avg)):
        if not -_PCT_SLACK <= v <= 100.0 + _PCT_SLACK:
            return Outcome.failure(AverageError.OUT_OF_RANGE, f"{name} {v}")

    hue = circular_mean([x.h for x in hsl])
    if hue is None:
        hue = FALLBACK_HUE
    # circular_mean already folds into [0, 360); kept as a guard on it
    if not 0.0 <= hue < 360.0:
        return Outcome.failure(AverageError.ANGLE_OUT_OF_RANGE, f"hue {hue}")

    s_avg = min(100.0, max(0.0, s_avg))
    l_avg = min(100.0, max(0.0, l_avg))
    return Outcome.success(HSL(hue, s_avg, l_avg).to_rgb())


# role (CSS class name) -> aggregate, in rendering order
AGGREGATES: Dict[str, Aggregate] = {
    "rgb-mean": rgb_mean,
    "blend-mix": blend_mix,
    "hsl-mean": hsl_circular_mean,
}


__all__ = [
    "AGGREGATES",
    "AverageError",
    "Outcome",
    "blend_mix",
    "circular_mean",
    "hsl_circular_mean",
    "mix_ratio",
    "rgb_mean",
]
