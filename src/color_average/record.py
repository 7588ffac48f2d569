from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from .averages import AGGREGATES, Outcome
from .color import BLACK, RGB

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    id: str
    inputs: tuple[RGB, ...]
    rgb_mean: RGB
    blend_mix: RGB
    hsl_mean: RGB

    def outputs(self) -> Iterator[tuple[str, RGB]]:
        """(role, color) pairs; the role doubles as the CSS class name."""
        yield "rgb-mean", self.rgb_mean
        yield "blend-mix", self.blend_mix
        yield "hsl-mean", self.hsl_mean


def resolve(role: str, outcome: Outcome, inputs: Sequence[RGB]) -> RGB:
    """Unwrap ``outcome``, logging and substituting black on failure."""
    if outcome.ok:
        return outcome.unwrap_or(BLACK)
    log.warning(
        "%s failed (%s) for input [%s]; using %s",
        role,
        outcome.detail,
        ", ".join(c.to_hex() for c in inputs),
        BLACK.to_hex(),
    )
    return BLACK


def build_record(record_id: str, inputs: Sequence[RGB]) -> Record:
    inputs = tuple(inputs)
    out = {
        role: resolve(role, fn(inputs), inputs) for role, fn in AGGREGATES.items()
    }
    log.debug("record %s: %s", record_id, {k: v.to_hex() for k, v in out.items()})
    return Record(
        id=record_id,
        inputs=inputs,
        rgb_mean=out["rgb-mean"],
        blend_mix=out["blend-mix"],
        hsl_mean=out["hsl-mean"],
    )


__all__ = ["Record", "build_record", "resolve"]
