"""Generate random color sets, average them three ways and write a demo page.

Usage
-----
$ pip install -e .
$ python -m color_average          # writes output/{index.html,records.css,style.css}
$ python -m color_average.app      # optional preview on http://127.0.0.1:5000
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List

import numpy as np

from .color import random_color
from .record import Record, build_record
from .render import RECORDS_CSS, STATIC_CSS, render_page

log = logging.getLogger(__name__)

INPUT_SIZES = range(2, 7)  # 2..6 colors per set
ROUNDS = 5
OUTPUT_DIR = Path("output")
INDEX_FILE = "index.html"
STATIC_DIR = Path(__file__).resolve().parent / "static"


def generate_records(
    sizes: Iterable[int] = INPUT_SIZES,
    rounds: int = ROUNDS,
    rng: np.random.Generator | None = None,
) -> List[Record]:
    """One record per (size, round) pair, size-major; ids are 'size-round'."""
    rng = rng if rng is not None else np.random.default_rng()
    records: List[Record] = []
    for size in sizes:
        for rnd in range(rounds):
            inputs = [random_color(rng) for _ in range(size)]
            records.append(build_record(f"{size}-{rnd}", inputs))
    return records


def write_output(records: Iterable[Record], out_dir: Path | str = OUTPUT_DIR) -> List[Path]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    css, html = render_page(records)

    static_path = out / STATIC_CSS
    shutil.copyfile(STATIC_DIR / STATIC_CSS, static_path)
    css_path = out / RECORDS_CSS
    css_path.write_text(css, encoding="utf-8")
    html_path = out / INDEX_FILE
    html_path.write_text(html, encoding="utf-8")

    written = [static_path, css_path, html_path]
    for p in written:
        log.info("wrote %s", p)
    return written


def main(out_dir: Path | str = OUTPUT_DIR, seed: int | None = None) -> List[Path]:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    records = generate_records(rng=np.random.default_rng(seed))
    log.info("generated %d records", len(records))
    return write_output(records, out_dir)


if __name__ == "__main__":
    main()
