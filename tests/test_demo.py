import re

import numpy as np

from color_average.demo import STATIC_DIR, generate_records, main, write_output
from color_average.render import record_css, record_html


def test_generate_forty_records():
    records = generate_records(range(2, 6), 10, np.random.default_rng(0))
    assert len(records) == 40
    assert len({r.id for r in records}) == 40
    assert records[0].id == "2-0"
    assert records[-1].id == "5-9"
    assert all(len(r.inputs) == int(r.id.split("-")[0]) for r in records)


def test_every_record_renders_its_id():
    for rec in generate_records(range(2, 6), 10, np.random.default_rng(1)):
        css, html = record_css(rec), record_html(rec)
        assert css and html
        selectors = re.findall(r"^(\S+) \{$", css, flags=re.M)
        assert len(selectors) == len(rec.inputs) + 3
        assert all(s.startswith(f".record-{rec.id}.") for s in selectors)
        classes = re.findall(r'class="([^"]*)"', html)
        assert len(classes) == len(rec.inputs) + 4
        assert all(f"record-{rec.id}" in c.split() for c in classes)


def test_write_output(tmp_path):
    out = tmp_path / "nested" / "out"
    records = generate_records([2], 2, np.random.default_rng(2))
    paths = write_output(records, out)
    assert [p.name for p in paths] == ["style.css", "records.css", "index.html"]
    assert (out / "style.css").read_text() == (STATIC_DIR / "style.css").read_text()
    assert ".record-2-1.hsl-mean" in (out / "records.css").read_text()
    assert 'class="record record-2-0"' in (out / "index.html").read_text()


def test_main_is_reproducible_with_seed(tmp_path):
    a = main(tmp_path / "a", seed=42)
    b = main(tmp_path / "b", seed=42)
    assert all(p.exists() for p in a + b)
    assert a[1].read_text() == b[1].read_text()
    # default parameters: sizes 2..6, 5 rounds
    assert a[1].read_text().count(".rgb-mean {") == 25
