import re

from color_average.color import RGB
from color_average.record import build_record
from color_average.render import record_css, record_html, render_page

REC = build_record("3-1", [RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 0, 255)])


def test_css_rule_format():
    css = record_css(REC)
    assert css.startswith(
        ".record-3-1.input-0 {\n    background-color: rgb(255, 0, 0);\n}\n"
    )
    assert ".record-3-1.rgb-mean {\n    background-color: rgb(85, 85, 85);\n}\n" in css


def test_css_has_one_rule_per_swatch():
    selectors = re.findall(r"^(\S+) \{$", record_css(REC), flags=re.M)
    assert selectors == [
        ".record-3-1.input-0",
        ".record-3-1.input-1",
        ".record-3-1.input-2",
        ".record-3-1.rgb-mean",
        ".record-3-1.blend-mix",
        ".record-3-1.hsl-mean",
    ]


def test_html_swatches_match_css():
    html = record_html(REC)
    assert html.startswith('<div class="record record-3-1">')
    swatches = re.findall(r'class="swatch ([^"]+)"', html)
    selectors = re.findall(r"^\.(\S+) \{$", record_css(REC), flags=re.M)
    assert [s.replace(" ", ".") for s in swatches] == selectors


def test_page_links_both_stylesheets():
    other = build_record("2-0", [RGB(1, 2, 3), RGB(4, 5, 6)])
    css, html = render_page([REC, other])
    assert css == record_css(REC) + record_css(other)
    assert '<link rel="stylesheet" href="style.css" />' in html
    assert '<link rel="stylesheet" href="records.css" />' in html
    assert record_html(REC) in html
    assert record_html(other) in html
