from __future__ import annotations

from typing import Iterable

from jinja2 import Environment

from .record import Record

STATIC_CSS = "style.css"
RECORDS_CSS = "records.css"

RECORD_CSS = """\
{% for color in record.inputs %}
.record-{{ record.id }}.input-{{ loop.index0 }} {
    background-color: {{ color.to_css() }};
}
{% endfor %}
{% for role, color in record.outputs() %}
.record-{{ record.id }}.{{ role }} {
    background-color: {{ color.to_css() }};
}
{% endfor %}
"""

RECORD_HTML = """\
<div class="record record-{{ record.id }}">
  <span>{{ record.id }}</span>
  <div>
{% for color in record.inputs %}
    <div class="swatch record-{{ record.id }} input-{{ loop.index0 }}" title="{{ color.to_hex() }}"></div>
{% endfor %}
  </div>
  <div>
{% for role, color in record.outputs() %}
    <div class="swatch record-{{ record.id }} {{ role }}" title="{{ role }} {{ color.to_hex() }}"></div>
{% endfor %}
  </div>
</div>
"""

INDEX_HTML = """\
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{{ title }}</title>
    <link rel="stylesheet" href="{{ static_css }}" />
    <link rel="stylesheet" href="{{ records_css }}" />
  </head>
  <body>
    <h1>{{ title }}</h1>
    <div class="legend">
      <span>inputs</span>
      <span>rgb-mean</span>
      <span>blend-mix</span>
      <span>hsl-mean</span>
    </div>
{{ body | safe }}
  </body>
</html>
"""

_css_env = Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
_html_env = Environment(
    autoescape=True, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True
)

_record_css = _css_env.from_string(RECORD_CSS)
_record_html = _html_env.from_string(RECORD_HTML)
_index_html = _html_env.from_string(INDEX_HTML)


def record_css(record: Record) -> str:
    """One rule per input swatch and per aggregate, scoped by record id."""
    return _record_css.render(record=record)


def record_html(record: Record) -> str:
    """Container div whose swatch classes match :func:`record_css` selectors."""
    return _record_html.render(record=record)


def render_page(
    records: Iterable[Record], *, title: str = "Color averages"
) -> tuple[str, str]:
    """Return ``(css, html)`` for a complete demo page."""
    records = list(records)
    css = "".join(record_css(r) for r in records)
    body = "".join(record_html(r) for r in records)
    html = _index_html.render(
        title=title,
        static_css=STATIC_CSS,
        records_css=RECORDS_CSS,
        body=body,
    )
    return css, html


__all__ = ["record_css", "record_html", "render_page"]
