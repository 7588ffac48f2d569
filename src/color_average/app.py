from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request, send_from_directory

from .averages import AGGREGATES, Outcome
from .color import RGB
from .demo import INDEX_FILE, OUTPUT_DIR

log = logging.getLogger(__name__)

MAX_COLORS = 512  # per /average request


def outcome_json(outcome: Outcome) -> dict[str, Any]:
    return {
        "color": outcome.color.to_hex() if outcome.color is not None else None,
        "error": outcome.detail if not outcome.ok else None,
    }


# ----------------------------- Flask app ----------------------------------


def create_app(output_dir: Path | str = OUTPUT_DIR) -> Flask:
    """Serve a generated demo page plus a JSON endpoint for ad-hoc sets."""
    app = Flask(__name__)
    root = Path(output_dir).resolve()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.route("/")
    def index():
        return send_from_directory(root, INDEX_FILE)

    @app.route("/average")
    def average():
        values = request.args.getlist("c")
        if len(values) > MAX_COLORS:
            return jsonify({"error": f"at most {MAX_COLORS} colors per request"}), 400
        try:
            colors = [RGB.from_hex(v) for v in values]
        except ValueError as e:
            return jsonify({"error": f"invalid color: {e}"}), 400

        body: dict[str, Any] = {"input": [c.to_hex() for c in colors]}
        for role, fn in AGGREGATES.items():
            outcome = fn(colors)
            if not outcome.ok:
                log.warning("%s failed for %s: %s", role, body["input"], outcome.detail)
            body[role] = outcome_json(outcome)
        return jsonify(body)

    @app.route("/<path:name>")
    def generated(name: str):
        return send_from_directory(root, name)

    return app


if __name__ == "__main__":
    create_app().run(debug=False)
