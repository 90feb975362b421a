from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from game import (
    Board,
    DataUnavailable,
    IndexOutOfRange,
    NoActiveGame,
    RevealController,
    cell_id,
    configure_logging,
    display_text,
    load_settings,
    new_session,
    parse_cell_id,
)

SETTINGS = load_settings()
configure_logging(SETTINGS.log_level)
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# The running game. Tests swap this for a session over a fake source.
SESSION = new_session(SETTINGS)


def board_to_json(board: Board, placeholder: str = SETTINGS.placeholder) -> Dict[str, Any]:
    # Hidden clue text stays on the server until it is revealed
    return {
        "width": board.width,
        "height": board.height,
        "placeholder": placeholder,
        "categories": [
            {
                "id": cat.id,
                "title": cat.title,
                "clues": [
                    {
                        "cell": cell_id(ci, ri),
                        "state": clue.reveal_state.value,
                        "text": display_text(clue, placeholder),
                    }
                    for ri, clue in enumerate(cat.clues)
                ],
            }
            for ci, cat in enumerate(board.categories)
        ],
    }


def _error(msg: str, status: int) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": msg}), status


def _index(value: Any) -> int:
    # bools are ints in Python; floats would truncate
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"category and clue must be integers, got {value!r}")
    return value


def _coord_from_body(body: Dict[str, Any], board: Board) -> Tuple[int, int]:
    if "cell" in body:
        return parse_cell_id(str(body["cell"]), board)
    if "category" not in body or "clue" not in body:
        raise ValueError("cell or category/clue required")
    return _index(body["category"]), _index(body["clue"])


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


@app.get("/static/<path:filename>")
def static_files(filename: str) -> Any:
    return send_from_directory(app.static_folder, filename)


# ---------- Game API (used by main.js) ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    try:
        board = SESSION.restart()
    except DataUnavailable as e:
        return _error(f"Could not load trivia: {e}", 503)
    except NoActiveGame as e:
        return _error(str(e), 503)
    return jsonify({"ok": True, "board": board_to_json(board, SESSION.placeholder)})


@app.get("/api/board")
def api_board() -> Any:
    try:
        ctl: RevealController = SESSION.controller
    except NoActiveGame as e:
        return _error(str(e), 404)
    return jsonify({"ok": True, "board": board_to_json(ctl.board, ctl.placeholder), "recentClue": ctl.recent_clue})


@app.post("/api/reveal")
def api_reveal() -> Any:
    body: Optional[Dict[str, Any]] = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return _error("JSON body required", 400)
    try:
        rv = SESSION.reveal_cell(lambda board: _coord_from_body(body, board))
    except NoActiveGame as e:
        return _error(str(e), 409)
    except IndexOutOfRange as e:
        logger.error("reveal rejected: %s (body=%r)", e, body)
        if app.debug:
            raise
        return _error(str(e), 400)
    except ValueError as e:
        return _error(str(e), 400)
    return jsonify({
        "ok": True,
        "cell": cell_id(*rv.coord),
        "text": rv.result.text,
        "state": rv.result.state.value,
        "cellChanged": rv.result.cell_changed,
        "recentClue": rv.recent_clue,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
