from __future__ import annotations

import os
import sys
from collections import Counter
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        ALLOWED_PAIR_COUNTS,
        MATCH_REWARD,
        Card,
        GameState,
        InvalidPairCount,
        check_pair_count,
        debug,
        default_pair_count,
    )
except ImportError:
    from game import (  # type: ignore
        ALLOWED_PAIR_COUNTS,
        MATCH_REWARD,
        Card,
        GameState,
        InvalidPairCount,
        check_pair_count,
        debug,
        default_pair_count,
    )

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


def card_to_json(c: Card) -> Dict[str, Any]:
    return {"id": c.id, "symbol": c.symbol, "faceUp": bool(c.face_up), "matched": bool(c.matched)}


def card_from_json(obj: Dict[str, Any]) -> Card:
    return Card(
        id=str(obj["id"]),
        symbol=str(obj["symbol"]),
        face_up=bool(obj.get("faceUp", False)),
        matched=bool(obj.get("matched", False)),
    )


def state_to_json(s: GameState) -> Dict[str, Any]:
    return s.snapshot()


def json_to_state(obj: Dict[str, Any]) -> GameState:
    """Rebuilds a GameState from its JSON form. Raises ValueError when the deck rules do not hold."""
    pair_count = check_pair_count(int(obj["pairCount"]))
    cards = [card_from_json(c) for c in obj["cards"]]
    if len(cards) != 2 * pair_count:
        raise ValueError(f"expected {2 * pair_count} cards, got {len(cards)}")
    if len({c.id for c in cards}) != len(cards):
        raise ValueError("card ids must be unique")
    counts = Counter(c.symbol for c in cards)
    if any(n != 2 for n in counts.values()):
        raise ValueError("every symbol must appear exactly twice")
    score = int(obj.get("score", 0))
    if score < 0 or score % MATCH_REWARD != 0:
        raise ValueError(f"score must be a non-negative multiple of {MATCH_REWARD}")
    pending = obj.get("pendingCardId")
    pending_id: Optional[str] = str(pending) if pending is not None else None
    if pending_id is not None:
        pending_card = next((c for c in cards if c.id == pending_id), None)
        if pending_card is None or not pending_card.face_up or pending_card.matched:
            raise ValueError("pendingCardId must name a face-up unmatched card")
    return GameState(cards=cards, score=score, pair_count=pair_count, pending_card_id=pending_id)


def _bad_request(error: str) -> Any:
    return jsonify({"ok": False, "error": error}), 400


def _state_from_body(body: Dict[str, Any]) -> GameState:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return json_to_state(s_in)


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


# ---------- Game API (required by main.js) ----------

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "allowedPairCounts": list(ALLOWED_PAIR_COUNTS),
        "defaultPairs": default_pair_count(),
        "matchReward": MATCH_REWARD,
    })


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    pairs = body.get("pairs", None)
    seed = body.get("seed", None)
    try:
        state = GameState.new(pair_count=int(pairs) if pairs is not None else None, seed=seed)
    except (InvalidPairCount, ValueError, TypeError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/select")
def api_select() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    card_id = body.get("cardId")
    if card_id is None:
        return _bad_request("cardId required")
    changed = state.select_card(str(card_id))
    return jsonify({"ok": True, "changed": changed, "state": state_to_json(state)})


@app.post("/api/reset")
def api_reset() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    state.reset_game()
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/pairs")
def api_pairs() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        n = int(body["pairs"])
    except (KeyError, TypeError, ValueError):
        return _bad_request("pairs required")
    if "state" in body:
        try:
            state = _state_from_body(body)
        except (KeyError, TypeError, ValueError) as e:
            return _bad_request(f"bad state: {e}")
    else:
        try:
            state = GameState.new(seed=body.get("seed", None))
        except (TypeError, ValueError) as e:
            return _bad_request(str(e))
    try:
        state.set_pair_count(n)
    except InvalidPairCount as e:
        debug('api', f"rejected pair count {n}")
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug_mode = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug_mode)
