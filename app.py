from __future__ import annotations

import os
import sys
import uuid
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    Card,
    Game,
    GameError,
    Player,
    TurnResult,
    deal_game,
    rules,
)

app = Flask(__name__)

# Matches live only in this process.
GAMES: Dict[str, Game] = {}


def card_to_json(card: Optional[Card], reveal: bool = False) -> Optional[Any]:
    if card is None:
        return None
    if not (card.face_up or reveal):
        return rules.HIDDEN_SYMBOL
    return {"symbol": card.symbol, "kind": card.kind.value, "points": int(card.points)}


def player_to_json(p: Player) -> Dict[str, Any]:
    return {"name": p.name, "score": int(p.score), "alive": bool(p.alive), "color": int(p.color)}


def result_to_json(res: TurnResult) -> Dict[str, Any]:
    return {
        "player": int(res.player_index),
        "playerName": res.player_name,
        "outcome": res.outcome.value,
        "cards": [card_to_json(c, reveal=True) for c in res.cards],
        "points": int(res.points),
        "keepsTurn": bool(res.keeps_turn),
        "nextPlayer": res.next_player,
        "gameOver": bool(res.game_over),
    }


def state_to_json(g: Game) -> Dict[str, Any]:
    grid: List[List[Any]] = []
    for r in range(1, g.grid.rows + 1):
        grid.append([card_to_json(g.grid.get_card((r, c))) for c in range(1, g.grid.cols + 1)])
    return {
        "rows": int(g.grid.rows),
        "cols": int(g.grid.cols),
        "grid": grid,
        "remaining": g.grid.occupied_count(),
        "players": [player_to_json(p) for p in g.players],
        "current": None if g.is_over else int(g.current),
        "phase": g.phase.value,
        "endReason": g.end_reason,
    }


def _error(message: str, status: int = 400) -> Any:
    return jsonify({"ok": False, "error": message}), status


def _coord_from_body(body: Dict[str, Any]):
    return (int(body["row"]), int(body["col"]))


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    names = body.get("players")
    if not isinstance(names, list):
        return _error("players must be a list of names")
    try:
        rows = int(body.get("rows", 4))
        cols = int(body.get("cols", 4))
        seed = body.get("seed", None)
        seed = int(seed) if seed is not None else rules.default_seed()
    except (TypeError, ValueError) as e:
        return _error(f"bad settings: {e}")
    try:
        g = deal_game([None if n is None else str(n) for n in names], rows, cols, seed=seed)
    except GameError as e:
        return _error(str(e))
    game_id = uuid.uuid4().hex
    GAMES[game_id] = g
    rules.debug("api", f"new game {game_id} {rows}x{cols} seed={seed}")
    return jsonify({"ok": True, "id": game_id, "state": state_to_json(g)})


@app.get("/api/state/<game_id>")
def api_state(game_id: str) -> Any:
    g = GAMES.get(game_id)
    if g is None:
        return _error("unknown game", 404)
    return jsonify({"ok": True, "state": state_to_json(g)})


@app.post("/api/reveal/<game_id>")
def api_reveal(game_id: str) -> Any:
    g = GAMES.get(game_id)
    if g is None:
        return _error("unknown game", 404)
    body = request.get_json(force=True, silent=True) or {}
    try:
        coord = _coord_from_body(body)
    except (KeyError, TypeError, ValueError):
        return _error("row and col are required integers")
    try:
        card = g.reveal(coord)
    except GameError as e:
        return _error(str(e))
    return jsonify({"ok": True, "card": card_to_json(card), "state": state_to_json(g)})


@app.post("/api/resolve/<game_id>")
def api_resolve(game_id: str) -> Any:
    g = GAMES.get(game_id)
    if g is None:
        return _error("unknown game", 404)
    try:
        res = g.resolve()
    except GameError as e:
        return _error(str(e))
    return jsonify({"ok": True, "result": result_to_json(res), "state": state_to_json(g)})


@app.get("/api/leaderboard/<game_id>")
def api_leaderboard(game_id: str) -> Any:
    g = GAMES.get(game_id)
    if g is None:
        return _error("unknown game", 404)
    return jsonify({
        "ok": True,
        "gameOver": g.is_over,
        "leaderboard": [player_to_json(p) for p in g.leaderboard()],
    })


@app.delete("/api/game/<game_id>")
def api_delete(game_id: str) -> Any:
    if GAMES.pop(game_id, None) is None:
        return _error("unknown game", 404)
    return jsonify({"ok": True})


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=rules.debug_enabled())
