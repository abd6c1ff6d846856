from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Coord,
    GameConfig,
    GameError,
    GameState,
    InvalidPlacement,
    Mark,
    BLOCKED,
    DEFAULT_BLOCKED,
    ROWS,
    COLS,
    new_game,
    attempt_move,
    legal_moves,
    computer_take_turn,
    random_blocked_layout,
)

# Defaults for /api/new when the request leaves a setting out
DEFAULT_OPPONENT = os.getenv("CETNO_OPPONENT", "human")
DEFAULT_DIFFICULTY = os.getenv("CETNO_DIFFICULTY", "easy")
DEFAULT_PARITY = os.getenv("CETNO_PARITY", "odd")

app = Flask(__name__)


def _coord_to_json(c: Optional[Coord]) -> Optional[List[int]]:
    return None if c is None else [int(c[0]), int(c[1])]


def _json_to_coord(obj: Any) -> Coord:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise ValueError(f"coordinate must be a [row, col] pair, got {obj!r}")
    r, c = obj
    return int(r), int(c)


def _board_to_json(s: GameState) -> List[List[Any]]:
    rows: List[List[Any]] = []
    for r in range(ROWS):
        row: List[Any] = []
        for c in range(COLS):
            cell = s.board.get((r, c))
            if isinstance(cell, Mark):
                row.append({"player": cell.player, "number": cell.number})
            elif cell == BLOCKED:
                row.append("blocked")
            else:
                row.append(None)
        rows.append(row)
    return rows


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": _board_to_json(s),
        "blocked": [_coord_to_json(c) for c in s.board.blocked_cells()],
        "history": [_coord_to_json(rec.coord) for rec in s.history],
        "turn": int(s.turn),
        "moveNumber": int(s.move_number),
        "lastMove": _coord_to_json(s.last_move),
        "parity": s.parity,
        "opponent": s.opponent,
        "difficulty": s.difficulty,
        "winner": s.winner,
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    """Rebuilds a session by replaying its history, so every stored move is re-validated."""
    config = GameConfig(
        opponent=str(obj.get("opponent", DEFAULT_OPPONENT)),
        difficulty=str(obj.get("difficulty", DEFAULT_DIFFICULTY)),
        parity=str(obj.get("parity", DEFAULT_PARITY)),
        blocked=tuple(_json_to_coord(c) for c in obj.get("blocked", DEFAULT_BLOCKED)),
    )
    state = new_game(config)
    for mv in obj.get("history", []):
        state = attempt_move(state, _json_to_coord(mv))
    return state


def _response(s: GameState, **extra: Any) -> Any:
    body = {"ok": True, "state": state_to_json(s), "legalMoves": legal_moves(s), "winner": s.winner}
    body.update(extra)
    return jsonify(body)


def _error(status: int, message: str, s: Optional[GameState] = None) -> Any:
    body: Dict[str, Any] = {"ok": False, "error": message}
    if s is not None:
        body["legalMoves"] = legal_moves(s)
    return jsonify(body), status


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        raise ValueError("JSON object required")
    return body


def _json_seed(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"seed must be an integer, got {seed!r}")
    return seed


def _load_state(body: Dict[str, Any]) -> GameState:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return json_to_state(s_in)


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _json_body()
        if body.get("randomize"):
            blocked = tuple(random_blocked_layout(rng=random.Random(_json_seed(body))))
        else:
            blocked = tuple(_json_to_coord(c) for c in body.get("blocked", DEFAULT_BLOCKED))
        config = GameConfig(
            opponent=str(body.get("opponent", DEFAULT_OPPONENT)),
            difficulty=str(body.get("difficulty", DEFAULT_DIFFICULTY)),
            parity=str(body.get("parity", DEFAULT_PARITY)),
            blocked=blocked,
        )
        state = new_game(config)
    except (TypeError, ValueError) as e:
        return _error(400, f"bad settings: {e}")
    app.logger.info("New game: %s", config)
    return _response(state)


@app.post("/api/legal")
def api_legal() -> Any:
    try:
        body = _json_body()
        state = _load_state(body)
    except (GameError, TypeError, ValueError, KeyError) as e:
        return _error(400, f"bad state: {e}")
    return jsonify({"ok": True, "legalMoves": legal_moves(state), "winner": state.winner})


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _json_body()
        state = _load_state(body)
        move = _json_to_coord(body["move"])
    except (GameError, TypeError, ValueError, KeyError) as e:
        return _error(400, f"bad request: {e}")
    if state.is_over:
        return _error(409, f"Game is over; Player {state.winner} won")
    try:
        next_state = attempt_move(state, move)
    except InvalidPlacement:
        return _error(400, "Illegal move", state)
    return _response(next_state, move=list(move))


@app.post("/api/ai")
def api_ai() -> Any:
    try:
        body = _json_body()
        state = _load_state(body)
        seed = _json_seed(body)
    except (GameError, TypeError, ValueError, KeyError) as e:
        return _error(400, f"bad request: {e}")
    try:
        next_state = computer_take_turn(state, random.Random(seed) if seed is not None else None)
    except GameError as e:
        return _error(409, str(e))
    return _response(next_state, move=_coord_to_json(next_state.last_move))


@app.get("/api/layout/random")
def api_random_layout() -> Any:
    seed = request.args.get("seed", type=int)
    cells = sorted(random_blocked_layout(seed=seed))
    return jsonify({"ok": True, "blocked": [_coord_to_json(c) for c in cells]})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
