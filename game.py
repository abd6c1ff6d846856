from __future__ import annotations

# Facade module that re-exports the Cetno-Licho core.
# The Flask app, the CLI and the tests talk to the game through here.
# Single-responsibility modules live under cetno_core/*.

from typing import List, Optional, Tuple

from cetno_core.board import (  # noqa: F401
    Board,
    Cell,
    Coord,
    Mark,
    ROWS,
    COLS,
    EMPTY,
    BLOCKED,
    DEFAULT_BLOCKED,
    in_bounds,
    all_coords,
)
from cetno_core.errors import GameError, InvalidPlacement, GameOver, NotComputersTurn  # noqa: F401
from cetno_core.state import (  # noqa: F401
    GameConfig,
    GameState,
    MoveRecord,
    HUMAN,
    COMPUTER,
    EASY,
    NORMAL,
    ODD,
    EVEN,
    COMPUTER_SIDE,
)
from cetno_core.moves import (  # noqa: F401
    is_adjacent,
    neighbors,
    count_marked_neighbors,
    is_legal,
    enumerate_moves,
    legal_moves,
    is_legal_move,
    apply_move,
)
from cetno_core.ai import (  # noqa: F401
    pick_easy_move,
    pick_normal_move,
    ai_pick_move,
    computer_take_turn,
)
from cetno_core.deal import border_cells, random_blocked_layout  # noqa: F401


def new_game(config: Optional[GameConfig] = None) -> GameState:
    """Starts a fresh session: Player 1 to move, move #1, no last move."""
    return GameState.start(config or GameConfig())


def attempt_move(state: GameState, coord: Coord) -> GameState:
    """Applies a human move. Raises InvalidPlacement or GameOver; state is left untouched on failure."""
    return apply_move(state, coord)


def is_terminal(state: GameState) -> Tuple[bool, Optional[int]]:
    return state.is_over, state.winner


def main(argv: Optional[List[str]] = None) -> None:
    # CLI driver delegated to cetno_core.cli
    from cetno_core.cli import main as _main
    _main(argv)


if __name__ == '__main__':
    main()
