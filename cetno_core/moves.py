from __future__ import annotations

import logging
from typing import List, Optional

from .board import Board, Coord, ROWS, COLS, all_coords
from .errors import GameOver, InvalidPlacement
from .state import GameState, MoveRecord, ODD, EVEN

logger = logging.getLogger(__name__)


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True if b is one of the eight cells surrounding a."""
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return max(dr, dc) == 1


def neighbors(coord: Coord) -> List[Coord]:
    """Gets the 8-neighbourhood of a coordinate, clipped to the grid."""
    r, c = coord
    out: List[Coord] = []
    for nr in range(r - 1, r + 2):
        for nc in range(c - 1, c + 2):
            if (nr, nc) == (r, c):
                continue
            if 0 <= nr < ROWS and 0 <= nc < COLS:
                out.append((nr, nc))
    return out


def count_marked_neighbors(board: Board, coord: Coord) -> int:
    """Counts neighbouring cells holding a number. Blocked and empty cells do not count."""
    return sum(1 for n in neighbors(coord) if board.is_marked(n))


def parity_matches(count: int, parity: str) -> bool:
    if parity == ODD:
        return count % 2 == 1
    if parity == EVEN:
        return count % 2 == 0
    raise ValueError(f'Unknown parity rule: {parity!r}')


def is_legal(board: Board, coord: Coord, last_move: Optional[Coord], move_number: int, parity: str) -> bool:
    """
    Decides whether a number may be placed at coord.

    The first move may go on any empty cell. The second move only has to touch
    the first. From the third move on the target must touch the last move and
    its count of numbered neighbours must have the configured parity.
    """
    if not board.is_empty(coord):
        return False
    if move_number == 1:
        return True
    if last_move is None:
        return False
    if not is_adjacent(coord, last_move):
        return False
    if move_number == 2:
        return True
    return parity_matches(count_marked_neighbors(board, coord), parity)


def enumerate_moves(board: Board, last_move: Optional[Coord], move_number: int, parity: str) -> List[Coord]:
    """Lists every legal placement in row-major order."""
    return [coord for coord in all_coords() if is_legal(board, coord, last_move, move_number, parity)]


def legal_moves(state: GameState) -> List[Coord]:
    """Calculates all legal moves for the current player."""
    if state.is_over:
        return []
    return enumerate_moves(state.board, state.last_move, state.move_number, state.parity)


def is_legal_move(state: GameState, coord: Coord) -> bool:
    if state.is_over:
        return False
    return is_legal(state.board, coord, state.last_move, state.move_number, state.parity)


def apply_move(state: GameState, dest: Coord) -> GameState:
    """
    Places the current player's next number at dest and passes the turn.

    If the player now to move has no legal placement the game ends and the
    player who just moved is recorded as the winner.
    """
    if state.is_over:
        raise GameOver(f'Game is over; Player {state.winner} won')
    dest = (int(dest[0]), int(dest[1]))
    if not is_legal_move(state, dest):
        raise InvalidPlacement(f'Illegal move {dest} for move #{state.move_number}')

    player = state.turn
    board = state.board.place(dest, player, state.move_number)
    next_turn = state.other_player()
    next_number = state.move_number + 1
    winner: Optional[int] = None
    if not enumerate_moves(board, dest, next_number, state.parity):
        winner = player
        logger.debug('Player %d has no legal moves after move #%d; Player %d wins', next_turn, state.move_number, player)
    return GameState(
        board=board,
        parity=state.parity,
        opponent=state.opponent,
        difficulty=state.difficulty,
        turn=next_turn,
        move_number=next_number,
        last_move=dest,
        winner=winner,
        history=state.history + (MoveRecord(coord=dest, player=player, number=state.move_number),),
    )
