from __future__ import annotations

import logging
import random
from typing import List, Optional

from .board import Board, Coord
from .errors import GameOver, NotComputersTurn
from .moves import enumerate_moves, legal_moves, apply_move
from .state import GameState, NORMAL

logger = logging.getLogger(__name__)


def pick_easy_move(state: GameState, rng: Optional[random.Random] = None) -> Optional[Coord]:
    """Picks a uniformly random legal move, or None if there is none."""
    moves = legal_moves(state)
    if not moves:
        return None
    rng = rng or random.Random()
    return rng.choice(moves)


def _replies(board: Board, move: Coord, move_number: int, player: int, parity: str):
    """Board after `player` places `move`, and the legal replies to it."""
    after = board.place(move, player, move_number)
    return after, enumerate_moves(after, move, move_number + 1, parity)


def _find_winning_move(state: GameState, candidates: List[Coord]) -> Optional[Coord]:
    for move in candidates:
        _, replies = _replies(state.board, move, state.move_number, state.turn, state.parity)
        if not replies:
            return move
    return None


def _is_safe(state: GameState, move: Coord) -> bool:
    """True if no single opponent reply to move leaves us without a follow-up."""
    me, opp = state.turn, state.other_player()
    after, replies = _replies(state.board, move, state.move_number, me, state.parity)
    for reply in replies:
        _, follow_ups = _replies(after, reply, state.move_number + 1, opp, state.parity)
        if not follow_ups:
            return False
    return True


def pick_normal_move(state: GameState, rng: Optional[random.Random] = None) -> Optional[Coord]:
    """
    Two-ply lookahead.

    Plays the first move that leaves the opponent without a reply. Failing
    that, plays the first move after which every opponent reply still leaves
    us a legal follow-up. Otherwise falls back to a random legal move.
    Simulation runs on board copies; state is never modified.
    """
    candidates = legal_moves(state)
    if not candidates:
        return None

    move = _find_winning_move(state, candidates)
    if move is not None:
        logger.debug('Normal AI: immediate win at %s', move)
        return move

    for move in candidates:
        if _is_safe(state, move):
            logger.debug('Normal AI: safe move at %s', move)
            return move

    logger.debug('Normal AI: no safe move among %d candidates; picking at random', len(candidates))
    return pick_easy_move(state, rng)


def ai_pick_move(state: GameState, rng: Optional[random.Random] = None) -> Optional[Coord]:
    """Picks a move for the player to act according to the configured difficulty."""
    if state.difficulty == NORMAL:
        return pick_normal_move(state, rng)
    return pick_easy_move(state, rng)


def computer_take_turn(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Lets the computer choose and play one move through the regular apply path."""
    if state.is_over:
        raise GameOver(f'Game is over; Player {state.winner} won')
    if not state.is_computer_turn():
        raise NotComputersTurn(f"It is Player {state.turn}'s turn")
    move = ai_pick_move(state, rng)
    if move is None:
        raise GameOver('No legal moves available')
    logger.info('Computer (%s) plays %s as move #%d', state.difficulty, move, state.move_number)
    return apply_move(state, move)
