from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .board import Coord, DEFAULT_BLOCKED
from .deal import random_blocked_layout
from .state import GameConfig, GameState, OPPONENTS, DIFFICULTIES, PARITIES, HUMAN, EASY, ODD
from .moves import legal_moves, apply_move
from .ai import computer_take_turn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Cetno-Licho in the terminal')
    parser.add_argument('--opponent', choices=OPPONENTS, default=HUMAN, help='Who plays as Player 2')
    parser.add_argument('--difficulty', choices=DIFFICULTIES, default=EASY, help='Computer difficulty')
    parser.add_argument('--parity', choices=PARITIES, default=ODD,
                        help='Required parity of numbered neighbours from move 3 on')
    parser.add_argument('--random-board', action='store_true', help='Block six random border cells')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for board layout and computer moves')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    return parser


def parse_coord(text: str) -> Coord:
    """Parses 'r,c' or 'r c' into a coordinate. Raises ValueError on bad input."""
    sep = ',' if ',' in text else ' '
    r_s, c_s = [t for t in text.strip().split(sep) if t != '']
    return int(r_s), int(c_s)


def prompt_human_move(state: GameState) -> Coord:
    moves = legal_moves(state)
    print(f"Player {state.turn}, legal moves:", moves)
    while True:
        text = input(f'Move #{state.move_number} as r,c or r c: ')
        try:
            move = parse_coord(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if move in moves:
            return move
        print('Illegal move. Try again.')


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    rng = random.Random(args.seed)
    blocked = tuple(random_blocked_layout(rng=rng)) if args.random_board else DEFAULT_BLOCKED
    config = GameConfig(opponent=args.opponent, difficulty=args.difficulty, parity=args.parity, blocked=blocked)
    state = GameState.start(config)
    print('Initial board:')
    print(state.board.pretty())

    while not state.is_over:
        if state.is_computer_turn():
            state = computer_take_turn(state, rng)
            print(f"Computer plays {state.last_move}")
        else:
            state = apply_move(state, prompt_human_move(state))
        print(state.board.pretty())

    print(f"Player {state.winner} wins!")


if __name__ == '__main__':
    main()
