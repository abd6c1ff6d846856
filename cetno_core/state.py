from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import Board, Coord, DEFAULT_BLOCKED, all_coords

HUMAN = 'human'
COMPUTER = 'computer'
OPPONENTS = (HUMAN, COMPUTER)

EASY = 'easy'
NORMAL = 'normal'
DIFFICULTIES = (EASY, NORMAL)

ODD = 'odd'
EVEN = 'even'
PARITIES = (ODD, EVEN)

# The computer, when enabled, always plays as Player 2.
COMPUTER_SIDE = 2


@dataclass(frozen=True)
class GameConfig:
    """Settings applied when a game is started or reset."""
    opponent: str = HUMAN
    difficulty: str = EASY
    parity: str = ODD
    blocked: Tuple[Coord, ...] = DEFAULT_BLOCKED

    def __post_init__(self) -> None:
        if self.opponent not in OPPONENTS:
            raise ValueError(f'Unknown opponent type: {self.opponent!r}')
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f'Unknown difficulty: {self.difficulty!r}')
        if self.parity not in PARITIES:
            raise ValueError(f'Unknown parity rule: {self.parity!r}')
        object.__setattr__(self, 'blocked', tuple(sorted((int(r), int(c)) for r, c in set(self.blocked))))
        if set(all_coords()) <= set(self.blocked):
            raise ValueError('Blocked layout leaves no open cell')


@dataclass(frozen=True)
class MoveRecord:
    coord: Coord
    player: int
    number: int


@dataclass(frozen=True)
class GameState:
    """A single game session. Every move produces a new GameState."""
    board: Board
    parity: str = ODD
    opponent: str = HUMAN
    difficulty: str = EASY
    turn: int = 1  # 1 or 2
    move_number: int = 1
    last_move: Optional[Coord] = None
    winner: Optional[int] = None  # set once the game is terminal
    history: Tuple[MoveRecord, ...] = field(default=tuple())

    @classmethod
    def start(cls, config: GameConfig) -> 'GameState':
        return cls(
            board=Board.initialize(config.blocked),
            parity=config.parity,
            opponent=config.opponent,
            difficulty=config.difficulty,
        )

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def other_player(self) -> int:
        return 2 if self.turn == 1 else 1

    def is_computer_turn(self) -> bool:
        return not self.is_over and self.opponent == COMPUTER and self.turn == COMPUTER_SIDE
