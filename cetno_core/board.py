from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Set, List, Union

from .errors import InvalidPlacement

Coord = Tuple[int, int]

ROWS = 7
COLS = 6

EMPTY = '.'
BLOCKED = '#'

# Two opposite corners of the grid.
DEFAULT_BLOCKED: Tuple[Coord, ...] = ((0, 4), (0, 5), (6, 5), (6, 0), (6, 1), (5, 0))


@dataclass(frozen=True)
class Mark:
    """A numbered marker placed by a player."""
    player: int
    number: int


Cell = Union[str, Mark]  # EMPTY, BLOCKED or a Mark


def in_bounds(coord: Coord) -> bool:
    r, c = coord
    return 0 <= r < ROWS and 0 <= c < COLS


def all_coords() -> Iterable[Coord]:
    """Iterates over every coordinate of the grid in row-major order."""
    for r in range(ROWS):
        for c in range(COLS):
            yield (r, c)


@dataclass(frozen=True)
class Board:
    """The 7x6 grid. Instances are immutable; place() returns a new board."""
    grid: Tuple[Cell, ...]  # row-major, length == ROWS * COLS

    @classmethod
    def initialize(cls, blocked: Iterable[Coord]) -> 'Board':
        """Creates a board where exactly the given coordinates are blocked."""
        blocked_set: Set[Coord] = set()
        for coord in blocked:
            coord = (int(coord[0]), int(coord[1]))
            if not in_bounds(coord):
                raise ValueError(f'Blocked cell out of bounds: {coord}')
            blocked_set.add(coord)
        return cls(grid=tuple(BLOCKED if coord in blocked_set else EMPTY for coord in all_coords()))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * COLS + c

    def get(self, coord: Coord) -> Cell:
        if not in_bounds(coord):
            raise IndexError(f'Coordinate out of bounds: {coord}')
        return self.grid[self.index(*coord)]

    def is_empty(self, coord: Coord) -> bool:
        return in_bounds(coord) and self.get(coord) == EMPTY

    def is_marked(self, coord: Coord) -> bool:
        return isinstance(self.get(coord), Mark)

    def place(self, coord: Coord, player: int, number: int) -> 'Board':
        """Returns a copy of the board with a numbered mark at coord."""
        if not self.is_empty(coord):
            raise InvalidPlacement(f'Cell {coord} is not empty')
        grid = list(self.grid)
        grid[self.index(*coord)] = Mark(player=player, number=number)
        return Board(grid=tuple(grid))

    def blocked_cells(self) -> Tuple[Coord, ...]:
        return tuple(coord for coord in all_coords() if self.get(coord) == BLOCKED)

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        lines: List[str] = ['    ' + ' '.join(f'{c:>3}' for c in range(COLS))]
        for r in range(ROWS):
            row: List[str] = []
            for c in range(COLS):
                cell = self.get((r, c))
                if isinstance(cell, Mark):
                    row.append(f"{cell.number}{'x' if cell.player == 1 else 'o'}".rjust(3))
                else:
                    row.append(cell.rjust(3))
            lines.append(f'{r:>3} ' + ' '.join(row))
        return "\n".join(lines)
