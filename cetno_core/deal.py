from __future__ import annotations

import random
from typing import FrozenSet, List, Optional

from .board import Coord, ROWS, COLS, all_coords

BLOCKED_COUNT = 6


def border_cells() -> List[Coord]:
    """All cells on the outer ring of the grid, corners included once, in row-major order."""
    return [(r, c) for r, c in all_coords() if r in (0, ROWS - 1) or c in (0, COLS - 1)]


def random_blocked_layout(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> FrozenSet[Coord]:
    """Samples six distinct border cells to be blocked in a new game."""
    rng = rng or random.Random(seed)
    return frozenset(rng.sample(border_cells(), BLOCKED_COUNT))
