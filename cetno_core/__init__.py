"""
Cetno-Licho core Python package.

Pure game logic for the Cetno-Licho placement game, kept free of any
presentation concerns so the CLI, the Flask app and the tests share it.
Modules:
- board.py: Board, Mark, Coord and the fixed grid constants
- state.py: GameConfig, GameState, MoveRecord
- moves.py: legality predicate, move enumeration, apply_move
- ai.py: Easy and Normal computer opponents
- deal.py: randomized blocked-cell layouts
- errors.py: typed game errors
"""
