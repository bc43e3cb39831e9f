# =========================================================
# --- core_board.py ---
# =========================================================

"""
Board-related constants and the reference configuration for Kulami.

This module defines:
- Tile sizes and tile footprint shapes
- Marble supply and the hard move ceiling
- Cell codes used by the board grids
- Player indices, majority signs and display names
- The reference tile layout
"""

#: Kulami has 17 tiles: four 6s, five 4s, four 3s and four 2s.
#: The tile index is the position in this tuple.
TILE_SIZES = (6, 6, 6, 6, 4, 4, 4, 4, 4, 3, 3, 3, 3, 2, 2, 2, 2)
NUM_TILES = len(TILE_SIZES)

#: Footprint extent per tile size, as (extra rows, extra cols) beyond the anchor.
#: Index 0 = portrait, index 1 = landscape.
TILE_SHAPES = {
    6: ((2, 1), (1, 2)),
    4: ((1, 1), (1, 1)),
    3: ((2, 0), (0, 2)),
    2: ((1, 0), (0, 1)),
}

#: Marbles per player and the resulting hard ceiling on moves
NUM_MARBLES = 28
MAX_MOVES = NUM_MARBLES * 2

#: Cell codes stored in the marble grid
#: OUT_OF_BOUNDS is also the tile code of cells no tile covers.
OUT_OF_BOUNDS = -1
EMPTY = 0
RED_MARBLE = 1
BLACK_MARBLE = 2

#: Player indices. Red moves on an empty board unless black opens.
RED = 0
BLACK = 1

#: Marble code per player
MARBLE = (RED_MARBLE, BLACK_MARBLE)

#: Majority counter step per player
#: Positive counters favour red, negative counters favour black.
SIGN = (1, -1)

PLAYER_NAMES = ("Red", "Black")

#: Reference layout: one ((row, col), is_landscape) entry per tile, in TILE_SIZES order.
DEFAULT_LAYOUT = [
    # 6s
    ((4, 0), False),
    ((6, 2), True),
    ((4, 3), True),
    ((1, 6), False),
    # 4s
    ((0, 4), False),
    ((2, 4), False),
    ((2, 2), False),
    ((4, 6), False),
    ((7, 5), False),
    # 3s
    ((1, 1), True),
    ((2, 8), False),
    ((5, 8), True),
    ((6, 5), True),
    # 2s
    ((4, 2), False),
    ((4, 9), True),
    ((2, 0), False),
    ((2, 1), False),
]
