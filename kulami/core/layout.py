# =========================================================
# --- core_layout.py ---
# =========================================================

import numpy as np
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .board import TILE_SIZES, TILE_SHAPES, OUT_OF_BOUNDS, EMPTY, DEFAULT_LAYOUT
from .errors import LayoutError
from .moves import Coord, as_coord

# =========================================================

#: Seed of the Zobrist keys, so equal boards hash equally across layouts
ZOBRIST_SEED = 0x4B554C41


@dataclass(frozen=True)
class TileLocation:
    """
    Placement of a tile: its upper-left corner and orientation.

    Attributes:
        coord (Coord): Upper-left cell of the tile.
        is_landscape (bool): True if the long axis runs along the row.
    """
    coord: Coord
    is_landscape: bool = False

    @classmethod
    def from_tuple(cls, entry: Tuple[Tuple[int, int], bool]) -> "TileLocation":
        coord, is_landscape = entry
        return cls(as_coord(coord), bool(is_landscape))


@dataclass(frozen=True)
class Tile:
    """
    A fixed-shape region of the board.

    Attributes:
        index (int): Tile identity, 0..N-1.
        size (int): Number of cells (6, 4, 3 or 2).
        anchor (Coord): Upper-left cell.
        is_landscape (bool): Orientation flag.
    """
    index: int
    size: int
    anchor: Coord
    is_landscape: bool = False

    @property
    def end(self) -> Coord:
        """Lower-right cell of the tile."""
        rows, cols = TILE_SHAPES[self.size][int(self.is_landscape)]
        return Coord(self.anchor.row + rows, self.anchor.col + cols)

    def footprint(self) -> Iterator[Coord]:
        """Yield every cell covered by the tile in row-major order."""
        end = self.end
        for row in range(self.anchor.row, end.row + 1):
            for col in range(self.anchor.col, end.col + 1):
                yield Coord(row, col)


class TileLayout:
    """
    Validated placement of all tiles and the grid derived from it.

    Attributes:
        tiles (Tuple[Tile, ...]): All tiles in index order.
        tile_sizes (Tuple[int, ...]): Size of every tile.
        grid (np.ndarray): Tile index per cell, OUT_OF_BOUNDS where no tile lies.
        end (Coord): Lower-right corner of the board.
        zobrist (np.ndarray): Random 64-bit key per (row, col, player).
    """

    def __init__(
        self,
        locations: Iterable[Union[TileLocation, Tuple[Tuple[int, int], bool]]],
        tile_sizes: Sequence[int] = TILE_SIZES,
    ) -> None:
        """
        Build the grid from tile placements.

        Args:
            locations: One placement per tile, in tile index order.
            tile_sizes: Size of every tile. Defaults to the Kulami tile set.

        Raises:
            LayoutError: On a wrong placement count, an unknown tile size,
                a negative anchor or two intersecting tiles.
        """
        locs: List[TileLocation] = [
            loc if isinstance(loc, TileLocation) else TileLocation.from_tuple(loc)
            for loc in locations
        ]
        if len(locs) != len(tile_sizes):
            raise LayoutError(
                f"need exactly {len(tile_sizes)} tile locations, got {len(locs)}",
                expected=len(tile_sizes),
                received=len(locs),
            )

        tiles: List[Tile] = []
        for index, (loc, size) in enumerate(zip(locs, tile_sizes)):
            if size not in TILE_SHAPES:
                raise LayoutError(f"tile {index} has unsupported size {size}")
            if loc.coord.row < 0 or loc.coord.col < 0:
                raise LayoutError(f"tile {index} is anchored outside the board at {loc.coord}")
            tiles.append(Tile(index, int(size), loc.coord, loc.is_landscape))

        self.tiles: Tuple[Tile, ...] = tuple(tiles)
        self.tile_sizes: Tuple[int, ...] = tuple(t.size for t in self.tiles)

        # Compute the board range.
        end_row = max(t.end.row for t in self.tiles)
        end_col = max(t.end.col for t in self.tiles)
        self.end: Coord = Coord(end_row, end_col)

        self.grid: np.ndarray = np.full((end_row + 1, end_col + 1), OUT_OF_BOUNDS, dtype=np.int8)
        for tile in self.tiles:
            for cell in tile.footprint():
                existing = int(self.grid[cell.row, cell.col])
                if existing != OUT_OF_BOUNDS:
                    raise LayoutError(
                        f"tiles {tile.index} and {existing} intersect on {cell.row},{cell.col}",
                        cell=(cell.row, cell.col),
                        tiles=(tile.index, existing),
                    )
                self.grid[cell.row, cell.col] = tile.index
        self.grid.setflags(write=False)

        rng = random.Random(ZOBRIST_SEED)
        self.zobrist: np.ndarray = np.array(
            [[[rng.getrandbits(63) for _ in range(2)] for _ in range(end_col + 1)] for _ in range(end_row + 1)],
            dtype=np.int64,
        )

    @classmethod
    def default(cls) -> "TileLayout":
        """Return the reference layout."""
        return cls(DEFAULT_LAYOUT)

    # ---------- Properties ----------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    def tile_at(self, coord: Coord) -> int:
        """Return the tile index of a cell, or OUT_OF_BOUNDS."""
        return int(self.grid[coord.row, coord.col])

    def empty_marbles(self) -> np.ndarray:
        """Return a fresh marble grid: EMPTY on covered cells, OUT_OF_BOUNDS elsewhere."""
        return np.where(self.grid == OUT_OF_BOUNDS, OUT_OF_BOUNDS, EMPTY).astype(np.int8)
