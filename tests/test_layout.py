import unittest

from core.board import DEFAULT_LAYOUT, TILE_SIZES, OUT_OF_BOUNDS, EMPTY
from core.errors import LayoutError
from core.layout import Tile, TileLayout, TileLocation
from core.moves import Coord
from core.state import KulamiState


class TestTileFootprints(unittest.TestCase):
    def test_six_tiles_follow_orientation(self):
        portrait = Tile(0, 6, Coord(1, 1), False)
        landscape = Tile(0, 6, Coord(1, 1), True)
        self.assertEqual(portrait.end, Coord(3, 2))
        self.assertEqual(landscape.end, Coord(2, 3))
        self.assertEqual(len(list(portrait.footprint())), 6)
        self.assertEqual(len(list(landscape.footprint())), 6)

    def test_four_tiles_ignore_orientation(self):
        self.assertEqual(Tile(0, 4, Coord(0, 0), False).end, Coord(1, 1))
        self.assertEqual(Tile(0, 4, Coord(0, 0), True).end, Coord(1, 1))

    def test_three_and_two_tiles_are_straight(self):
        self.assertEqual(list(Tile(0, 3, Coord(2, 2), True).footprint()),
                         [Coord(2, 2), Coord(2, 3), Coord(2, 4)])
        self.assertEqual(list(Tile(0, 3, Coord(2, 2), False).footprint()),
                         [Coord(2, 2), Coord(3, 2), Coord(4, 2)])
        self.assertEqual(list(Tile(0, 2, Coord(0, 5), True).footprint()), [Coord(0, 5), Coord(0, 6)])
        self.assertEqual(list(Tile(0, 2, Coord(0, 5), False).footprint()), [Coord(0, 5), Coord(1, 5)])


class TestTileLayout(unittest.TestCase):
    def test_reference_layout_builds_grid(self):
        layout = TileLayout.default()
        self.assertEqual(layout.shape, (9, 11))
        self.assertEqual(layout.end, Coord(8, 10))
        self.assertEqual(layout.tile_sizes, TILE_SIZES)
        self.assertEqual(len(layout.tiles), 17)

        # Every covered cell belongs to exactly one tile.
        for tile in layout.tiles:
            for cell in tile.footprint():
                self.assertEqual(layout.tile_at(cell), tile.index)
        covered = int((layout.grid != OUT_OF_BOUNDS).sum())
        self.assertEqual(covered, sum(TILE_SIZES))

    def test_reference_layout_cells(self):
        layout = TileLayout.default()
        self.assertEqual(layout.tile_at(Coord(4, 5)), 2)
        self.assertEqual(layout.tile_at(Coord(4, 0)), 0)
        self.assertEqual(layout.tile_at(Coord(7, 0)), OUT_OF_BOUNDS)
        self.assertEqual(layout.tile_at(Coord(0, 0)), OUT_OF_BOUNDS)

    def test_empty_marbles_mark_uncovered_cells(self):
        layout = TileLayout.default()
        marbles = layout.empty_marbles()
        self.assertEqual(marbles[4, 5], EMPTY)
        self.assertEqual(marbles[7, 0], OUT_OF_BOUNDS)
        self.assertEqual(int((marbles == EMPTY).sum()), 64)

    def test_grid_is_read_only(self):
        layout = TileLayout.default()
        with self.assertRaises(ValueError):
            layout.grid[0, 0] = 3

    def test_tuples_and_locations_are_equivalent(self):
        locs = [TileLocation(Coord(*coord), landscape) for coord, landscape in DEFAULT_LAYOUT]
        self.assertTrue((TileLayout(locs).grid == TileLayout(DEFAULT_LAYOUT).grid).all())

    def test_too_few_placements(self):
        with self.assertRaises(LayoutError) as ctx:
            TileLayout(DEFAULT_LAYOUT[:16])
        self.assertEqual(ctx.exception.expected, 17)
        self.assertEqual(ctx.exception.received, 16)
        self.assertIn("17", str(ctx.exception))
        self.assertIn("16", str(ctx.exception))

    def test_too_many_placements(self):
        with self.assertRaises(LayoutError) as ctx:
            TileLayout(DEFAULT_LAYOUT + [((10, 10), False)])
        self.assertEqual(ctx.exception.expected, 17)
        self.assertEqual(ctx.exception.received, 18)

    def test_overlap_names_both_tiles_and_cell(self):
        locs = list(DEFAULT_LAYOUT)
        # Tile 16 (size 2) moved onto tile 15 at (3,0).
        locs[16] = ((3, 0), False)
        with self.assertRaises(LayoutError) as ctx:
            TileLayout(locs)
        self.assertEqual(ctx.exception.tiles, (16, 15))
        self.assertEqual(ctx.exception.cell, (3, 0))
        self.assertEqual(str(ctx.exception), "tiles 16 and 15 intersect on 3,0")

    def test_unsupported_tile_size(self):
        with self.assertRaises(LayoutError):
            TileLayout([((0, 0), False)], tile_sizes=(5,))

    def test_negative_anchor(self):
        locs = list(DEFAULT_LAYOUT)
        locs[0] = ((-1, 0), False)
        with self.assertRaises(LayoutError):
            TileLayout(locs)

    def test_custom_tile_set(self):
        layout = TileLayout([((0, 0), True), ((1, 0), True)], tile_sizes=(3, 2))
        self.assertEqual(layout.shape, (2, 3))
        self.assertEqual(layout.tile_at(Coord(1, 2)), OUT_OF_BOUNDS)

    def test_state_from_locations_propagates_layout_error(self):
        with self.assertRaises(LayoutError):
            KulamiState.from_locations(DEFAULT_LAYOUT[:3])


if __name__ == "__main__":
    unittest.main()
