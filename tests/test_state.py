import unittest

import numpy as np

from core.board import MAX_MOVES, RED, BLACK, EMPTY, RED_MARBLE, BLACK_MARBLE
from core.errors import (
    MoveError, TurnError, GameOverError, OutOfBoundsError, OccupiedError, TileBlockedError,
)
from core.moves import Coord
from core.rules import KulamiRules
from core.state import KulamiState

from kulami_samples import SAMPLE_MOVES, play_sample


def fingerprint(state):
    return (
        state.marbles.tobytes(),
        tuple(state.moves),
        state.red_score,
        state.black_score,
        state.ledger.tile_score.tobytes(),
        state.zobrist_hash,
    )


class TestMoveAndUndo(unittest.TestCase):
    def test_reference_game_scores(self):
        state = KulamiState(debug=True)
        play_sample(state)
        self.assertEqual(state.red_score, 9)
        self.assertEqual(state.black_score, 10)
        self.assertEqual(state.recompute_scores(), (9, 10))
        self.assertEqual(state.moves, SAMPLE_MOVES)
        self.assertEqual(state.last_move, Coord(1, 6))
        self.assertEqual(state.previous_move, Coord(5, 6))
        self.assertEqual(state.last_moves(), [Coord(5, 6), Coord(1, 6)])
        self.assertEqual(state.last_moves(0), [])
        self.assertEqual(state.turn, BLACK)

    def test_undo_all_restores_fresh_board(self):
        state = KulamiState(debug=True)
        fresh = fingerprint(state)
        play_sample(state)
        for _ in SAMPLE_MOVES:
            self.assertIsNotNone(state.undo_last_move())
        self.assertEqual(state.red_score, 0)
        self.assertEqual(state.black_score, 0)
        self.assertEqual(fingerprint(state), fresh)
        self.assertEqual(state, KulamiState())

    def test_move_then_undo_is_a_no_op(self):
        state = KulamiState(debug=True)
        play_sample(state, SAMPLE_MOVES[:6])
        before = fingerprint(state)
        for coord in state.legal_moves():
            state.move(coord, state.is_reds_turn)
            state.undo_last_move()
            self.assertEqual(fingerprint(state), before)

    def test_undo_on_empty_history_is_a_no_op(self):
        state = KulamiState()
        before = fingerprint(state)
        self.assertIsNone(state.undo_last_move())
        self.assertEqual(fingerprint(state), before)

    def test_move_returns_inverse_delta(self):
        state = KulamiState()
        record = state.move(Coord(4, 5), True)
        self.assertEqual(record.player, RED)
        self.assertEqual(record.coord, Coord(4, 5))
        self.assertEqual(record.tile, 2)
        self.assertEqual((record.delta.red, record.delta.black), (6, 0))
        self.assertEqual(state.cell(Coord(4, 5)), RED_MARBLE)

        undone = state.undo_last_move()
        self.assertEqual(undone, record)
        self.assertEqual(state.cell(Coord(4, 5)), EMPTY)

    def test_tuple_coordinates_are_accepted(self):
        state = KulamiState()
        state.move((4, 5), True)
        self.assertEqual(state.last_move, Coord(4, 5))

    def test_fractional_coordinates_are_rejected(self):
        state = KulamiState()
        before = fingerprint(state)
        for coord in ((4.7, 5.2), (4.0, 5), (True, 5)):
            with self.assertRaises(TypeError):
                state.move(coord, True)
        with self.assertRaises(TypeError):
            state.is_legal_move((4.7, 5.2))
        self.assertEqual(fingerprint(state), before)
        self.assertEqual(len(state.history), 0)

    def test_numpy_integer_coordinates_are_accepted(self):
        state = KulamiState()
        state.move((np.int64(4), np.int8(5)), True)
        self.assertEqual(state.last_move, Coord(4, 5))

    def test_black_may_open(self):
        state = KulamiState(debug=True)
        state.move(Coord(0, 4), False)
        self.assertEqual(state.cell(Coord(0, 4)), BLACK_MARBLE)
        self.assertEqual(state.turn, RED)
        self.assertTrue(state.is_reds_turn)
        with self.assertRaises(TurnError):
            state.move(Coord(0, 6), False)


class TestMoveErrors(unittest.TestCase):
    def setUp(self):
        self.state = KulamiState()
        self.state.move(Coord(4, 5), True)
        self.state.move(Coord(4, 0), False)

    def assertRejected(self, coord, is_red, error):
        before = fingerprint(self.state)
        with self.assertRaises(error) as ctx:
            self.state.move(coord, is_red)
        self.assertEqual(fingerprint(self.state), before)
        self.assertEqual(ctx.exception.coord, coord)
        return ctx.exception

    def test_occupied_cells(self):
        err = self.assertRejected(Coord(4, 5), True, OccupiedError)
        self.assertEqual(err.reason, "occupied")
        self.assertRejected(Coord(4, 0), True, OccupiedError)

    def test_tile_blocked_by_own_previous_move(self):
        err = self.assertRejected(Coord(4, 3), True, TileBlockedError)
        self.assertEqual(err.blocked_by, "self")
        self.assertEqual(err.tile, 2)
        self.assertIn("blocked by you", str(err))

    def test_tile_blocked_by_opponent(self):
        err = self.assertRejected(Coord(5, 0), True, TileBlockedError)
        self.assertEqual(err.blocked_by, "opponent")
        self.assertEqual(err.tile, 0)
        self.assertIn("blocked by the other player", str(err))

    def test_uncovered_cell(self):
        self.assertRejected(Coord(7, 0), True, OutOfBoundsError)

    def test_outside_grid(self):
        self.assertRejected(Coord(4, 11), True, OutOfBoundsError)
        self.assertRejected(Coord(-1, 0), True, OutOfBoundsError)

    def test_off_the_line_of_play(self):
        err = self.assertRejected(Coord(2, 4), True, OccupiedError)
        self.assertEqual(err.reason, "line_of_play")

    def test_wrong_turn(self):
        self.assertRejected(Coord(2, 0), False, TurnError)

    def test_turn_is_checked_first(self):
        # Occupied and out of turn at once: the turn error wins.
        self.assertRejected(Coord(4, 5), False, TurnError)

    def test_all_errors_are_move_errors(self):
        for error in (TurnError, GameOverError, OutOfBoundsError, OccupiedError, TileBlockedError):
            self.assertTrue(issubclass(error, MoveError))

    def test_legal_move_still_accepted_after_rejections(self):
        for coord in (Coord(4, 5), Coord(4, 3), Coord(7, 0)):
            self.assertFalse(self.state.is_legal_move(coord))
        self.state.move(Coord(2, 0), True)
        self.assertEqual(self.state.turn, BLACK)


class TestMarbleSupply(unittest.TestCase):
    def test_reference_ceiling(self):
        self.assertEqual(MAX_MOVES, 56)
        self.assertEqual(KulamiState().rules.max_moves, 56)

    def test_no_move_after_ceiling(self):
        state = KulamiState(rules=KulamiRules(max_moves=4), debug=True)
        play_sample(state, SAMPLE_MOVES[:4])
        self.assertEqual(state.legal_moves(), [])
        self.assertTrue(state.is_game_over())
        with self.assertRaises(GameOverError):
            state.move(Coord(4, 7), True)
        self.assertEqual(len(state.history), 4)

        result = state.rules.game_over(state)
        self.assertIsNotNone(result)
        self.assertEqual((result.red_score, result.black_score), (state.red_score, state.black_score))


class TestRuleTable(unittest.TestCase):
    def test_rules_in_check_order(self):
        rules = KulamiRules()
        self.assertEqual([r.id for r in rules.rules], ["R1", "R2", "R3", "R4", "R5", "R6", "R7"])
        self.assertEqual(len({r.description for r in rules.rules}), 7)
        self.assertIn("56", rules.R2.description)

    def test_on_board_covers_grid_edges_and_holes(self):
        state = KulamiState()
        rules = state.rules
        for coord in (Coord(0, 4), Coord(8, 6), Coord(4, 10), Coord(4, 0)):
            self.assertTrue(rules.on_board(state, coord))
        for coord in (Coord(-1, 4), Coord(9, 5), Coord(4, 11), Coord(0, 0), Coord(8, 10)):
            self.assertFalse(rules.on_board(state, coord))


class TestCopyAndSnapshot(unittest.TestCase):
    def test_copy_is_independent(self):
        state = KulamiState()
        play_sample(state, SAMPLE_MOVES[:5])
        before = fingerprint(state)
        clone = state.copy()
        self.assertEqual(clone, state)
        self.assertEqual(hash(clone), hash(state))

        clone.move(clone.legal_moves()[0], clone.is_reds_turn)
        clone.undo_last_move()
        clone.undo_last_move()
        self.assertEqual(fingerprint(state), before)
        self.assertNotEqual(clone, state)

    def test_snapshot_is_read_only(self):
        state = KulamiState()
        play_sample(state, SAMPLE_MOVES[:2])
        snap = state.snapshot()
        self.assertEqual(snap.moves, (Coord(4, 5), Coord(4, 0)))
        self.assertEqual(snap.last_moves, (Coord(4, 5), Coord(4, 0)))
        with self.assertRaises(ValueError):
            snap.marbles[0, 4] = RED_MARBLE
        state.move(Coord(2, 0), True)
        self.assertEqual(snap.marbles[2, 0], EMPTY)

    def test_hash_tracks_placements(self):
        state = KulamiState()
        play_sample(state, SAMPLE_MOVES[:7])
        h = state.zobrist_hash
        state.update_zobrist_hash()
        self.assertEqual(state.zobrist_hash, h)


class TestDebugInvariants(unittest.TestCase):
    def test_corrupted_score_is_detected(self):
        state = KulamiState(debug=True)
        state.move(Coord(4, 5), True)
        state.ledger.scores[RED] += 1
        with self.assertRaises(AssertionError):
            state.move(Coord(4, 0), False)

    def test_stray_marble_is_detected(self):
        state = KulamiState(debug=True)
        state.move(Coord(4, 5), True)
        state.marbles[0, 4] = BLACK_MARBLE
        with self.assertRaises(AssertionError):
            state.undo_last_move()

    def test_debug_mode_is_silent_on_a_real_game(self):
        state = KulamiState(debug=True)
        play_sample(state)
        while state.history:
            state.undo_last_move()
        self.assertFalse(np.any(state.ledger.tile_score))


if __name__ == "__main__":
    unittest.main()
