import unittest

from core.state import KulamiState

from cli.boardDisplay import BoardDisplay
from cli.cliColors import TColor

from kulami_samples import play_sample, read_reference_board


class TestBoardDisplay(unittest.TestCase):
    def test_reference_board(self):
        state = KulamiState()
        play_sample(state)
        text = BoardDisplay(state, clear_screen=False, use_color=False).render()
        self.assertEqual(text, read_reference_board())

    def test_empty_board(self):
        text = BoardDisplay(KulamiState(), clear_screen=False, use_color=False).render()
        board, _, _ = text.partition("Score:")
        self.assertTrue(board.startswith("*  "))
        self.assertEqual(board.count("."), 64)
        for marble in "xXoO":
            self.assertNotIn(marble, board)
        self.assertTrue(text.endswith("Score:\t\tRed: 0\tBlack: 0\n"))

    def test_last_two_moves_are_highlighted(self):
        state = KulamiState()
        state.move((4, 5), True)
        state.move((4, 0), False)
        state.move((2, 0), True)
        text, _, _ = BoardDisplay(state, clear_screen=False, use_color=False).render().partition("Score:")
        self.assertEqual(text.count("x"), 1)
        self.assertEqual(text.count("X"), 1)
        self.assertEqual(text.count("O"), 1)

    def test_colored_output(self):
        state = KulamiState()
        play_sample(state)
        text = BoardDisplay(state, clear_screen=False, use_color=True).render()
        self.assertIn(f"{TColor.RED}X{TColor.RESET}", text)
        self.assertIn(f"{TColor.BLUE}O{TColor.RESET}", text)
        self.assertIn(f"{TColor.RED}x{TColor.RESET}", text)

    def test_render_does_not_touch_state(self):
        state = KulamiState()
        play_sample(state)
        before = state.marbles.tobytes()
        BoardDisplay(state, clear_screen=False).render()
        self.assertEqual(state.marbles.tobytes(), before)


if __name__ == "__main__":
    unittest.main()
