import io
import unittest
from contextlib import redirect_stdout

from game import SYMBOLS, Card, GameState
from memory_core.cli import _display_width, handle_command, main, render_board


class TestCli(unittest.TestCase):
    def _mk_state(self):
        cards = [Card(symbol=s, id=f"c{i}") for i, s in enumerate(["A", "B", "A", "B", "C", "C"])]
        return GameState(cards=cards, pair_count=3)

    def test_given_board_when_rendered_then_positions_symbols_and_blanks(self):
        s = self._mk_state()
        s.select_card("c0")
        s.select_card("c2")  # match
        s.select_card("c1")
        txt = render_board(s)
        lines = txt.splitlines()
        self.assertEqual(len(lines), 3)  # 4 + 2 cards, then score line
        self.assertEqual(lines[0].split(), ["B", "4"])
        self.assertEqual(lines[1].split(), ["5", "6"])
        self.assertIn("Score: 10", lines[2])
        self.assertIn("Pairs: 1/3", lines[2])

    def test_given_face_up_and_matched_cards_when_rendered_then_rows_same_display_width(self):
        symbols = [SYMBOLS[0], SYMBOLS[1], SYMBOLS[0], SYMBOLS[1], "C", "C", "D", "D"]
        cards = [Card(symbol=sym, id=f"c{i}") for i, sym in enumerate(symbols)]
        s = GameState(cards=cards, pair_count=4)
        s.select_card("c0")
        s.select_card("c2")  # emoji pair matched
        s.select_card("c1")  # emoji face-up
        s.select_card("c4")  # narrow symbol face-up after mismatch
        rows = render_board(s).splitlines()[:-1]
        self.assertEqual(len(rows), 2)
        widths = {_display_width(r) for r in rows}
        self.assertEqual(widths, {4 * 2 + 3})
        self.assertIn(SYMBOLS[1], rows[0])
        self.assertIn(" C", rows[1])

    def test_given_commands_when_handled_then_state_updates(self):
        s = self._mk_state()
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertTrue(handle_command(s, "1"))
            self.assertEqual(s.pending_card_id, "c0")
            self.assertTrue(handle_command(s, "1"))     # already face-up
            self.assertTrue(handle_command(s, "99"))    # out of range
            self.assertTrue(handle_command(s, "hello"))
            self.assertTrue(handle_command(s, "p 5"))   # not allowed
            self.assertEqual(s.pair_count, 3)
            self.assertTrue(handle_command(s, "p 6"))
            self.assertEqual(len(s.cards), 12)
            self.assertTrue(handle_command(s, "r"))
            self.assertFalse(handle_command(s, "q"))
        text = out.getvalue()
        self.assertIn("cannot be chosen", text)
        self.assertIn("No card at that position", text)
        self.assertIn("Could not parse", text)
        self.assertIn("error: Invalid pair count 5", text)

    def test_given_autoplay_flag_when_main_then_game_solved(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--pairs", "4", "--seed", "9", "--autoplay"])
        self.assertIn("Score: 40", out.getvalue())
        self.assertIn("Solved in", out.getvalue())

    def test_given_scripted_input_when_main_then_renders_and_quits(self):
        inputs = iter(["1", "r", "q"])
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--pairs", "2", "--seed", "1"], input_fn=lambda prompt: next(inputs))
        # initial render + select + reset
        self.assertEqual(out.getvalue().count("Score: 0"), 3)

    def test_given_eof_when_main_then_exits_cleanly(self):
        def _eof(prompt):
            raise EOFError

        out = io.StringIO()
        with redirect_stdout(out):
            main(["--pairs", "2"], input_fn=_eof)
        self.assertIn("Score: 0", out.getvalue())


if __name__ == "__main__":
    unittest.main(verbosity=2)
