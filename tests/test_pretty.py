import io
import unittest

from techcross.data.word_source import FALLBACK_WORDS
from techcross.engine.builder import build_grid
from techcross.utils.pretty import format_clues, format_grid, print_puzzle_stats


class PrettyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = build_grid(list(FALLBACK_WORDS), 15)

    def test_format_grid_shows_letters_and_blacks(self) -> None:
        lines = format_grid(self.result.grid).splitlines()
        self.assertEqual(len(lines), 2 + 15)
        row_seven = lines[2 + 7]
        self.assertTrue(row_seven.startswith(" 7 |"))
        self.assertIn("C  A  C  H  E", row_seven)
        self.assertIn("#", lines[2])

    def test_hidden_answers_show_player_input(self) -> None:
        cell = self.result.grid.cell(7, 5)
        cell.player_input = "C"
        hidden = format_grid(self.result.grid, show_answers=False).splitlines()
        self.assertIn(" C  .  .  .  .", hidden[2 + 7])

    def test_format_clues_numbers_by_placement(self) -> None:
        text = format_clues(self.result.placed_words)
        self.assertEqual(
            text.splitlines(),
            [
                "ACROSS",
                "   1. High-speed data storage layer (5)",
                "   3. Intermediate server for requests (5)",
                "DOWN",
                "   2. Speeds up database queries (5)",
            ],
        )

    def test_stats_report_dropped_words(self) -> None:
        stream = io.StringIO()
        print_puzzle_stats(self.result, stream=stream)
        output = stream.getvalue()
        self.assertIn("Placed words:  3", output)
        self.assertIn("Dropped:       1 (STORM)", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
