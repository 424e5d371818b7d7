import unittest

from techcross.core.constants import Direction
from techcross.core.exceptions import MalformedWordError, ValidationError
from techcross.core.models import PlacedWord, Placement, WordEntry
from techcross.engine.grid import PuzzleGrid
from techcross.engine.validator import GridValidator


def _placed(answer: str, row: int, col: int, direction: Direction) -> PlacedWord:
    return PlacedWord(entry=WordEntry(answer=answer), row=row, col=col, direction=direction)


class WordEntryTests(unittest.TestCase):
    def test_hints_may_be_omitted(self) -> None:
        self.assertEqual(WordEntry(answer="CAT").hints, ())

    def test_three_hints_are_stored_as_tuple(self) -> None:
        entry = WordEntry("CAT", hints=["Pet", "Meows", "C_T"])
        self.assertEqual(entry.hints, ("Pet", "Meows", "C_T"))

    def test_wrong_hint_count_is_rejected(self) -> None:
        with self.assertRaises(MalformedWordError):
            WordEntry("CAT", hints=("Pet",))
        with self.assertRaises(MalformedWordError):
            WordEntry("CAT", hints=("a", "b", "c", "d"))


class PuzzleGridTests(unittest.TestCase):
    def test_new_grid_is_all_black(self) -> None:
        grid = PuzzleGrid(4)
        self.assertEqual(len(grid.cells), 4)
        self.assertTrue(all(cell.is_black for _, _, cell in grid.iter_cells()))
        self.assertEqual(grid.filled_count, 0)

    def test_fits_checks_bounds_per_direction(self) -> None:
        grid = PuzzleGrid(5)
        self.assertTrue(grid.fits("CACHE", Placement(4, 0, Direction.ACROSS)))
        self.assertFalse(grid.fits("CACHE", Placement(0, 1, Direction.ACROSS)))
        self.assertTrue(grid.fits("CACHE", Placement(0, 4, Direction.DOWN)))
        self.assertFalse(grid.fits("CACHE", Placement(1, 0, Direction.DOWN)))

    def test_place_word_records_letters_and_indices(self) -> None:
        grid = PuzzleGrid(5)
        grid.place_word("CAT", Placement(0, 0, Direction.ACROSS), 0)
        grid.place_word("COW", Placement(0, 0, Direction.DOWN), 1)
        self.assertEqual(grid.cell(0, 0).letter, "C")
        self.assertEqual(grid.cell(0, 0).member_word_indices, [0, 1])
        self.assertEqual(grid.cell(2, 0).letter, "W")
        self.assertEqual(grid.filled_count, 5)

    def test_can_place_rejects_conflict(self) -> None:
        grid = PuzzleGrid(5)
        grid.place_word("CAT", Placement(0, 0, Direction.ACROSS), 0)
        self.assertFalse(grid.can_place("DOG", Placement(0, 0, Direction.DOWN)))
        self.assertTrue(grid.can_place("ART", Placement(0, 1, Direction.DOWN)))

    def test_count_intersections(self) -> None:
        grid = PuzzleGrid(5)
        grid.place_word("CAT", Placement(0, 0, Direction.ACROSS), 0)
        self.assertEqual(grid.count_intersections("ART", Placement(0, 1, Direction.DOWN)), 1)
        self.assertEqual(grid.count_intersections("ART", Placement(2, 1, Direction.DOWN)), 0)

    def test_place_word_raises_on_conflict(self) -> None:
        grid = PuzzleGrid(5)
        grid.place_word("CAT", Placement(0, 0, Direction.ACROSS), 0)
        with self.assertRaises(ValidationError):
            grid.place_word("DOG", Placement(0, 0, Direction.DOWN), 1)

    def test_to_jsonable_shape(self) -> None:
        grid = PuzzleGrid(3)
        grid.place_word("AB", Placement(1, 1, Direction.ACROSS), 0)
        data = grid.to_jsonable()
        self.assertEqual(len(data), 3)
        self.assertEqual(data[1][1]["letter"], "A")
        self.assertFalse(data[1][1]["is_black"])
        self.assertEqual(data[1][2]["member_word_indices"], [0])
        self.assertTrue(data[0][0]["is_black"])


class GridValidatorTests(unittest.TestCase):
    def test_valid_grid_passes(self) -> None:
        grid = PuzzleGrid(5)
        words = [
            _placed("CAT", 0, 0, Direction.ACROSS),
            _placed("COW", 0, 0, Direction.DOWN),
        ]
        for index, word in enumerate(words):
            grid.place_word(word.answer, word.placement, index)
        result = GridValidator().validate(grid, words)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_out_of_bounds_word_fails(self) -> None:
        grid = PuzzleGrid(3)
        words = [_placed("CACHE", 0, 0, Direction.ACROSS)]
        result = GridValidator().validate(grid, words)
        self.assertFalse(result.ok)
        self.assertIn("leaves the grid", result.messages[0])

    def test_conflicting_words_fail(self) -> None:
        grid = PuzzleGrid(5)
        words = [
            _placed("CAT", 0, 0, Direction.ACROSS),
            _placed("DOG", 0, 0, Direction.DOWN),
        ]
        result = GridValidator().validate(grid, words)
        self.assertFalse(result.ok)
        self.assertIn("Letter conflict", result.messages[0])

    def test_cells_missing_word_fail(self) -> None:
        grid = PuzzleGrid(5)
        words = [_placed("CAT", 0, 0, Direction.ACROSS)]
        result = GridValidator().validate(grid, words)
        self.assertFalse(result.ok)

    def test_letter_on_black_cell_fails(self) -> None:
        grid = PuzzleGrid(3)
        grid.cell(1, 1).letter = "Q"
        result = GridValidator().validate(grid, [])
        self.assertFalse(result.ok)
        self.assertIn("black flag", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
