import unittest

from techcross.core.constants import DEFAULT_GRID_SIZE, Difficulty
from techcross.data.campaign import (
    TOPICS,
    difficulty_for_level,
    grid_size_for_level,
    topic_for_level,
    word_count_for_level,
)
from techcross.data.normalization import clean_word


class CampaignTests(unittest.TestCase):
    def test_topics_cycle(self) -> None:
        self.assertEqual(topic_for_level(1), "Binary & Logic Gates")
        self.assertEqual(topic_for_level(12), "Machine Learning Basics")
        self.assertEqual(topic_for_level(13), TOPICS[0])

    def test_difficulty_tiers(self) -> None:
        self.assertEqual(difficulty_for_level(4), Difficulty.EASY)
        self.assertEqual(difficulty_for_level(5), Difficulty.MEDIUM)
        self.assertEqual(difficulty_for_level(9), Difficulty.MEDIUM)
        self.assertEqual(difficulty_for_level(10), Difficulty.HARD)

    def test_word_count_grows_then_caps(self) -> None:
        self.assertEqual(word_count_for_level(1), 6)
        self.assertEqual(word_count_for_level(10), 15)
        self.assertEqual(word_count_for_level(25), 15)

    def test_grid_size(self) -> None:
        self.assertEqual(grid_size_for_level(3), DEFAULT_GRID_SIZE)

    def test_level_zero_rejected(self) -> None:
        with self.assertRaises(ValueError):
            topic_for_level(0)


class NormalizationTests(unittest.TestCase):
    def test_clean_word_removes_diacritics(self) -> None:
        self.assertEqual(clean_word("ăâîșț"), "AAIST")
        self.assertEqual(clean_word("Café"), "CAFE")

    def test_clean_word_strips_non_letters(self) -> None:
        self.assertEqual(clean_word("Node.js"), "NODEJS")
        self.assertEqual(clean_word("TCP/IP v6"), "TCPIPV")
        self.assertEqual(clean_word(""), "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
