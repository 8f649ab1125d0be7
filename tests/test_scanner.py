import unittest

from wordfinder.core.constants import Direction
from wordfinder.core.exceptions import ShapeError
from wordfinder.core.models import RankedWord, WordMatch
from wordfinder.engine.grid import LetterGrid
from wordfinder.engine.scanner import FinderConfig, Scanner, WordFinder, prepare_words


DEMO_ROWS = ["ABCCC", "FGWOO", "CHILL", "PQNDD", "UVDXY"]
ALPHABET_ROWS = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY"]


class PrepareWordsTests(unittest.TestCase):
    def test_drops_empty_and_repeated_entries(self) -> None:
        prepared, ignored = prepare_words(["CHILL", "", "WIND", "CHILL"])
        self.assertEqual(prepared, ["CHILL", "WIND"])
        self.assertEqual(ignored, ["", "CHILL"])


class ScannerTests(unittest.TestCase):
    def test_demo_grid_matches(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["CHILL", "WIND", "COLD"])
        # completion order: CHILL ends at (2,4), COLD at (3,3) and (3,4), WIND at (4,2)
        self.assertEqual(
            result.matches,
            [
                WordMatch("CHILL", 2, 0, Direction.HORIZONTAL),
                WordMatch("COLD", 0, 3, Direction.VERTICAL),
                WordMatch("COLD", 0, 4, Direction.VERTICAL),
                WordMatch("WIND", 1, 2, Direction.VERTICAL),
            ],
        )
        self.assertGreater(result.attempts_spawned, 0)
        self.assertGreater(result.peak_live, 0)

    def test_full_row_found_once_horizontally(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["FGWOO"])
        self.assertEqual(result.matches, [WordMatch("FGWOO", 1, 0, Direction.HORIZONTAL)])

    def test_full_column_found_once_vertically(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["AFCPU"])
        self.assertEqual(result.matches, [WordMatch("AFCPU", 0, 0, Direction.VERTICAL)])

    def test_single_character_word_counts_once_per_cell(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["A"])
        self.assertEqual(result.matches, [WordMatch("A", 0, 0, Direction.HORIZONTAL)])
        self.assertEqual(result.hits()["A"], 1)
        self.assertEqual(result.matches[0].cells, [(0, 0)])

    def test_uniform_grid_full_length_word_matches_each_row_and_column(self) -> None:
        result = Scanner(LetterGrid(["AAAAA"] * 5)).scan(["AAAAA"])
        # only starts on the first column or first row fit the whole word
        expected = {WordMatch("AAAAA", r, 0, Direction.HORIZONTAL) for r in range(5)}
        expected |= {WordMatch("AAAAA", 0, c, Direction.VERTICAL) for c in range(5)}
        self.assertEqual(len(result.matches), 10)
        self.assertEqual(set(result.matches), expected)

    def test_overlapping_occurrences_count_independently(self) -> None:
        result = Scanner(LetterGrid(["AAAAA"] * 5)).scan(["AA"])
        # four starts per row horizontally and four per column vertically
        self.assertEqual(result.hits()["AA"], 40)
        starts = {(m.start_row, m.start_col, m.direction) for m in result.matches}
        self.assertEqual(len(starts), 40)

    def test_words_longer_than_grid_never_match(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["CHILLS", "ABCCCX", "AFCPUZ"])
        self.assertEqual(result.matches, [])

    def test_duplicate_words_do_not_double_hits(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["CHILL", "CHILL"])
        self.assertEqual(result.hits()["CHILL"], 1)
        self.assertEqual(result.words, ["CHILL"])
        self.assertEqual(result.ignored_words, ["CHILL"])

    def test_empty_word_never_matches(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(["", "CHILL"])
        self.assertEqual([m.word for m in result.matches], ["CHILL"])

    def test_scan_summary_logged_at_debug(self) -> None:
        with self.assertLogs("wordfinder.engine.scanner", level="DEBUG") as logs:
            Scanner(LetterGrid(DEMO_ROWS)).scan(["CHILL"])
        summaries = [r for r in logs.records if r.getMessage().startswith("Scanned 5x5 grid")]
        self.assertEqual(len(summaries), 1)
        self.assertEqual(summaries[0].levelname, "DEBUG")
        self.assertIn("1 matches", summaries[0].getMessage())

    def test_empty_word_list(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan([])
        self.assertEqual(result.matches, [])
        self.assertEqual(result.attempts_spawned, 0)

    def test_accepts_generator_input(self) -> None:
        result = Scanner(LetterGrid(DEMO_ROWS)).scan(w for w in ["CHILL", "WIND"])
        self.assertEqual(result.words, ["CHILL", "WIND"])
        self.assertEqual(len(result.matches), 2)


class WordFinderTests(unittest.TestCase):
    def test_demo_scenario(self) -> None:
        finder = WordFinder(DEMO_ROWS)
        self.assertEqual(finder.find(["CHILL", "WIND", "COLD"]), ["COLD", "CHILL", "WIND"])
        self.assertEqual(
            finder.find_ranked(["CHILL", "WIND", "COLD"]),
            [RankedWord("COLD", 2), RankedWord("CHILL", 1), RankedWord("WIND", 1)],
        )

    def test_absent_words_are_omitted(self) -> None:
        finder = WordFinder(DEMO_ROWS)
        self.assertEqual(finder.find(["QUIZ", "CHILL", "JAZZ"]), ["CHILL"])
        self.assertEqual(finder.find(["QUIZ"]), [])

    def test_single_character_word_ranked_once(self) -> None:
        finder = WordFinder(DEMO_ROWS)
        self.assertEqual(finder.find_ranked(["A"]), [RankedWord("A", 1)])

    def test_uniform_grid_ranked(self) -> None:
        finder = WordFinder(["AAAAA"] * 5)
        self.assertEqual(finder.find_ranked(["AAAAA"]), [RankedWord("AAAAA", 10)])

    def test_returns_at_most_top_k_words_from_list(self) -> None:
        words = list("ABCDEFGHIJKL")
        found = WordFinder(ALPHABET_ROWS).find(words)
        self.assertEqual(found, list("ABCDEFGHIJ"))
        self.assertTrue(set(found) <= set(words))

    def test_ranks_by_cumulative_hits(self) -> None:
        rows = ["AAAAA", "ABBBB", "ACCCC", "ADDDD", "AEEEE"]
        ranked = WordFinder(rows).find_ranked(["BB", "AA", "EE"])
        # AA: four along row 0 and four down column 0; BB: three along row 1
        self.assertEqual(
            ranked,
            [RankedWord("AA", 8), RankedWord("BB", 3), RankedWord("EE", 3)],
        )

    def test_custom_grid_size_and_limit(self) -> None:
        config = FinderConfig(grid_size=3, top_k=2)
        finder = WordFinder(["CAT", "ATE", "TEA"], config)
        self.assertEqual(
            finder.find_ranked(["CAT", "ATE", "TEA"]),
            [RankedWord("CAT", 2), RankedWord("ATE", 2)],
        )

    def test_config_rejects_negative_top_k(self) -> None:
        with self.assertRaises(ValueError):
            FinderConfig(top_k=-1)
        with self.assertRaises(ValueError):
            WordFinder(DEMO_ROWS, FinderConfig(top_k=-1))
        self.assertEqual(WordFinder(DEMO_ROWS, FinderConfig(top_k=0)).find(["CHILL"]), [])

    def test_shape_error_raised_at_construction(self) -> None:
        with self.assertRaises(ShapeError):
            WordFinder(["CAT", "ATE", "TEA"])

    def test_find_is_idempotent(self) -> None:
        rows = list(DEMO_ROWS)
        words = ["CHILL", "WIND", "COLD", "A"]
        finder = WordFinder(rows)
        first = finder.find(words)
        second = finder.find(words)
        self.assertEqual(first, second)
        self.assertEqual(words, ["CHILL", "WIND", "COLD", "A"])
        self.assertEqual(list(finder.grid.rows), DEMO_ROWS)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
