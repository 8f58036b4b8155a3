import math
import unittest

from sightreader.policy.scoring import AccuracyPolicy, SpeedPolicy
from sightreader.stats.difficulty import (
    REPORT_COLUMNS,
    difficulty_frame,
    history_badness,
    item_badness,
    relative_difficulty,
)
from sightreader.stats.history import AttemptHistory
from sightreader.stats.schema import Attempt
from sightreader.theory.clef import BOTH, TREBLE


def _store() -> AttemptHistory:
    store = AttemptHistory()
    # oldest first
    store.add("treble-30", Attempt(failed=False, duration=2.0), 10)
    store.add("treble-30", Attempt(failed=False, duration=2.0), 10)
    store.add("treble-31", Attempt(failed=True, duration=1.0), 10)
    store.add("treble-31", Attempt(failed=False, duration=3.0), 10)
    store.add("treble-32", Attempt(failed=False, duration=1.0), 10)
    return store


class HistoryBadnessTests(unittest.TestCase):
    def test_mean_of_guess_badness(self) -> None:
        history = [Attempt(failed=True), Attempt(failed=False, duration=3.0)]
        self.assertEqual(history_badness(history, SpeedPolicy(bad_guess_time=5)), 4.0)
        self.assertEqual(history_badness(history, AccuracyPolicy()), 0.5)

    def test_empty_history(self) -> None:
        self.assertIsNone(history_badness([], AccuracyPolicy()))

    def test_item_badness_respects_min_sample_size(self) -> None:
        scored = item_badness(_store(), ["treble-30", "treble-31", "treble-32", "treble-33"], SpeedPolicy(5), 2)
        self.assertEqual(scored, {"treble-30": 2.0, "treble-31": 4.0})


class RelativeDifficultyTests(unittest.TestCase):
    def test_scale(self) -> None:
        self.assertEqual(relative_difficulty(2.0, worst=4.0, best=2.0), 0.0)
        self.assertEqual(relative_difficulty(3.0, worst=4.0, best=2.0), 0.5)
        self.assertEqual(relative_difficulty(4.0, worst=4.0, best=2.0), 1.0)

    def test_clipped_and_degenerate(self) -> None:
        self.assertEqual(relative_difficulty(9.0, worst=4.0, best=2.0), 1.0)
        self.assertEqual(relative_difficulty(3.0, worst=3.0, best=3.0), 0.0)


class DifficultyFrameTests(unittest.TestCase):
    def test_speed_report(self) -> None:
        df = difficulty_frame(_store(), TREBLE, 0, SpeedPolicy(bad_guess_time=5), min_sample_size=2)
        self.assertEqual(list(df.columns), REPORT_COLUMNS)
        self.assertEqual(len(df), 9)
        self.assertEqual(df["note"].tolist(), list(range(30, 39)))

        rows = df.set_index("key")
        self.assertEqual(rows.loc["treble-30", "name"], "E4")
        self.assertEqual(rows.loc["treble-30", "samples"], 2)
        self.assertEqual(rows.loc["treble-30", "description"], "2.00s")
        self.assertEqual(rows.loc["treble-30", "relative"], 0.0)
        self.assertEqual(rows.loc["treble-31", "relative"], 1.0)
        self.assertEqual(rows.loc["treble-32", "samples"], 1)
        self.assertTrue(math.isnan(rows.loc["treble-32", "badness"]))
        self.assertTrue(math.isnan(rows.loc["treble-32", "relative"]))
        self.assertEqual(rows.loc["treble-32", "description"], "")

    def test_accuracy_report_uses_absolute_bounds(self) -> None:
        df = difficulty_frame(_store(), TREBLE, 0, AccuracyPolicy(), min_sample_size=2)
        rows = df.set_index("key")
        self.assertEqual(rows.loc["treble-30", "relative"], 0.0)
        self.assertEqual(rows.loc["treble-31", "relative"], 0.5)
        self.assertEqual(rows.loc["treble-31", "description"], "50%")

    def test_nothing_scored(self) -> None:
        df = difficulty_frame(AttemptHistory(), BOTH, 1, SpeedPolicy(5), min_sample_size=1)
        self.assertEqual(len(df), 25)
        self.assertTrue(df["relative"].isna().all())
        self.assertEqual(set(df["staff"]), {"treble", "bass"})


if __name__ == "__main__":
    unittest.main()
