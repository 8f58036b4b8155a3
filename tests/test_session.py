import unittest

from sightreader.app.session import PracticeSession
from sightreader.config.config import Settings
from sightreader.policy.scoring import AccuracyPolicy, SpeedPolicy
from sightreader.stats.schema import Attempt


class PracticeSessionTests(unittest.TestCase):
    def test_defaults(self) -> None:
        session = PracticeSession()
        self.assertEqual(session.clef.id, "treble")
        self.assertIsInstance(session.policy, SpeedPolicy)
        self.assertEqual(len(session.store), 0)

    def test_record_returns_feedback(self) -> None:
        session = PracticeSession(Settings(clef="both", optimize_for="speed", bad_guess_time=5))
        fb = session.record(27, Attempt(failed=False, duration=3.0))
        self.assertEqual(fb.key, "bass-27")
        self.assertEqual(fb.badness, 3.0)
        self.assertEqual(fb.description, "3.00s")
        self.assertEqual(fb.samples, 1)

        fb = session.record(27, Attempt(failed=True, duration=0.5))
        self.assertEqual(fb.badness, 5.0)
        self.assertEqual(fb.history_badness, 4.0)
        self.assertEqual(fb.history_description, "4.00s")
        self.assertEqual(session.history(27)[0], Attempt(failed=True, duration=0.5))

    def test_capacity_comes_from_settings(self) -> None:
        session = PracticeSession(Settings(take_stats_over=3))
        for _ in range(5):
            session.record(30, Attempt(failed=False, duration=1.0))
        self.assertEqual(len(session.history(30)), 3)

    def test_lowered_capacity_applies_on_next_write(self) -> None:
        session = PracticeSession(Settings(take_stats_over=5))
        for _ in range(5):
            session.record(30, Attempt(failed=False, duration=1.0))
        session.apply_settings(Settings(take_stats_over=2, optimize_for="accuracy"))
        self.assertIsInstance(session.policy, AccuracyPolicy)
        self.assertEqual(len(session.history(30)), 5)
        fb = session.record(30, Attempt(failed=True))
        self.assertEqual(fb.samples, 2)
        self.assertEqual(fb.description, "0%")
        self.assertEqual(fb.history_description, "50%")

    def test_report_and_reset(self) -> None:
        session = PracticeSession(Settings(extra_bars=0, min_sample_size=1, optimize_for="accuracy"))
        session.record(30, Attempt(failed=True))
        session.record(31, Attempt(failed=False, duration=1.0))
        report = session.report().set_index("note")
        self.assertEqual(report.loc[30, "relative"], 1.0)
        self.assertEqual(report.loc[31, "relative"], 0.0)

        session.reset()
        self.assertEqual(session.history(30), [])
        self.assertTrue(session.report()["relative"].isna().all())


if __name__ == "__main__":
    unittest.main()
