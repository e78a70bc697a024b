import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.stages import analyze_cv_content, weighted_total  # noqa: E402
from cvscore.stages.utils import integer_mean, round_half_up  # noqa: E402

SAMPLES = [
    "",
    "Worked on a project",
    "Helped with pricing",
    "Increased revenue by 25% through strategic pricing analysis with stakeholders",
    "Led a cross-functional team of 8 engineers, reducing deployment time by 40% and increasing release cadence.",
    "Led {team} <project> with |stakeholders|",
    "word " * 80,
]


def _expected_total(analysis) -> int:
    total = 0.0
    total += analysis.indicators.score * 0.20
    total += analysis.ats.score * 0.30
    total += analysis.recruiter_ux.score * 0.20
    total += analysis.pm_intelligence.score * 0.30
    return int(math.floor(total + 0.5))


class RoundingTests(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(round_half_up(13.5), 14)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(0.0), 0)

    def test_integer_mean(self):
        self.assertEqual(integer_mean([]), 0)
        self.assertEqual(integer_mean([12, 13]), 13)
        self.assertEqual(integer_mean([10, 20, 31]), 20)


class AnalysisPipelineTests(unittest.TestCase):
    def test_total_is_weighted_sum_of_stages(self):
        for text in SAMPLES:
            with self.subTest(text=text[:30]):
                analysis = analyze_cv_content(text)
                self.assertEqual(analysis.total_score, _expected_total(analysis))

    def test_scores_are_bounded_and_explained(self):
        for text in SAMPLES:
            with self.subTest(text=text[:30]):
                analysis = analyze_cv_content(text)
                for stage_id in ("indicators", "ats", "recruiter_ux", "pm_intelligence"):
                    stage = analysis.stage(stage_id)
                    self.assertGreaterEqual(stage.score, 0)
                    self.assertLessEqual(stage.score, 100)
                    self.assertTrue(stage.details)
                self.assertGreaterEqual(analysis.total_score, 0)
                self.assertLessEqual(analysis.total_score, 100)

    def test_analysis_is_deterministic(self):
        for text in SAMPLES:
            self.assertEqual(analyze_cv_content(text), analyze_cv_content(text))

    def test_empty_text(self):
        analysis = analyze_cv_content("")
        self.assertEqual(analysis.indicators.score, 0)
        self.assertEqual(analysis.ats.score, 15)
        self.assertEqual(analysis.recruiter_ux.score, 45)
        self.assertEqual(analysis.pm_intelligence.score, 0)
        self.assertEqual(analysis.total_score, 14)

    def test_strong_bullet_scores(self):
        analysis = analyze_cv_content(
            "Led a cross-functional team of 8 engineers, reducing deployment time by 40% and increasing release cadence."
        )
        self.assertEqual(
            (analysis.indicators.score, analysis.ats.score, analysis.recruiter_ux.score, analysis.pm_intelligence.score),
            (58, 100, 100, 40),
        )
        self.assertEqual(analysis.total_score, 74)

    def test_weighted_total_extremes(self):
        zeros = {"indicators": 0, "ats": 0, "recruiter_ux": 0, "pm_intelligence": 0}
        hundreds = {"indicators": 100, "ats": 100, "recruiter_ux": 100, "pm_intelligence": 100}
        self.assertEqual(weighted_total(zeros), 0)
        self.assertEqual(weighted_total(hundreds), 100)

    def test_analysis_is_immutable(self):
        analysis = analyze_cv_content("Worked on a project")
        with self.assertRaises(Exception):
            analysis.total_score = 99  # type: ignore[misc]

    def test_stage_details_cannot_be_mutated(self):
        analysis = analyze_cv_content("Worked on a project")
        details = analysis.indicators.details
        self.assertIsInstance(details, tuple)
        with self.assertRaises(AttributeError):
            details.append("Padded detail")  # type: ignore[attr-defined]
        self.assertEqual(analyze_cv_content("Worked on a project"), analysis)


if __name__ == "__main__":
    unittest.main()
