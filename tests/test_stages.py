import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.schemas.analysis import PrincipleAnalysis, PrincipleRef  # noqa: E402
from cvscore.stages import (  # noqa: E402
    analyze_ats,
    analyze_indicators,
    analyze_pm_stage,
    analyze_recruiter_ux,
)


def _filler(word_count: int) -> str:
    return " ".join(["word"] * word_count)


class _FixedMatcher:
    def __init__(self, score: int, missing: list[PrincipleRef] | None = None) -> None:
        self._analysis = PrincipleAnalysis(score=score, missing_principles=missing or [])

    def analyze(self, text: str) -> PrincipleAnalysis:
        return self._analysis


class IndicatorStageTests(unittest.TestCase):
    def test_empty_text_scores_zero_with_explanations(self):
        result = analyze_indicators("")
        self.assertEqual(result.score, 0)
        self.assertEqual(
            result.details,
            (
                "Missing strong action verbs",
                "No quantified metrics detected",
                "Missing impact/business language",
                "No organisational scope indicators",
            ),
        )

    def test_sub_scores_for_strong_bullet(self):
        result = analyze_indicators(
            "Led a cross-functional team of 8 engineers, reducing deployment time by 40% and increasing release cadence."
        )
        # led (8) + two metrics (30) + no impact words + two scope words (20)
        self.assertEqual(result.score, 58)
        self.assertIn("Action verbs: led", result.details)
        self.assertIn("Metrics found: 8 engineers, 40%", result.details)
        self.assertIn("Scope indicators: cross-functional, team", result.details)

    def test_each_category_is_capped(self):
        self.assertEqual(analyze_indicators("Led drove launched increased").score, 25)
        self.assertEqual(analyze_indicators("10% 20% 30%").score, 30)
        self.assertEqual(analyze_indicators("revenue growth retention conversion").score, 25)
        self.assertEqual(analyze_indicators("enterprise global team").score, 20)

    def test_repeated_terms_count_once_and_matching_ignores_case(self):
        self.assertEqual(analyze_indicators("led led led").score, 8)
        self.assertEqual(analyze_indicators("LED").score, 8)

    def test_metric_with_non_breaking_space_is_counted(self):
        result = analyze_indicators("Led 8\u00a0engineers resulting in 40% savings")
        # led (8) + two metrics (30) + savings (8)
        self.assertEqual(result.score, 46)
        self.assertIn("Metrics found: 8\u00a0engineers, 40%", result.details)

    def test_currency_and_multiplier_metrics(self):
        result = analyze_indicators("Generated $2.3M and a 3x lift")
        self.assertEqual(result.score, 30)
        self.assertIn("Metrics found: $2.3M, 3x", result.details)


class ATSStageTests(unittest.TestCase):
    def test_empty_text_only_earns_clean_formatting(self):
        result = analyze_ats("")
        self.assertEqual(result.score, 15)
        self.assertEqual(result.details[0], "Does not start with a strong action verb")

    def test_word_count_bands(self):
        # filler text: no verb, no digit, clean, no industry terms
        self.assertEqual(analyze_ats(_filler(9)).score, 15)
        self.assertEqual(analyze_ats(_filler(10)).score, 25)
        self.assertEqual(analyze_ats(_filler(15)).score, 35)
        self.assertEqual(analyze_ats(_filler(35)).score, 35)
        self.assertEqual(analyze_ats(_filler(36)).score, 25)
        self.assertEqual(analyze_ats(_filler(50)).score, 25)
        self.assertEqual(analyze_ats(_filler(51)).score, 15)

    def test_parser_hostile_characters_lose_formatting_points(self):
        self.assertEqual(analyze_ats("word {word}").score, 0)
        self.assertEqual(analyze_ats("word | word").score, 0)
        self.assertEqual(analyze_ats("word word").score, 15)

    def test_industry_terms(self):
        self.assertEqual(analyze_ats("word product").score, 15 + 8)
        self.assertEqual(analyze_ats("word product roadmap").score, 15 + 15)

    def test_full_marks(self):
        result = analyze_ats(
            "Led a cross-functional team of 8 engineers, reducing deployment time by 40% and increasing release cadence."
        )
        self.assertEqual(result.score, 100)
        self.assertEqual(result.details[0], 'Starts with action verb: "led"')
        self.assertIn("Good length: 16 words", result.details)


class RecruiterUXStageTests(unittest.TestCase):
    def test_empty_text(self):
        result = analyze_recruiter_ux("")
        # concise (20) + jargon-light (15) + non-generic (10)
        self.assertEqual(result.score, 45)
        self.assertEqual(len(result.details), 5)

    def test_opening_needs_verb_and_impact_in_first_words(self):
        self.assertEqual(analyze_recruiter_ux("Managed the product roadmap").score, 15 + 20 + 15 + 10)
        late_digit = "Managed a b c d e f g 40 items"
        self.assertEqual(analyze_recruiter_ux(late_digit).score, 15 + 20 + 15 + 10)

    def test_conciseness_bands(self):
        self.assertEqual(analyze_recruiter_ux(_filler(30)).score, 45)
        self.assertEqual(analyze_recruiter_ux(_filler(31)).score, 35)
        self.assertEqual(analyze_recruiter_ux(_filler(45)).score, 35)
        self.assertEqual(analyze_recruiter_ux(_filler(46)).score, 25)

    def test_so_what_partial_and_full(self):
        self.assertEqual(analyze_recruiter_ux("word resulting in word").score, 45 + 12)
        self.assertEqual(analyze_recruiter_ux("word 40% word").score, 45 + 12)
        self.assertEqual(analyze_recruiter_ux("word resulting in 40% word").score, 45 + 25)

    def test_jargon_density(self):
        self.assertEqual(analyze_recruiter_ux("word docker").score, 45)
        self.assertEqual(analyze_recruiter_ux("word docker kubernetes").score, 45 - 7)
        self.assertEqual(analyze_recruiter_ux("word docker kubernetes terraform").score, 45 - 15)

    def test_generic_phrase_penalty(self):
        result = analyze_recruiter_ux("Worked on a project")
        self.assertEqual(result.score, 35)
        self.assertEqual(result.details[-1], "Contains generic phrases: replace with specific achievements")


class PMStageTests(unittest.TestCase):
    def test_default_matcher_scores_categories(self):
        result = analyze_pm_stage(
            "Led cross-functional team to solve customer churn problem, increased user retention by 40%"
        )
        self.assertEqual(result.score, 100)
        self.assertEqual(result.details, ("Strong PM framing across all dimensions",))

    def test_empty_text_lists_all_missing_principles(self):
        result = analyze_pm_stage("")
        self.assertEqual(result.score, 0)
        self.assertEqual(result.details[0], "Weak PM framing, significant improvement possible")
        self.assertEqual(
            result.details[1],
            "Missing: Outcome Over Output, Data-Driven Decision Making, User-Centricity, "
            "Cross-Functional Leadership, Problem-Solving & Root Cause Analysis",
        )

    def test_bands_follow_matcher_score(self):
        missing = [PrincipleRef(id="user-centricity", name="User-Centricity")]
        good = analyze_pm_stage("anything", matcher=_FixedMatcher(60, missing))
        self.assertEqual(good.score, 60)
        self.assertEqual(good.details, ("Good PM signals, minor gaps", "Missing: User-Centricity"))

        present = analyze_pm_stage("anything", matcher=_FixedMatcher(40))
        self.assertEqual(present.details, ("Some PM thinking present, needs strengthening",))

        weak = analyze_pm_stage("anything", matcher=_FixedMatcher(39))
        self.assertEqual(weak.details, ("Weak PM framing, significant improvement possible",))


if __name__ == "__main__":
    unittest.main()
