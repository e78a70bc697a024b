from __future__ import annotations

from cvscore.core.config.scoring import get_scoring_int
from cvscore.principles import PrincipleMatcher, get_default_principle_matcher
from cvscore.schemas.analysis import StageScore

from .utils import clamp_score


def pm_band(score: int) -> str:
    if score >= get_scoring_int("pm_intelligence.bands.strong", 80):
        return "Strong PM framing across all dimensions"
    if score >= get_scoring_int("pm_intelligence.bands.good", 60):
        return "Good PM signals, minor gaps"
    if score >= get_scoring_int("pm_intelligence.bands.present", 40):
        return "Some PM thinking present, needs strengthening"
    return "Weak PM framing, significant improvement possible"


def analyze_pm_stage(text: str, matcher: PrincipleMatcher | None = None) -> StageScore:
    """Stage 4: delegates to the principle matcher capability."""
    analysis = (matcher or get_default_principle_matcher()).analyze(text)
    score = clamp_score(analysis.score)
    details = [pm_band(score)]
    if analysis.missing_principles:
        details.append(f"Missing: {', '.join(p.name for p in analysis.missing_principles)}")
    return StageScore(score=score, details=tuple(details))
