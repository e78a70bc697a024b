from __future__ import annotations

import math

from cvscore.core.config.scoring import get_scoring_value
from cvscore.lexicon import Lexicon
from cvscore.principles import PrincipleMatcher
from cvscore.schemas.analysis import STAGE_IDS, FourStageAnalysis

from .ats import analyze_ats
from .indicators import analyze_indicators
from .pm_intelligence import analyze_pm_stage
from .recruiter_ux import analyze_recruiter_ux
from .utils import clamp_score, round_half_up

_DEFAULT_WEIGHTS = {
    "indicators": 0.20,
    "ats": 0.30,
    "recruiter_ux": 0.20,
    "pm_intelligence": 0.30,
}


def stage_weights() -> dict[str, float]:
    """Stage weights from the scoring config, validated to be non-negative and sum to 1.0."""
    configured = get_scoring_value("weights", None) or {}
    if not isinstance(configured, dict):
        raise RuntimeError("Invalid scoring config: 'weights' must be a mapping.")

    weights: dict[str, float] = {}
    for stage_id in STAGE_IDS:
        try:
            weight = float(configured.get(stage_id, _DEFAULT_WEIGHTS[stage_id]))
        except (TypeError, ValueError) as exc:
            raise RuntimeError(f"Invalid scoring config: weight for '{stage_id}' is not a number.") from exc
        if weight < 0:
            raise RuntimeError(f"Invalid scoring config: weight for '{stage_id}' is negative.")
        weights[stage_id] = weight

    if not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-9):
        raise RuntimeError(
            f"Invalid scoring config: stage weights must sum to 1.0, got {sum(weights.values()):.4f}."
        )
    return weights


def weighted_total(scores: dict[str, int], weights: dict[str, float] | None = None) -> int:
    weights = weights or stage_weights()
    total = 0.0
    for stage_id in STAGE_IDS:
        total += scores[stage_id] * weights[stage_id]
    return clamp_score(round_half_up(total))


def analyze_cv_content(
    text: str,
    lexicon: Lexicon | None = None,
    matcher: PrincipleMatcher | None = None,
) -> FourStageAnalysis:
    """Run all four stages on one bullet and combine them into a weighted total."""
    indicators = analyze_indicators(text, lexicon)
    ats = analyze_ats(text, lexicon)
    recruiter_ux = analyze_recruiter_ux(text, lexicon)
    pm_intelligence = analyze_pm_stage(text, matcher)

    total_score = weighted_total(
        {
            "indicators": indicators.score,
            "ats": ats.score,
            "recruiter_ux": recruiter_ux.score,
            "pm_intelligence": pm_intelligence.score,
        }
    )
    return FourStageAnalysis(
        indicators=indicators,
        ats=ats,
        recruiter_ux=recruiter_ux,
        pm_intelligence=pm_intelligence,
        total_score=total_score,
    )
