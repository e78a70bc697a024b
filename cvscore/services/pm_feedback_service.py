from __future__ import annotations

from cvscore.principles import get_default_catalogue, get_default_principle_matcher
from cvscore.schemas.analysis import MissingPrincipleAdvice, PMFeedback, PrincipleRef
from cvscore.stages.pm_intelligence import pm_band


def build_pm_feedback(text: str, context: str | None = None) -> PMFeedback:
    """Principle score for a bullet plus one concrete tip per missing principle."""
    catalogue = get_default_catalogue()
    analysis = get_default_principle_matcher().analyze(text)

    missing: list[MissingPrincipleAdvice] = []
    for ref in analysis.missing_principles:
        principle = catalogue.get(ref.id)
        tips = principle.application_tips
        missing.append(
            MissingPrincipleAdvice(
                id=principle.id,
                name=principle.name,
                how_to_apply=tips[0] if tips else principle.suggestion,
            )
        )

    focus: list[PrincipleRef] = []
    if context:
        focus = [PrincipleRef(id=p.id, name=p.name) for p in catalogue.for_context(context)]

    return PMFeedback(
        score=analysis.score,
        summary=pm_band(analysis.score),
        suggestions=list(analysis.suggestions),
        missing_principles=missing,
        focus_principles=focus,
    )
