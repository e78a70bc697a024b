from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from cvscore.core.config import settings
from cvscore.schemas.analysis import (
    STAGE_IDS,
    STAGE_NAMES,
    ArbiterDecision,
    ArbiterResult,
    FourStageAnalysis,
    StageDropDetail,
)
from cvscore.stages import analyze_cv_content
from cvscore.stages.utils import integer_mean

logger = logging.getLogger(__name__)


class MethodologyIntegrityError(RuntimeError):
    """A chosen bullet scored below its original side (the empty text for additions)."""

    status_code = 500

    def __init__(self, positions: list[int]) -> None:
        self.positions = positions
        super().__init__(
            f"Score arbiter produced regressed bullets at positions {positions}."
        )


def stage_drops(original: FourStageAnalysis, tailored: FourStageAnalysis) -> tuple[StageDropDetail, ...]:
    drops: list[StageDropDetail] = []
    for stage_id in STAGE_IDS:
        original_score = original.stage(stage_id).score
        tailored_score = tailored.stage(stage_id).score
        if tailored_score < original_score:
            drops.append(
                StageDropDetail(
                    stage=stage_id,
                    stage_name=STAGE_NAMES[stage_id],
                    original_score=original_score,
                    tailored_score=tailored_score,
                    drop=original_score - tailored_score,
                )
            )
    return tuple(drops)


def _decide(
    original_bullet: str,
    tailored_bullet: str,
    original_analysis: FourStageAnalysis,
    tailored_analysis: FourStageAnalysis,
) -> ArbiterDecision:
    score_delta = tailored_analysis.total_score - original_analysis.total_score
    # Ties keep the edit.
    winner = "tailored" if score_delta >= 0 else "original"
    return ArbiterDecision(
        bullet=tailored_bullet if winner == "tailored" else original_bullet,
        winner=winner,
        original_analysis=original_analysis,
        tailored_analysis=tailored_analysis,
        score_delta=score_delta,
        rejection_reasons=stage_drops(original_analysis, tailored_analysis),
    )


def arbitrate_bullet(original_bullet: str, tailored_bullet: str) -> ArbiterDecision:
    """Compare one bullet with its tailored rewrite and keep the better-scoring text.

    ``rejection_reasons`` lists every stage where the rewrite scored lower,
    whichever side wins.
    """
    return _decide(
        original_bullet,
        tailored_bullet,
        analyze_cv_content(original_bullet),
        analyze_cv_content(tailored_bullet),
    )


def _analyze_distinct(texts: list[str], max_workers: int) -> dict[str, FourStageAnalysis]:
    distinct = list(dict.fromkeys(texts))
    if max_workers > 1 and len(distinct) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(distinct))) as executor:
            analyses = list(executor.map(analyze_cv_content, distinct))
    else:
        analyses = [analyze_cv_content(text) for text in distinct]
    return dict(zip(distinct, analyses))


def methodology_violations(decisions: Sequence[ArbiterDecision]) -> list[int]:
    """Positions whose chosen text scores below its original side.

    Additions count too: their original side is the empty-text analysis.
    """
    return [
        index
        for index, decision in enumerate(decisions)
        if decision.chosen_total_score < decision.original_analysis.total_score
    ]


def score_arbiter(
    original_bullets: list[str],
    tailored_bullets: list[str],
    *,
    max_workers: int | None = None,
) -> ArbiterResult:
    """Arbitrate two bullet lists position by position.

    Extra tailored bullets are additions and are kept as-is. Extra original
    bullets are compared against themselves, which is a tie and leaves them
    unchanged. ``methodology_preserved`` is False when any chosen text scores
    below its original side (for additions, the empty text); that is logged
    as an error.
    """
    pair_count = max(len(original_bullets), len(tailored_bullets))
    pairs: list[tuple[str, str, bool]] = []
    for index in range(pair_count):
        if index < len(original_bullets):
            original = original_bullets[index]
            tailored = tailored_bullets[index] if index < len(tailored_bullets) else original
            pairs.append((original, tailored, False))
        else:
            pairs.append(("", tailored_bullets[index], True))

    texts = [text for original, tailored, _ in pairs for text in (original, tailored)]
    analyses = _analyze_distinct(texts, max_workers or settings.arbiter_max_workers)

    decisions: list[ArbiterDecision] = []
    for original, tailored, is_addition in pairs:
        if is_addition:
            tailored_analysis = analyses[tailored]
            decisions.append(
                ArbiterDecision(
                    bullet=tailored,
                    winner="tailored",
                    original_analysis=analyses[original],
                    tailored_analysis=tailored_analysis,
                    score_delta=tailored_analysis.total_score,
                    rejection_reasons=(),
                    is_addition=True,
                )
            )
        else:
            decisions.append(_decide(original, tailored, analyses[original], analyses[tailored]))

    violations = methodology_violations(decisions)
    if violations:
        logger.error("methodology_not_preserved positions=%s", violations)

    result = ArbiterResult(
        decisions=tuple(decisions),
        optimised_bullets=tuple(decision.bullet for decision in decisions),
        original_total_score=integer_mean([d.original_analysis.total_score for d in decisions]),
        optimised_total_score=integer_mean([d.chosen_total_score for d in decisions]),
        methodology_preserved=not violations,
    )
    logger.info(
        "arbiter_completed bullets=%d reverted=%d original_score=%d optimised_score=%d",
        len(decisions),
        sum(1 for d in decisions if d.winner == "original"),
        result.original_total_score,
        result.optimised_total_score,
    )
    return result


def ensure_methodology_preserved(result: ArbiterResult) -> ArbiterResult:
    if result.methodology_preserved:
        return result
    raise MethodologyIntegrityError(methodology_violations(result.decisions))
