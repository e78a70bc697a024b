import asyncio

from fastapi import APIRouter, HTTPException, Request

from cvscore.core.config import settings
from cvscore.core.config.scoring import get_scoring_value
from cvscore.core.rate_limit import rate_limit
from cvscore.lexicon import LEXICON_VERSION
from cvscore.schemas.analysis import STAGE_NAMES, ArbiterDecision, ArbiterResult, FourStageAnalysis, PMFeedback
from cvscore.schemas.api import (
    AnalyzeRequest,
    ArbitrateBulletRequest,
    ArbitrateRequest,
    PMFeedbackRequest,
    StageWeightsResponse,
)
from cvscore.services.arbiter_service import (
    MethodologyIntegrityError,
    arbitrate_bullet,
    ensure_methodology_preserved,
    score_arbiter,
)
from cvscore.services.pm_feedback_service import build_pm_feedback
from cvscore.stages import analyze_cv_content, stage_weights

router = APIRouter()


@router.get("/cv/weights", response_model=StageWeightsResponse)
async def cv_weights():
    return StageWeightsResponse(
        version=int(get_scoring_value("version", 1)),
        lexicon_version=LEXICON_VERSION,
        weights=stage_weights(),
        stage_names=dict(STAGE_NAMES),
    )


# Scoring is CPU-bound; every scoring route runs it in a worker thread.
@router.post("/cv/analyze", response_model=FourStageAnalysis)
@rate_limit()
async def cv_analyze(request: Request, payload: AnalyzeRequest):
    return await asyncio.to_thread(analyze_cv_content, payload.text)


@router.post("/cv/arbitrate-bullet", response_model=ArbiterDecision)
@rate_limit()
async def cv_arbitrate_bullet(request: Request, payload: ArbitrateBulletRequest):
    return await asyncio.to_thread(arbitrate_bullet, payload.original, payload.tailored)


@router.post("/cv/arbitrate", response_model=ArbiterResult)
@rate_limit(settings.arbitrate_rate_limit)
async def cv_arbitrate(request: Request, payload: ArbitrateRequest):
    result = await asyncio.to_thread(score_arbiter, payload.original_bullets, payload.tailored_bullets)
    if not settings.strict_methodology:
        return result
    try:
        return ensure_methodology_preserved(result)
    except MethodologyIntegrityError as exc:
        raise HTTPException(
            status_code=exc.status_code,
            detail="Score arbiter integrity check failed. The optimised CV was not returned.",
        ) from exc


@router.post("/cv/pm-feedback", response_model=PMFeedback)
@rate_limit()
async def cv_pm_feedback(request: Request, payload: PMFeedbackRequest):
    return await asyncio.to_thread(build_pm_feedback, payload.text, payload.context)
