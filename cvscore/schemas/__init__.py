from .analysis import (
    STAGE_IDS,
    STAGE_NAMES,
    ArbiterDecision,
    ArbiterResult,
    FourStageAnalysis,
    MissingPrincipleAdvice,
    PMFeedback,
    PrincipleAnalysis,
    PrincipleRef,
    StageDropDetail,
    StageId,
    StageScore,
    Winner,
)

__all__ = [
    "STAGE_IDS",
    "STAGE_NAMES",
    "StageId",
    "Winner",
    "StageScore",
    "FourStageAnalysis",
    "StageDropDetail",
    "ArbiterDecision",
    "ArbiterResult",
    "PrincipleRef",
    "PrincipleAnalysis",
    "MissingPrincipleAdvice",
    "PMFeedback",
]
