from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StageId = Literal["indicators", "ats", "recruiter_ux", "pm_intelligence"]
Winner = Literal["original", "tailored"]

STAGE_IDS: tuple[StageId, ...] = ("indicators", "ats", "recruiter_ux", "pm_intelligence")
STAGE_NAMES: dict[str, str] = {
    "indicators": "Cold Indicators",
    "ats": "ATS Compatibility",
    "recruiter_ux": "Recruiter UX",
    "pm_intelligence": "PM Intelligence",
}


class StageScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    details: tuple[str, ...] = ()


class FourStageAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    indicators: StageScore
    ats: StageScore
    recruiter_ux: StageScore
    pm_intelligence: StageScore
    total_score: int = Field(ge=0, le=100)

    def stage(self, stage_id: StageId) -> StageScore:
        return getattr(self, stage_id)


class StageDropDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    stage: StageId
    stage_name: str
    original_score: int
    tailored_score: int
    drop: int = Field(gt=0)


class ArbiterDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    bullet: str
    winner: Winner
    original_analysis: FourStageAnalysis
    tailored_analysis: FourStageAnalysis
    score_delta: int
    rejection_reasons: tuple[StageDropDetail, ...] = ()
    is_addition: bool = False

    @property
    def chosen_total_score(self) -> int:
        if self.winner == "tailored":
            return self.tailored_analysis.total_score
        return self.original_analysis.total_score


class ArbiterResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    decisions: tuple[ArbiterDecision, ...] = ()
    optimised_bullets: tuple[str, ...] = ()
    original_total_score: int = 0
    optimised_total_score: int = 0
    methodology_preserved: bool = True


class PrincipleRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class PrincipleAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    missing_principles: tuple[PrincipleRef, ...] = ()
    suggestions: tuple[str, ...] = ()


class MissingPrincipleAdvice(BaseModel):
    id: str
    name: str
    how_to_apply: str


class PMFeedback(BaseModel):
    score: int = Field(ge=0, le=100)
    summary: str
    suggestions: list[str] = Field(default_factory=list)
    missing_principles: list[MissingPrincipleAdvice] = Field(default_factory=list)
    focus_principles: list[PrincipleRef] = Field(default_factory=list)
