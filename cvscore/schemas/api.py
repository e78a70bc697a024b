from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from cvscore.core.config import settings

CoachingContext = Literal["cv_tailor", "interview_coach"]


def _check_bullet_lengths(values: list[str]) -> list[str]:
    for index, value in enumerate(values):
        if len(value) > settings.max_bullet_chars:
            raise ValueError(
                f"bullet {index} exceeds {settings.max_bullet_chars} characters"
            )
    return values


class AnalyzeRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_bullet_chars)


class ArbitrateBulletRequest(BaseModel):
    original: str = Field(default="", max_length=settings.max_bullet_chars)
    tailored: str = Field(default="", max_length=settings.max_bullet_chars)


class ArbitrateRequest(BaseModel):
    original_bullets: list[str] = Field(default_factory=list, max_length=settings.max_bullets)
    tailored_bullets: list[str] = Field(default_factory=list, max_length=settings.max_bullets)

    @field_validator("original_bullets", "tailored_bullets")
    @classmethod
    def _validate_bullet_lengths(cls, value: list[str]) -> list[str]:
        return _check_bullet_lengths(value)


class PMFeedbackRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_bullet_chars)
    context: CoachingContext | None = None


class StageWeightsResponse(BaseModel):
    version: int
    lexicon_version: str
    weights: dict[str, float]
    stage_names: dict[str, str]
