from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class ExampleFraming(BaseModel):
    weak: str
    strong: str


class PMPrinciple(BaseModel):
    id: str
    name: str
    description: str
    suggestion: str
    key_questions: list[str] = Field(default_factory=list)
    application_tips: list[str] = Field(default_factory=list)
    example_framing: ExampleFraming | None = None


class PrincipleCatalogue:
    def __init__(self, catalogue_path: str | Path | None = None) -> None:
        path = Path(catalogue_path) if catalogue_path else Path(__file__).with_name("principles.json")
        self._principles, self._contexts = self._load(path)

    @staticmethod
    def _load(path: Path) -> tuple[dict[str, PMPrinciple], dict[str, tuple[str, ...]]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        principles = {item["id"]: PMPrinciple.model_validate(item) for item in raw.get("principles", [])}
        contexts: dict[str, tuple[str, ...]] = {}
        for context, ids in (raw.get("contexts") or {}).items():
            unknown = [principle_id for principle_id in ids if principle_id not in principles]
            if unknown:
                raise RuntimeError(f"Principle catalogue context '{context}' references unknown ids: {unknown}")
            contexts[context] = tuple(ids)
        return principles, contexts

    @property
    def principles(self) -> list[PMPrinciple]:
        return list(self._principles.values())

    def get(self, principle_id: str) -> PMPrinciple:
        try:
            return self._principles[principle_id]
        except KeyError as exc:
            raise KeyError(f"Unknown PM principle '{principle_id}'") from exc

    def for_context(self, context: str) -> list[PMPrinciple]:
        """Principles a coaching context focuses on, in catalogue order."""
        ids = self._contexts.get(context)
        if ids is None:
            raise KeyError(f"Unknown coaching context '{context}'")
        return [principle for principle in self._principles.values() if principle.id in ids]
