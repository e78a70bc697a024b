from __future__ import annotations

from typing import Protocol

from cvscore.schemas.analysis import PrincipleAnalysis


class PrincipleMatcher(Protocol):
    def analyze(self, text: str) -> PrincipleAnalysis:
        """Return a 0-100 principle score and the missing principles in report order."""
