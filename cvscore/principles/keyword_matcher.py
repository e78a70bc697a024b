from __future__ import annotations

from cvscore.core.config.scoring import get_scoring_int
from cvscore.lexicon import DEFAULT_LEXICON, Lexicon
from cvscore.schemas.analysis import PrincipleAnalysis, PrincipleRef

from .catalogue import PrincipleCatalogue
from .provider import PrincipleMatcher


class KeywordPrincipleMatcher(PrincipleMatcher):
    """Scores PM framing by keyword category presence.

    Each lexicon principle signal present in the text is worth a fixed number
    of points (20 by default, five categories). Absent categories are reported
    as missing principles, in lexicon order, with a matching suggestion.
    """

    def __init__(
        self,
        catalogue: PrincipleCatalogue | None = None,
        lexicon: Lexicon | None = None,
        category_points: int | None = None,
    ) -> None:
        self._catalogue = catalogue or PrincipleCatalogue()
        self._lexicon = lexicon or DEFAULT_LEXICON
        if category_points is None:
            category_points = get_scoring_int("pm_intelligence.category_points", 20)
        self._category_points = category_points
        for signal in self._lexicon.principle_signals:
            self._catalogue.get(signal.principle_id)

    def analyze(self, text: str) -> PrincipleAnalysis:
        score = 0
        missing: list[PrincipleRef] = []
        suggestions: list[str] = []
        for signal in self._lexicon.principle_signals:
            if signal.present_in(text):
                score += self._category_points
                continue
            principle = self._catalogue.get(signal.principle_id)
            missing.append(PrincipleRef(id=principle.id, name=principle.name))
            suggestions.append(principle.suggestion)
        return PrincipleAnalysis(
            score=max(0, min(score, 100)),
            missing_principles=tuple(missing),
            suggestions=tuple(suggestions),
        )
