from __future__ import annotations

from cvscore.core.config.scoring import get_scoring_int
from cvscore.lexicon import DEFAULT_LEXICON, Lexicon, find_pattern_matches, find_terms
from cvscore.schemas.analysis import StageScore

from .utils import clamp_score


def _capped(hits: int, key: str, default_points: int, default_cap: int) -> int:
    points = get_scoring_int(f"indicators.{key}.points", default_points)
    cap = get_scoring_int(f"indicators.{key}.cap", default_cap)
    return min(hits * points, cap)


def analyze_indicators(text: str, lexicon: Lexicon | None = None) -> StageScore:
    """Stage 1: raw lexical strength of a bullet."""
    lexicon = lexicon or DEFAULT_LEXICON
    details: list[str] = []
    raw = 0

    verb_hits = find_terms(text, lexicon.action_verbs)
    raw += _capped(len(verb_hits), "action_verbs", 8, 25)
    if verb_hits:
        details.append(f"Action verbs: {', '.join(verb_hits)}")
    else:
        details.append("Missing strong action verbs")

    metric_matches = find_pattern_matches(text, lexicon.metric_pattern)
    raw += _capped(len(metric_matches), "metrics", 15, 30)
    if metric_matches:
        details.append(f"Metrics found: {', '.join(metric_matches)}")
    else:
        details.append("No quantified metrics detected")

    impact_hits = find_terms(text, lexicon.impact_words)
    raw += _capped(len(impact_hits), "impact", 8, 25)
    if impact_hits:
        details.append(f"Impact language: {', '.join(impact_hits)}")
    else:
        details.append("Missing impact/business language")

    scope_hits = find_terms(text, lexicon.scope_words)
    raw += _capped(len(scope_hits), "scope", 10, 20)
    if scope_hits:
        details.append(f"Scope indicators: {', '.join(scope_hits)}")
    else:
        details.append("No organisational scope indicators")

    return StageScore(score=clamp_score(raw), details=tuple(details))
