from __future__ import annotations

from cvscore.core.config.scoring import get_scoring_int
from cvscore.lexicon import DEFAULT_LEXICON, Lexicon, find_terms
from cvscore.schemas.analysis import StageScore

from .utils import clamp_score, has_digit, words


def analyze_recruiter_ux(text: str, lexicon: Lexicon | None = None) -> StageScore:
    """Stage 3: how a tired recruiter at 4 PM reads the bullet.

    Rewards an opening that shows action and impact within the first few
    words, brevity, a visible "so what?", low jargon, and specific (not
    generic) phrasing.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    details: list[str] = []
    raw = 0
    tokens = words(text)

    window = get_scoring_int("recruiter_ux.opening.window_words", 8)
    opening = " ".join(tokens[:window]).lower()
    has_quick_verb = bool(find_terms(opening, lexicon.action_verbs))
    has_quick_impact = bool(find_terms(opening, lexicon.impact_words)) or has_digit(opening)
    if has_quick_verb and has_quick_impact:
        raw += get_scoring_int("recruiter_ux.opening.strong_points", 30)
        details.append("Strong opening: action + impact visible immediately")
    elif has_quick_verb:
        raw += get_scoring_int("recruiter_ux.opening.verb_only_points", 15)
        details.append("Opens with action verb but impact buried later")
    else:
        details.append("Weak opening: recruiter may skim past")

    word_count = len(tokens)
    if word_count <= get_scoring_int("recruiter_ux.conciseness.tight_max", 30):
        raw += get_scoring_int("recruiter_ux.conciseness.tight_points", 20)
        details.append("Concise and scannable")
    elif word_count <= get_scoring_int("recruiter_ux.conciseness.readable_max", 45):
        raw += get_scoring_int("recruiter_ux.conciseness.readable_points", 10)
        details.append("Slightly long but readable")
    else:
        details.append("Too long: recruiter fatigue risk")

    has_so_what = any(pattern.search(text or "") for pattern in lexicon.so_what_patterns)
    has_outcome_number = bool(lexicon.outcome_metric_pattern.search(text or ""))
    if has_so_what and has_outcome_number:
        raw += get_scoring_int("recruiter_ux.so_what.full_points", 25)
        details.append('Clear "so what?" with outcome + metrics')
    elif has_so_what or has_outcome_number:
        raw += get_scoring_int("recruiter_ux.so_what.partial_points", 12)
        details.append('Partial "so what?": add outcome or metrics')
    else:
        details.append("Missing \"so what?\": recruiter won't see the impact")

    jargon_count = len(find_terms(text, lexicon.jargon_terms))
    if jargon_count <= get_scoring_int("recruiter_ux.jargon.light_max", 1):
        raw += get_scoring_int("recruiter_ux.jargon.light_points", 15)
        details.append("Jargon-light: accessible to non-technical recruiters")
    elif jargon_count <= get_scoring_int("recruiter_ux.jargon.moderate_max", 2):
        raw += get_scoring_int("recruiter_ux.jargon.moderate_points", 8)
        details.append("Moderate jargon: consider simplifying for broader audiences")
    else:
        details.append("Heavy jargon: may lose non-technical recruiters")

    if not find_terms(text, lexicon.generic_phrases):
        raw += get_scoring_int("recruiter_ux.specificity_points", 10)
        details.append("Specific and non-generic language")
    else:
        details.append("Contains generic phrases: replace with specific achievements")

    return StageScore(score=clamp_score(raw), details=tuple(details))
