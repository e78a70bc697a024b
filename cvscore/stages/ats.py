from __future__ import annotations

from cvscore.core.config.scoring import get_scoring_int
from cvscore.lexicon import DEFAULT_LEXICON, Lexicon, find_terms
from cvscore.schemas.analysis import StageScore

from .utils import clamp_score, has_digit, words


def analyze_ats(text: str, lexicon: Lexicon | None = None) -> StageScore:
    """Stage 2: machine-parseability and structural conventions."""
    lexicon = lexicon or DEFAULT_LEXICON
    details: list[str] = []
    raw = 0
    tokens = words(text)

    first_word = tokens[0].lower() if tokens else ""
    if first_word in lexicon.action_verbs:
        raw += get_scoring_int("ats.action_verb_start", 25)
        details.append(f'Starts with action verb: "{first_word}"')
    else:
        details.append("Does not start with a strong action verb")

    word_count = len(tokens)
    ideal_min = get_scoring_int("ats.length.ideal_min", 15)
    ideal_max = get_scoring_int("ats.length.ideal_max", 35)
    acceptable_min = get_scoring_int("ats.length.acceptable_min", 10)
    acceptable_max = get_scoring_int("ats.length.acceptable_max", 50)
    if ideal_min <= word_count <= ideal_max:
        raw += get_scoring_int("ats.length.ideal_points", 20)
        details.append(f"Good length: {word_count} words")
    elif acceptable_min <= word_count <= acceptable_max:
        raw += get_scoring_int("ats.length.acceptable_points", 10)
        details.append(f"Acceptable length: {word_count} words")
    else:
        details.append(f"Length issue: {word_count} words (ideal: {ideal_min}-{ideal_max})")

    if has_digit(text):
        raw += get_scoring_int("ats.has_digit", 25)
        details.append("Contains quantified data")
    else:
        details.append("No quantified data for ATS parsing")

    if not lexicon.parser_hostile_pattern.search(text or ""):
        raw += get_scoring_int("ats.clean_formatting", 15)
        details.append("Clean formatting for ATS parsers")
    else:
        details.append("Contains characters that may confuse ATS parsers")

    term_hits = find_terms(text, lexicon.industry_terms)
    if len(term_hits) >= get_scoring_int("ats.industry_terms.strong_min", 2):
        raw += get_scoring_int("ats.industry_terms.strong_points", 15)
        details.append(f"Industry terms: {', '.join(term_hits)}")
    elif term_hits:
        raw += get_scoring_int("ats.industry_terms.some_points", 8)
        details.append(f"Some industry terms: {', '.join(term_hits)}")
    else:
        details.append("Missing standard industry terminology")

    return StageScore(score=clamp_score(raw), details=tuple(details))
