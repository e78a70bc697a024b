from .tables import (
    DEFAULT_LEXICON,
    LEXICON_VERSION,
    Lexicon,
    PrincipleSignal,
    find_pattern_matches,
    find_terms,
)

__all__ = [
    "Lexicon",
    "PrincipleSignal",
    "DEFAULT_LEXICON",
    "LEXICON_VERSION",
    "find_terms",
    "find_pattern_matches",
]
