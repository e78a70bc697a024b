from functools import lru_cache

from .catalogue import PMPrinciple, PrincipleCatalogue
from .keyword_matcher import KeywordPrincipleMatcher
from .provider import PrincipleMatcher


@lru_cache(maxsize=1)
def get_default_catalogue() -> PrincipleCatalogue:
    return PrincipleCatalogue()


@lru_cache(maxsize=1)
def get_default_principle_matcher() -> PrincipleMatcher:
    return KeywordPrincipleMatcher(catalogue=get_default_catalogue())


def get_principles_for_context(context: str) -> list[PMPrinciple]:
    return get_default_catalogue().for_context(context)


__all__ = [
    "PMPrinciple",
    "PrincipleCatalogue",
    "PrincipleMatcher",
    "KeywordPrincipleMatcher",
    "get_default_catalogue",
    "get_default_principle_matcher",
    "get_principles_for_context",
]
