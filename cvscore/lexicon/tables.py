from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern

LEXICON_VERSION = "2025.1"


@dataclass(frozen=True)
class PrincipleSignal:
    """Evidence for one PM principle: any term or a pattern match."""

    principle_id: str
    terms: tuple[str, ...] = ()
    pattern: Pattern[str] | None = None

    def present_in(self, text: str) -> bool:
        lowered = (text or "").lower()
        if any(term in lowered for term in self.terms):
            return True
        return bool(self.pattern and self.pattern.search(text or ""))


@dataclass(frozen=True)
class Lexicon:
    """Vocabularies and patterns shared by the four analysis stages.

    Term lists are matched by case-insensitive containment against the
    lower-cased text, so ``"led"`` also hits ``"enabled"``. Scores depend on
    that behaviour; keep it when tuning the lists.
    """

    version: str
    action_verbs: tuple[str, ...]
    impact_words: tuple[str, ...]
    scope_words: tuple[str, ...]
    industry_terms: tuple[str, ...]
    jargon_terms: tuple[str, ...]
    generic_phrases: tuple[str, ...]
    so_what_patterns: tuple[Pattern[str], ...]
    metric_pattern: Pattern[str]
    outcome_metric_pattern: Pattern[str]
    parser_hostile_pattern: Pattern[str]
    principle_signals: tuple[PrincipleSignal, ...]


_ACTION_VERBS = (
    "led",
    "drove",
    "launched",
    "increased",
    "reduced",
    "improved",
    "delivered",
    "built",
    "created",
    "designed",
    "managed",
    "developed",
    "established",
    "implemented",
    "optimized",
    "spearheaded",
    "orchestrated",
    "transformed",
    "pioneered",
    "accelerated",
    "negotiated",
    "scaled",
)

_IMPACT_WORDS = (
    "revenue",
    "growth",
    "retention",
    "conversion",
    "efficiency",
    "adoption",
    "engagement",
    "satisfaction",
    "churn",
    "savings",
    "profit",
    "roi",
    "kpi",
    "nps",
    "csat",
    "arr",
    "mrr",
)

_SCOPE_WORDS = (
    "cross-functional",
    "enterprise",
    "global",
    "company-wide",
    "organization",
    "department",
    "team",
    "stakeholder",
    "c-suite",
    "executive",
    "board",
)

_INDUSTRY_TERMS = (
    "product",
    "roadmap",
    "strategy",
    "analytics",
    "platform",
    "feature",
    "release",
    "sprint",
    "agile",
    "scrum",
    "api",
    "infrastructure",
    "pipeline",
    "deployment",
    "integration",
    "stakeholder",
    "requirement",
    "specification",
    "backlog",
)

_JARGON_TERMS = (
    "api",
    "sdk",
    "cicd",
    "ci/cd",
    "kubernetes",
    "docker",
    "terraform",
    "graphql",
    "microservices",
    "monorepo",
)

_GENERIC_PHRASES = (
    "responsible for",
    "worked on",
    "helped with",
    "involved in",
    "participated in",
    "assisted with",
)

_SO_WHAT_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"result(ing|ed)?\s+in",
        r"leading\s+to",
        r"which\s+(led|drove|enabled|resulted)",
        r"thereby",
        r"achieving",
        r"generating",
        r"saving",
        r"improving",
        r"increasing",
        r"reducing",
    )
)

# Digits are ASCII only; \s still matches Unicode whitespace such as NBSP.
_METRIC_PATTERN = re.compile(
    r"[0-9]+%|\$[0-9,.]+[KMB]?|[0-9]+x|[0-9]+[\s-]*(?:users|customers|clients|people|teams|stakeholders|engineers|members)",
    re.IGNORECASE,
)
_OUTCOME_METRIC_PATTERN = re.compile(r"[0-9]+%|\$[0-9,.]+")
_PARSER_HOSTILE_PATTERN = re.compile(r"[{}<>|\\~`]")

# Order is the reporting order for missing principles.
_PRINCIPLE_SIGNALS = (
    PrincipleSignal("outcome-over-output", ("increased", "reduced", "improved", "enabled", "grew", "decreased")),
    # Case-sensitive: "10 Users" does not count as quantified data.
    PrincipleSignal("data-driven-decisions", pattern=re.compile(r"[0-9]+%|\$[0-9]+|[0-9]+x|[0-9]+ (?:users|customers|people)")),
    PrincipleSignal("user-centricity", ("user", "customer", "client", "people")),
    PrincipleSignal("cross-functional-leadership", ("led", "collaborated", "partnered", "aligned", "team")),
    PrincipleSignal("problem-solving", ("problem", "challenge", "issue", "solution", "solved")),
)

DEFAULT_LEXICON = Lexicon(
    version=LEXICON_VERSION,
    action_verbs=_ACTION_VERBS,
    impact_words=_IMPACT_WORDS,
    scope_words=_SCOPE_WORDS,
    industry_terms=_INDUSTRY_TERMS,
    jargon_terms=_JARGON_TERMS,
    generic_phrases=_GENERIC_PHRASES,
    so_what_patterns=_SO_WHAT_PATTERNS,
    metric_pattern=_METRIC_PATTERN,
    outcome_metric_pattern=_OUTCOME_METRIC_PATTERN,
    parser_hostile_pattern=_PARSER_HOSTILE_PATTERN,
    principle_signals=_PRINCIPLE_SIGNALS,
)


def find_terms(text: str, terms: tuple[str, ...]) -> list[str]:
    """Return the distinct terms contained in ``text``, in lexicon order."""
    lowered = (text or "").lower()
    return [term for term in terms if term in lowered]


def find_pattern_matches(text: str, pattern: Pattern[str]) -> list[str]:
    return [match.group(0) for match in pattern.finditer(text or "")]
