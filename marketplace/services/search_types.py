from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional


def normalize_term(value: Optional[str]) -> str:
    """Lowercase and collapse runs of whitespace to single spaces."""
    return " ".join((value or "").split()).lower()


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase whitespace tokenization; blank input yields no tokens."""
    return normalize_term(text).split()


@dataclass(frozen=True)
class ExpandedTermSet:
    original_terms: FrozenSet[str]
    expanded_terms: FrozenSet[str]

    @classmethod
    def identity(cls, term: str) -> "ExpandedTermSet":
        terms = frozenset([term])
        return cls(original_terms=terms, expanded_terms=terms)


@dataclass
class SearchQuery:
    keyword_terms: List[str] = field(default_factory=list)
    location_term: Optional[str] = None
    structured_filters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_text(
        cls,
        keywords: Optional[str],
        location: Optional[str] = None,
        structured_filters: Optional[Dict[str, Any]] = None,
    ) -> "SearchQuery":
        location_term = normalize_term(location) or None
        return cls(
            keyword_terms=tokenize(keywords),
            location_term=location_term,
            structured_filters=dict(structured_filters or {}),
        )

    @property
    def keyword_phrase(self) -> str:
        return " ".join(self.keyword_terms)

    @property
    def has_keywords(self) -> bool:
        return bool(self.keyword_terms)


@dataclass
class ScoredCandidate:
    record: Dict[str, Any]
    score: int = 0
