import datetime
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from marketplace.services.search_types import (
    ExpandedTermSet,
    ScoredCandidate,
    SearchQuery,
    normalize_term,
)

logger = logging.getLogger(__name__)

EXACT_TITLE_POINTS = 10
PARTIAL_TITLE_POINTS = 5
SYNONYM_TITLE_POINTS = 4
DESCRIPTION_POINTS = 3
EXACT_LOCATION_POINTS = 10
PARTIAL_LOCATION_POINTS = 5


@dataclass(frozen=True)
class ScoringProfile:
    """Which record fields feed the score, and the per-entity bonuses."""

    title_field: str
    description_field: Optional[str] = None
    location_field: Optional[str] = "location"
    availability_field: Optional[str] = None
    available_values: frozenset = frozenset()
    availability_bonus: int = 0
    # field -> points when the field holds anything
    presence_bonuses: Mapping[str, int] = field(default_factory=dict)
    # list field -> points per item
    per_item_bonuses: Mapping[str, int] = field(default_factory=dict)
    recency_field: str = "created_at"


class RelevanceScorer:
    def __init__(self, profile: ScoringProfile):
        self.profile = profile

    def score(
        self,
        record: Mapping[str, Any],
        query: SearchQuery,
        expansions: Iterable[ExpandedTermSet] = (),
    ) -> int:
        score = 0
        if query.has_keywords:
            score += self._keyword_points(record, query, expansions)
        if query.location_term and self.profile.location_field:
            score += self._location_points(record, query.location_term)
        score += self._bonus_points(record)
        return score

    def rank(
        self,
        records: Iterable[Dict[str, Any]],
        query: SearchQuery,
        expansions: Iterable[ExpandedTermSet] = (),
    ) -> List[ScoredCandidate]:
        """
        Score every record and order by score, newest first on ties.
        Without keywords the incoming (store) order is kept.
        """
        expansions = list(expansions)
        candidates = [
            ScoredCandidate(record=record, score=self.score(record, query, expansions))
            for record in records
        ]
        if not query.has_keywords:
            return candidates

        candidates.sort(key=self._recency_key, reverse=True)
        candidates.sort(key=lambda c: c.score, reverse=True)
        return candidates

    def _keyword_points(
        self,
        record: Mapping[str, Any],
        query: SearchQuery,
        expansions: Iterable[ExpandedTermSet],
    ) -> int:
        phrase = query.keyword_phrase
        tokens = query.keyword_terms
        points = 0

        title = normalize_term(record.get(self.profile.title_field))
        if title:
            if title == phrase:
                points += EXACT_TITLE_POINTS
            elif phrase in title or any(token in title for token in tokens):
                points += PARTIAL_TITLE_POINTS
            elif any(
                term in title
                for expansion in expansions
                for term in expansion.expanded_terms
            ):
                points += SYNONYM_TITLE_POINTS

        if self.profile.description_field:
            description = normalize_term(record.get(self.profile.description_field))
            if description and (
                phrase in description or any(token in description for token in tokens)
            ):
                points += DESCRIPTION_POINTS

        return points

    def _location_points(self, record: Mapping[str, Any], location_term: str) -> int:
        location = normalize_term(record.get(self.profile.location_field))
        wanted = normalize_term(location_term)
        if not location or not wanted:
            return 0
        if location == wanted:
            return EXACT_LOCATION_POINTS
        if wanted in location:
            return PARTIAL_LOCATION_POINTS
        return 0

    def _bonus_points(self, record: Mapping[str, Any]) -> int:
        points = 0
        profile = self.profile
        if profile.availability_field and profile.availability_bonus:
            status = normalize_term(record.get(profile.availability_field))
            if status in profile.available_values:
                points += profile.availability_bonus

        for name, bonus in profile.presence_bonuses.items():
            if record.get(name):
                points += bonus

        for name, bonus in profile.per_item_bonuses.items():
            items = record.get(name)
            if isinstance(items, list):
                points += bonus * len(items)

        return points

    def _recency_key(self, candidate: ScoredCandidate):
        record = candidate.record
        return (
            _as_timestamp(record.get(self.profile.recency_field)),
            record.get("id") or 0,
        )


def _as_timestamp(value: Any) -> float:
    if isinstance(value, datetime.datetime):
        return value.timestamp()
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min).timestamp()
    return float("-inf")
