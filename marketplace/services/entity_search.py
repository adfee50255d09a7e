import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from marketplace.exceptions import SearchUnavailableError
from marketplace.services.location_resolver import LocationResolver
from marketplace.services.query_builder import FilterPlan, Predicate, QueryBuilder
from marketplace.services.relevance_scorer import RelevanceScorer
from marketplace.services.search_types import (
    ExpandedTermSet,
    ScoredCandidate,
    SearchQuery,
)
from marketplace.services.side_data import parse_list_fields
from marketplace.services.synonym_expander import SynonymExpander

logger = logging.getLogger(__name__)

Fetch = Callable[[FilterPlan, int], List[Dict[str, Any]]]


@contextmanager
def store_access(action: str):
    """Turn any record-store failure into a single SearchUnavailableError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Record store failure during {action}: {e}")
        raise SearchUnavailableError(f"{action} is unavailable") from e


class EntitySearch:
    """
    Expand -> build -> fetch -> parse side data -> score for one entity type.
    Synonym expansion and location resolution are optional per entity.
    """

    def __init__(
        self,
        name: str,
        builder: QueryBuilder,
        scorer: RelevanceScorer,
        baseline: Callable[[], Sequence[Any]] = lambda: [],
        list_fields: Sequence[str] = (),
        expander: Optional[SynonymExpander] = None,
        resolver: Optional[LocationResolver] = None,
    ):
        self.name = name
        self.builder = builder
        self.scorer = scorer
        self.baseline = baseline
        self.list_fields = list(list_fields)
        self.expander = expander
        self.resolver = resolver

    def expand_keywords(self, query: SearchQuery) -> List[ExpandedTermSet]:
        if self.expander is None:
            return [ExpandedTermSet.identity(term) for term in query.keyword_terms]
        return self.expander.expand_query(query.keyword_phrase)

    def run(
        self,
        fetch: Fetch,
        query: SearchQuery,
        limit: int,
        expansions: Optional[List[ExpandedTermSet]] = None,
        extra_keyword_predicates: Sequence[Predicate] = (),
    ) -> List[ScoredCandidate]:
        if expansions is None:
            expansions = self.expand_keywords(query)
        locations = (
            self.resolver.expand_location(query.location_term)
            if self.resolver and query.location_term
            else set()
        )

        plan = self.builder.build(
            keyword_sets=expansions,
            location_terms=locations,
            structured_filters=query.structured_filters,
            baseline=self.baseline(),
            extra_keyword_predicates=extra_keyword_predicates,
        )

        with store_access(f"{self.name} search"):
            records = fetch(plan, limit)

        records = [parse_list_fields(record, self.list_fields) for record in records]
        ranked = self.scorer.rank(records, query, expansions)
        logger.info(f"{self.name} search matched {len(ranked)} records")
        return ranked[:limit]
