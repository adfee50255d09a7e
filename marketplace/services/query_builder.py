import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import and_, func, or_, true

from marketplace.services.search_types import ExpandedTermSet, normalize_term

logger = logging.getLogger(__name__)

# Structured filter values meaning "do not filter"
IGNORED_FILTER_VALUES = frozenset({"", "all"})
LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


@dataclass(frozen=True)
class Predicate:
    field: str
    op: str  # "contains" or "eq"
    value: Any

    @property
    def folds_case(self) -> bool:
        return self.op == "contains" or isinstance(self.value, str)

    @property
    def template(self) -> str:
        if self.op == "contains":
            return f"LOWER({self.field}) LIKE ?"
        if self.folds_case:
            return f"LOWER({self.field}) = ?"
        return f"{self.field} = ?"

    @property
    def bound_value(self) -> Any:
        if self.op == "contains":
            return f"%{escape_like(self.value)}%"
        if self.folds_case:
            return self.value.lower()
        return self.value


@dataclass
class PredicateGroup:
    """Predicates OR'ed together; groups are AND'ed."""

    category: str
    predicates: List[Predicate] = field(default_factory=list)


@dataclass
class FilterPlan:
    columns: Mapping[str, Any]
    groups: List[PredicateGroup] = field(default_factory=list)
    baseline: List[Any] = field(default_factory=list)

    def params(self) -> List[Tuple[str, Any]]:
        return [
            (predicate.template, predicate.bound_value)
            for group in self.groups
            for predicate in group.predicates
        ]

    def categories(self) -> List[str]:
        return [group.category for group in self.groups]

    def where_clause(self):
        clauses = [
            or_(*[self._to_clause(p) for p in group.predicates])
            for group in self.groups
        ]
        return and_(true(), *clauses, *self.baseline)

    def _to_clause(self, predicate: Predicate):
        column = self.columns[predicate.field]
        if predicate.op == "contains":
            return func.lower(column).like(predicate.bound_value, escape=LIKE_ESCAPE)
        if predicate.folds_case:
            return func.lower(column) == predicate.bound_value
        return column == predicate.value


class QueryBuilder:
    """Turns expanded keyword/location sets and filters into a FilterPlan."""

    def __init__(
        self,
        columns: Mapping[str, Any],
        keyword_fields: Sequence[str],
        location_field: Optional[str] = None,
    ):
        unknown = [
            name
            for name in [*keyword_fields, location_field]
            if name and name not in columns
        ]
        if unknown:
            raise ValueError(f"Unknown search fields: {unknown}")
        self.columns = dict(columns)
        self.keyword_fields = list(keyword_fields)
        self.location_field = location_field

    def build(
        self,
        keyword_sets: Iterable[ExpandedTermSet] = (),
        location_terms: Iterable[str] = (),
        structured_filters: Optional[Mapping[str, Any]] = None,
        baseline: Sequence[Any] = (),
        extra_keyword_predicates: Sequence[Predicate] = (),
    ) -> FilterPlan:
        plan = FilterPlan(columns=self.columns, baseline=list(baseline))

        for term_set in keyword_sets:
            group = self._keyword_group(term_set)
            if group.predicates:
                group.predicates.extend(extra_keyword_predicates)
                plan.groups.append(group)

        locations = sorted({t for t in map(normalize_term, location_terms) if t})
        if locations and self.location_field:
            plan.groups.append(
                PredicateGroup(
                    category="location",
                    predicates=[
                        Predicate(self.location_field, "contains", term)
                        for term in locations
                    ],
                )
            )

        for name, value in self._active_filters(structured_filters).items():
            plan.groups.append(
                PredicateGroup(category=name, predicates=[Predicate(name, "eq", value)])
            )

        logger.debug(f"Built filter plan with categories {plan.categories()}")
        return plan

    def _keyword_group(self, term_set: ExpandedTermSet) -> PredicateGroup:
        terms = sorted({t for t in map(normalize_term, term_set.expanded_terms) if t})
        label = " ".join(sorted(term_set.original_terms))
        return PredicateGroup(
            category=f"keyword:{label}",
            predicates=[
                Predicate(column, "contains", term)
                for term in terms
                for column in self.keyword_fields
            ],
        )

    def _active_filters(self, filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        active = {}
        for name, value in (filters or {}).items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if value.lower() in IGNORED_FILTER_VALUES:
                    continue
            if name not in self.columns:
                raise ValueError(f"Unknown filter field: {name}")
            active[name] = value
        return active
