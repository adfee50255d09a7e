import pytest
from sqlalchemy import column, literal_column

from marketplace.services.query_builder import (
    FilterPlan,
    Predicate,
    QueryBuilder,
    escape_like,
)
from marketplace.services.search_types import ExpandedTermSet

COLUMNS = {
    "job_title": column("job_title"),
    "description": column("description"),
    "location": column("location"),
    "availability_status": column("availability_status"),
    "id": column("id"),
}


def make_builder():
    return QueryBuilder(
        COLUMNS,
        keyword_fields=["job_title", "description"],
        location_field="location",
    )


def term_set(original, *expanded):
    return ExpandedTermSet(
        original_terms=frozenset([original]),
        expanded_terms=frozenset([original, *expanded]),
    )


def test_empty_input_builds_no_groups():
    plan = make_builder().build()
    assert plan.groups == []
    assert plan.params() == []


def test_keyword_group_crosses_terms_and_fields_in_sorted_order():
    plan = make_builder().build(keyword_sets=[term_set("developer", "engineer")])

    assert plan.categories() == ["keyword:developer"]
    assert plan.params() == [
        ("LOWER(job_title) LIKE ?", "%developer%"),
        ("LOWER(description) LIKE ?", "%developer%"),
        ("LOWER(job_title) LIKE ?", "%engineer%"),
        ("LOWER(description) LIKE ?", "%engineer%"),
    ]


def test_one_group_per_token():
    plan = make_builder().build(
        keyword_sets=[ExpandedTermSet.identity("senior"), ExpandedTermSet.identity("welder")]
    )
    assert plan.categories() == ["keyword:senior", "keyword:welder"]


def test_blank_terms_never_emit_match_all_patterns():
    plan = make_builder().build(keyword_sets=[ExpandedTermSet.identity("  ")])
    assert plan.groups == []
    assert all(value != "%%" for _template, value in plan.params())


def test_location_group_uses_every_expanded_name():
    plan = make_builder().build(location_terms={"madras", "chennai", ""})

    assert plan.categories() == ["location"]
    assert plan.params() == [
        ("LOWER(location) LIKE ?", "%chennai%"),
        ("LOWER(location) LIKE ?", "%madras%"),
    ]


def test_empty_location_expansion_adds_no_group():
    plan = make_builder().build(location_terms=set())
    assert plan.categories() == []


def test_structured_filters_ignore_blank_none_and_all():
    builder = make_builder()
    for value in (None, "", "  ", "all", "ALL"):
        plan = builder.build(structured_filters={"availability_status": value})
        assert plan.groups == []

    plan = builder.build(structured_filters={"availability_status": "available"})
    assert plan.params() == [("LOWER(availability_status) = ?", "available")]


def test_string_filters_compare_case_insensitively():
    plan = make_builder().build(structured_filters={"availability_status": " Available "})

    assert plan.params() == [("LOWER(availability_status) = ?", "available")]
    assert "lower(availability_status) = " in str(plan.where_clause()).lower()


def test_unknown_filter_field_is_rejected():
    with pytest.raises(ValueError):
        make_builder().build(structured_filters={"salary": "high"})


def test_unknown_keyword_field_is_rejected():
    with pytest.raises(ValueError):
        QueryBuilder(COLUMNS, keyword_fields=["nope"])


def test_extra_predicates_join_each_keyword_group():
    plan = make_builder().build(
        keyword_sets=[ExpandedTermSet.identity("42")],
        extra_keyword_predicates=[Predicate("id", "eq", 42)],
    )
    assert plan.params()[-1] == ("id = ?", 42)


def test_like_wildcards_in_terms_are_escaped():
    assert escape_like("100%_done\\") == "100\\%\\_done\\\\"
    plan = make_builder().build(keyword_sets=[ExpandedTermSet.identity("50%")])
    assert plan.params()[0] == ("LOWER(job_title) LIKE ?", "%50\\%%")


def test_where_clause_ands_groups_and_baseline():
    baseline = literal_column("is_active")
    plan = make_builder().build(
        keyword_sets=[ExpandedTermSet.identity("welder")],
        location_terms={"riyadh"},
        baseline=[baseline],
    )

    sql = str(plan.where_clause())

    assert sql.count(" AND ") >= 2
    assert "is_active" in sql
    assert "lower(job_title) LIKE" in sql
    assert "lower(location) LIKE" in sql


def test_where_clause_without_groups_is_still_valid():
    plan = FilterPlan(columns=COLUMNS)
    assert str(plan.where_clause()) in ("true", "1 = 1")
