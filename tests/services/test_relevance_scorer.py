import datetime

from marketplace.services.relevance_scorer import RelevanceScorer, ScoringProfile
from marketplace.services.search_types import SearchQuery
from marketplace.services.synonym_expander import SynonymExpander

PLAIN = ScoringProfile(title_field="title", description_field="description")
MANPOWER_LIKE = ScoringProfile(
    title_field="title",
    description_field="description",
    availability_field="status",
    available_values=frozenset({"available"}),
    availability_bonus=3,
    presence_bonuses={"cv_path": 2},
    per_item_bonuses={"certificates": 1},
)


def test_exact_title_scores_ten():
    scorer = RelevanceScorer(PLAIN)
    query = SearchQuery.from_text("Welder")
    assert scorer.score({"title": " welder "}, query) == 10


def test_partial_title_and_description_add_up():
    scorer = RelevanceScorer(PLAIN)
    query = SearchQuery.from_text("pipe welder")
    record = {"title": "Senior Welder", "description": "Pipe work in refineries"}
    assert scorer.score(record, query) == 5 + 3


def test_synonym_in_title_beats_description_only_match():
    expander = SynonymExpander(synonym_groups={"developer": ["engineer", "backend"]})
    query = SearchQuery.from_text("developer")
    expansions = expander.expand_query(query.keyword_phrase)
    scorer = RelevanceScorer(PLAIN)

    backend = {"title": "Backend Engineer", "description": "APIs"}
    consultant = {"title": "Senior Consultant", "description": "Ex developer"}

    assert scorer.score(backend, query, expansions) == 4
    assert scorer.score(consultant, query, expansions) == 3


def test_location_uses_original_term_only():
    scorer = RelevanceScorer(PLAIN)
    query = SearchQuery.from_text(None, location="Riyadh")

    assert scorer.score({"location": "riyadh"}, query) == 10
    assert scorer.score({"location": "Olaya, Riyadh"}, query) == 5
    # matched only through the gazetteer: no location points
    assert scorer.score({"location": "Olaya"}, query) == 0


def test_bonuses_for_availability_cv_and_certificates():
    scorer = RelevanceScorer(MANPOWER_LIKE)
    record = {"status": "Available", "cv_path": "cv.pdf", "certificates": ["a", "b"]}
    assert scorer.score(record, SearchQuery()) == 3 + 2 + 2


def test_unparsed_list_fields_give_no_per_item_bonus():
    scorer = RelevanceScorer(MANPOWER_LIKE)
    assert scorer.score({"certificates": '["a"]'}, SearchQuery()) == 0


def test_scores_are_never_negative():
    scorer = RelevanceScorer(MANPOWER_LIKE)
    assert scorer.score({}, SearchQuery.from_text("anything", "anywhere")) == 0


def test_rank_orders_by_score_then_recency():
    scorer = RelevanceScorer(PLAIN)
    records = [
        {"id": 1, "title": "Welder", "created_at": datetime.datetime(2024, 1, 1)},
        {"id": 2, "title": "Pipe Welder", "created_at": datetime.datetime(2024, 1, 2)},
        {"id": 3, "title": "Pipe Welder", "created_at": datetime.datetime(2024, 1, 3)},
        {"id": 4, "title": "Pipe Welder", "created_at": None},
    ]

    ranked = scorer.rank(records, SearchQuery.from_text("welder"))

    assert [c.record["id"] for c in ranked] == [1, 3, 2, 4]
    assert [c.score for c in ranked] == [10, 5, 5, 5]


def test_rank_breaks_equal_timestamps_by_id():
    scorer = RelevanceScorer(PLAIN)
    when = datetime.datetime(2024, 1, 1)
    records = [
        {"id": 7, "title": "Driver", "created_at": when},
        {"id": 9, "title": "Driver", "created_at": when},
    ]
    ranked = scorer.rank(records, SearchQuery.from_text("driver"))
    assert [c.record["id"] for c in ranked] == [9, 7]


def test_rank_without_keywords_keeps_store_order():
    scorer = RelevanceScorer(MANPOWER_LIKE)
    records = [
        {"id": 1, "status": "busy"},
        {"id": 2, "status": "available"},
    ]

    ranked = scorer.rank(records, SearchQuery.from_text("", "riyadh"))

    assert [c.record["id"] for c in ranked] == [1, 2]
    assert ranked[1].score == 3


def test_title_and_location_beat_title_only():
    scorer = RelevanceScorer(PLAIN)
    query = SearchQuery.from_text("welder", "jubail")

    both = scorer.score({"title": "Welder", "location": "Jubail"}, query)
    title_only = scorer.score({"title": "Welder", "location": "Dammam"}, query)

    assert both > title_only
