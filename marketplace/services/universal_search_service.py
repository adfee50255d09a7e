import logging
import time
from typing import Any, Dict, List, Optional

from marketplace.repos.equipment_repo import EQUIPMENT_COLUMNS, active_equipment_filter
from marketplace.repos.job_repo import JOB_COLUMNS, open_job_filters
from marketplace.repos.manpower_repo import MANPOWER_COLUMNS, active_account_filter
from marketplace.services.entity_search import EntitySearch
from marketplace.services.equipment_search_service import (
    EQUIPMENT_LIST_FIELDS,
    EQUIPMENT_SCORING,
    serialize_equipment,
)
from marketplace.services.job_search_service import JOB_SCORING
from marketplace.services.manpower_search_service import (
    MANPOWER_SCORING,
    serialize_profile,
)
from marketplace.services.query_builder import Predicate, QueryBuilder
from marketplace.services.relevance_scorer import RelevanceScorer
from marketplace.services.search_types import ExpandedTermSet, SearchQuery
from marketplace.settings import settings
from marketplace.utils import elapsed_ms, now_iso

logger = logging.getLogger(__name__)

# Broad substring matching across heterogeneous entities: no synonyms, no gazetteer
universal_manpower = EntitySearch(
    name="universal manpower",
    builder=QueryBuilder(
        MANPOWER_COLUMNS,
        keyword_fields=[
            "first_name",
            "last_name",
            "full_name",
            "email",
            "mobile_number",
            "whatsapp_number",
            "national_id",
            "location",
            "job_title",
            "profile_description",
            "rate",
        ],
    ),
    scorer=RelevanceScorer(MANPOWER_SCORING),
    baseline=lambda: [active_account_filter()],
    list_fields=["certificates"],
)

universal_equipment = EntitySearch(
    name="universal equipment",
    builder=QueryBuilder(
        EQUIPMENT_COLUMNS,
        keyword_fields=[
            "equipment_name",
            "equipment_type",
            "location",
            "contact_person",
            "contact_number",
            "contact_email",
            "description",
            "owner_name",
            "owner_email",
            "owner_mobile",
            "owner_company",
        ],
    ),
    scorer=RelevanceScorer(EQUIPMENT_SCORING),
    baseline=lambda: [active_equipment_filter()],
    list_fields=EQUIPMENT_LIST_FIELDS,
)

universal_jobs = EntitySearch(
    name="universal job",
    builder=QueryBuilder(
        JOB_COLUMNS,
        keyword_fields=[
            "job_title",
            "company_name",
            "location",
            "description",
            "requirements",
            "industry",
            "job_type",
            "experience_level",
            "salary_range",
            "company_email",
            "company_mobile",
        ],
    ),
    scorer=RelevanceScorer(JOB_SCORING),
    baseline=open_job_filters,
)


def job_id_predicates(phrase: str) -> List[Predicate]:
    """A purely numeric phrase may also be a job reference number."""
    if phrase.isdigit():
        return [Predicate("id", "eq", int(phrase))]
    return []


class UniversalSearchService:
    def __init__(
        self,
        manpower_repo,
        equipment_repo,
        job_repo,
        result_limit: Optional[int] = None,
    ):
        self.manpower_repo = manpower_repo
        self.equipment_repo = equipment_repo
        self.job_repo = job_repo
        self.result_limit = result_limit or settings.SEARCH_RESULT_LIMIT

    def search(self, query: Optional[str]) -> Dict[str, Any]:
        started = time.perf_counter()
        search_query = SearchQuery.from_text(query)
        phrase = search_query.keyword_phrase

        manpower: List[Dict[str, Any]] = []
        equipment: List[Dict[str, Any]] = []
        jobs: List[Dict[str, Any]] = []

        if phrase:
            # The whole phrase is one term; it is not split into tokens
            expansions = [ExpandedTermSet.identity(phrase)]
            manpower = [
                serialize_profile(candidate)
                for candidate in universal_manpower.run(
                    self.manpower_repo.search,
                    search_query,
                    self.result_limit,
                    expansions=expansions,
                )
            ]
            equipment = [
                serialize_equipment(candidate)
                for candidate in universal_equipment.run(
                    self.equipment_repo.search,
                    search_query,
                    self.result_limit,
                    expansions=expansions,
                )
            ]
            jobs = [
                {**candidate.record, "relevanceScore": candidate.score}
                for candidate in universal_jobs.run(
                    self.job_repo.search,
                    search_query,
                    self.result_limit,
                    expansions=expansions,
                    extra_keyword_predicates=job_id_predicates(phrase),
                )
            ]

        logger.info(
            f"Universal search '{phrase}': {len(manpower)} manpower, "
            f"{len(equipment)} equipment, {len(jobs)} jobs"
        )
        return {
            "success": True,
            "query": phrase,
            "manpower": manpower,
            "equipment": equipment,
            "jobs": jobs,
            "totalResults": len(manpower) + len(equipment) + len(jobs),
            "counts": {
                "manpower": len(manpower),
                "equipment": len(equipment),
                "jobs": len(jobs),
            },
            "processingTime": elapsed_ms(started),
            "timestamp": now_iso(),
        }
