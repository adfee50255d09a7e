import logging
import time
from typing import Any, Dict, Optional

from marketplace.repos.manpower_repo import MANPOWER_COLUMNS, active_account_filter
from marketplace.services.aggregate_cache import AggregateCache, category_cache
from marketplace.services.entity_search import EntitySearch, store_access
from marketplace.services.location_resolver import location_resolver
from marketplace.services.query_builder import QueryBuilder
from marketplace.services.relevance_scorer import RelevanceScorer, ScoringProfile
from marketplace.services.search_types import ScoredCandidate, SearchQuery
from marketplace.services.side_data import parse_json_list
from marketplace.services.synonym_expander import synonym_expander
from marketplace.settings import settings
from marketplace.utils import elapsed_ms, now_iso

logger = logging.getLogger(__name__)

CATEGORY_CACHE_KEY = "professional_categories"

MANPOWER_SCORING = ScoringProfile(
    title_field="job_title",
    description_field="profile_description",
    location_field="location",
    availability_field="availability_status",
    available_values=frozenset({"available"}),
    availability_bonus=3,
    presence_bonuses={"cv_path": 2},
    per_item_bonuses={"certificates": 1},
    recency_field="created_at",
)

manpower_search = EntitySearch(
    name="manpower",
    builder=QueryBuilder(
        MANPOWER_COLUMNS,
        keyword_fields=["job_title", "profile_description"],
        location_field="location",
    ),
    scorer=RelevanceScorer(MANPOWER_SCORING),
    baseline=lambda: [active_account_filter()],
    list_fields=["certificates"],
    expander=synonym_expander,
    resolver=location_resolver,
)


class ManpowerSearchService:
    def __init__(
        self,
        repo,
        cache: AggregateCache = category_cache,
        result_limit: Optional[int] = None,
    ):
        self.repo = repo
        self.cache = cache
        self.result_limit = result_limit or settings.SEARCH_RESULT_LIMIT

    def search(
        self,
        job_title: Optional[str] = None,
        location: Optional[str] = None,
        availability_status: Optional[str] = None,
    ) -> Dict[str, Any]:
        started = time.perf_counter()
        query = SearchQuery.from_text(
            job_title,
            location,
            {"availability_status": availability_status},
        )

        ranked = manpower_search.run(self.repo.search, query, self.result_limit)
        manpower = [serialize_profile(candidate) for candidate in ranked]

        return {
            "success": True,
            "manpower": manpower,
            "count": len(manpower),
            "criteria": {
                "jobTitle": job_title,
                "location": location,
                "availabilityStatus": availability_status,
            },
            "executionTime": elapsed_ms(started),
            "timestamp": now_iso(),
        }

    def get_details(self, profile_id: int) -> Optional[Dict[str, Any]]:
        with store_access("manpower details"):
            profile = self.repo.get_details(profile_id)
        if not profile:
            return None

        is_consultant_managed = profile.get("profile_type") == "consultant_managed"
        return {
            **profile,
            "certificates": parse_json_list(
                profile.get("certificates"), "certificates", profile_id
            ),
            "isConsultantManaged": is_consultant_managed,
            "profileType": profile.get("profile_type"),
            "lastModified": profile.get("last_modified"),
            "modifiedBy": (
                {
                    "firstName": profile.get("modifier_first_name"),
                    "lastName": profile.get("modifier_last_name"),
                    "userType": profile.get("modifier_type"),
                }
                if profile.get("modified_by")
                else None
            ),
            "managedBy": (
                {
                    "name": profile.get("consultant_name"),
                    "company": profile.get("consultant_company"),
                    "email": profile.get("consultant_email"),
                    "mobile": profile.get("consultant_mobile"),
                    "whatsapp": profile.get("consultant_whatsapp"),
                }
                if is_consultant_managed
                else None
            ),
        }

    def get_categories(self) -> Dict[str, Any]:
        lookup = self.cache.get_or_load(CATEGORY_CACHE_KEY, self._load_categories)
        return {
            "success": True,
            **lookup.value,
            "cached": lookup.cached,
            "cacheAge": f"{lookup.age_seconds}s",
        }

    def refresh_categories(self) -> None:
        self.cache.invalidate(CATEGORY_CACHE_KEY)

    def get_stats(self) -> Dict[str, Any]:
        with store_access("manpower statistics"):
            stats = self.repo.stats()
        return {"success": True, "statistics": stats}

    def get_featured(self, limit: Optional[int] = None) -> Dict[str, Any]:
        with store_access("featured manpower"):
            rows = self.repo.featured(limit or settings.FEATURED_LIMIT)
        manpower = [serialize_profile(ScoredCandidate(record=row)) for row in rows]
        return {"success": True, "manpower": manpower, "count": len(manpower)}

    def _load_categories(self) -> Dict[str, Any]:
        with store_access("professional categories"):
            categories = self.repo.job_title_counts(settings.CATEGORY_LIMIT)
        logger.info(f"Loaded {len(categories)} professional categories")
        return {
            "categories": categories,
            "totalCategories": len(categories),
            "totalProfessionals": sum(c["count"] for c in categories),
            "timestamp": now_iso(),
        }


def serialize_profile(candidate: ScoredCandidate) -> Dict[str, Any]:
    profile = candidate.record
    is_consultant_managed = profile.get("profile_type") == "consultant_managed"
    return {
        **profile,
        "certificates": parse_json_list(
            profile.get("certificates"), "certificates", profile.get("id")
        ),
        "relevanceScore": candidate.score,
        "isConsultantManaged": is_consultant_managed,
        "profileType": profile.get("profile_type"),
        "lastModified": profile.get("last_modified"),
        "managedBy": (
            {
                "name": profile.get("consultant_name"),
                "company": profile.get("consultant_company"),
            }
            if is_consultant_managed
            else None
        ),
    }