import logging
from typing import Any, Dict, Optional

from marketplace.repos.job_repo import JOB_COLUMNS, open_job_filters
from marketplace.services.entity_search import EntitySearch, store_access
from marketplace.services.location_resolver import location_resolver
from marketplace.services.query_builder import QueryBuilder
from marketplace.services.relevance_scorer import RelevanceScorer, ScoringProfile
from marketplace.services.search_types import SearchQuery, normalize_term
from marketplace.services.synonym_expander import synonym_expander
from marketplace.settings import settings
from marketplace.utils import now_iso

logger = logging.getLogger(__name__)

JOB_SCORING = ScoringProfile(
    title_field="job_title",
    description_field="description",
    location_field="location",
    recency_field="posted_date",
)

job_search = EntitySearch(
    name="job",
    builder=QueryBuilder(
        JOB_COLUMNS,
        keyword_fields=["job_title", "description", "company_name"],
        location_field="location",
    ),
    scorer=RelevanceScorer(JOB_SCORING),
    baseline=open_job_filters,
    expander=synonym_expander,
    resolver=location_resolver,
)


class JobSearchService:
    def __init__(self, repo, manpower_repo=None, result_limit: Optional[int] = None):
        self.repo = repo
        self.manpower_repo = manpower_repo
        self.result_limit = result_limit or settings.SEARCH_RESULT_LIMIT

    def search(
        self,
        query: Optional[str] = None,
        location: Optional[str] = None,
        industry: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> Dict[str, Any]:
        search_query = SearchQuery.from_text(
            query,
            location,
            {
                "industry": industry,
                "job_type": job_type,
                "experience_level": experience_level,
            },
        )

        ranked = job_search.run(self.repo.search, search_query, self.result_limit)
        jobs = [{**c.record, "relevanceScore": c.score} for c in ranked]

        return {
            "success": True,
            "jobs": jobs,
            "count": len(jobs),
            "criteria": {
                "query": query,
                "location": location,
                "industry": industry,
                "jobType": job_type,
                "experienceLevel": experience_level,
            },
            "timestamp": now_iso(),
        }

    def get_details(self, job_id: int) -> Optional[Dict[str, Any]]:
        """Fetch a job and count the view."""
        with store_access("job details"):
            job = self.repo.get_details(job_id)
            if not job:
                return None
            self.repo.increment_views(job_id)
        return job

    def get_featured(self, limit: Optional[int] = None) -> Dict[str, Any]:
        with store_access("featured jobs"):
            jobs = self.repo.featured(limit or settings.FEATURED_LIMIT)
        return {"success": True, "jobs": jobs, "count": len(jobs)}

    def get_categories(self) -> Dict[str, Any]:
        with store_access("job categories"):
            categories = self.repo.industry_counts()
            total = self.repo.count_open()
        return {
            "success": True,
            "categories": categories,
            "totalJobs": total,
            "timestamp": now_iso(),
        }

    def get_recommendations(
        self, profile_id: int, limit: Optional[int] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Recommend open jobs to a manpower profile by its job title and location.

        Args:
            profile_id: Manpower profile to match against
            limit: Maximum number of jobs, defaults to RECOMMENDATION_LIMIT

        Returns:
            Jobs carrying a match_score, or None when the profile does not exist
        """
        with store_access("job recommendations"):
            profile = self.manpower_repo.get_match_terms(profile_id)
            if not profile:
                return None

            job_title = normalize_term(profile.get("job_title"))
            location = normalize_term(profile.get("location"))
            jobs = []
            if job_title or location:
                jobs = self.repo.recommendations(
                    job_title, location, limit or settings.RECOMMENDATION_LIMIT
                )

        logger.info(f"Found {len(jobs)} recommended jobs for profile {profile_id}")
        return {
            "success": True,
            "jobs": jobs,
            "count": len(jobs),
            "profileData": {
                "job_title": profile.get("job_title"),
                "location": profile.get("location"),
            },
        }
