import logging
from typing import Any, Dict, Optional

from marketplace.repos.equipment_repo import EQUIPMENT_COLUMNS, active_equipment_filter
from marketplace.services.entity_search import EntitySearch, store_access
from marketplace.services.location_resolver import location_resolver
from marketplace.services.query_builder import QueryBuilder
from marketplace.services.relevance_scorer import RelevanceScorer, ScoringProfile
from marketplace.services.search_types import ScoredCandidate, SearchQuery
from marketplace.settings import settings
from marketplace.utils import now_iso

logger = logging.getLogger(__name__)

EQUIPMENT_LIST_FIELDS = ["equipment_images", "equipment_documents"]

EQUIPMENT_SCORING = ScoringProfile(
    title_field="equipment_name",
    description_field="description",
    location_field="location",
    availability_field="availability",
    available_values=frozenset({"available"}),
    availability_bonus=2,
    presence_bonuses={"equipment_images": 1},
    per_item_bonuses={"equipment_documents": 1},
    recency_field="created_at",
)

# Equipment vocabulary is not job titles: no synonym expansion
equipment_search = EntitySearch(
    name="equipment",
    builder=QueryBuilder(
        EQUIPMENT_COLUMNS,
        keyword_fields=["equipment_name", "equipment_type"],
        location_field="location",
    ),
    scorer=RelevanceScorer(EQUIPMENT_SCORING),
    baseline=lambda: [active_equipment_filter()],
    list_fields=EQUIPMENT_LIST_FIELDS,
    resolver=location_resolver,
)


class EquipmentSearchService:
    def __init__(self, repo, result_limit: Optional[int] = None):
        self.repo = repo
        self.result_limit = result_limit or settings.SEARCH_RESULT_LIMIT

    def search(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        availability: Optional[str] = None,
    ) -> Dict[str, Any]:
        query = SearchQuery.from_text(search, location, {"availability": availability})
        ranked = equipment_search.run(self.repo.search, query, self.result_limit)
        equipment = [serialize_equipment(candidate) for candidate in ranked]
        return {
            "success": True,
            "data": equipment,
            "count": len(equipment),
            "criteria": {
                "search": search,
                "location": location,
                "availability": availability,
            },
        }

    def get_locations(self) -> Dict[str, Any]:
        with store_access("equipment locations"):
            locations = self.repo.locations()
        return {
            "success": True,
            "data": locations,
            "count": len(locations),
            "timestamp": now_iso(),
        }

    def get_stats(self) -> Dict[str, Any]:
        with store_access("equipment statistics"):
            stats = self.repo.stats()
        return {"success": True, "data": stats, "timestamp": now_iso()}


def serialize_equipment(candidate: ScoredCandidate) -> Dict[str, Any]:
    item = candidate.record
    return {
        "id": item.get("id"),
        "user_id": item.get("user_id"),
        "equipmentName": item.get("equipment_name"),
        "equipmentType": item.get("equipment_type"),
        "availability": item.get("availability"),
        "location": item.get("location"),
        "contactPerson": item.get("contact_person"),
        "contactNumber": item.get("contact_number"),
        "contactEmail": item.get("contact_email"),
        "description": item.get("description"),
        "equipmentImages": item.get("equipment_images") or [],
        "equipmentDocuments": item.get("equipment_documents") or [],
        "created_at": item.get("created_at"),
        "owner": {
            "name": item.get("owner_name"),
            "email": item.get("owner_email"),
            "mobile": item.get("owner_mobile"),
            "whatsapp": item.get("owner_whatsapp"),
            "company": item.get("owner_company"),
        },
        "relevanceScore": candidate.score,
    }
