import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.schemas.search import EquipmentStatsResponse
from marketplace.services.equipment_search_service import EquipmentSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/equipment-search", tags=["equipment"])


@router.get("/search")
def search_equipment(
    search: Optional[str] = None,
    location: Optional[str] = None,
    availability: Optional[str] = None,
    service: EquipmentSearchService = Depends(deps.get_equipment_search_service),
):
    try:
        return service.search(search=search, location=location, availability=availability)
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error searching equipment: {e}")
        raise HTTPException(status_code=500, detail="Failed to search equipment")


@router.get("/locations")
def get_equipment_locations(
    service: EquipmentSearchService = Depends(deps.get_equipment_search_service),
):
    """Distinct locations of active equipment listings."""
    try:
        return service.get_locations()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving equipment locations: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve locations")


@router.get("/stats", response_model=EquipmentStatsResponse)
def get_equipment_stats(
    service: EquipmentSearchService = Depends(deps.get_equipment_search_service),
):
    try:
        return service.get_stats()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving equipment stats: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve statistics")
