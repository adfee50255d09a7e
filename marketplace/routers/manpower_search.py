import logging

from fastapi import APIRouter, Depends, HTTPException

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.schemas.search import (
    ManpowerSearchRequest,
    ManpowerStatsResponse,
    ProfessionalCategories,
)
from marketplace.security import get_api_key
from marketplace.services.manpower_search_service import ManpowerSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/manpower-search", tags=["manpower"])


@router.post("/search")
def search_manpower(
    request: ManpowerSearchRequest,
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    """Search manpower profiles by job title, location and availability."""
    try:
        return service.search(
            job_title=request.jobTitle,
            location=request.location,
            availability_status=request.availabilityStatus,
        )
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error searching manpower: {e}")
        raise HTTPException(status_code=500, detail="Failed to search manpower")


@router.get("/details/{profile_id}")
def get_manpower_details(
    profile_id: int,
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    try:
        profile = service.get_details(profile_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Manpower profile not found")
        return {"success": True, "profile": profile}
    except HTTPException:
        raise
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving manpower profile {profile_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve profile")


@router.get("/categories", response_model=ProfessionalCategories)
def get_professional_categories(
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    """Most common job titles with their profile counts."""
    try:
        return service.get_categories()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving professional categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")


@router.get("/categories/refresh", dependencies=[Depends(get_api_key)])
def refresh_professional_categories(
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    service.refresh_categories()
    logger.info("Professional categories cache cleared")
    return {"success": True, "message": "Categories cache cleared"}


@router.get("/stats", response_model=ManpowerStatsResponse)
def get_manpower_stats(
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    try:
        return service.get_stats()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving manpower stats: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve statistics")


@router.get("/featured")
def get_featured_manpower(
    service: ManpowerSearchService = Depends(deps.get_manpower_search_service),
):
    try:
        return service.get_featured()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving featured manpower: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve featured manpower")
