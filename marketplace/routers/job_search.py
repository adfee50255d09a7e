import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.schemas.search import JobCategoriesResponse
from marketplace.services.job_search_service import JobSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/job-search", tags=["jobs"])


@router.get("/search")
def search_jobs(
    query: Optional[str] = None,
    location: Optional[str] = None,
    industry: Optional[str] = None,
    job_type: Optional[str] = Query(None, alias="jobType"),
    experience_level: Optional[str] = Query(None, alias="experienceLevel"),
    service: JobSearchService = Depends(deps.get_job_search_service),
):
    """Search open jobs by keywords, location and structured filters."""
    try:
        return service.search(
            query=query,
            location=location,
            industry=industry,
            job_type=job_type,
            experience_level=experience_level,
        )
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error searching jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to search jobs")


@router.get("/featured/all")
def get_featured_jobs(service: JobSearchService = Depends(deps.get_job_search_service)):
    try:
        return service.get_featured()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving featured jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve featured jobs")


@router.get("/categories/all", response_model=JobCategoriesResponse)
def get_job_categories(service: JobSearchService = Depends(deps.get_job_search_service)):
    try:
        return service.get_categories()
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving job categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")


@router.get("/recommendations/{profile_id}")
def get_job_recommendations(
    profile_id: int,
    service: JobSearchService = Depends(deps.get_job_search_service),
):
    """Open jobs matching a manpower profile's job title and location."""
    try:
        recommendations = service.get_recommendations(profile_id)
        if recommendations is None:
            raise HTTPException(status_code=404, detail="Manpower profile not found")
        return recommendations
    except HTTPException:
        raise
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error recommending jobs for profile {profile_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to get job recommendations")


@router.get("/{job_id}")
def get_job_details(
    job_id: int,
    service: JobSearchService = Depends(deps.get_job_search_service),
):
    try:
        job = service.get_details(job_id)
        if not job:
            raise HTTPException(status_code=404, detail="Job not found")
        return {"success": True, "job": job}
    except HTTPException:
        raise
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve job")
