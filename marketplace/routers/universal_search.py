import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.schemas.search import UniversalSearchResponse
from marketplace.services.universal_search_service import UniversalSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/universal-search", tags=["search"])


@router.get("", response_model=UniversalSearchResponse)
def universal_search(
    query: str = Query(..., min_length=1),
    service: UniversalSearchService = Depends(deps.get_universal_search_service),
):
    """
    Search manpower, equipment and jobs at once.
    The trimmed query is matched as one substring across most text columns.
    """
    if not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    try:
        return service.search(query)
    except SearchUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error in universal search: {e}")
        raise HTTPException(status_code=500, detail="Universal search failed")
