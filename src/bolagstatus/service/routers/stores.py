"""Store search endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query

from bolagstatus.exceptions import (
    PlaceSearchError,
    PlaceSearchNoResultsError,
    PlaceSearchNotConfiguredError,
)
from bolagstatus.places import PlaceSearchClient
from bolagstatus.service.schemas import StoreItem, StoreSearchResponse

logger = logging.getLogger("bolagstatus.service")

router = APIRouter(prefix="/stores", tags=["Stores"])

# Shared client instance (set by main.py)
client: PlaceSearchClient = None


def set_client(c: PlaceSearchClient):
    global client
    client = c


def status_code_for(error: PlaceSearchError) -> int:
    """Map store search errors to HTTP status codes."""
    if isinstance(error, PlaceSearchNotConfiguredError):
        return 503
    if isinstance(error, PlaceSearchNoResultsError):
        return 404
    return 502


@router.get("", response_model=StoreSearchResponse)
async def search_stores(q: str = Query(..., description="Town, street or store name")):
    """
    Look up stores and whether each one is open.

    Opening information comes from the place search backend and is not
    reconciled with /status. Failed searches can simply be retried.
    """
    try:
        stores = client.search(q)
    except PlaceSearchError as e:
        status_code = status_code_for(e)
        if status_code >= 500:
            logger.warning(
                f"Store search failed: {e}",
                extra={"query": q, "error_code": e.code},
            )
        raise HTTPException(status_code=status_code, detail=e.to_dict())

    return StoreSearchResponse(
        query=q.strip(),
        count=len(stores),
        stores=[StoreItem(headline=s.headline, **s.to_dict()) for s in stores],
    )
