# routes/recently_viewed.py
# Per-session "recently viewed" list. sessionId is an opaque client token.

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from deps import get_settings, get_store
from models import RecentlyViewed, RecentlyViewedCreate
from stores import GuideStore

router = APIRouter(prefix="/api/recently-viewed", tags=["recently-viewed"])


@router.get("", response_model=List[RecentlyViewed])
def list_recently_viewed(
    session_id: str = Query(..., alias="sessionId", min_length=1),
    limit: Optional[int] = Query(None, ge=0),
    store: GuideStore = Depends(get_store),
    settings=Depends(get_settings),
):
    if limit is None:
        limit = settings.recent_limit
    return store.list_recently_viewed(session_id, limit)


@router.post("", response_model=RecentlyViewed, status_code=201)
def add_recently_viewed(payload: RecentlyViewedCreate, store: GuideStore = Depends(get_store)):
    # No dedup: every view is a new entry.
    return store.add_recently_viewed(payload)
