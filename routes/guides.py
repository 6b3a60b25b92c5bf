# routes/guides.py
# Guide endpoints. Static paths (search, category) are declared before the
# catch-all slug route so they are matched first.

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from deps import get_settings, get_store
from models import Breadcrumb, Guide, GuideCreate
from stores import GuideStore

router = APIRouter(prefix="/api/guides", tags=["guides"])


@router.get("", response_model=List[Guide])
def list_guides(store: GuideStore = Depends(get_store)):
    return store.list_guides()


@router.get("/search", response_model=List[Guide])
def search_guides(
    q: str = Query(""),
    store: GuideStore = Depends(get_store),
    settings=Depends(get_settings),
):
    if len(q) < settings.search_min_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Search query must be at least {settings.search_min_chars} characters",
        )
    return store.search_guides(q)


@router.get("/category/{category_id}", response_model=List[Guide])
def list_guides_by_category(category_id: int, store: GuideStore = Depends(get_store)):
    return store.list_guides_by_category(category_id)


@router.get("/{slug}", response_model=Guide)
def get_guide(slug: str, store: GuideStore = Depends(get_store)):
    guide = store.get_guide_by_slug(slug)
    if not guide:
        raise HTTPException(status_code=404, detail="Guide not found")
    return guide


@router.get("/{guide_id}/breadcrumbs", response_model=List[Breadcrumb])
def get_guide_breadcrumbs(guide_id: int, store: GuideStore = Depends(get_store)):
    trail = store.guide_breadcrumbs(guide_id)
    if trail is None:
        raise HTTPException(status_code=404, detail="Guide not found")
    return trail


@router.post("", response_model=Guide, status_code=201)
def create_guide(payload: GuideCreate, store: GuideStore = Depends(get_store)):
    return store.create_guide(payload)


@router.get("/{guide_id}/related", response_model=List[Guide])
def get_related_guides(
    guide_id: int,
    limit: Optional[int] = Query(None, ge=0),
    store: GuideStore = Depends(get_store),
    settings=Depends(get_settings),
):
    """Same-category guides; an unknown guide id yields an empty list."""
    if limit is None:
        limit = settings.related_limit
    return store.get_related_guides(guide_id, limit)
