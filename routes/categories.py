# routes/categories.py
# Category tree endpoints: listing, slug lookup, subcategories, breadcrumbs.

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from deps import get_store
from models import Breadcrumb, Category, CategoryCreate
from stores import GuideStore

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[Category])
def list_categories(
    root: bool = Query(False),
    store: GuideStore = Depends(get_store),
):
    """All categories, or only the top-level ones with ``?root=true`` (sidebar)."""
    if root:
        return store.list_root_categories()
    return store.list_categories()


@router.get("/{slug}", response_model=Category)
def get_category(slug: str, store: GuideStore = Depends(get_store)):
    category = store.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("/{slug}/breadcrumbs", response_model=List[Breadcrumb])
def get_category_breadcrumbs(slug: str, store: GuideStore = Depends(get_store)):
    category = store.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return store.category_breadcrumbs(category.id)


@router.get("/{category_id}/subcategories", response_model=List[Category])
def list_subcategories(category_id: int, store: GuideStore = Depends(get_store)):
    return store.list_subcategories(category_id)


@router.post("", response_model=Category, status_code=201)
def create_category(payload: CategoryCreate, store: GuideStore = Depends(get_store)):
    return store.create_category(payload)
