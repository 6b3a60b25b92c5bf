# routes/tips.py
# Community tips attached to guides.

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from deps import get_store
from models import Tip, TipCreate
from stores import GuideStore

router = APIRouter(prefix="/api", tags=["tips"])


@router.get("/guides/{guide_id}/tips", response_model=List[Tip])
def list_tips(guide_id: int, store: GuideStore = Depends(get_store)):
    """Newest first."""
    return store.list_tips_by_guide(guide_id)


@router.post("/tips", response_model=Tip, status_code=201)
def create_tip(payload: TipCreate, store: GuideStore = Depends(get_store)):
    return store.create_tip(payload)


@router.post("/tips/{tip_id}/helpful", response_model=Tip)
def mark_tip_helpful(tip_id: int, store: GuideStore = Depends(get_store)):
    # Not idempotent: "already marked" tracking belongs to the client.
    tip = store.increment_helpful(tip_id)
    if not tip:
        raise HTTPException(status_code=404, detail="Tip not found")
    return tip
