from fastapi import APIRouter, Depends

from deps import get_store
from stores import GuideStore
from utils import now_iso

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health(store: GuideStore = Depends(get_store)):
    return {
        "ok": True,
        "time": now_iso(),
        "categories": len(store.list_categories()),
        "guides": len(store.list_guides()),
        "strict": store.strict,
    }
