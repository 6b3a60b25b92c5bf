# stores.py
# In-memory guide store: categories, guides, recently viewed entries and tips.

import datetime as dt
import threading
from typing import Callable, Dict, List, Optional

import structlog

from models import (
    Breadcrumb,
    Category,
    CategoryCreate,
    Guide,
    GuideCreate,
    RecentlyViewed,
    RecentlyViewedCreate,
    Tip,
    TipCreate,
)
from utils import utc_now

logger = structlog.get_logger("stores")

DEFAULT_RELATED_LIMIT = 3
DEFAULT_RECENT_LIMIT = 5


class StoreError(ValueError):
    """Raised by a strict store when a create would break integrity."""


class DuplicateSlugError(StoreError):
    def __init__(self, kind: str, slug: str):
        super().__init__(f"{kind} slug already in use: {slug}")
        self.kind = kind
        self.slug = slug


class InvalidReferenceError(StoreError):
    def __init__(self, field: str, value: int):
        super().__init__(f"{field} does not reference an existing record: {value}")
        self.field = field
        self.value = value


class CategoryDepthError(StoreError):
    def __init__(self, parent_id: int):
        super().__init__(f"parentId {parent_id} is itself a subcategory; categories nest one level only")
        self.parent_id = parent_id


class GuideStore:
    """Single owner of every entity collection.

    Each collection is a dict keyed by the integer id the store assigned, so
    iteration follows insertion order. Ids start at 1 and are counted per
    entity type.

    Lookups return ``None`` (single record) or ``[]`` (collections) when
    nothing matches; they never raise. With ``strict=True`` the create
    operations additionally reject duplicate slugs, references to records
    that do not exist and subcategories nested under a subcategory; with the default ``strict=False`` both are accepted
    silently and later slug lookups return the first match.

    One re-entrant lock guards all four collections: route handlers run on a
    thread pool.
    """

    def __init__(
        self,
        clock: Callable[[], dt.datetime] = utc_now,
        strict: bool = False,
    ) -> None:
        self._clock = clock
        self.strict = strict
        self._lock = threading.RLock()

        self._categories: Dict[int, Category] = {}
        self._guides: Dict[int, Guide] = {}
        self._recently_viewed: Dict[int, RecentlyViewed] = {}
        self._tips: Dict[int, Tip] = {}

        self._next_category_id = 1
        self._next_guide_id = 1
        self._next_recently_viewed_id = 1
        self._next_tip_id = 1

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> List[Category]:
        with self._lock:
            return list(self._categories.values())

    def get_category(self, category_id: int) -> Optional[Category]:
        with self._lock:
            return self._categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        with self._lock:
            return next((c for c in self._categories.values() if c.slug == slug), None)

    def list_subcategories(self, parent_id: int) -> List[Category]:
        with self._lock:
            return [c for c in self._categories.values() if c.parent_id == parent_id]

    def list_root_categories(self) -> List[Category]:
        with self._lock:
            return [c for c in self._categories.values() if c.parent_id is None]

    def category_breadcrumbs(self, category_id: int) -> Optional[List[Breadcrumb]]:
        """Navigation trail ``Home > [parent >] category``; ``None`` if unknown."""
        with self._lock:
            category = self._categories.get(category_id)
            if category is None:
                return None
            items = [Breadcrumb(name="Home", path="/")]
            if category.parent_id is not None:
                parent = self._categories.get(category.parent_id)
                if parent is not None:
                    items.append(Breadcrumb(name=parent.name, path=f"/categories/{parent.slug}"))
            items.append(
                Breadcrumb(name=category.name, path=f"/categories/{category.slug}", is_active=True)
            )
            return items

    def guide_breadcrumbs(self, guide_id: int) -> Optional[List[Breadcrumb]]:
        """Category trail with the guide appended as the active item."""
        with self._lock:
            guide = self._guides.get(guide_id)
            if guide is None:
                return None
            items = self.category_breadcrumbs(guide.category_id) or [Breadcrumb(name="Home", path="/")]
            items[-1] = items[-1].model_copy(update={"is_active": False})
            items.append(Breadcrumb(name=guide.title, path=f"/guides/{guide.slug}", is_active=True))
            return items

    def create_category(self, data: CategoryCreate) -> Category:
        with self._lock:
            if self.strict:
                if any(c.slug == data.slug for c in self._categories.values()):
                    raise DuplicateSlugError("category", data.slug)
                if data.parent_id is not None:
                    parent = self._categories.get(data.parent_id)
                    if parent is None:
                        raise InvalidReferenceError("parentId", data.parent_id)
                    if parent.parent_id is not None:
                        raise CategoryDepthError(data.parent_id)

            category = Category(id=self._next_category_id, **data.model_dump())
            self._next_category_id += 1
            self._categories[category.id] = category

        logger.info("category_created", category_id=category.id, slug=category.slug, parent_id=category.parent_id)
        return category

    # ------------------------------------------------------------------
    # Guides
    # ------------------------------------------------------------------

    def list_guides(self) -> List[Guide]:
        with self._lock:
            return list(self._guides.values())

    def list_guides_by_category(self, category_id: int) -> List[Guide]:
        with self._lock:
            return [g for g in self._guides.values() if g.category_id == category_id]

    def get_guide(self, guide_id: int) -> Optional[Guide]:
        with self._lock:
            return self._guides.get(guide_id)

    def get_guide_by_slug(self, slug: str) -> Optional[Guide]:
        with self._lock:
            return next((g for g in self._guides.values() if g.slug == slug), None)

    def create_guide(self, data: GuideCreate) -> Guide:
        with self._lock:
            if self.strict:
                if any(g.slug == data.slug for g in self._guides.values()):
                    raise DuplicateSlugError("guide", data.slug)
                if data.category_id not in self._categories:
                    raise InvalidReferenceError("categoryId", data.category_id)

            now = self._clock()
            guide = Guide(id=self._next_guide_id, created_at=now, updated_at=now, **data.model_dump())
            self._next_guide_id += 1
            self._guides[guide.id] = guide

        logger.info("guide_created", guide_id=guide.id, slug=guide.slug, category_id=guide.category_id)
        return guide

    def search_guides(self, query: str) -> List[Guide]:
        """Case-insensitive substring match on title, excerpt and content."""
        needle = query.lower()
        with self._lock:
            return [
                g for g in self._guides.values()
                if needle in g.title.lower()
                or (g.excerpt is not None and needle in g.excerpt.lower())
                or needle in g.content.lower()
            ]

    def get_related_guides(self, guide_id: int, limit: int = DEFAULT_RELATED_LIMIT) -> List[Guide]:
        """Other guides from the same category, in storage order, capped at ``limit``."""
        with self._lock:
            guide = self._guides.get(guide_id)
            if guide is None:
                return []
            related = [
                g for g in self._guides.values()
                if g.id != guide_id and g.category_id == guide.category_id
            ]
            return related[:max(limit, 0)]

    # ------------------------------------------------------------------
    # Recently viewed
    # ------------------------------------------------------------------

    def list_recently_viewed(self, session_id: str, limit: int = DEFAULT_RECENT_LIMIT) -> List[RecentlyViewed]:
        with self._lock:
            entries = [e for e in self._recently_viewed.values() if e.session_id == session_id]
        # Same-tick inserts fall back to id order so the newest still comes first.
        entries.sort(key=lambda e: (e.viewed_at, e.id), reverse=True)
        return entries[:max(limit, 0)]

    def add_recently_viewed(self, data: RecentlyViewedCreate) -> RecentlyViewed:
        with self._lock:
            if self.strict and data.guide_id not in self._guides:
                raise InvalidReferenceError("guideId", data.guide_id)

            entry = RecentlyViewed(
                id=self._next_recently_viewed_id,
                viewed_at=self._clock(),
                **data.model_dump(),
            )
            self._next_recently_viewed_id += 1
            self._recently_viewed[entry.id] = entry

        logger.info("guide_viewed", entry_id=entry.id, guide_id=entry.guide_id, session_id=entry.session_id)
        return entry

    # ------------------------------------------------------------------
    # Tips
    # ------------------------------------------------------------------

    def list_tips_by_guide(self, guide_id: int) -> List[Tip]:
        with self._lock:
            tips = [t for t in self._tips.values() if t.guide_id == guide_id]
        tips.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        return tips

    def create_tip(self, data: TipCreate, helpful_count: int = 0) -> Tip:
        with self._lock:
            if self.strict and data.guide_id not in self._guides:
                raise InvalidReferenceError("guideId", data.guide_id)

            tip = Tip(
                id=self._next_tip_id,
                created_at=self._clock(),
                helpful_count=helpful_count,
                **data.model_dump(),
            )
            self._next_tip_id += 1
            self._tips[tip.id] = tip

        logger.info("tip_created", tip_id=tip.id, guide_id=tip.guide_id)
        return tip

    def increment_helpful(self, tip_id: int) -> Optional[Tip]:
        """Add exactly one to the tip's helpful count; ``None`` if unknown."""
        with self._lock:
            tip = self._tips.get(tip_id)
            if tip is None:
                return None
            updated = tip.model_copy(update={"helpful_count": tip.helpful_count + 1})
            self._tips[tip_id] = updated

        logger.info("tip_marked_helpful", tip_id=tip_id, helpful_count=updated.helpful_count)
        return updated
