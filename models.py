# /models.py
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ----------------------------
# Base: snake_case in Python, camelCase on the wire
# ----------------------------

class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------
# Categories
# ----------------------------

class CategoryCreate(WireModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    parent_id: Optional[int] = None  # root categories have no parent
    icon: Optional[str] = None  # "sword", "shield", "spell", "quest", "character"


class Category(CategoryCreate):
    id: int


class Breadcrumb(WireModel):
    name: str
    path: str
    is_active: bool = False


# ----------------------------
# Guides
# ----------------------------

class GuideCreate(WireModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    excerpt: Optional[str] = None
    content: str = Field(min_length=1)  # markdown body
    category_id: int
    featured_image: Optional[str] = None
    tags: Optional[List[str]] = None
    patch: Optional[str] = None  # e.g. "Patch 5"


class Guide(GuideCreate):
    id: int
    created_at: dt.datetime
    # No guide-editing operation exists; always equal to created_at.
    updated_at: dt.datetime


# ----------------------------
# Recently viewed
# ----------------------------

class RecentlyViewedCreate(WireModel):
    guide_id: int
    session_id: str = Field(min_length=1)  # opaque client token


class RecentlyViewed(RecentlyViewedCreate):
    id: int
    viewed_at: dt.datetime


# ----------------------------
# Community tips
# ----------------------------

class TipCreate(WireModel):
    guide_id: int
    author: str = Field(min_length=1)
    content: str = Field(min_length=1)


class Tip(TipCreate):
    id: int
    created_at: dt.datetime
    helpful_count: int = 0
