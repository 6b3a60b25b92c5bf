import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import datetime as dt  # noqa: E402

from models import CategoryCreate, GuideCreate  # noqa: E402
from stores import GuideStore  # noqa: E402


def make_guide(store: GuideStore, slug: str, category_id: int = 7, **fields):
    data = {"title": slug.replace("-", " ").title(), "content": "Body text.", **fields}
    return store.create_guide(GuideCreate(slug=slug, category_id=category_id, **data))


def test_create_guide_stamps_both_timestamps():
    moment = dt.datetime(2024, 8, 1, 12, 0, tzinfo=dt.timezone.utc)
    store = GuideStore(clock=lambda: moment)

    guide = make_guide(store, "fighter-class-guide", tags=["Melee"], patch="Patch 5")

    assert guide.id == 1
    assert guide.created_at == moment
    assert guide.updated_at == moment
    assert guide.tags == ["Melee"]
    assert store.get_guide(1) == guide
    assert store.get_guide_by_slug("fighter-class-guide") == guide
    assert store.get_guide(2) is None


def test_list_guides_by_category():
    store = GuideStore()
    a = make_guide(store, "a", category_id=1)
    make_guide(store, "b", category_id=2)
    c = make_guide(store, "c", category_id=1)

    assert store.list_guides_by_category(1) == [a, c]
    assert store.list_guides_by_category(99) == []


def test_search_is_case_insensitive():
    store = GuideStore()
    make_guide(store, "fighter-class-guide", title="Fighter Class Guide")
    make_guide(store, "wizard-guide", title="Wizard Guide")

    upper = store.search_guides("FIGHTER")
    lower = store.search_guides("fighter")

    assert upper == lower
    assert [g.slug for g in upper] == ["fighter-class-guide"]


def test_search_matches_title_excerpt_or_content():
    store = GuideStore()
    by_title = make_guide(store, "t", title="Action Surge explained")
    by_excerpt = make_guide(store, "e", title="Other", excerpt="all about ACTION surge")
    by_content = make_guide(store, "c", title="Third", content="Use action surge wisely.")
    make_guide(store, "n", title="Nothing here", excerpt=None, content="Second Wind only.")

    assert store.search_guides("action surge") == [by_title, by_excerpt, by_content]
    assert store.search_guides("no such phrase") == []


def test_related_guides_same_category_without_self():
    store = GuideStore()
    a = make_guide(store, "a", category_id=7)
    b = make_guide(store, "b", category_id=7)
    make_guide(store, "other", category_id=8)

    assert store.get_related_guides(a.id, limit=3) == [b]


def test_related_guides_respects_limit_in_storage_order():
    store = GuideStore()
    guides = [make_guide(store, f"g{i}", category_id=3) for i in range(6)]

    related = store.get_related_guides(guides[2].id, limit=3)

    assert related == [guides[0], guides[1], guides[3]]
    assert store.get_related_guides(guides[0].id) == guides[1:4]
    assert store.get_related_guides(guides[0].id, limit=0) == []


def test_related_guides_unknown_id_is_empty():
    store = GuideStore()
    make_guide(store, "a")
    assert store.get_related_guides(404) == []


def test_guide_breadcrumbs_append_guide_after_category_trail():
    store = GuideStore()
    classes = store.create_category(CategoryCreate(name="Classes", slug="classes"))
    fighter = store.create_category(CategoryCreate(name="Fighter", slug="fighter", parent_id=classes.id))
    guide = make_guide(store, "battle-master", category_id=fighter.id, title="Battle Master")

    trail = store.guide_breadcrumbs(guide.id)

    assert [b.name for b in trail] == ["Home", "Classes", "Fighter", "Battle Master"]
    assert [b.is_active for b in trail] == [False, False, False, True]
    assert trail[-1].path == "/guides/battle-master"
    # the category trail itself is left untouched
    assert store.category_breadcrumbs(fighter.id)[-1].is_active is True


def test_guide_breadcrumbs_unknown_category_or_guide():
    store = GuideStore()
    guide = make_guide(store, "lost", category_id=99, title="Lost")

    assert [b.name for b in store.guide_breadcrumbs(guide.id)] == ["Home", "Lost"]
    assert store.guide_breadcrumbs(guide.id + 1) is None
