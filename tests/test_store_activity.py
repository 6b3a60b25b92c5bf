import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import datetime as dt  # noqa: E402
import itertools  # noqa: E402

from models import CategoryCreate, GuideCreate, RecentlyViewedCreate, TipCreate  # noqa: E402
from stores import GuideStore  # noqa: E402

START = dt.datetime(2024, 8, 1, tzinfo=dt.timezone.utc)


def ticking_clock(step_seconds: int = 1):
    counter = itertools.count()
    return lambda: START + dt.timedelta(seconds=step_seconds * next(counter))


def frozen_clock():
    return START


def view(store: GuideStore, guide_id: int, session_id: str):
    return store.add_recently_viewed(RecentlyViewedCreate(guide_id=guide_id, session_id=session_id))


def test_recently_viewed_most_recent_first_without_dedup():
    store = GuideStore(clock=ticking_clock())
    first = view(store, 3, "x")
    second = view(store, 3, "x")
    latest = view(store, 4, "x")

    assert store.list_recently_viewed("x", limit=5) == [latest, second, first]


def test_recently_viewed_same_tick_still_newest_first():
    store = GuideStore(clock=frozen_clock)
    entries = [view(store, gid, "x") for gid in (1, 2, 3)]

    assert store.list_recently_viewed("x") == list(reversed(entries))


def test_recently_viewed_is_scoped_to_session_and_limited():
    store = GuideStore(clock=ticking_clock())
    for gid in range(1, 9):
        view(store, gid, "mine")
    view(store, 99, "theirs")

    listed = store.list_recently_viewed("mine", limit=5)

    assert len(listed) == 5
    assert all(e.session_id == "mine" for e in listed)
    assert [e.guide_id for e in listed] == [8, 7, 6, 5, 4]
    assert store.list_recently_viewed("mine") == listed
    assert store.list_recently_viewed("nobody") == []


def test_create_tip_starts_at_zero():
    store = GuideStore(clock=ticking_clock())
    tip = store.create_tip(TipCreate(guide_id=1, author="TavernWanderer", content="Use the high ground."))

    assert tip.id == 1
    assert tip.helpful_count == 0
    assert tip.created_at == START


def test_tips_listed_newest_first_per_guide():
    store = GuideStore(clock=ticking_clock())
    older = store.create_tip(TipCreate(guide_id=1, author="a", content="first"))
    store.create_tip(TipCreate(guide_id=2, author="b", content="elsewhere"))
    newer = store.create_tip(TipCreate(guide_id=1, author="c", content="second"))

    assert store.list_tips_by_guide(1) == [newer, older]
    assert store.list_tips_by_guide(3) == []


def test_increment_helpful_twice_adds_two():
    store = GuideStore()
    tip = store.create_tip(TipCreate(guide_id=1, author="a", content="tip"))

    store.increment_helpful(tip.id)
    updated = store.increment_helpful(tip.id)

    assert updated.helpful_count == 2
    assert store.list_tips_by_guide(1)[0].helpful_count == 2


def test_increment_helpful_unknown_tip_changes_nothing():
    store = GuideStore()
    tip = store.create_tip(TipCreate(guide_id=1, author="a", content="tip"))

    assert store.increment_helpful(tip.id + 1) is None
    assert store.list_tips_by_guide(1) == [tip]


def test_each_entity_type_counts_ids_on_its_own():
    store = GuideStore()
    tip = store.create_tip(TipCreate(guide_id=1, author="a", content="tip"))
    entry = view(store, 1, "s")
    guide = store.create_guide(GuideCreate(title="G", slug="g", content="c", category_id=1))
    category = store.create_category(CategoryCreate(name="C", slug="c"))

    assert (category.id, guide.id, entry.id, tip.id) == (1, 1, 1, 1)

    second_tip = store.create_tip(TipCreate(guide_id=1, author="b", content="again"))
    second_category = store.create_category(CategoryCreate(name="D", slug="d"))
    assert (second_category.id, second_tip.id) == (2, 2)
