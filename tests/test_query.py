"""Tests for query views."""

from datetime import UTC, datetime, timedelta

import pytest

from catalog_tracker.domain.bags import Bag, BagStyle
from catalog_tracker.domain.looks import MakeupLook
from catalog_tracker.services.bags import BAG_QUERY
from catalog_tracker.services.looks import LOOK_QUERY
from catalog_tracker.services.persistence import CollectionPersistence
from catalog_tracker.services.query import QueryState, QueryView, run_query
from catalog_tracker.services.records import RecordStore
from tests.conftest import InMemoryKeyValueStore

DAY_1 = datetime(2026, 1, 1, tzinfo=UTC)


def _bags(store: RecordStore[Bag]) -> tuple[Bag, Bag]:
    tote = Bag(name="Tote", style=BagStyle.EVERYDAY, created_at=DAY_1)
    clutch = Bag(
        name="Clutch", style=BagStyle.EVENING, created_at=DAY_1 + timedelta(days=1)
    )
    store.add(tote)
    store.add(clutch)
    return tote, clutch


def test_search_is_case_insensitive_substring(bag_store: RecordStore[Bag]) -> None:
    tote, _ = _bags(bag_store)
    view = QueryView(bag_store, BAG_QUERY)

    view.search("tot")

    assert view.results() == [tote]


def test_default_sort_is_newest_first(bag_store: RecordStore[Bag]) -> None:
    tote, clutch = _bags(bag_store)

    assert QueryView(bag_store, BAG_QUERY).results() == [clutch, tote]


def test_search_checks_secondary_field(bag_store: RecordStore[Bag]) -> None:
    dior = Bag(name="Saddle", brand="Dior")
    bag_store.add(dior)
    bag_store.add(Bag(name="Basket", brand="Zara"))
    view = QueryView(bag_store, BAG_QUERY)

    view.search("DIOR")

    assert view.results() == [dior]


def test_blank_search_means_no_text_filter(bag_store: RecordStore[Bag]) -> None:
    _bags(bag_store)
    view = QueryView(bag_store, BAG_QUERY)

    view.search("   ")

    assert len(view.results()) == 2


def test_filter_composition_matches_explicit_filters(
    bag_store: RecordStore[Bag],
) -> None:
    for name, style in [
        ("Tote", BagStyle.EVERYDAY),
        ("Travel tote", BagStyle.TRAVEL),
        ("Mini tote", BagStyle.EVERYDAY),
        ("Clutch", BagStyle.EVENING),
    ]:
        bag_store.add(Bag(name=name, style=style))
    state = QueryState(
        filter_axis="style", filter_value=BagStyle.EVERYDAY, search_text="tote"
    )

    results = run_query(bag_store.all(), BAG_QUERY, state)

    expected = [
        bag
        for bag in bag_store.all()
        if bag.style == BagStyle.EVERYDAY and "tote" in bag.name.lower()
    ]
    assert sorted(b.id for b in results) == sorted(b.id for b in expected)


def test_selecting_axis_clears_previous_axis(bag_store: RecordStore[Bag]) -> None:
    evening = Bag(name="Clutch", style=BagStyle.EVENING)
    favorite = Bag(name="Tote", is_favorite=True)
    bag_store.add(evening)
    bag_store.add(favorite)
    view = QueryView(bag_store, BAG_QUERY)

    view.filter_by("style", BagStyle.EVENING)
    view.filter_by("favorites", True)

    assert view.state.filter_axis == "favorites"
    assert view.results() == [favorite]

    view.clear_filter()
    assert len(view.results()) == 2


def test_enum_filter_accepts_raw_value(bag_store: RecordStore[Bag]) -> None:
    _, clutch = _bags(bag_store)
    view = QueryView(bag_store, BAG_QUERY)

    view.filter_by("style", "evening")

    assert view.results() == [clutch]


def test_unknown_axis_and_sort_are_rejected(bag_store: RecordStore[Bag]) -> None:
    view = QueryView(bag_store, BAG_QUERY)

    with pytest.raises(ValueError, match="Unknown filter axis"):
        view.filter_by("size", "large")
    with pytest.raises(ValueError, match="Unknown sort option"):
        view.sort_by("price")


def test_alphabetical_sort_is_stable(bag_store: RecordStore[Bag]) -> None:
    first = Bag(name="tote", created_at=DAY_1)
    second = Bag(name="Tote", created_at=DAY_1 + timedelta(days=1))
    other = Bag(name="Backpack")
    for bag in (first, second, other):
        bag_store.add(bag)
    view = QueryView(bag_store, BAG_QUERY)

    view.sort_by("name")

    assert view.results() == [other, first, second]


def test_last_used_sort_puts_unused_last(bag_store: RecordStore[Bag]) -> None:
    never = Bag(name="Never")
    recent = Bag(name="Recent", last_used_at=DAY_1 + timedelta(days=5))
    older = Bag(name="Older", last_used_at=DAY_1)
    for bag in (never, older, recent):
        bag_store.add(bag)
    view = QueryView(bag_store, BAG_QUERY)

    view.sort_by("last_used")

    assert view.results() == [recent, older, never]


def test_search_matches_any_shade(kv_store: InMemoryKeyValueStore) -> None:
    store = RecordStore(CollectionPersistence(kv_store, "looks", MakeupLook))
    smoky = MakeupLook(name="Smoky", main_shades=("Charcoal", "Plum"))
    store.add(smoky)
    store.add(MakeupLook(name="Fresh", main_shades=("Peach",)))
    view = QueryView(store, LOOK_QUERY)

    view.search("plum")

    assert view.results() == [smoky]


def test_view_reflects_store_changes(bag_store: RecordStore[Bag]) -> None:
    view = QueryView(bag_store, BAG_QUERY)
    assert view.results() == []

    bag = Bag(name="Tote")
    bag_store.add(bag)

    assert view.results() == [bag]
