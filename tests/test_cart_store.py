import random
from decimal import Decimal

import pytest

from app.domain.schemas import Artwork, Language
from app.services.cart_store import CartStore
from app.services.client_storage import CART_KEY, LANGUAGE_KEY, MemoryClientStorage


def artwork(artwork_id, price=None):
    return Artwork(
        id=artwork_id,
        title=f"Artwork {artwork_id}",
        image=f"https://img.test/{artwork_id}.jpg",
        for_sale=price is not None,
        price=price,
    )


@pytest.fixture
def store():
    return CartStore(MemoryClientStorage(), "client-1")


def test_totals_for_two_artworks(store):
    store.add(artwork(1, Decimal("10.00")))
    store.add(artwork(2, Decimal("25.50")))

    assert store.total_price() == Decimal("35.50")
    assert store.total_items() == 2


def test_adding_present_artwork_is_noop(store):
    store.add(artwork(1, Decimal("10.00")))
    store.add(artwork(1, Decimal("10.00")))

    assert len(store.items) == 1
    assert store.items[0].quantity == 1
    assert [n.level for n in store.notifications] == ["success", "info"]
    assert store.notifications[-1].message == "This artwork is already in your cart"


@pytest.mark.parametrize("quantity", [0, -1])
def test_non_positive_quantity_removes_item(quantity):
    removed = CartStore(MemoryClientStorage(), "a")
    updated = CartStore(MemoryClientStorage(), "b")
    for s in (removed, updated):
        s.add(artwork(1, Decimal("10.00")))
        s.add(artwork(2, Decimal("5.00")))

    removed.remove(1)
    updated.set_quantity(1, quantity)

    assert [i.artwork.id for i in updated.items] == [i.artwork.id for i in removed.items] == [2]
    assert updated.notifications[-1] == removed.notifications[-1]


def test_set_quantity_updates_totals(store):
    store.add(artwork(1, Decimal("10.00")))
    store.set_quantity(1, 3)

    assert store.total_items() == 3
    assert store.total_price() == Decimal("30.00")


def test_missing_price_counts_as_zero(store):
    store.add(artwork(1))
    store.add(artwork(2, Decimal("7.25")))

    assert store.total_price() == Decimal("7.25")
    assert store.total_items() == 2


def test_totals_match_quantities_over_random_operations():
    rnd = random.Random(1234)
    store = CartStore(MemoryClientStorage(), "client-r")
    prices = {i: (Decimal(rnd.randint(0, 9999)) / 100 if i % 3 else None) for i in range(1, 8)}
    expected = {}

    for _ in range(300):
        artwork_id = rnd.randint(1, 7)
        op = rnd.choice(["add", "remove", "set"])
        if op == "add":
            store.add(artwork(artwork_id, prices[artwork_id]))
            expected.setdefault(artwork_id, 1)
        elif op == "remove":
            store.remove(artwork_id)
            expected.pop(artwork_id, None)
        else:
            qty = rnd.randint(-2, 5)
            store.set_quantity(artwork_id, qty)
            if qty <= 0:
                expected.pop(artwork_id, None)
            elif artwork_id in expected:
                expected[artwork_id] = qty

        assert store.total_items() == sum(expected.values())
        assert store.total_price() == sum(
            ((prices[a] or Decimal("0")) * q for a, q in expected.items()), Decimal("0.00")
        )
        assert all(store.is_present(a) for a in expected)


def test_cart_survives_reload():
    storage = MemoryClientStorage()
    first = CartStore(storage, "client-1")
    first.add(artwork(1, Decimal("10.00")))
    first.add(artwork(2))
    first.set_quantity(2, 4)

    reloaded = CartStore(storage, "client-1")

    assert reloaded.items == first.items
    assert reloaded.total_price() == first.total_price()
    assert CartStore(storage, "client-2").items == []


@pytest.mark.parametrize("payload", ["{not json", '[{"quantity": 1}]', '{"artwork": 1}'])
def test_corrupted_payload_yields_empty_cart(payload):
    storage = MemoryClientStorage()
    storage.set("client-1", CART_KEY, payload)

    store = CartStore(storage, "client-1")

    assert store.items == []
    assert store.total_items() == 0


def test_clear_empties_cart(store):
    store.add(artwork(1, Decimal("10.00")))
    store.clear()

    assert store.is_empty()
    assert CartStore(store.storage, store.client_id).items == []


def test_notifications_follow_language_preference():
    storage = MemoryClientStorage()
    storage.set("client-1", LANGUAGE_KEY, "bg")

    store = CartStore(storage, "client-1")
    store.add(artwork(1, Decimal("10.00")))

    assert store.language == Language.BG
    assert store.notifications[0].message == "Добавено в кошницата"
