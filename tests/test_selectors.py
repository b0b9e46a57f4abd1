import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from decimal import Decimal

import pytest

from storefront.actions import add_to_cart, login, set_products
from storefront.domain import Product, User
from storefront.selectors import (
    select_cart_count,
    select_cart_items,
    select_cart_total,
    select_featured_products,
    select_is_authenticated,
    select_products,
    select_user,
)
from storefront.store import create_store


@pytest.fixture
def catalog():
    return tuple(
        Product(id=i, title=f"Item {i}", price=Decimal("1.10") * i) for i in range(1, 9)
    )


@pytest.fixture
def store(catalog):
    store = create_store()
    store.dispatch(set_products(catalog))
    return store


def test_featured_products_are_first_six(store, catalog):
    state = store.get_state()

    assert select_products(state) == catalog
    assert select_featured_products(state) == catalog[:6]
    assert select_featured_products(state, 3) == catalog[:3]
    assert select_featured_products(state, 0) == ()


def test_cart_total_counts_duplicates(store, catalog):
    store.dispatch(add_to_cart(catalog[0]))
    store.dispatch(add_to_cart(catalog[0]))
    store.dispatch(add_to_cart(catalog[2]))
    state = store.get_state()

    assert select_cart_items(state) == (catalog[0], catalog[0], catalog[2])
    assert select_cart_count(state) == 3
    assert select_cart_total(state) == Decimal("5.50")


def test_cart_total_empty(store):
    assert select_cart_total(store.get_state()) == Decimal("0")


def test_cart_total_accepts_float_prices():
    store = create_store()
    store.dispatch(add_to_cart(Product(id=1, title="A", price=109.95)))
    store.dispatch(add_to_cart(Product(id=2, title="B", price=22.3)))

    assert select_cart_total(store.get_state()) == Decimal("132.25")


def test_user_selectors(store):
    assert not select_is_authenticated(store.get_state())
    assert select_user(store.get_state()).is_none()

    store.dispatch(login(User(email="a@b.com")))

    assert select_is_authenticated(store.get_state())
    assert select_user(store.get_state()).get_or_else(None).email == "a@b.com"
