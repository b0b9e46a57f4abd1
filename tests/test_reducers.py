import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from dataclasses import dataclass
from decimal import Decimal

import pytest

from storefront.actions import (
    add_to_cart,
    login,
    logout,
    remove_from_cart,
    set_products,
)
from storefront.domain import AuthState, CartState, CatalogState, Product, User
from storefront.reducers import auth_reducer, cart_reducer, catalog_reducer


@dataclass(frozen=True)
class UnknownAction:
    payload: object = None


PHONE = Product(id=1, title="Phone", price=Decimal("10"))
LAPTOP = Product(id=2, title="Laptop", price=Decimal("20"))
CABLE = Product(id=3, title="Cable", price=Decimal("1.50"))


# ============ Auth ============


@pytest.mark.parametrize(
    "state",
    [
        AuthState(),
        AuthState(user=User(email="old@b.com"), is_authenticated=True),
    ],
)
def test_login_sets_user_and_flag(state):
    """AuthLogin из любого состояния даёт вошедшего пользователя"""
    user = User(email="a@b.com")
    new_state = auth_reducer(state, login(user))

    assert new_state.is_authenticated is True
    assert new_state.user == user


def test_logout_clears_user():
    state = AuthState(user=User(email="a@b.com"), is_authenticated=True)
    new_state = auth_reducer(state, logout())

    assert new_state.is_authenticated is False
    assert new_state.user is None


def test_auth_default_state():
    """state=None -> значение по умолчанию"""
    assert auth_reducer(None, UnknownAction()) == AuthState(
        user=None, is_authenticated=False
    )


def test_auth_ignores_foreign_actions_by_identity():
    state = AuthState()
    for action in (UnknownAction(), add_to_cart(PHONE), set_products([PHONE])):
        assert auth_reducer(state, action) is state


# ============ Catalog ============


def test_set_products_replaces_in_order():
    state = CatalogState(items=(CABLE,))
    new_state = catalog_reducer(state, set_products([LAPTOP, PHONE]))

    assert new_state.items == (LAPTOP, PHONE)


def test_set_products_keeps_duplicates_and_empty():
    """Каталог не проверяется: дубликаты и пустой список принимаются как есть"""
    state = CatalogState(items=(PHONE,))

    assert catalog_reducer(state, set_products([PHONE, PHONE])).items == (PHONE, PHONE)
    assert catalog_reducer(state, set_products([])).items == ()


def test_set_products_idempotent():
    once = catalog_reducer(CatalogState(), set_products([PHONE, LAPTOP]))
    twice = catalog_reducer(once, set_products([PHONE, LAPTOP]))

    assert once == twice


def test_redispatch_same_action_gives_same_catalog():
    """Повторный dispatch того же действия не теряет товары"""
    action = set_products([PHONE, LAPTOP])
    once = catalog_reducer(CatalogState(), action)
    twice = catalog_reducer(once, action)

    assert twice.items == once.items == (PHONE, LAPTOP)


def test_set_products_keeps_tuple_payload():
    products = (PHONE, LAPTOP)
    assert catalog_reducer(CatalogState(), set_products(products)).items is products


def test_catalog_ignores_foreign_actions_by_identity():
    state = CatalogState(items=(PHONE,))
    assert catalog_reducer(state, login(User(email="a@b.com"))) is state
    assert catalog_reducer(state, UnknownAction()) is state


# ============ Cart ============


@pytest.mark.parametrize("items", [(), (PHONE,), (PHONE, LAPTOP)])
def test_add_appends_to_end(items):
    state = CartState(cart_items=items)
    new_state = cart_reducer(state, add_to_cart(CABLE))

    assert len(new_state.cart_items) == len(items) + 1
    assert new_state.cart_items[-1] == CABLE
    assert new_state.cart_items[:-1] == items


def test_add_same_product_twice_gives_two_entries():
    state = cart_reducer(CartState(), add_to_cart(PHONE))
    state = cart_reducer(state, add_to_cart(PHONE))

    assert state.cart_items == (PHONE, PHONE)


def test_remove_drops_all_entries_with_id():
    state = CartState(cart_items=(PHONE, LAPTOP, PHONE, CABLE))
    new_state = cart_reducer(state, remove_from_cart(1))

    assert new_state.cart_items == (LAPTOP, CABLE)
    assert all(item.id != 1 for item in new_state.cart_items)


def test_remove_absent_id_is_content_equal():
    state = CartState(cart_items=(PHONE, LAPTOP))
    new_state = cart_reducer(state, remove_from_cart(999))

    assert new_state == state
    assert new_state is not state


def test_cart_does_not_mutate_input():
    items = (PHONE,)
    state = CartState(cart_items=items)
    cart_reducer(state, add_to_cart(LAPTOP))
    cart_reducer(state, remove_from_cart(1))

    assert state.cart_items is items
    assert state.cart_items == (PHONE,)


def test_cart_default_and_foreign_actions():
    assert cart_reducer(None, UnknownAction()) == CartState(cart_items=())

    state = CartState(cart_items=(PHONE,))
    assert cart_reducer(state, logout()) is state
