from decimal import Decimal
from functools import reduce
from typing import Tuple

from .compose import pipe
from .domain import AppState, Product, User
from .ftypes import Maybe


# ============ Селекторы (производные данные для представлений) ============


def select_products(state: AppState) -> Tuple[Product, ...]:
    return state.products.items


def select_featured_products(state: AppState, count: int = 6) -> Tuple[Product, ...]:
    """Первые count товаров каталога для главной страницы"""
    return select_products(state)[: max(count, 0)]


def select_cart_items(state: AppState) -> Tuple[Product, ...]:
    return state.cart.cart_items


def select_cart_count(state: AppState) -> int:
    return len(select_cart_items(state))


def _sum_prices(items: Tuple[Product, ...]) -> Decimal:
    return reduce(lambda acc, item: acc + Decimal(str(item.price)), items, Decimal("0"))


# Сумма корзины: дубликаты считаются отдельными позициями
select_cart_total = pipe(select_cart_items, _sum_prices)


def select_is_authenticated(state: AppState) -> bool:
    return state.auth.is_authenticated


def select_user(state: AppState) -> Maybe[User]:
    return Maybe.from_optional(state.auth.user)
