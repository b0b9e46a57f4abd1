from typing import Optional

from .actions import (
    Action,
    AuthLogin,
    AuthLogout,
    CartAdd,
    CartRemove,
    CatalogSet,
)
from .domain import AuthState, CartState, CatalogState


# ============ Редьюсеры (чистые функции) ============
# (state, action) -> state. Неизвестное действие возвращает тот же объект state


def auth_reducer(state: Optional[AuthState], action: Action) -> AuthState:
    """Сессия пользователя: is_authenticated истинно тогда и только тогда, когда есть user"""
    if state is None:
        state = AuthState()

    match action:
        case AuthLogin(user=user):
            return AuthState(user=user, is_authenticated=True)
        case AuthLogout():
            return AuthState(user=None, is_authenticated=False)
        case _:
            return state


def catalog_reducer(state: Optional[CatalogState], action: Action) -> CatalogState:
    """
    Каталог заменяется целиком, порядок как у источника.
    Без дедупликации и проверок: источнику доверяем
    """
    if state is None:
        state = CatalogState()

    match action:
        case CatalogSet(products=products):
            return CatalogState(items=tuple(products))
        case _:
            return state


def cart_reducer(state: Optional[CartState], action: Action) -> CartState:
    """
    Корзина - последовательность, а не множество:
    CartAdd дописывает в конец даже при совпадении id,
    CartRemove убирает ВСЕ позиции с данным id
    """
    if state is None:
        state = CartState()

    match action:
        case CartAdd(product=product):
            return CartState(cart_items=state.cart_items + (product,))
        case CartRemove(product_id=product_id):
            return CartState(
                cart_items=tuple(
                    filter(lambda item: item.id != product_id, state.cart_items)
                )
            )
        case _:
            return state
