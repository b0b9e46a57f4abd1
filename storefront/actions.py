from dataclasses import dataclass
from typing import Any, Sequence, Union

from .domain import Product, User


# ============ Действия (закрытое множество) ============


@dataclass(frozen=True)
class AuthLogin:
    user: User


@dataclass(frozen=True)
class AuthLogout:
    pass


@dataclass(frozen=True)
class CatalogSet:
    """
    products - последовательность (список или кортеж), не генератор:
    повторный dispatch того же действия должен дать тот же каталог
    """

    products: Sequence[Product]


@dataclass(frozen=True)
class CartAdd:
    product: Product


@dataclass(frozen=True)
class CartRemove:
    product_id: Any


Action = Union[AuthLogin, AuthLogout, CatalogSet, CartAdd, CartRemove]


@dataclass(frozen=True)
class StoreInit:
    """
    Служебное действие хранилища при создании.
    Не входит в Action: ни один редьюсер его не обрабатывает,
    поэтому каждый срез получает значение по умолчанию
    """


# ============ Конструкторы действий ============
# Валидации нет: некорректный payload доходит до редьюсера


def login(user: User) -> AuthLogin:
    return AuthLogin(user=user)


def logout() -> AuthLogout:
    return AuthLogout()


def set_products(products: Sequence[Product]) -> CatalogSet:
    return CatalogSet(products=products)


def add_to_cart(product: Product) -> CartAdd:
    return CartAdd(product=product)


def remove_from_cart(product_id: Any) -> CartRemove:
    return CartRemove(product_id=product_id)


def action_kind(action: object) -> str:
    """Имя вида действия (для логов)"""
    return type(action).__name__
