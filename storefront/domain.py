from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    price: Decimal
    description: str = ""
    image: str = ""
    category: str = ""


@dataclass(frozen=True)
class User:
    email: str
    name: str = ""  # пароль не храним: авторизация фиктивная


# ============ Состояния срезов ============


@dataclass(frozen=True)
class AuthState:
    user: Optional[User] = None
    is_authenticated: bool = False


@dataclass(frozen=True)
class CatalogState:
    items: Tuple[Product, ...] = ()


@dataclass(frozen=True)
class CartState:
    cart_items: Tuple[Product, ...] = ()


@dataclass(frozen=True)
class AppState:
    """
    Дерево состояния приложения.
    Ключи фиксированы: auth, products, cart
    """

    auth: AuthState = AuthState()
    products: CatalogState = CatalogState()
    cart: CartState = CartState()
