import logging
from typing import Any, Callable, Optional, Sequence

from .actions import add_to_cart, login, logout, remove_from_cart
from .catalog import fetch_products, load_catalog
from .domain import Product, User
from .ftypes import Either
from .store import Store

logger = logging.getLogger(__name__)

CatalogFetcher = Callable[[], Either[dict, Sequence[Product]]]


class StorefrontService:
    """
    Фасад: события интерфейса -> действия хранилища.
    fetch_catalog - источник каталога (по умолчанию HTTP Fake Store API)
    """

    def __init__(self, store: Store, fetch_catalog: CatalogFetcher = fetch_products):
        self.store = store
        self.fetch_catalog = fetch_catalog

    def login(self, email: str, password: Optional[str] = None) -> User:
        """
        Фиктивный вход: пароль не проверяется и не сохраняется
        """
        user = User(email=email, name=email.split("@", 1)[0])
        self.store.dispatch(login(user))
        logger.info("User %s logged in", email)
        return user

    def logout(self) -> None:
        self.store.dispatch(logout())

    def add_to_cart(self, product: Product) -> None:
        self.store.dispatch(add_to_cart(product))

    def remove_from_cart(self, product_id: Any) -> None:
        self.store.dispatch(remove_from_cart(product_id))

    def load_catalog(self, result: Either[dict, Sequence[Product]]) -> bool:
        return load_catalog(self.store, result)

    def refresh_catalog(self) -> bool:
        """Загрузка каталога из источника и передача в хранилище"""
        return self.load_catalog(self.fetch_catalog())
