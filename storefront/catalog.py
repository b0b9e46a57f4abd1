import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Sequence, Optional, Tuple

import httpx

from .actions import set_products
from .domain import Product
from .ftypes import Either

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://fakestoreapi.com/products"
DEFAULT_TIMEOUT = 10.0

# Ошибки разбора записей каталога
PARSE_ERRORS = (KeyError, TypeError, ValueError, InvalidOperation)


# ============ Разбор записей каталога ============


def product_from_dict(raw: Dict[str, Any]) -> Product:
    """
    Запись каталога -> Product.
    Цена переводится в Decimal через строку, чтобы 109.95 не превратилось в 109.9500000000000028...
    """
    return Product(
        id=raw["id"],
        title=str(raw["title"]),
        price=Decimal(str(raw["price"])),
        description=str(raw.get("description", "")),
        image=str(raw.get("image", "")),
        category=str(raw.get("category", "")),
    )


def parse_products(payload: Any) -> Tuple[Product, ...]:
    """Список записей (или {"products": [...]}) -> кортеж Product в исходном порядке"""
    if isinstance(payload, dict):
        # Объект без "products" (например, ошибка API) - KeyError, а не пустой каталог
        payload = payload["products"]
    if not isinstance(payload, list):
        raise TypeError(f"Expected a list of products, got {type(payload).__name__}")
    return tuple(map(product_from_dict, payload))


def load_seed(path: str) -> Tuple[Product, ...]:
    """Загружает каталог из локального JSON (для работы без сети)"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_products(data)


def read_seed(path: str) -> Either[dict, Tuple[Product, ...]]:
    """load_seed -> Either: нет файла или битый JSON дают Left, как и HTTP-источник"""
    try:
        return Either.right(load_seed(path))
    except OSError as e:
        logger.warning("Seed catalog unreadable: %s", e)
        return Either.left({"error": f"Seed catalog unreadable: {e}"})
    except PARSE_ERRORS as e:
        logger.warning("Seed catalog malformed: %s", e)
        return Either.left({"error": f"Malformed catalog payload: {e}"})


# ============ HTTP-источник ============


def decode_response(response: httpx.Response) -> Either[dict, Tuple[Product, ...]]:
    """Ответ каталога -> Either (общий для sync и async клиентов)"""
    try:
        response.raise_for_status()
        return Either.right(parse_products(response.json()))
    except httpx.HTTPStatusError as e:
        return Either.left(
            {"error": f"Catalog responded with HTTP {e.response.status_code}"}
        )
    except PARSE_ERRORS as e:
        return Either.left({"error": f"Malformed catalog payload: {e}"})


def fetch_products(
    url: str = DEFAULT_CATALOG_URL,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Either[dict, Tuple[Product, ...]]:
    """
    Получает все товары каталога -> Either[error, products]
    Left({"error": ...}) при сетевой ошибке, не-2xx ответе или кривом JSON
    """
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.get(url)
    except httpx.RequestError as e:
        logger.warning("Catalog fetch failed: %s", e)
        return Either.left({"error": f"Catalog unavailable: {e}"})

    result = decode_response(response)
    if result.is_left:
        logger.warning("Catalog fetch failed: %s", result.value["error"])
    else:
        logger.info("Fetched %d products from %s", len(result.value), url)
    return result


# ============ Загрузка в хранилище ============


def load_catalog(store, result: Either[dict, Sequence[Product]]) -> bool:
    """
    Right -> один dispatch CatalogSet, Left -> только запись в лог.
    Ядро видит лишь успешные загрузки
    """

    def on_error(error: dict) -> bool:
        logger.warning("Catalog not loaded: %s", error.get("error", error))
        return False

    def on_products(products: Sequence[Product]) -> bool:
        store.dispatch(set_products(products))
        return True

    return result.fold(on_error, on_products)
