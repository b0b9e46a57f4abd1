import logging
from typing import Optional, Tuple

import httpx

from .catalog import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT, decode_response
from .domain import Product
from .ftypes import Either

logger = logging.getLogger(__name__)


# ============ Асинхронная загрузка каталога ============


async def fetch_products_async(
    url: str = DEFAULT_CATALOG_URL,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Either[dict, Tuple[Product, ...]]:
    """
    Асинхронный вариант fetch_products.
    Ядро о задержках не знает: по готовности результат передаётся в load_catalog
    """
    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
    except httpx.RequestError as e:
        logger.warning("Async catalog fetch failed: %s", e)
        return Either.left({"error": f"Catalog unavailable: {e}"})

    result = decode_response(response)
    if result.is_left:
        logger.warning("Async catalog fetch failed: %s", result.value["error"])
    return result

