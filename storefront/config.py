import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .catalog import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT, fetch_products, read_seed
from .ftypes import Either

ENV_PREFIX = "STOREFRONT_"
TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StorefrontConfig:
    """
    Настройки витрины.

    catalog_url: адрес каталога (Fake Store API по умолчанию)
    request_timeout: таймаут HTTP-запроса, секунды
    seed_path: локальный JSON-каталог
    use_seed: брать каталог из seed_path вместо сети
    featured_count: сколько товаров на главной
    log_level: уровень логирования
    """

    catalog_url: str = DEFAULT_CATALOG_URL
    request_timeout: float = DEFAULT_TIMEOUT
    seed_path: str = "data/catalog.json"
    use_seed: bool = False
    featured_count: int = 6
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StorefrontConfig":
        """Читает STOREFRONT_* переменные окружения, остальное по умолчанию"""
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        return cls(
            catalog_url=get("CATALOG_URL", defaults.catalog_url),
            request_timeout=float(get("REQUEST_TIMEOUT", str(defaults.request_timeout))),
            seed_path=get("SEED_PATH", defaults.seed_path),
            use_seed=get("USE_SEED", "false").strip().lower() in TRUTHY,
            featured_count=int(get("FEATURED_COUNT", str(defaults.featured_count))),
            log_level=get("LOG_LEVEL", defaults.log_level).upper(),
        )

    def fetch_catalog(self) -> Either:
        """Каталог из настроенного источника: seed-файл или HTTP"""
        if self.use_seed:
            return read_seed(self.seed_path)
        return fetch_products(self.catalog_url, timeout=self.request_timeout)
