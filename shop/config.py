# shop/config.py
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import List
import logging
import os

from dotenv import load_dotenv

DEFAULT_SHIPPING_FEE = Decimal(30)
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


@dataclass(frozen=True)
class Settings:
    shipping_fee: Decimal = DEFAULT_SHIPPING_FEE
    log_level: str = "INFO"
    cors_origins: tuple = tuple(DEFAULT_CORS_ORIGINS.split(","))


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings() -> Settings:
    # .env is read first; real environment variables win
    load_dotenv()

    raw_fee = os.getenv("SHOP_SHIPPING_FEE", str(DEFAULT_SHIPPING_FEE))
    try:
        fee = Decimal(raw_fee.strip())
    except InvalidOperation:
        raise RuntimeError(f"SHOP_SHIPPING_FEE is not a number: {raw_fee!r}") from None
    if not fee.is_finite() or fee < 0:
        raise RuntimeError(f"SHOP_SHIPPING_FEE must be a non-negative number, got {raw_fee!r}")

    level = os.getenv("SHOP_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"SHOP_LOG_LEVEL is not a logging level: {level!r}")

    origins = _split_origins(os.getenv("SHOP_CORS_ORIGINS", DEFAULT_CORS_ORIGINS))

    return Settings(shipping_fee=fee, log_level=level, cors_origins=tuple(origins))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
