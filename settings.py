from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_COLLECTION_FILE_ENV = "RAILISTS_COLLECTION_FILE"
_CURRENCY_ENV = "RAILISTS_CURRENCY"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    collection_file: str
    currency: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_currency(default: str) -> str:
    value = os.getenv(_CURRENCY_ENV)
    if value is None:
        return default
    candidate = value.strip().upper()
    if len(candidate) != 3 or not candidate.isalpha():
        return default
    return candidate


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        collection_file=_read_str_env(_COLLECTION_FILE_ENV, "./collection.yaml"),
        currency=_read_currency("EUR"),
        log_level=_read_log_level("INFO"),
    )
