from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from settings import get_settings

DEFAULT_DESCRIPTION_WIDTH = 50


@dataclass(frozen=True)
class CLIConfig:
    collection_file: Path
    currency: str = "EUR"
    description_width: int = DEFAULT_DESCRIPTION_WIDTH


def load_config(
    collection_file: Optional[Path] = None,
    currency: Optional[str] = None,
) -> CLIConfig:
    settings = get_settings()
    path = collection_file if collection_file is not None else Path(settings.collection_file)
    code = currency.strip().upper() if currency and currency.strip() else settings.currency
    return CLIConfig(
        collection_file=path,
        currency=code,
    )
