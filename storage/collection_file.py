from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from settings import get_settings


class CollectionLoadError(Exception):
    """The collection document as a whole could not be read or parsed."""


class CollectionFile:
    """A collection YAML document on the local filesystem."""

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding

    def read_text(self) -> str:
        if not self.path.exists():
            raise FileNotFoundError(f"Collection file {str(self.path)!r} not found.")
        if not self.path.is_file():
            raise CollectionLoadError(f"Path {str(self.path)!r} is not a file.")
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise CollectionLoadError(
                f"Unable to read collection file {str(self.path)!r}: {exc}"
            ) from exc


@lru_cache
def build_default_collection_file(path: Optional[str] = None) -> CollectionFile:
    settings = get_settings()
    collection_path = settings.collection_file if path is None else path
    return CollectionFile(path=Path(collection_path))
