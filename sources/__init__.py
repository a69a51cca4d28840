# sources/__init__.py
from typing import Any
from urllib.parse import urlparse

from . import local
from . import remote
from .document import PriceDocument, SourceError, parse_document

LOADERS = {
    "file": local.load_document,
    "http": remote.load_document,
    "https": remote.load_document,
}


def load_document(location: str) -> Any:
    """Load a raw price document from a file path or an http(s)/file URL."""
    scheme = urlparse(location).scheme.lower()
    loader = LOADERS.get(scheme, local.load_document)
    return loader(location)


__all__ = ["LOADERS", "PriceDocument", "SourceError", "load_document", "parse_document"]
