# sources/local.py
import json
from typing import Any
from urllib.parse import urlparse

from pricing.logger import get_logger

from .document import SourceError

logger = get_logger(__name__)


def _to_path(location: str) -> str:
    if location.startswith("file://"):
        return urlparse(location).path
    return location


def load_document(location: str) -> Any:
    """Read a JSON price document from disk."""
    path = _to_path(location)
    logger.info("Loading price document from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise SourceError(f"Price document not found at {path}") from None
    except json.JSONDecodeError as e:
        raise SourceError(f"Price document at {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise SourceError(f"Failed to read price document at {path}: {e}") from e
