# sources/remote.py
import os
from typing import Any

import requests
from tenacity import RetryError, retry, stop_after_attempt, wait_exponential_jitter

from pricing.logger import get_logger

from .document import SourceError

logger = get_logger(__name__)

USER_AGENT = os.getenv(
    "SOURCE_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
)
SOURCE_TIMEOUT = int(os.getenv("SOURCE_TIMEOUT", "30"))

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})


@retry(wait=wait_exponential_jitter(initial=1, max=30), stop=stop_after_attempt(5))
def _fetch(url: str) -> requests.Response:
    r = SESSION.get(url, timeout=SOURCE_TIMEOUT)
    r.raise_for_status()
    return r


def load_document(url: str) -> Any:
    """Fetch a JSON price document over HTTP(S)."""
    logger.info("Fetching price document from %s", url)
    try:
        resp = _fetch(url)
    except RetryError as e:
        logger.error("Price document fetch failed for %s after retries: %s", url, e)
        raise SourceError(f"Failed to fetch price document from {url}") from e

    try:
        return resp.json()
    except ValueError as e:
        raise SourceError(f"Price document at {url} is not valid JSON: {e}") from e
