#!/usr/bin/env python3
"""Read translation documents from disk or over HTTP.

Both helpers return the raw document text; pass it to
``TranslationStore.load_xml``.
"""

import time
from pathlib import Path

import requests

from localekit.core.logging_utils import setup_logger

logger = setup_logger(__name__)

DEFAULT_TIMEOUT = 5.0
RETRY_DELAY = 0.5
RETRY_BACKOFF = 2.0


class TranslationSourceError(RuntimeError):
    """Raised when a translation document cannot be read or downloaded."""


def read_xml_file(path: str | Path) -> str:
    """Read a translation document from disk.

    Args:
        path: File path

    Returns:
        Document text (UTF-8)

    Raises:
        TranslationSourceError: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TranslationSourceError(f"Cannot read translations from {path}: {e}") from e

    logger.debug(f"Read {len(text)} chars from {path}")
    return text


def fetch_xml(url: str, timeout: float = DEFAULT_TIMEOUT, tries: int = 3) -> str:
    """Download a translation document.

    Connection errors and timeouts are retried with exponential backoff.
    HTTP error statuses are not retried.

    Args:
        url: Document URL
        timeout: Per-request timeout in seconds
        tries: Maximum number of attempts

    Returns:
        Document text

    Raises:
        TranslationSourceError: If the download fails
    """
    try:
        response = _get_with_retry(url, timeout, tries)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TranslationSourceError(f"Cannot fetch translations from {url}: {e}") from e

    # text/xml without a charset makes requests assume ISO-8859-1
    if response.encoding is None or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"

    logger.info(f"Fetched translations from {url} ({len(response.content)} bytes)")
    return response.text


def _get_with_retry(url: str, timeout: float, tries: int) -> requests.Response:
    """GET ``url``, retrying connection errors and timeouts with exponential backoff."""
    delay = RETRY_DELAY
    for attempt in range(1, max(tries, 1) + 1):
        try:
            return requests.get(url, timeout=timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            if attempt >= tries:
                raise
            logger.warning(f"Fetching {url} failed (attempt {attempt}/{tries}): {e}. Retrying in {delay:.1f}s...")
            time.sleep(delay)
            delay *= RETRY_BACKOFF
