"""
HTTP helpers for talking to the release host.

This module provides:
- JSON fetching with an explicit timeout and no retry (catalog requests)
- Artifact downloads with retry and exponential backoff
- Uniform translation of requests failures into NetworkError
"""

import logging
import time
from typing import Any, Optional

import requests
from requests.exceptions import RequestException, Timeout, ConnectionError, HTTPError

from .exceptions import NetworkError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _get(session: Optional[requests.Session], url: str, timeout: float, **kwargs):
    getter = session.get if session is not None else requests.get
    response = getter(url, timeout=timeout, allow_redirects=True, **kwargs)
    try:
        response.raise_for_status()
    except HTTPError:
        response.close()
        raise
    return response


def get_json(
    url: str, timeout: float = 30, session: Optional[requests.Session] = None
) -> Any:
    """
    Fetch and decode a JSON document.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds
        session: Optional requests session to reuse connections

    Returns:
        Decoded JSON value

    Raises:
        NetworkError: On transport failure, non-success status or bad JSON
    """
    logger.debug(f"Fetching {url}")
    try:
        response = _get(session, url, timeout)
    except HTTPError as e:
        raise NetworkError(
            f"Request to {url} failed with HTTP {e.response.status_code}", url
        ) from e
    except RequestException as e:
        raise NetworkError(f"Request to {url} failed: {e}", url) from e

    try:
        return response.json()
    except ValueError as e:
        raise NetworkError(f"Malformed JSON returned by {url}: {e}", url) from e


def download_bytes(
    url: str,
    timeout: float = 30,
    max_retries: int = 3,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    Download a URL into memory, retrying transient failures.

    Args:
        url: URL to download from
        timeout: Request timeout in seconds
        max_retries: Maximum number of attempts
        session: Optional requests session to reuse connections

    Returns:
        Response body

    Raises:
        NetworkError: If the download fails after all attempts, or the
            server answers with a client error (4xx), which is not retried

    Example:
        >>> data = download_bytes("https://binaries.soliditylang.org/linux-amd64/solc-linux-amd64-v0.8.4+commit.c7e474f2")
    """
    if not url:
        raise ValueError("URL cannot be empty")

    for attempt in range(max_retries):
        try:
            return _download_once(url, timeout, session)
        except HTTPError as e:
            status = e.response.status_code
            if status < 500 or attempt == max_retries - 1:
                raise NetworkError(
                    f"Download of {url} failed with HTTP {status}", url
                ) from e
            last_error = e
        except (Timeout, ConnectionError, RequestException) as e:
            if attempt == max_retries - 1:
                raise NetworkError(
                    f"Download of {url} failed after {max_retries} attempts: {e}",
                    url,
                ) from e
            last_error = e

        # Exponential backoff
        backoff_seconds = 2**attempt
        logger.warning(
            f"Download attempt {attempt + 1} failed: {last_error}. "
            f"Retrying in {backoff_seconds}s..."
        )
        time.sleep(backoff_seconds)

    # max_retries < 1
    raise NetworkError(f"Download of {url} was not attempted", url)


def _download_once(
    url: str, timeout: float, session: Optional[requests.Session]
) -> bytes:
    logger.debug(f"Downloading from {url}")

    response = _get(session, url, timeout, stream=True)
    chunks = []
    downloaded = 0
    with response:
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if chunk:
                chunks.append(chunk)
                downloaded += len(chunk)

    logger.debug(f"Downloaded {downloaded} bytes from {url}")
    return b"".join(chunks)


__all__ = ["get_json", "download_bytes"]
