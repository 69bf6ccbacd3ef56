"""Blocking HTTP helpers used by every service module.

Non-2xx responses are not treated as failures here: their body is returned
like any other. A request that never completes, or whose response is cut
short, raises TransportError; a URL that cannot be sent at all (spaces,
control characters, no scheme) raises LocalIOError.
"""

from __future__ import annotations

import gzip
import json
import logging
import webbrowser
from http.client import HTTPException, InvalidURL
from typing import Any, Callable, Optional, TypeVar
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from bio_apis.config import load_settings
from bio_apis.core.errors import DecodeError, LocalIOError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _request(
    url: str,
    method: str = "GET",
    data: Optional[dict | str] = None,
    timeout: Optional[float] = None,
) -> tuple[int, bytes]:
    """Execute HTTP request and return (status, body)."""
    settings = load_settings()
    headers = {"User-Agent": settings.user_agent}
    body = None
    if data is not None:
        body = json.dumps(data).encode("utf-8") if isinstance(data, dict) else data.encode("utf-8")
        headers["Content-Type"] = "application/json"
    logger.debug("%s %s", method, url)
    try:
        req = Request(url, data=body, method=method, headers=headers)
        with urlopen(req, timeout=settings.http_timeout if timeout is None else timeout) as resp:
            return resp.status, resp.read()
    except HTTPError as e:
        return e.code, (e.read() if e.fp is not None else b"")
    except (InvalidURL, ValueError) as e:
        raise LocalIOError("Unusable request URL", url=url, cause=e) from e
    except HTTPException as e:
        logger.error("%s %s failed: %s", method, url, e)
        raise TransportError(f"{method} response was cut short or malformed", url=url, cause=e) from e
    except OSError as e:
        logger.error("%s %s failed: %s", method, url, e)
        raise TransportError(f"{method} request failed", url=url, cause=e) from e


def _to_text(raw: bytes, url: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LocalIOError("Response body is not valid UTF-8", url=url, cause=e) from e


def _gunzip(raw: bytes, url: str) -> bytes:
    try:
        return gzip.decompress(raw)
    except (OSError, EOFError) as e:
        raise LocalIOError("Failed to decompress gzip body", url=url, cause=e) from e


def get_bytes(url: str, timeout: Optional[float] = None) -> bytes:
    _, raw = _request(url, timeout=timeout)
    return raw


def get_text(url: str, timeout: Optional[float] = None) -> str:
    """GET url and return the body as text, whatever the status."""
    return _to_text(get_bytes(url, timeout=timeout), url)


def post_text(url: str, payload: dict, timeout: Optional[float] = None) -> str:
    """POST payload as JSON and return the body as text."""
    _, raw = _request(url, method="POST", data=payload, timeout=timeout)
    return _to_text(raw, url)


def get_gz_bytes(url: str, timeout: Optional[float] = None) -> bytes:
    return _gunzip(get_bytes(url, timeout=timeout), url)


def get_gz_text(url: str, timeout: Optional[float] = None) -> str:
    """GET a gzip-compressed resource and return the decompressed text."""
    return _to_text(get_gz_bytes(url, timeout=timeout), url)


def url_exists(url: str, timeout: Optional[float] = None) -> bool:
    """HEAD url; True only for a 200 response."""
    status, _ = _request(url, method="HEAD", timeout=timeout)
    return status == 200


def decode_json(text: str, url: str, parse: Callable[[Any], T]) -> T:
    """Parse text as JSON and map it with parse, wrapping any shape error."""
    try:
        return parse(json.loads(text))
    except (ValueError, KeyError, TypeError, IndexError, AttributeError) as e:
        raise DecodeError("Unexpected response", url=url, cause=e) from e


def get_json(url: str, parse: Callable[[Any], T], timeout: Optional[float] = None) -> T:
    return decode_json(get_text(url, timeout=timeout), url, parse)


def post_json(url: str, payload: dict, parse: Callable[[Any], T], timeout: Optional[float] = None) -> T:
    return decode_json(post_text(url, payload, timeout=timeout), url, parse)


def open_in_browser(url: str) -> None:
    """Open url in the default web browser. Failures are only logged."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.error("Failed to open the web browser: %s", e)
        return
    if not opened:
        logger.warning("No web browser available to open %s", url)
