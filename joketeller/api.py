"""Transport layer for the JokeAPI.

Every call returns a JokeResult instead of raising: the decoded joke on
success, the API's own error document on a rejected request, or a small
sentinel document when the body can't be decoded or no response arrived.
Network calls go through ``requests`` and are designed to be mockable in
tests.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

import requests

from .config import get_settings
from .options import StatusCode

if TYPE_CHECKING:
    from .joker import Joker

logger = logging.getLogger(__name__)

TRANSPORT_ERROR = "Transport Error"
DECODE_ERROR = "Decode Error"


class JokeAPIError(Exception):
    """Raised by JokeResult.raise_for_error() when a call did not succeed."""

    def __init__(self, result: "JokeResult"):
        self.result = result
        super().__init__(f"JokeAPI call failed (status={result.status_code}): {result.data}")


@dataclass
class JokeResult:
    ok: bool
    data: Any
    status_code: Optional[int] = None

    @property
    def status(self) -> Optional[StatusCode]:
        return StatusCode.lookup(self.status_code)

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None and isinstance(self.data, dict) and self.data.get("err") == TRANSPORT_ERROR

    def raise_for_error(self) -> "JokeResult":
        if not self.ok:
            raise JokeAPIError(self)
        return self


def _classify(resp: requests.Response, url: str) -> JokeResult:
    """Decode a response body and sort it into success or remote error."""
    ok = 200 <= resp.status_code < 300
    try:
        data = resp.json()
    except ValueError:
        logger.warning("Undecodable body from %s (HTTP %s)", url, resp.status_code)
        return JokeResult(ok=False, data={"err": DECODE_ERROR, "body": resp.text}, status_code=resp.status_code)
    if not ok:
        logger.info("JokeAPI rejected %s with HTTP %s", url, resp.status_code)
    return JokeResult(ok=ok, data=data, status_code=resp.status_code)


def _transport_error(url: str, exc: Exception) -> JokeResult:
    logger.warning("Request failed for %s: %s", url, exc)
    return JokeResult(ok=False, data={"err": TRANSPORT_ERROR}, status_code=None)


def get_joke(joker: "Joker", timeout: Optional[float] = None) -> JokeResult:
    """Fetch jokes matching the joker's filters.

    Args:
        joker: The configured request builder.
        timeout: Request timeout in seconds (defaults to JOKEAPI_TIMEOUT).

    Returns:
        JokeResult with the decoded joke payload, or an error document.
    """
    url = joker.build_url()
    timeout = timeout if timeout is not None else get_settings().timeout
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers=joker.headers(), timeout=timeout)
    except requests.RequestException as e:
        return _transport_error(url, e)
    return _classify(resp, url)


def _submit(path: str, document: Dict[str, Any], timeout: Optional[float]) -> JokeResult:
    settings = get_settings()
    url = f"{settings.base_url}{path}"
    timeout = timeout if timeout is not None else settings.timeout
    logger.debug("POST %s", url)
    try:
        resp = requests.post(url, json=document, timeout=timeout)
    except requests.RequestException as e:
        return _transport_error(url, e)
    return _classify(resp, url)


def submit_joke(document: Dict[str, Any], timeout: Optional[float] = None) -> JokeResult:
    """Submit a joke. See https://jokeapi.dev/#submit-endpoint for the format.

    The document is sent as-is; the API does the validation.
    """
    return _submit("submit", document, timeout)


def submit_joke_dryrun(document: Dict[str, Any], timeout: Optional[float] = None) -> JokeResult:
    """Same as submit_joke, but the API only validates and stores nothing."""
    return _submit("submit?dry-run", document, timeout)
