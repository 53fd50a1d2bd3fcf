"""Thin HTTP helper around ``requests``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from chatgpt_cli._exceptions import APIError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HTTPResult:
    """Status and fully-read body of a successful response."""

    status_code: int
    reason: str
    body: str


def _raise_for_status(r: requests.Response) -> None:
    if r.status_code != 200:
        raise APIError(r.status_code, r.reason or "", r.text)


def post_json(
    url: str,
    headers: dict[str, str],
    body: bytes,
    timeout: float | None = None,
) -> HTTPResult:
    """POST an already-encoded JSON body once and return the response.

    No retry is attempted. ``timeout=None`` waits as long as the platform allows.
    """
    logger.debug("POST %s (%d bytes)", url, len(body))
    try:
        with requests.post(url, headers=headers, data=body, timeout=timeout) as r:
            text = r.text
            _raise_for_status(r)
            return HTTPResult(status_code=r.status_code, reason=r.reason or "", body=text)
    except requests.RequestException as exc:
        raise TransportError(f"Error making API request: {exc}") from exc
