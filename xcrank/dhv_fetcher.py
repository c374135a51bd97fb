from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any

import requests

from .models import FlightRecord, ResultSet

DEFAULT_API_URL = "https://en.dhv-xc.de/api/fli/flights"

_RECORD_FIELDS = tuple(f.name for f in fields(FlightRecord))


class DhvXcError(RuntimeError):
    """Error talking to the DHV-XC flights API."""


class FetchError(DhvXcError):
    """The HTTP request itself failed (DNS, connect, timeout...)."""


class DecodeError(DhvXcError):
    """The response body is not a valid flights payload."""


class ApiError(DhvXcError):
    """The API answered with ``success: false``."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Request failed: [{message}]")
        self.message = message


class DhvXcFetcher:
    """
    Client for the DHV-XC flight list (``/api/fli/flights``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/?")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    # ──────────────────────────────────────────────────────────

    def build_url(self, day: str) -> str:
        return f"{self.base_url}?d={day}"

    def fetch_raw(self, day: str) -> bytes:
        """Issue a single GET for *day* and return the raw body."""
        url = self.build_url(day)
        self.logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"GET {url} failed: {exc}") from exc
        self.logger.debug("HTTP %s, %d bytes", resp.status_code, len(resp.content))
        return resp.content

    def fetch(self, day: str) -> ResultSet:
        """Fetch and decode the flights of *day*."""
        body = self.fetch_raw(day)
        try:
            return decode_flights(body)
        except DecodeError as exc:
            self.logger.error("Can't load json response: %s", exc)
            raise


def _str_field(item: dict, name: str) -> str:
    value = item.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"field {name!r} must be a string, got {type(value).__name__}"
        )
    return value


def _to_record(item: Any) -> FlightRecord:
    """Map one JSON flight object onto a FlightRecord."""
    if item is None:
        return FlightRecord()
    if not isinstance(item, dict):
        raise DecodeError(f"flight entry must be an object, got {type(item).__name__}")
    return FlightRecord(**{name: _str_field(item, name) for name in _RECORD_FIELDS})


def decode_flights(body: bytes | str) -> ResultSet:
    """Strictly decode an API response body into a ResultSet.

    Unknown keys are ignored, missing or ``null`` ones fall back to empty
    values. Anything of the wrong JSON type raises :class:`DecodeError`.
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc

    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")

    data = payload.get("data")
    if data is None:
        data = []
    elif not isinstance(data, list):
        raise DecodeError(f"field 'data' must be a list, got {type(data).__name__}")

    success = payload.get("success")
    if success is None:
        success = False
    elif not isinstance(success, bool):
        raise DecodeError(
            f"field 'success' must be a boolean, got {type(success).__name__}"
        )

    return ResultSet(
        data=[_to_record(item) for item in data],
        success=success,
        message=_str_field(payload, "message"),
    )


__all__ = [
    "DEFAULT_API_URL",
    "DhvXcError",
    "FetchError",
    "DecodeError",
    "ApiError",
    "DhvXcFetcher",
    "decode_flights",
]
