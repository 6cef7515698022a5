"""Data resolver: pure lookup of a query string into a weather Record."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

from api_flow_simulator.exceptions import QueryNotFound


@dataclass(frozen=True)
class Record:
    """Weather record produced by a successful resolution."""

    key: str
    country: str
    measurement: float
    label: str
    humidity: int
    wind_speed: int
    icon: str


class _NotFound(Enum):
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound.NOT_FOUND
"""Returned by :func:`resolve` when the query matches no record."""

Resolution = Record | Literal[_NotFound.NOT_FOUND]

# Raw measurements as the simulated third-party service reports them (°C).
_RECORDS: dict[str, Record] = {
    "roma": Record("Roma", "IT", 22.4, "Clear sky", 45, 12, "☀️"),
    "milano": Record("Milano", "IT", 17.8, "Cloudy", 65, 8, "☁️"),
    "napoli": Record("Napoli", "IT", 25.3, "Sunny", 55, 15, "🌤️"),
    "londra": Record("Londra", "UK", 14.2, "Light rain", 80, 20, "🌧️"),
    "parigi": Record("Parigi", "FR", 15.6, "Cloudy", 70, 10, "☁️"),
    "tokyo": Record("Tokyo", "JP", 27.9, "Hot and humid", 85, 5, "🌡️"),
    "new_york": Record("New York", "US", 20.1, "Partly cloudy", 50, 18, "⛅"),
}

_WHITESPACE = re.compile(r"\s+")


def normalize_query(query: str) -> str:
    """Lookup key for ``query``: trimmed, lowercased, spaces joined by ``_``."""
    return _WHITESPACE.sub("_", query.strip().lower())


def normalize(record: Record) -> Record:
    """Round the measurement to the nearest integer, halves rounding up.

    Non-finite measurements have no integer form and are returned unchanged.
    """
    if not math.isfinite(record.measurement):
        return record
    return replace(record, measurement=int(math.floor(record.measurement + 0.5)))


def known_keys() -> tuple[str, ...]:
    return tuple(record.key for record in _RECORDS.values())


def raw_record(query: str) -> Record | None:
    """Stored record for ``query`` before normalization, if any."""
    return _RECORDS.get(normalize_query(query))


def lookup(query: str) -> Record:
    """Normalized record for ``query``.

    Raises:
        QueryNotFound: when the normalized query is not a known key.
    """
    record = raw_record(query)
    if record is None:
        raise QueryNotFound(query, known_keys())
    return normalize(record)


def resolve(query: str) -> Resolution:
    """Normalized record for ``query``, or ``NOT_FOUND``."""
    try:
        return lookup(query)
    except QueryNotFound:
        return NOT_FOUND


def not_found_message(query: str) -> str:
    return QueryNotFound(query, known_keys()).detail
