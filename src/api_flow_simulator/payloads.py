"""Synthetic payloads shown next to each stage of a session.

Nothing here performs I/O: the "third-party" response is derived from the
stored record, converted back to the units a real weather API would use
(Kelvin, metres per second) so the normalization step has something to do.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from api_flow_simulator.presentation import STAGE_COPY
from api_flow_simulator.resolver import Record, normalize, raw_record
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import Stage

KELVIN_OFFSET = 273.15
BACKEND_URL = "/api/weather"
EXTERNAL_URL = "https://api.openweathermap.org/data/2.5/weather"
API_KEY_ENV = "WEATHER_API_KEY"


@dataclass(frozen=True)
class Transformation:
    """One field as the external API returns it and as the UI receives it."""

    field: str
    raw_value: str
    normalized_value: str
    explanation: str


def raw_payload(record: Record) -> dict[str, Any]:
    """Simulated third-party response for ``record``."""
    return {
        "name": record.key,
        "sys": {"country": record.country},
        "main": {
            "temp": round(record.measurement + KELVIN_OFFSET, 2),
            "feels_like": round(record.measurement + 2 + KELVIN_OFFSET, 2),
            "humidity": record.humidity,
        },
        "weather": [{"description": record.label.lower(), "icon": record.icon}],
        "wind": {"speed": round(record.wind_speed / 3.6, 1), "deg": 180},
    }


def compare(raw: Record, normalized: Record) -> list[Transformation]:
    """Field-by-field view of what normalization changes."""
    payload = raw_payload(raw)
    return [
        Transformation(
            field="temperature",
            raw_value=f"{payload['main']['temp']} K",
            normalized_value=f"{normalized.measurement} °C",
            explanation="Kelvin to Celsius: K - 273.15, rounded",
        ),
        Transformation(
            field="wind_speed",
            raw_value=f"{payload['wind']['speed']} m/s",
            normalized_value=f"{normalized.wind_speed} km/h",
            explanation="Metres per second to km/h: m/s × 3.6",
        ),
        Transformation(
            field="humidity",
            raw_value=f"{payload['main']['humidity']}%",
            normalized_value=f"{normalized.humidity}%",
            explanation="Already a percentage, kept as is",
        ),
        Transformation(
            field="key",
            raw_value=f"name: {payload['name']}, sys.country: {raw.country}",
            normalized_value=f"{normalized.key}, {normalized.country}",
            explanation="Nested fields flattened into the record",
        ),
    ]


def stage_payload(session: FlowSession) -> dict[str, Any]:
    """Title and payload a code panel shows for the session's stage."""
    stage = session.stage
    copy = STAGE_COPY[stage]
    if stage is Stage.IDLE or stage is Stage.ERROR:
        title = copy.label
    else:
        title = f"{session.stage_index + 1}. {copy.label}"
    return {"stage": stage.value, "title": title, "payload": _body(session)}


def _body(session: FlowSession) -> Any:
    stage = session.stage
    query = session.query
    if stage is Stage.IDLE:
        return None
    if stage is Stage.SENDING:
        return {
            "method": "POST",
            "url": BACKEND_URL,
            "headers": {"Content-Type": "application/json"},
            "body": {"city": query},
        }
    if stage is Stage.BACKEND_PROCESSING:
        # the key never leaves the backend
        return {"env": API_KEY_ENV, "api_key": "sk-" + "x" * 16, "loaded": True}
    if stage is Stage.CALLING_EXTERNAL:
        return {
            "method": "GET",
            "url": EXTERNAL_URL,
            "params": {"q": query, "appid": f"${{{API_KEY_ENV}}}"},
        }

    raw = raw_record(query)
    if stage is Stage.EXTERNAL_RESPONDING:
        if raw is None:
            return {"cod": "404", "message": "city not found"}
        return raw_payload(raw)
    if stage is Stage.NORMALIZING:
        if raw is None:
            return {"transformations": []}
        return {
            "transformations": [asdict(t) for t in compare(raw, normalize(raw))]
        }
    if stage is Stage.COMPLETE and session.result is not None:
        return asdict(session.result)
    return {"error": session.error_message}
