"""SessionTrace and TraceEntry — debug timing recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from api_flow_simulator.stage import Stage


@dataclass(frozen=True)
class TraceEntry:
    """Time spent in a single stage."""

    stage: Stage
    duration_ms: float
    outcome: Literal["OK", "FAILED"]
    reason: str | None = None


@dataclass
class SessionTrace:
    """Structured record of a single session."""

    session_id: int
    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["RUNNING", "OK", "ERROR", "CANCELLED"] = "RUNNING"
