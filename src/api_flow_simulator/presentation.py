"""Stage copy and timeline status for presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from api_flow_simulator.stage import WORKING_STAGES, Stage

TimelineStatus = Literal["completed", "active", "pending", "error"]


@dataclass(frozen=True)
class StageCopy:
    """User-facing text attached to a stage."""

    label: str
    description: str
    message: str
    icon: str


STAGE_COPY: dict[Stage, StageCopy] = {
    Stage.IDLE: StageCopy(
        "Idle", "Waiting for a query", "Waiting for a request...", "⏸️"
    ),
    Stage.SENDING: StageCopy(
        "Send to backend",
        "The frontend sends the request",
        "📤 Sending request to the backend...",
        "📤",
    ),
    Stage.BACKEND_PROCESSING: StageCopy(
        "Backend processing",
        "Reading the API key and preparing the call",
        "⚙️ Backend: reading the API key from the environment...",
        "⚙️",
    ),
    Stage.CALLING_EXTERNAL: StageCopy(
        "External API call",
        "Request to the third-party API",
        "🌐 Calling the external API...",
        "🌐",
    ),
    Stage.EXTERNAL_RESPONDING: StageCopy(
        "API response",
        "Receiving raw data",
        "📥 Receiving raw data from the API...",
        "📥",
    ),
    Stage.NORMALIZING: StageCopy(
        "Normalization",
        "Transforming the data",
        "✨ Normalizing the data...",
        "✨",
    ),
    Stage.COMPLETE: StageCopy(
        "Complete",
        "Data ready for the UI",
        "✅ Data ready to display!",
        "✅",
    ),
    Stage.ERROR: StageCopy(
        "Error", "The request failed", "❌ Error in the API call", "❌"
    ),
}


@dataclass(frozen=True)
class TimelineRow:
    stage: Stage
    label: str
    description: str
    status: TimelineStatus


def timeline_status(current: Stage, stage: Stage) -> TimelineStatus:
    """Status of the ``stage`` row while the session sits at ``current``."""
    if current is Stage.ERROR:
        return "error" if stage is Stage.COMPLETE else "pending"
    if stage.order < current.order:
        return "completed"
    if stage is current:
        return "active"
    return "pending"


def timeline(current: Stage) -> list[TimelineRow]:
    return [
        TimelineRow(
            stage=stage,
            label=STAGE_COPY[stage].label,
            description=STAGE_COPY[stage].description,
            status=timeline_status(current, stage),
        )
        for stage in WORKING_STAGES
    ]
