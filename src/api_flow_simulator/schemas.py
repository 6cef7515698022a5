"""Request/response schemas for the HTTP surface."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, Field

from api_flow_simulator.presentation import STAGE_COPY, TimelineRow
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import Mode, Speed


class StartRequest(BaseModel):
    """Start a new session."""

    query: str = Field(..., description="Place to look up, e.g. 'New York'")
    mode: Mode | None = Field(None, description="Driving mode for this session")
    speed: Speed | None = Field(None, description="Speed preset for this session")


class SessionResponse(BaseModel):
    """Snapshot of the controller's current session."""

    session_id: int
    stage: str
    stage_index: int
    query: str
    mode: str
    speed_factor: float
    loading: bool
    message: str = Field(..., description="Stage message for the UI")
    result: dict[str, Any] | None = None
    error_message: str | None = None

    @classmethod
    def from_session(cls, session: FlowSession) -> SessionResponse:
        return cls(
            session_id=session.session_id,
            stage=session.stage.value,
            stage_index=session.stage_index,
            query=session.query,
            mode=session.mode.value,
            speed_factor=session.speed_factor,
            loading=session.loading,
            message=STAGE_COPY[session.stage].message,
            result=asdict(session.result) if session.result is not None else None,
            error_message=session.error_message,
        )


class TimelineRowResponse(BaseModel):
    stage: str
    label: str
    description: str
    status: str

    @classmethod
    def from_row(cls, row: TimelineRow) -> TimelineRowResponse:
        return cls(
            stage=row.stage.value,
            label=row.label,
            description=row.description,
            status=row.status,
        )


class PayloadResponse(BaseModel):
    """Synthetic payload for the current stage."""

    stage: str
    title: str
    payload: Any = None
