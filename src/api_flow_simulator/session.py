"""FlowSession — immutable snapshot of a controller's run state."""

from __future__ import annotations

from dataclasses import dataclass

from api_flow_simulator.resolver import Record
from api_flow_simulator.stage import Mode, Stage


@dataclass(frozen=True)
class FlowSession:
    """Read-only view of one session, handed to every consumer."""

    session_id: int = 0
    stage: Stage = Stage.IDLE
    query: str = ""
    mode: Mode = Mode.AUTO
    speed_factor: float = 1.0
    result: Record | None = None
    error_message: str | None = None

    @property
    def stage_index(self) -> int:
        return self.stage.order

    @property
    def is_terminal(self) -> bool:
        return self.stage.is_terminal

    @property
    def is_active(self) -> bool:
        return self.stage is not Stage.IDLE

    @property
    def loading(self) -> bool:
        return self.is_active and not self.is_terminal
