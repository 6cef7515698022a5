"""Stage, Mode and Speed enums plus the fixed timing tables."""

from __future__ import annotations

from enum import Enum


class Stage(Enum):
    """Named points a simulated request passes through, in strict order."""

    IDLE = "idle"
    SENDING = "sending"
    BACKEND_PROCESSING = "backend-processing"
    CALLING_EXTERNAL = "calling-external"
    EXTERNAL_RESPONDING = "external-responding"
    NORMALIZING = "normalizing"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def order(self) -> int:
        _ORDER = {
            "idle": -1,
            "sending": 0,
            "backend-processing": 1,
            "calling-external": 2,
            "external-responding": 3,
            "normalizing": 4,
            "complete": 5,
            # error is only reachable from normalizing
            "error": 4,
        }
        return _ORDER[self.value]

    @property
    def is_terminal(self) -> bool:
        return self in (Stage.COMPLETE, Stage.ERROR)


WORKING_STAGES: tuple[Stage, ...] = (
    Stage.SENDING,
    Stage.BACKEND_PROCESSING,
    Stage.CALLING_EXTERNAL,
    Stage.EXTERNAL_RESPONDING,
    Stage.NORMALIZING,
    Stage.COMPLETE,
)

# Reference units (milliseconds at the default time unit).
BASE_DURATIONS: dict[Stage, int] = {
    Stage.SENDING: 800,
    Stage.BACKEND_PROCESSING: 1000,
    Stage.CALLING_EXTERNAL: 1000,
    Stage.EXTERNAL_RESPONDING: 800,
    Stage.NORMALIZING: 1200,
}


def base_duration(stage: Stage) -> int:
    """Base dwell time of ``stage``; 0 for stages that do not wait."""
    return BASE_DURATIONS.get(stage, 0)


class Mode(Enum):
    """How a session is driven."""

    AUTO = "auto"
    MANUAL = "manual"


class Speed(Enum):
    """Named speed presets for automatic mode."""

    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"

    @property
    def factor(self) -> float:
        _FACTORS = {
            "slow": 2.0,
            "normal": 1.0,
            "fast": 0.5,
        }
        return _FACTORS[self.value]
