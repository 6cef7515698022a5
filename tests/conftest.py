"""Shared pytest fixtures for api-flow-simulator tests."""

from __future__ import annotations

import asyncio

import pytest

from api_flow_simulator.controller import FlowController
from api_flow_simulator.hooks import StageHook
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import Mode, Speed, Stage


class SleepRecorder:
    """Stand-in for asyncio.sleep that records delays and only yields once."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        await asyncio.sleep(0)


class TransitionRecorder(StageHook):
    """Hook collecting every lifecycle event as plain tuples."""

    def __init__(self) -> None:
        self.started: list[FlowSession] = []
        self.transitions: list[tuple[int, Stage, Stage]] = []
        self.ended: list[FlowSession] = []

    def on_session_start(self, session: FlowSession) -> None:
        self.started.append(session)

    def on_transition(self, session: FlowSession, previous: Stage) -> None:
        self.transitions.append((session.session_id, previous, session.stage))

    def on_session_end(self, session: FlowSession) -> None:
        self.ended.append(session)

    def stages(self, session_id: int | None = None) -> list[Stage]:
        return [
            stage
            for sid, _, stage in self.transitions
            if session_id is None or sid == session_id
        ]


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def recorder() -> TransitionRecorder:
    return TransitionRecorder()


@pytest.fixture
def manual_controller(recorder: TransitionRecorder) -> FlowController:
    """Manual-mode controller with a transition recorder attached."""
    return FlowController(Mode.MANUAL, hooks=[recorder], debug=True)


@pytest.fixture
def auto_controller(
    sleep_recorder: SleepRecorder, recorder: TransitionRecorder
) -> FlowController:
    """Automatic-mode controller whose timers complete instantly."""
    return FlowController(
        Mode.AUTO,
        Speed.NORMAL,
        hooks=[recorder],
        debug=True,
        sleep=sleep_recorder,
    )
