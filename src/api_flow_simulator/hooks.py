"""StageHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Callable

from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import Stage


class StageHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    Hooks run synchronously, in transition order, after the controller has
    updated its state.
    """

    def on_session_start(self, session: FlowSession) -> None:
        pass

    def on_transition(self, session: FlowSession, previous: Stage) -> None:
        pass

    def on_session_end(self, session: FlowSession) -> None:
        pass


class BeforeSession(StageHook):
    """Convenience hook that only fires when a session starts."""

    def __init__(self, callback: Callable[[FlowSession], None]) -> None:
        self._callback = callback

    def on_session_start(self, session: FlowSession) -> None:
        self._callback(session)


class OnTransition(StageHook):
    """Convenience hook that fires after every stage change."""

    def __init__(self, callback: Callable[[FlowSession, Stage], None]) -> None:
        self._callback = callback

    def on_transition(self, session: FlowSession, previous: Stage) -> None:
        self._callback(session, previous)


class AfterSession(StageHook):
    """Convenience hook that fires once a session reaches a terminal stage."""

    def __init__(self, callback: Callable[[FlowSession], None]) -> None:
        self._callback = callback

    def on_session_end(self, session: FlowSession) -> None:
        self._callback(session)
