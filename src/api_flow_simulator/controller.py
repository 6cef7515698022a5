"""FlowController — owner of the staged request simulation."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from dataclasses import replace

from api_flow_simulator._types import SleepCallback
from api_flow_simulator.exceptions import FlowInternalError, QueryNotFound
from api_flow_simulator.hooks import StageHook
from api_flow_simulator.resolver import Record, lookup
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import (
    WORKING_STAGES,
    Mode,
    Speed,
    Stage,
    base_duration,
)
from api_flow_simulator.trace import SessionTrace, TraceEntry

logger = logging.getLogger(__name__)


class FlowController:
    """Drives one simulated request at a time through the working stages.

    In automatic mode each session is driven by an asyncio task that sleeps
    ``base_duration(stage) * speed_factor * time_unit`` seconds per stage.
    In manual mode the caller steps with :meth:`advance`. Starting a new
    session or resetting cancels the previous one; a stale task can never
    mutate the current session because every suspension is followed by a
    session id check.
    """

    def __init__(
        self,
        mode: Mode = Mode.AUTO,
        speed: Speed = Speed.NORMAL,
        *,
        hooks: Iterable[StageHook] = (),
        debug: bool = False,
        time_unit: float = 0.001,
        sleep: SleepCallback | None = None,
    ) -> None:
        if time_unit <= 0:
            raise ValueError("time_unit must be positive")
        self._mode = mode
        self._speed = speed
        self._hooks: list[StageHook] = list(hooks)
        self._debug = debug
        self._time_unit = time_unit
        self._sleep: SleepCallback = sleep or asyncio.sleep

        self._session_id = 0
        self._session = self._idle_session()
        self._task: asyncio.Task[None] | None = None
        self._pending: Record | None = None
        self._trace: SessionTrace | None = None
        self._session_started = 0.0
        self._stage_started = 0.0

    # -- configuration --

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        self.configure(mode=mode)

    @property
    def speed(self) -> Speed:
        return self._speed

    @speed.setter
    def speed(self, speed: Speed) -> None:
        self.configure(speed=speed)

    @property
    def debug(self) -> bool:
        return self._debug

    def configure(
        self, *, mode: Mode | None = None, speed: Speed | None = None
    ) -> FlowController:
        """Set mode and/or speed for the next session."""
        if mode is not None:
            self._mode = mode
        if speed is not None:
            self._speed = speed
        if self._session.stage is Stage.IDLE:
            self._session = self._idle_session()
        return self

    def add_hook(self, hook: StageHook) -> FlowController:
        self._hooks.append(hook)
        return self

    # -- public contract --

    def get_state(self) -> FlowSession:
        return self._session

    @property
    def state(self) -> FlowSession:
        return self._session

    @property
    def trace(self) -> SessionTrace | None:
        """Timing record of the latest session; ``None`` unless ``debug``."""
        return self._trace

    def start(self, query: str) -> None:
        """Begin a new session for ``query``, replacing any running one."""
        query = query.strip()
        if not query:
            logger.debug("Ignoring start() with an empty query")
            return

        mode = self._mode
        loop: asyncio.AbstractEventLoop | None = None
        if mode is Mode.AUTO:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.warning(
                    "Ignoring start(%r): automatic mode needs a running event loop",
                    query,
                )
                return

        self._cancel()
        session_id = self._session_id
        self._session = FlowSession(
            session_id=session_id,
            query=query,
            mode=mode,
            speed_factor=self._speed.factor,
        )
        self._session_started = self._stage_started = time.perf_counter()
        if self._debug:
            self._trace = SessionTrace(session_id=session_id)

        logger.info(
            "Session %d started for %r (%s, x%s)",
            session_id,
            query,
            mode.value,
            self._session.speed_factor,
        )
        session = self._session
        for hook in self._hooks:
            hook.on_session_start(session)
            # a hook may have started another session
            if session_id != self._session_id:
                return

        self._enter(WORKING_STAGES[0])

        if loop is not None and session_id == self._session_id:
            self._task = loop.create_task(
                self._drive(session_id), name=f"flow-session-{session_id}"
            )

    def advance(self) -> None:
        """Step a manual session to its next stage."""
        session = self._session
        if session.mode is not Mode.MANUAL or not session.loading:
            logger.debug(
                "Ignoring advance() in %s mode at stage %s",
                session.mode.value,
                session.stage.value,
            )
            return

        self._step()
        if self._session.stage is Stage.NORMALIZING:
            self._resolve_pending()

    def reset(self) -> None:
        """Cancel the running session and return to idle."""
        self._cancel()
        self._session = self._idle_session()
        logger.debug("Controller reset (session %d)", self._session_id)

    async def wait(self) -> FlowSession:
        """Wait for the automatic chain of the current session to stop.

        Returns the state at that point, which belongs to a newer session if
        the awaited one was superseded. Errors raised by hooks inside the
        chain end the session in the error stage and are re-raised here as
        :class:`FlowInternalError`.
        """
        task = self._task
        if task is not None:
            await asyncio.wait({task})
            if not task.cancelled():
                task.result()
        return self._session

    async def run(self, query: str) -> FlowSession:
        """Start a session and wait until it settles."""
        self.start(query)
        return await self.wait()

    # -- internals --

    def _idle_session(self) -> FlowSession:
        return FlowSession(
            session_id=self._session_id,
            mode=self._mode,
            speed_factor=self._speed.factor,
        )

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        if self._trace is not None and self._trace.outcome == "RUNNING":
            self._trace.outcome = "CANCELLED"
            self._trace.total_duration_ms = self._elapsed_ms(self._session_started)
        if self._session.loading:
            logger.info("Session %d cancelled", self._session.session_id)
        self._pending = None
        self._session_id += 1

    async def _drive(self, session_id: int) -> None:
        try:
            await self._chain(session_id)
        except Exception as exc:
            wrapped = FlowInternalError(f"Internal flow error: {exc}", cause=exc)
            if session_id == self._session_id:
                self._abort(wrapped)
            raise wrapped from exc

    def _abort(self, error: FlowInternalError) -> None:
        session = self._session
        logger.exception("Session %d aborted", session.session_id)
        if session.is_terminal:
            return

        self._record(session.stage, error.detail)
        session = replace(
            session, stage=Stage.ERROR, result=None, error_message=error.detail
        )
        self._session = session
        if self._trace is not None and self._trace.session_id == session.session_id:
            self._trace.outcome = "ERROR"
            self._trace.total_duration_ms = self._elapsed_ms(self._session_started)
        for hook in self._hooks:
            hook.on_session_end(session)

    async def _chain(self, session_id: int) -> None:
        while True:
            stage = self._session.stage
            delay = base_duration(stage) * self._session.speed_factor * self._time_unit
            if delay > 0:
                await self._sleep(delay)
            if session_id != self._session_id:
                return
            if stage is Stage.NORMALIZING and not self._resolve_pending():
                return
            if stage.is_terminal:
                return
            self._step()

    def _step(self) -> None:
        next_stage = WORKING_STAGES[self._session.stage_index + 1]
        if next_stage is Stage.COMPLETE:
            self._enter(Stage.COMPLETE, result=self._pending)
        else:
            self._enter(next_stage)

    def _resolve_pending(self) -> bool:
        try:
            self._pending = lookup(self._session.query)
        except QueryNotFound as exc:
            self._enter(Stage.ERROR, error_message=exc.detail, reason=exc.detail)
            return False
        return True

    def _enter(
        self,
        stage: Stage,
        *,
        result: Record | None = None,
        error_message: str | None = None,
        reason: str | None = None,
    ) -> None:
        previous = self._session.stage
        self._record(previous, reason)

        session = replace(
            self._session, stage=stage, result=result, error_message=error_message
        )
        self._session = session
        logger.debug(
            "Session %d: %s -> %s", session.session_id, previous.value, stage.value
        )
        for hook in self._hooks:
            hook.on_transition(session, previous)
            if session.session_id != self._session_id:
                return

        if not stage.is_terminal:
            return

        if self._trace is not None and self._trace.session_id == session.session_id:
            self._trace.outcome = "OK" if stage is Stage.COMPLETE else "ERROR"
            self._trace.total_duration_ms = self._elapsed_ms(self._session_started)
        if stage is Stage.ERROR:
            logger.info("Session %d failed: %s", session.session_id, error_message)
        else:
            logger.info("Session %d complete", session.session_id)
        for hook in self._hooks:
            hook.on_session_end(session)

    def _record(self, previous: Stage, reason: str | None) -> None:
        now = time.perf_counter()
        if self._trace is not None and previous is not Stage.IDLE:
            self._trace.entries.append(
                TraceEntry(
                    stage=previous,
                    duration_ms=(now - self._stage_started) * 1000,
                    outcome="OK" if reason is None else "FAILED",
                    reason=reason,
                )
            )
        self._stage_started = now

    @staticmethod
    def _elapsed_ms(since: float) -> float:
        return (time.perf_counter() - since) * 1000
