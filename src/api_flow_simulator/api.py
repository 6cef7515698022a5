"""FastAPI surface — exposes a FlowController to a polling UI.

  GET  /flow/state    → current session snapshot
  POST /flow/start    → start a session (optionally switching mode/speed)
  POST /flow/advance  → manual single step
  POST /flow/reset    → back to idle
  GET  /flow/stages   → timeline rows for the current stage
  GET  /flow/payload  → synthetic payload for the current stage
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, FastAPI

from api_flow_simulator.controller import FlowController
from api_flow_simulator.payloads import stage_payload
from api_flow_simulator.presentation import timeline
from api_flow_simulator.schemas import (
    PayloadResponse,
    SessionResponse,
    StartRequest,
    TimelineRowResponse,
)

logger = logging.getLogger(__name__)


def controller_dependency(
    controller: FlowController,
) -> Callable[[], FlowController]:
    """Return a FastAPI-compatible dependency yielding ``controller``."""

    def dependency() -> FlowController:
        return controller

    return dependency


def flow_router(
    controller: FlowController | None = None, *, prefix: str = "/flow"
) -> APIRouter:
    """Build a router bound to ``controller`` (a fresh one by default)."""
    controller = controller or FlowController()
    get_controller = controller_dependency(controller)
    router = APIRouter(prefix=prefix, tags=["flow"])

    @router.get("/state", response_model=SessionResponse)
    async def get_state(
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> SessionResponse:
        return SessionResponse.from_session(ctrl.get_state())

    @router.post("/start", response_model=SessionResponse)
    async def start(
        body: StartRequest,
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> SessionResponse:
        if body.query.strip():
            ctrl.configure(mode=body.mode, speed=body.speed)
        ctrl.start(body.query)
        logger.debug("start requested for %r", body.query)
        return SessionResponse.from_session(ctrl.get_state())

    @router.post("/advance", response_model=SessionResponse)
    async def advance(
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> SessionResponse:
        ctrl.advance()
        return SessionResponse.from_session(ctrl.get_state())

    @router.post("/reset", response_model=SessionResponse)
    async def reset(
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> SessionResponse:
        ctrl.reset()
        return SessionResponse.from_session(ctrl.get_state())

    @router.get("/stages", response_model=list[TimelineRowResponse])
    async def stages(
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> list[TimelineRowResponse]:
        rows = timeline(ctrl.get_state().stage)
        return [TimelineRowResponse.from_row(row) for row in rows]

    @router.get("/payload", response_model=PayloadResponse)
    async def payload(
        ctrl: FlowController = Depends(get_controller),  # noqa: B008
    ) -> PayloadResponse:
        return PayloadResponse(**stage_payload(ctrl.get_state()))

    return router


def create_app(controller: FlowController | None = None) -> FastAPI:
    """FastAPI application serving a single controller."""
    app = FastAPI(title="API Flow Simulator")
    app.include_router(flow_router(controller))
    return app
