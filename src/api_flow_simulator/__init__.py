"""API Flow Simulator - staged simulation of a frontend/backend/third-party request."""

from api_flow_simulator.api import controller_dependency, create_app, flow_router
from api_flow_simulator.controller import FlowController
from api_flow_simulator.exceptions import (
    FlowException,
    FlowInternalError,
    QueryNotFound,
)
from api_flow_simulator.hooks import (
    AfterSession,
    BeforeSession,
    OnTransition,
    StageHook,
)
from api_flow_simulator.payloads import (
    Transformation,
    compare,
    raw_payload,
    stage_payload,
)
from api_flow_simulator.presentation import (
    STAGE_COPY,
    StageCopy,
    TimelineRow,
    timeline,
    timeline_status,
)
from api_flow_simulator.resolver import (
    NOT_FOUND,
    Record,
    known_keys,
    normalize,
    normalize_query,
    resolve,
)
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import (
    BASE_DURATIONS,
    WORKING_STAGES,
    Mode,
    Speed,
    Stage,
    base_duration,
)
from api_flow_simulator.trace import SessionTrace, TraceEntry

__all__ = [
    "BASE_DURATIONS",
    "NOT_FOUND",
    "STAGE_COPY",
    "WORKING_STAGES",
    "AfterSession",
    "BeforeSession",
    "FlowController",
    "FlowException",
    "FlowInternalError",
    "FlowSession",
    "Mode",
    "OnTransition",
    "QueryNotFound",
    "Record",
    "SessionTrace",
    "Speed",
    "Stage",
    "StageCopy",
    "StageHook",
    "TimelineRow",
    "TraceEntry",
    "Transformation",
    "base_duration",
    "compare",
    "controller_dependency",
    "create_app",
    "flow_router",
    "known_keys",
    "normalize",
    "normalize_query",
    "raw_payload",
    "resolve",
    "stage_payload",
    "timeline",
    "timeline_status",
]
