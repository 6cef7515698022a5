"""Tests for the FlowSession snapshot."""

from __future__ import annotations

import dataclasses

import pytest

from api_flow_simulator.resolver import lookup
from api_flow_simulator.session import FlowSession
from api_flow_simulator.stage import Mode, Stage


class TestFlowSession:
    def test_defaults_are_idle(self) -> None:
        session = FlowSession()
        assert session.stage is Stage.IDLE
        assert session.stage_index == -1
        assert session.query == ""
        assert session.result is None
        assert session.error_message is None

    def test_frozen(self) -> None:
        session = FlowSession()
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.stage = Stage.SENDING  # type: ignore[misc]

    def test_stage_index_follows_stage(self) -> None:
        session = FlowSession(stage=Stage.CALLING_EXTERNAL)
        assert session.stage_index == 2

    def test_idle_is_neither_active_nor_loading(self) -> None:
        session = FlowSession()
        assert not session.is_active
        assert not session.loading
        assert not session.is_terminal

    def test_working_stage_is_loading(self) -> None:
        session = FlowSession(stage=Stage.NORMALIZING, query="Roma")
        assert session.is_active
        assert session.loading

    def test_complete_is_terminal(self) -> None:
        session = FlowSession(
            stage=Stage.COMPLETE, query="Roma", result=lookup("Roma")
        )
        assert session.is_terminal
        assert not session.loading

    def test_mode_is_kept(self) -> None:
        assert FlowSession(mode=Mode.MANUAL).mode is Mode.MANUAL
