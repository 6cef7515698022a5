"""Tests for Stage, Mode, Speed and the timing tables."""

from __future__ import annotations

import pytest

from api_flow_simulator.stage import (
    BASE_DURATIONS,
    WORKING_STAGES,
    Mode,
    Speed,
    Stage,
    base_duration,
)


class TestStage:
    def test_values_match_wire_names(self) -> None:
        assert [s.value for s in Stage] == [
            "idle",
            "sending",
            "backend-processing",
            "calling-external",
            "external-responding",
            "normalizing",
            "complete",
            "error",
        ]

    def test_working_order_is_strictly_increasing(self) -> None:
        orders = [s.order for s in WORKING_STAGES]
        assert orders == list(range(6))

    def test_idle_order_is_minus_one(self) -> None:
        assert Stage.IDLE.order == -1

    def test_error_sits_at_normalizing_position(self) -> None:
        assert Stage.ERROR.order == Stage.NORMALIZING.order

    def test_terminal_stages(self) -> None:
        terminal = {s for s in Stage if s.is_terminal}
        assert terminal == {Stage.COMPLETE, Stage.ERROR}

    def test_working_stages_exclude_idle_and_error(self) -> None:
        assert Stage.IDLE not in WORKING_STAGES
        assert Stage.ERROR not in WORKING_STAGES


class TestDurations:
    def test_base_durations(self) -> None:
        assert BASE_DURATIONS == {
            Stage.SENDING: 800,
            Stage.BACKEND_PROCESSING: 1000,
            Stage.CALLING_EXTERNAL: 1000,
            Stage.EXTERNAL_RESPONDING: 800,
            Stage.NORMALIZING: 1200,
        }

    @pytest.mark.parametrize("stage", [Stage.IDLE, Stage.COMPLETE, Stage.ERROR])
    def test_non_waiting_stages_have_zero_duration(self, stage: Stage) -> None:
        assert base_duration(stage) == 0

    def test_total_working_duration(self) -> None:
        assert sum(base_duration(s) for s in WORKING_STAGES) == 4800


class TestSpeed:
    @pytest.mark.parametrize(
        ("speed", "factor"),
        [(Speed.SLOW, 2.0), (Speed.NORMAL, 1.0), (Speed.FAST, 0.5)],
    )
    def test_factors(self, speed: Speed, factor: float) -> None:
        assert speed.factor == factor

    def test_lookup_by_name(self) -> None:
        assert Speed("fast") is Speed.FAST


class TestMode:
    def test_values(self) -> None:
        assert Mode("auto") is Mode.AUTO
        assert Mode("manual") is Mode.MANUAL
