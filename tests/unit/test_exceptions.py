"""Tests for FlowException hierarchy."""

from __future__ import annotations

from api_flow_simulator.exceptions import FlowException, QueryNotFound


class TestFlowException:
    def test_is_base_exception(self) -> None:
        exc = FlowException("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestQueryNotFound:
    def test_is_flow_exception(self) -> None:
        assert issubclass(QueryNotFound, FlowException)

    def test_detail_lists_known_keys(self) -> None:
        exc = QueryNotFound("Atlantis", ("Roma", "Tokyo"))
        assert exc.detail == 'City "Atlantis" not found. Try: Roma, Tokyo'
        assert str(exc) == exc.detail

    def test_carries_query_and_keys(self) -> None:
        exc = QueryNotFound("Atlantis", ("Roma",))
        assert exc.query == "Atlantis"
        assert exc.known_keys == ("Roma",)
