"""FlowException hierarchy for the simulated request flow."""

from __future__ import annotations


class FlowException(Exception):
    """Base for all flow exceptions."""


class QueryNotFound(FlowException):
    """The query does not match any known record.

    Raised while a session enters the normalizing stage and converted by the
    controller into the terminal error stage.
    """

    def __init__(self, query: str, known_keys: tuple[str, ...]) -> None:
        detail = f'City "{query}" not found. Try: {", ".join(known_keys)}'
        super().__init__(detail)
        self.query = query
        self.known_keys = known_keys
        self.detail = detail


class FlowInternalError(FlowException):
    """Engine-level error wrapping unexpected exceptions in the automatic chain."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
