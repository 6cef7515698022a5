"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# Suspends the automatic chain for the given number of seconds
SleepCallback = Callable[[float], Awaitable[None]]
