# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Session controller for a single health check.

The controller owns ``SessionState`` and is driven by the terminal runtime:
``init`` returns the probe command, ``update`` applies one event at a time and
``view`` renders the current state. Once an outcome or the cancel key has been
processed the session is terminated and ignores anything delivered later.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

import httpx

from .config import ProbeSettings, load_probe_settings
from .errors import ProbeError
from .events import (
    CANCEL_KEY,
    QUIT,
    Command,
    Event,
    KeyPressed,
    Outcome,
    ProbeFailed,
    StatusReceived,
    WindowResized,
)
from .probe import probe

logger = logging.getLogger(__name__)

Prober = Callable[[str, float], Outcome]

_EVENT_TYPES = (StatusReceived, ProbeFailed, KeyPressed, WindowResized)


@dataclass
class SessionState:
    status_code: int | None = None
    probe_error: ProbeError | None = None


class Session:
    """State machine behind the status check screen."""

    def __init__(self, settings: ProbeSettings | None = None, *, prober: Prober = probe):
        self.settings = settings or load_probe_settings()
        self.state = SessionState()
        self.terminated = False
        self._prober = prober

    @property
    def target(self) -> str:
        return self.settings.target

    def init(self) -> Command:
        return partial(self._prober, self.settings.target, self.settings.timeout)

    def update(self, event: Event) -> Command | None:
        if not isinstance(event, _EVENT_TYPES):
            raise TypeError(f"Unsupported event: {event!r}")
        if self.terminated:
            logger.debug("Ignoring %s after termination", type(event).__name__)
            return None

        if isinstance(event, StatusReceived):
            self.state.status_code = event.code
            return self._terminate()
        if isinstance(event, ProbeFailed):
            self.state.probe_error = event.error
            return self._terminate()
        if isinstance(event, KeyPressed):
            if event.key == CANCEL_KEY:
                logger.debug("Cancelled by user")
                return self._terminate()
            return None
        # WindowResized: nothing to update, the runtime repaints.
        return None

    def view(self) -> str:
        if self.state.probe_error is not None:
            return f"Error: {self.state.probe_error}\nPress Ctrl+C to exit."

        text = f"Checking {self.target}...\n"
        if self.state.status_code is not None:
            code = self.state.status_code
            text += f"{code} {httpx.codes.get_reason_phrase(code)}!"

        return "\n" + text + "\n\n"

    def _terminate(self) -> Command:
        self.terminated = True
        return QUIT


__all__ = ["Prober", "Session", "SessionState"]
