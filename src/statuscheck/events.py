# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Event and command types exchanged between the terminal runtime and a model.

Events form a closed set: the probe outcome (``StatusReceived`` or
``ProbeFailed``) and terminal input (``KeyPressed``, ``WindowResized``).
A command is a zero-argument callable that the runtime executes off the
event loop; whatever event it returns is posted back to the loop.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from .errors import ProbeError


@dataclass(frozen=True)
class StatusReceived:
    """The probe got a response; carries its status code verbatim."""

    code: int


@dataclass(frozen=True)
class ProbeFailed:
    """The probe could not produce a status code."""

    error: ProbeError


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class WindowResized:
    width: int
    height: int


Outcome = Union[StatusReceived, ProbeFailed]
Event = Union[StatusReceived, ProbeFailed, KeyPressed, WindowResized]
Command = Callable[[], Union[Event, None]]


def quit_program() -> None:
    """Command that asks the runtime to stop; handled inline by the runtime."""
    return None


QUIT: Command = quit_program

CANCEL_KEY = "ctrl+c"

__all__ = [
    "CANCEL_KEY",
    "Command",
    "Event",
    "KeyPressed",
    "Outcome",
    "ProbeFailed",
    "QUIT",
    "StatusReceived",
    "WindowResized",
    "quit_program",
]
