# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
statuscheck package entrypoint.

A one-shot HTTP health check shown in the terminal. The session controller
is a small state machine driven by a terminal event loop; HTTP behavior is
abstracted behind an injectable client interface.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, ProbeError, ProgramError
from .events import KeyPressed, ProbeFailed, StatusReceived, WindowResized
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .probe import probe
from .session import Session, SessionState
from .terminal import Program
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "KeyPressed",
    "ProbeError",
    "ProbeFailed",
    "ProbeSettings",
    "Program",
    "ProgramError",
    "Session",
    "SessionState",
    "StatusReceived",
    "WindowResized",
    "create_default_http_client",
    "load_probe_settings",
    "probe",
    "setup_logging",
    "__version__",
]
