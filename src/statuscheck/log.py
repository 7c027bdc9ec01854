# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging helpers for statuscheck.

The live display owns the terminal while a check runs, so records can be sent
to a file instead of stderr with ``--log-file`` or ``STATUSCHECK_LOG_FILE``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure root logging; arguments win over the environment."""
    effective_level = (level or os.getenv("STATUSCHECK_LOG_LEVEL") or "WARNING").upper()
    target_file = log_file or os.getenv("STATUSCHECK_LOG_FILE") or None

    options: dict[str, Any] = {
        "level": getattr(logging, effective_level, logging.WARNING),
        "format": LOG_FORMAT,
    }
    if target_file:
        options["filename"] = target_file
    logging.basicConfig(**options)


__all__ = ["LOG_FORMAT", "setup_logging"]
