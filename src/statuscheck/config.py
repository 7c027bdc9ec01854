# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for statuscheck."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_TARGET = "https://charm.sh"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"statuscheck/{__version__}"


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ProbeSettings:
    """Health check target and HTTP client defaults.

    The target and timeout are fixed; only transport details can be tuned
    from the environment.
    """

    target: str = DEFAULT_TARGET
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            user_agent=os.getenv("STATUSCHECK_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("STATUSCHECK_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("STATUSCHECK_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
