# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the prober."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ProbeError

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """Status line of a completed request, or the error that prevented one.

    The body is never kept.
    """

    ok: bool
    status_code: int | None = None
    url: str | None = None
    error: ProbeError | None = None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None
