# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import ProbeError, categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            # Streaming without reading leaves the body unread; leaving the
            # block closes the response and returns the connection.
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
            ) as resp:
                return HttpResponse(ok=True, status_code=resp.status_code, url=str(resp.url))
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.info("Request to %s failed (%s): %s", request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error=ProbeError(message=str(exc) or type(exc).__name__, error_type=type(exc).__name__, category=category),
            )

    def close(self) -> None:
        self._client.close()
