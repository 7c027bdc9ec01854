# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-shot HTTP health probe."""

from __future__ import annotations

import logging
from dataclasses import replace

from .config import load_probe_settings
from .errors import ProbeError, categorize_exception
from .events import Outcome, ProbeFailed, StatusReceived
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest

logger = logging.getLogger(__name__)


def probe(target: str, timeout: float, client: HttpClient | None = None) -> Outcome:
    """
    Issue one GET against ``target`` and translate the result into an Outcome.

    Any status code the transport reports is passed through unchanged. Every
    transport failure, including timeouts, becomes ``ProbeFailed``. When no
    client is supplied a default one is created and closed before returning.
    """
    owned: HttpClient | None = None
    logger.debug("Probing %s (timeout %.1fs)", target, timeout)
    try:
        if client is None:
            # Building the client loads TLS configuration and can fail too.
            client = owned = create_default_http_client(replace(load_probe_settings(), target=target, timeout=timeout))
        response = client.request(HttpRequest(url=target, timeout=timeout))
    except Exception as exc:  # noqa: BLE001
        logger.info("Probe of %s failed: %s", target, exc)
        return ProbeFailed(
            ProbeError(message=str(exc) or type(exc).__name__, error_type=type(exc).__name__, category=categorize_exception(exc))
        )
    finally:
        if owned is not None:
            owned.close()

    if response.status_code is not None:
        logger.debug("Probe of %s returned %s", target, response.status_code)
        return StatusReceived(response.status_code)

    error = response.error or ProbeError(message="request failed without a response")
    return ProbeFailed(error)


__all__ = ["probe"]
