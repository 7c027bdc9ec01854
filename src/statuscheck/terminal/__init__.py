# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal runtime exports."""

from .keys import decode_keys
from .program import NO_INPUT, Model, Program

__all__ = ["NO_INPUT", "Model", "Program", "decode_keys"]
