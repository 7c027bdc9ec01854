# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode raw terminal input into key names."""

from __future__ import annotations

_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[3~": "delete",
}

_NAMED_CONTROLS = {
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x00": "ctrl+@",
}


def decode_keys(data: bytes) -> list[str]:
    """
    Split one read from a cbreak-mode terminal into key names.

    Control bytes become ``ctrl+<letter>`` (``0x03`` is ``ctrl+c``), known
    escape sequences become arrow/navigation names and everything else is
    returned character by character.
    """
    text = data.decode("utf-8", errors="replace")
    keys: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            for sequence, name in _ESCAPE_SEQUENCES.items():
                if text.startswith(sequence, i):
                    keys.append(name)
                    i += len(sequence)
                    break
            else:
                keys.append("esc")
                i += 1
            continue

        char = text[i]
        i += 1
        if char in _NAMED_CONTROLS:
            keys.append(_NAMED_CONTROLS[char])
        elif "\x01" <= char <= "\x1a":
            keys.append(f"ctrl+{chr(ord(char) + 96)}")
        elif char == " ":
            keys.append("space")
        else:
            keys.append(char)
    return keys


__all__ = ["decode_keys"]
