# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Single-threaded terminal event loop.

``Program`` drives a model: it runs the model's startup command, feeds key
presses, resizes and command results to ``model.update`` one at a time from an
asyncio queue, and repaints ``model.view()`` after every event. Commands run on
daemon threads and only hand their result back through the queue; a command
that raises ends the run with ``ProgramError``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
import termios
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import IO, Any, Protocol

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..errors import ProgramError
from ..events import CANCEL_KEY, QUIT, Command, Event, KeyPressed, WindowResized
from .keys import decode_keys

logger = logging.getLogger(__name__)

_READ_SIZE = 1024


class Model(Protocol):
    def init(self) -> Command | None: ...

    def update(self, event: Event) -> Command | None: ...

    def view(self) -> str: ...


class _NoInput:
    def __repr__(self) -> str:
        return "NO_INPUT"


NO_INPUT = _NoInput()


def _event_loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class Program:
    """Runs a model until it returns the QUIT command."""

    def __init__(
        self,
        model: Model,
        *,
        console: Console | None = None,
        input: IO[Any] | _NoInput | None = None,  # noqa: A002
        handle_signals: bool = True,
    ):
        self.model = model
        self.console = console or Console(highlight=False)
        self._input = sys.stdin if input is None else input
        self._handle_signals = handle_signals
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[Event | None] | None = None
        self._quitting = False
        self._command_error: BaseException | None = None

    def run(self) -> Model:
        """Run the event loop to completion and return the final model."""
        if _event_loop_running():
            raise ProgramError("cannot start inside a running event loop")
        return asyncio.run(self.run_async())

    async def run_async(self) -> Model:
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue[Event | None] = asyncio.Queue()
        self._loop, self._queue = loop, queue
        self._quitting = False
        self._command_error = None

        with self._terminal_input(loop, queue), self._signal_handlers(loop, queue):
            with Live(
                self._render(),
                console=self.console,
                auto_refresh=False,
                transient=False,
                redirect_stdout=False,
                redirect_stderr=False,
            ) as live:
                self._execute(self.model.init())
                while not self._quitting:
                    event = await queue.get()
                    if event is None:
                        break
                    self._execute(self.model.update(event))
                    live.update(self._render(), refresh=True)

        if self._command_error is not None:
            error = self._command_error
            raise ProgramError(f"command failed: {error or type(error).__name__}") from error
        return self.model

    def send(self, event: Event) -> None:
        """Post an event to the running loop; safe to call from any thread."""
        self._post(type(event).__name__, self._enqueue, event)

    def _post(self, what: str, callback: Callable[..., None], *args: Any) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            logger.debug("Dropping %s: program is not running", what)
            return
        try:
            loop.call_soon_threadsafe(callback, *args)
        except RuntimeError:
            # The loop closed between the check and the call.
            logger.debug("Dropping %s: event loop closed", what)

    def _enqueue(self, event: Event | None) -> None:
        if self._queue is not None:
            self._queue.put_nowait(event)

    def _abort(self, exc: BaseException) -> None:
        if self._command_error is None:
            self._command_error = exc
        self._enqueue(None)

    def _render(self) -> Text:
        return Text(self.model.view())

    def _execute(self, command: Command | None) -> None:
        if command is None:
            return
        if command is QUIT:
            self._quitting = True
            return
        thread = threading.Thread(target=self._run_command, args=(command,), daemon=True)
        thread.start()

    def _run_command(self, command: Command) -> None:
        try:
            event = command()
        except Exception as exc:  # noqa: BLE001
            logger.exception("Command %r raised", command)
            self._post("command failure", self._abort, exc)
            return
        if event is not None:
            self.send(event)

    def _on_keys(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[Event | None], fd: int) -> None:
        try:
            data = os.read(fd, _READ_SIZE)
        except BlockingIOError:
            return
        if not data:
            loop.remove_reader(fd)
            return
        for key in decode_keys(data):
            queue.put_nowait(KeyPressed(key))

    def _post_resize(self, queue: asyncio.Queue[Event | None]) -> None:
        width, height = self.console.size
        queue.put_nowait(WindowResized(width, height))

    @contextmanager
    def _terminal_input(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[Event | None]) -> Iterator[None]:
        """Put a TTY input into cbreak mode without signal keys and read it on the loop."""
        fd = self._input_fd()
        if fd is None:
            yield
            return

        try:
            saved = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
            attrs[6][termios.VMIN] = 1
            attrs[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except termios.error as exc:
            raise ProgramError(f"could not configure terminal: {exc}") from exc

        try:
            loop.add_reader(fd, self._on_keys, loop, queue, fd)
        except (OSError, ValueError) as exc:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            raise ProgramError(f"could not read terminal input: {exc}") from exc
        try:
            yield
        finally:
            loop.remove_reader(fd)
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def _input_fd(self) -> int | None:
        if isinstance(self._input, _NoInput):
            return None
        try:
            fd = self._input.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    @contextmanager
    def _signal_handlers(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[Event | None]) -> Iterator[None]:
        """Translate SIGINT into the cancel key and SIGWINCH into resize events."""
        if not self._handle_signals:
            yield
            return

        handlers: dict[int, Callable[[], None]] = {
            signal.SIGINT: lambda: queue.put_nowait(KeyPressed(CANCEL_KEY)),
        }
        if hasattr(signal, "SIGWINCH"):
            handlers[signal.SIGWINCH] = lambda: self._post_resize(queue)

        installed = []
        for signum, handler in handlers.items():
            try:
                loop.add_signal_handler(signum, handler)
            except (NotImplementedError, RuntimeError) as exc:
                logger.debug("Cannot handle %s: %s", signal.Signals(signum).name, exc)
                continue
            installed.append(signum)
        try:
            yield
        finally:
            for signum in installed:
                loop.remove_signal_handler(signum)


__all__ = ["NO_INPUT", "Model", "Program"]
