# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from statuscheck.cli import main as cli_main
from statuscheck.cli.main import build_parser
from statuscheck.errors import ProgramError
from statuscheck.session import Session
from statuscheck.version import __version__


class FakeProgram:
    instances: list["FakeProgram"] = []

    def __init__(self, model, **kwargs):
        self.model = model
        self.kwargs = kwargs
        self.ran = False
        FakeProgram.instances.append(self)

    def run(self):
        self.ran = True
        return self.model


def test_build_parser_accepts_no_arguments():
    args = build_parser().parse_args([])
    assert args.log_level is None


def test_build_parser_rejects_positional_target(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["http://example.com"])
    assert excinfo.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_main_runs_session(monkeypatch):
    FakeProgram.instances.clear()
    monkeypatch.setattr(cli_main, "Program", FakeProgram)
    monkeypatch.setattr(cli_main, "setup_logging", lambda *args, **kwargs: None)

    exit_code = cli_main.main([])

    assert exit_code == 0
    (program,) = FakeProgram.instances
    assert program.ran is True
    assert isinstance(program.model, Session)
    assert program.model.target == "https://charm.sh"


def test_cli_main_reports_runtime_failure(monkeypatch, capsys):
    class BrokenProgram(FakeProgram):
        def run(self):
            raise ProgramError("could not configure terminal: not a tty")

    monkeypatch.setattr(cli_main, "Program", BrokenProgram)
    monkeypatch.setattr(cli_main, "setup_logging", lambda *args, **kwargs: None)

    exit_code = cli_main.main([])

    assert exit_code == 1
    assert "Error: could not configure terminal: not a tty" in capsys.readouterr().out


def test_cli_main_error_session_still_exits_zero(monkeypatch):
    from statuscheck.errors import ProbeError
    from statuscheck.events import ProbeFailed

    class FailingProgram(FakeProgram):
        def run(self):
            self.model.update(ProbeFailed(ProbeError("connection refused")))
            return self.model

    monkeypatch.setattr(cli_main, "Program", FailingProgram)
    monkeypatch.setattr(cli_main, "setup_logging", lambda *args, **kwargs: None)

    assert cli_main.main([]) == 0


def test_cli_main_passes_logging_options(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main, "Program", FakeProgram)
    monkeypatch.setattr(cli_main, "setup_logging", lambda *args: calls.append(args))

    assert cli_main.main(["--log-level", "debug", "--log-file", "statuscheck.log"]) == 0
    assert calls == [("debug", "statuscheck.log")]
