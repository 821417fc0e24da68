from __future__ import annotations

import io
import sys
from collections.abc import Iterator

import pytest

from pytoll.cli import main


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TOLL_REPORT_UNFINISHED", "TOLL_ENCODING", "TOLL_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_main_processes_stdin() -> None:
    stdin = io.StringIO("ABC123 A1 10,0\nABC123 A1 15,0\nbad line\n?\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    code = main([], stdin=stdin, stdout=stdout, stderr=stderr)

    assert code == 0
    assert stdout.getvalue() == "ABC123 A 5,0\nA1 5,0\n"
    assert stderr.getvalue() == "Error in line 3: bad line\n"


def test_report_unfinished_flag() -> None:
    stderr = io.StringIO()

    code = main(["--report-unfinished"], stdin=io.StringIO("ABC123 A1 10,0"), stdout=io.StringIO(), stderr=stderr)

    assert code == 0
    assert stderr.getvalue() == "Error in line 1: ABC123 A1 10,0\n"


def test_invalid_env_config_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOLL_REPORT_UNFINISHED", "sometimes")
    stderr = io.StringIO()

    code = main([], stdin=io.StringIO(""), stdout=io.StringIO(), stderr=stderr)

    assert code == 2
    assert "TOLL_REPORT_UNFINISHED" in stderr.getvalue()


def test_undecodable_line_is_reported_and_run_continues(monkeypatch: pytest.MonkeyPatch) -> None:
    raw = b"AAA A1 1,0\n\xff\nAAA A1 3,0\n?\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8"))
    stdout = io.StringIO()
    stderr = io.StringIO()

    code = main([], stdout=stdout, stderr=stderr)

    assert code == 0
    assert stdout.getvalue() == "AAA A 0,2\nA1 0,2\n"
    assert stderr.getvalue() == "Error in line 2: \udcff\n"


def test_undecodable_line_is_echoed_byte_for_byte(monkeypatch: pytest.MonkeyPatch) -> None:
    raw_err = io.BytesIO()
    err_stream = io.TextIOWrapper(raw_err, encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"bad \xfe\xff line\n"), encoding="utf-8"))
    monkeypatch.setattr(sys, "stderr", err_stream)

    code = main([], stdout=io.StringIO())
    err_stream.flush()

    assert code == 0
    assert raw_err.getvalue() == b"Error in line 1: bad \xfe\xff line\n"


def test_unreadable_input_exits_with_1() -> None:
    class _BrokenStream:
        def __iter__(self) -> Iterator[str]:
            yield "AAA A1 1,0\n"
            raise OSError("device went away")

    stderr = io.StringIO()

    code = main([], stdin=_BrokenStream(), stdout=io.StringIO(), stderr=stderr)  # type: ignore[arg-type]

    assert code == 1
    assert stderr.getvalue() == "pytoll: failed to read line 2: device went away\n"
