"""Tests for the command-line interface."""

import logging
import os
from pathlib import Path

import pytest

from headr import cli
from headr.config import Bytes, Lines


def test_build_config_defaults() -> None:
    args = cli.create_parser().parse_args([])
    config = cli.build_config(args)
    assert config.sources == ("-",)
    assert config.mode == Lines(10)


def test_build_config_bytes() -> None:
    args = cli.create_parser().parse_args(["-c", "4", "a", "b"])
    config = cli.build_config(args)
    assert config.sources == ("a", "b")
    assert config.mode == Bytes(4)


def test_lines_and_bytes_conflict() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.create_parser().parse_args(["-n", "1", "-c", "1"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["-n", "0"], "illegal line count -- 0"),
        (["--lines", "foo"], "illegal line count -- foo"),
        (["-c", "-3"], "illegal byte count -- -3"),
        (["--bytes", "x"], "illegal byte count -- x"),
    ],
)
def test_invalid_count_exits_before_output(capsysbinary, argv: list[str], message: str) -> None:
    assert cli.main(argv) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert captured.err.decode() == message + "\n"


def test_main_prints_files(tmp_path: Path, capsysbinary) -> None:
    a = tmp_path / "a.txt"
    a.write_bytes(b"1\n2\n3\n")
    missing = tmp_path / "missing.txt"

    assert cli.main(["-n", "2", str(a), str(missing)]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == f"==> {a} <==\n1\n2\n".encode()
    assert captured.err.decode() == f"{missing}: No such file or directory\n"


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "headr 0.1.0"


def test_log_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv(cli.HEADR_LOG_LEVEL_ENV, "debug")
    assert cli.default_log_level() == "DEBUG"

    monkeypatch.setenv(cli.HEADR_LOG_LEVEL_ENV, "chatty")
    assert cli.default_log_level() == "WARNING"

    monkeypatch.delenv(cli.HEADR_LOG_LEVEL_ENV)
    args = cli.create_parser().parse_args([])
    assert getattr(logging, args.log_level) == logging.WARNING


def test_broken_pipe_exits_quietly(monkeypatch, capsysbinary) -> None:
    def closed_pipe(config) -> None:
        raise BrokenPipeError(32, "Broken pipe")

    monkeypatch.setattr(cli, "run", closed_pipe)

    assert cli.main(["-n", "1"]) == 1
    captured = capsysbinary.readouterr()
    assert captured.err == b""


def test_silence_stdout_redirects_to_null_device(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "stdout.bin"

    with open(target, "wb") as handle:

        class FakeStdout:
            def fileno(self) -> int:
                return handle.fileno()

        monkeypatch.setattr(cli.sys, "stdout", FakeStdout())
        cli.silence_stdout()
        os.write(handle.fileno(), b"dropped")

    assert target.read_bytes() == b""
