# Copyright 2020, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from functools import cached_property
from pathlib import Path
from spelling.argx import arg, CommandLineTool, Config, name_to_cmd_parts, UserError
from spelling.errors import DictionaryError
from typing import Callable, NoReturn

import errno
import json
import os
import pytest


class TestCLI(CommandLineTool):
    __test__ = False  # to avoid PytestCollectionWarning

    @arg()
    def xxx(self) -> None:
        """7"""

    @arg()
    def aaa(self) -> None:
        """1"""

    @arg()
    def ccc(self) -> None:
        """4"""

    @arg()
    def yyy(self) -> None:
        """8"""

    @arg()
    def bbb(self) -> None:
        """2

        With more explaining
        """


def test_commands_remain_alphabetically_ordered() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds(cli.add_cmd)

    action_order = [item.dest for item in cli.subparsers._choices_actions]
    assert action_order == ["aaa", "bbb", "ccc", "xxx", "yyy"]


def test_command_has_function_help() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds(cli.add_cmd)

    help_text = cli.subparsers.choices[cli.bbb.__name__].format_help()
    assert cli.bbb.__doc__ is not None
    assert "With more explaining" in help_text


def test_parse_args_sets_args() -> None:
    cli = TestCLI("testcli")
    cli.parse_args(["--config", "x.json", "ccc"])
    assert cli.args.config == "x.json"
    assert cli.args.func == cli.ccc


class DescriptorCLI(CommandLineTool):
    @property
    def raise1(self) -> NoReturn:
        raise RuntimeError("evaluated raise1")

    @cached_property
    def raise2(self) -> NoReturn:
        raise RuntimeError("evaluated raise2")

    @arg("something")
    def example_command(self) -> None:
        """Example command."""


def test_descriptors_are_not_eagerly_evaluated() -> None:
    cli = DescriptorCLI("DescriptorCLI")
    calls: list[Callable] = []
    cli.add_cmds(calls.append)
    assert calls == [cli.example_command]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("check", ["check"]),
        ("config__show", ["config", "show"]),
        ("config__set_default", ["config", "set-default"]),
        ("word_list", ["word", "list"]),
    ],
)
def test_name_to_cmd_parts(name: str, expected: list[str]) -> None:
    assert name_to_cmd_parts(name) == expected


class FailingCLI(CommandLineTool):
    @arg()
    def fail(self) -> None:
        """fails with a user error"""
        raise UserError("bad input")

    @arg()
    def missing(self) -> None:
        """fails loading a dictionary"""
        raise DictionaryError("words.txt", "FileNotFoundError: No such file or directory")

    @arg()
    def pipe(self) -> None:
        """fails writing output"""
        raise OSError(errno.EPIPE, "Broken pipe")

    @arg()
    def interrupt(self) -> None:
        """interrupted by the user"""
        raise KeyboardInterrupt

    @arg()
    def succeed(self) -> int:
        """returns a custom exit code"""
        return 5


@pytest.mark.parametrize(
    "command,exit_code,message",
    [
        ("fail", 1, "command failed: UserError: bad input"),
        (
            "missing",
            1,
            "command failed: DictionaryError: Failed to load dictionary 'words.txt': FileNotFoundError",
        ),
        ("pipe", 13, "*** output truncated ***"),
        ("interrupt", 2, "*** terminated by keyboard ***"),
        ("succeed", 5, None),
    ],
)
def test_run_exit_codes(
    tmp_path: Path, caplog: LogCaptureFixture, command: str, exit_code: int, message: str | None
) -> None:
    cli = FailingCLI("failing")
    assert cli.run(["--config", str(tmp_path / "config.json"), command]) == exit_code
    if message is not None:
        assert message in caplog.text


def test_run_without_command_prints_help() -> None:
    with pytest.raises(SystemExit) as excinfo:
        FailingCLI("failing").run(args=[])
    assert excinfo.value.code == 0


def test_config_missing_file_is_empty(tmp_path: Path) -> None:
    config = Config(tmp_path / "missing.json")
    assert config == {}


def test_config_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "spelling.json"
    config = Config(path)
    config["max_distance"] = 3
    config.save()

    assert json.loads(path.read_text()) == {"max_distance": 3}
    assert oct(os.stat(path).st_mode & 0o777) == oct(0o600)
    assert Config(path) == {"max_distance": 3}


def test_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "spelling.json"
    path.write_text("{not json")
    with pytest.raises(UserError) as excinfo:
        Config(path)
    assert "Invalid JSON in configuration file" in str(excinfo.value)


def test_invalid_config_fails_cleanly(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    path = tmp_path / "spelling.json"
    path.write_text("[")
    assert FailingCLI("failing").run(["--config", str(path), "succeed"]) == 1
    assert "Invalid JSON in configuration file" in caplog.text
