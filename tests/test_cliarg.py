# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from pytest import CaptureFixture
from spelling.argx import CommandLineTool
from spelling.cliarg import arg, non_negative_int, positive_int

import argparse
import pytest


@pytest.mark.parametrize("value,expected", [("0", 0), ("3", 3), ("08", 8)])
def test_non_negative_int(value: str, expected: int) -> None:
    assert non_negative_int(value) == expected


@pytest.mark.parametrize("value", ["-1", "two", "1.5", ""])
def test_non_negative_int_invalid(value: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        non_negative_int(value)


def test_positive_int() -> None:
    assert positive_int("4") == 4
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")


class T(CommandLineTool):
    """Test class"""

    @arg.max_distance
    @arg.workers
    @arg()
    def t(self) -> None:
        """t"""


def test_max_distance_argument(tmp_path: Path) -> None:
    test_class = T("spelling")
    ret = test_class.run(args=["--config", str(tmp_path / "c.json"), "t", "-m", "3", "--workers", "2"])
    assert ret is None
    assert test_class.args.max_distance == 3
    assert test_class.args.workers == 2


def test_negative_max_distance_is_usage_error(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        T("spelling").run(args=["--config", str(tmp_path / "c.json"), "t", "--max-distance", "-1"])
    assert excinfo.value.code == 2
    assert "expected a non-negative integer" in capsys.readouterr().err
