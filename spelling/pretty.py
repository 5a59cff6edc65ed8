# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print lists of dicts as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, Sequence, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Sequence[str]


def format_item(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    if isinstance(value, str):
        # json encode strings, but if the only change would be the quotes go with the original;
        # this makes empty words and words with odd whitespace visible
        json_v = json.dumps(value, ensure_ascii=False)
        if json_v == '"{}"'.format(value) and value:
            return value
        return json_v
    return "{}".format(value)


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to print, in order. Defaults to all keys sorted.
    :param bool header: True to print the column names
    """
    formatted_values = [{key: format_item(value) for key, value in item.items()} for item in result]
    if table_layout is None:
        table_layout = sorted({key for row in formatted_values for key in row})

    widths = {field: len(field) for field in table_layout}
    for row in formatted_values:
        for field in table_layout:
            widths[field] = max(widths[field], len(row.get(field, "")))

    if header:
        yield "  ".join(field.upper().ljust(widths[field]) for field in table_layout).rstrip()
        yield "  ".join("=" * widths[field] for field in table_layout)
    for row in formatted_values:
        yield "  ".join(row.get(field, "").ljust(widths[field]) for field in table_layout).rstrip()


def print_table(
    result: ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout, header=header):
        print(row, file=file or sys.stdout)
