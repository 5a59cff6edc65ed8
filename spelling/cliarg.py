# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg

import argparse


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError as ex:
        raise argparse.ArgumentTypeError("invalid integer value {!r}".format(value)) from ex
    if number < 0:
        raise argparse.ArgumentTypeError("expected a non-negative integer, got {!r}".format(value))
    return number


def positive_int(value):
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("expected a positive integer, got {!r}".format(value))
    return number


arg.dictionary = arg(
    "-d",
    "--dictionary",
    default=None,
    metavar="SOURCE",
    help="Dictionary file, http(s) URL or '-' for stdin [SPELLING_DICTIONARY]",
)
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.max_distance = arg(
    "-m",
    "--max-distance",
    type=non_negative_int,
    default=None,
    help="Maximum edit distance of a suggestion [SPELLING_MAX_DISTANCE]",
)
arg.query = arg("query", help="Word to look up")
arg.queries = arg("queries", nargs="+", metavar="query", help="Words to look up")
arg.request_timeout = arg(
    "--request-timeout",
    type=float,
    default=None,
    help="Wait for up to N seconds when downloading a dictionary [SPELLING_REQUEST_TIMEOUT] (default: infinite)",
)
arg.sequential = arg(
    "--sequential",
    action="store_true",
    default=False,
    help="Scan the dictionary on a single thread instead of a worker pool",
)
arg.skip_blank = arg("--skip-blank", action="store_true", default=False, help="Ignore blank dictionary lines")
arg.workers = arg("--workers", type=positive_int, default=None, help="Worker pool size [SPELLING_WORKERS]")
arg.processes = arg(
    "--processes",
    action="store_true",
    default=False,
    help="Run the worker pool as processes instead of threads, faster on large dictionaries",
)
