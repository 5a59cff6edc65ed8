# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

FALSE_VALUES = frozenset({"0", "false", "no", "off", "n"})


def parse_flag(value: str) -> bool:
    return value.strip().lower() not in FALSE_VALUES


USER_HOME = os.path.expanduser("~")

SPELLING_CONFIG_DIR = os.environ.get("SPELLING_CONFIG_DIR", os.path.join(USER_HOME, ".config", "spelling"))

SPELLING_CONFIG = os.environ.get("SPELLING_CONFIG", os.path.join(SPELLING_CONFIG_DIR, "spelling.json"))
SPELLING_DICTIONARY = os.environ.get("SPELLING_DICTIONARY")
SPELLING_MAX_DISTANCE = os.environ.get("SPELLING_MAX_DISTANCE")
# use-parallel-scan, enabled unless explicitly turned off
SPELLING_PARALLEL_SCAN = parse_flag(os.environ.get("SPELLING_PARALLEL_SCAN", "true"))
SPELLING_REQUEST_TIMEOUT = os.environ.get("SPELLING_REQUEST_TIMEOUT")
SPELLING_WORKERS = os.environ.get("SPELLING_WORKERS")
