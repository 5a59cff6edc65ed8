# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations


class SpellingError(Exception):
    """Base class for errors raised by the spelling library"""


class InvalidThresholdError(SpellingError, ValueError):
    def __init__(self, name: str, value: object, minimum: int = 0) -> None:
        super().__init__(name, value, minimum)
        self.name = name
        self.value = value
        self.minimum = minimum

    def __str__(self) -> str:
        if self.minimum == 0:
            expected = "a non-negative integer"
        elif self.minimum == 1:
            expected = "a positive integer"
        else:
            expected = f"an integer of at least {self.minimum}"
        return f"{self.name} must be {expected}, got {self.value!r}"


class DictionaryError(SpellingError):
    def __init__(self, source: str, message: str) -> None:
        super().__init__(source, message)
        self.source = source
        self.message = message

    def __str__(self) -> str:
        return f"Failed to load dictionary {self.source!r}: {self.message}"
