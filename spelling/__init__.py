# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from spelling.dictionary import iter_words, load_dictionary, split_words
from spelling.distance import bounded_distance, distance
from spelling.errors import DictionaryError, InvalidThresholdError, SpellingError
from spelling.scanner import get_scanner, Match, ParallelScanner, Scanner, ScanStrategy, SequentialScanner, spellcheck
from spelling.speller import SpellChecker, suggest

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "bounded_distance",
    "DictionaryError",
    "distance",
    "get_scanner",
    "InvalidThresholdError",
    "iter_words",
    "load_dictionary",
    "Match",
    "ParallelScanner",
    "Scanner",
    "ScanStrategy",
    "SequentialScanner",
    "spellcheck",
    "SpellChecker",
    "SpellingError",
    "split_words",
    "suggest",
]
