# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .dictionary import iter_words, load_dictionary
from .scanner import Match, Scanner, get_scanner
from typing import Any, Iterable

DEFAULT_MAX_DISTANCE = 2


class SpellChecker:
    """A dictionary loaded once and reused for any number of queries"""

    def __init__(self, words: Iterable[str], scanner: Scanner | None = None) -> None:
        self.words = tuple(words)
        self.scanner = scanner or get_scanner()

    @classmethod
    def from_text(cls, text: str, *, skip_blank: bool = False, scanner: Scanner | None = None) -> SpellChecker:
        return cls(iter_words(text, skip_blank=skip_blank), scanner=scanner)

    @classmethod
    def from_source(
        cls,
        source: str,
        *,
        skip_blank: bool = False,
        scanner: Scanner | None = None,
        **load_kwargs: Any,
    ) -> SpellChecker:
        """Load from a path, URL or '-', see load_dictionary()"""
        return cls.from_text(load_dictionary(source, **load_kwargs), skip_blank=skip_blank, scanner=scanner)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def check(self, query: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> list[Match]:
        return self.scanner.scan(self.words, query, max_distance)

    def suggest(self, query: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> str | None:
        """Closest known word, the earliest one in the dictionary on ties"""
        matches = self.check(query, max_distance)
        return matches[0].word if matches else None


def suggest(
    word_to_check: str,
    known_words: Iterable[str],
    max_distance: int = DEFAULT_MAX_DISTANCE,
    scanner: Scanner | None = None,
) -> str | None:
    return SpellChecker(known_words, scanner=scanner).suggest(word_to_check, max_distance)
