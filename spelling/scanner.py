# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Dictionary scanning: filter candidate words by edit distance and rank them"""
from __future__ import annotations

from ._typing import assert_never
from .dictionary import iter_words
from .distance import bounded_distance
from .errors import InvalidThresholdError
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from enum import Enum
from spelling import envdefault
from typing import Any, Callable, Iterable, Iterator, NamedTuple, Sequence

import itertools
import logging
import math
import os

DEFAULT_CHUNK_SIZE = 4096


class Match(NamedTuple):
    word: str
    distance: int


def check_count(name: str, value: Any, *, minimum: int = 0) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidThresholdError(name, value, minimum)
    return value


def env_count(name: str, value: str | None, *, minimum: int = 0) -> int | None:
    """Count from the environment variable `name`, None when unset or empty"""
    if not value:
        return None
    try:
        number = int(value)
    except ValueError as ex:
        raise InvalidThresholdError(name, value, minimum) from ex
    return check_count(name, number, minimum=minimum)


def match_words(words: Iterable[str], query: str, max_distance: int) -> list[Match]:
    """Matches within `max_distance` of `query`, in the order the words were given"""
    matches = []
    for word in words:
        word_distance = bounded_distance(query, word, max_distance)
        if word_distance is not None:
            matches.append(Match(word, word_distance))
    return matches


def rank(matches: Iterable[Match]) -> list[Match]:
    # sorted() is stable: equal distances keep dictionary order
    return sorted(matches, key=lambda match: match.distance)


class Scanner:
    """Scan strategy: sub-classes decide how the per-word filter is scheduled"""

    def __init__(self) -> None:
        self.log = logging.getLogger(self.__class__.__name__)

    def scan(self, words: Iterable[str], query: str, max_distance: int) -> list[Match]:
        max_distance = check_count("max_distance", max_distance)
        matches = self.collect(words, query, max_distance)
        self.log.debug("%d matches within distance %d of %r", len(matches), max_distance, query)
        return rank(matches)

    def collect(self, words: Iterable[str], query: str, max_distance: int) -> list[Match]:
        raise NotImplementedError


class SequentialScanner(Scanner):
    def collect(self, words: Iterable[str], query: str, max_distance: int) -> list[Match]:
        return match_words(words, query, max_distance)


class ParallelScanner(Scanner):
    """Partition the dictionary into contiguous chunks and filter each chunk on a worker pool.

    Chunk results are merged in chunk order before the global stable sort, so the
    output is identical to SequentialScanner for any input.

    The default thread pool gives no speed-up: the distance computation is pure
    Python and holds the GIL. Pass `executor_class=ProcessPoolExecutor` (or
    `processes=True` to get_scanner) to use several CPUs; that pays for pickling
    each chunk, so it only wins on large dictionaries.
    """

    def __init__(
        self,
        workers: int | None = None,
        chunk_size: int | None = None,
        executor_class: Callable[..., Executor] = ThreadPoolExecutor,
    ) -> None:
        super().__init__()
        if workers is None:
            workers = os.cpu_count() or 1
        self.workers = check_count("workers", workers, minimum=1)
        self.chunk_size = None if chunk_size is None else check_count("chunk_size", chunk_size, minimum=1)
        self.executor_class = executor_class

    def get_chunk_size(self, words: Iterable[str]) -> int:
        if self.chunk_size is not None:
            return self.chunk_size
        if isinstance(words, Sequence):
            return max(1, math.ceil(len(words) / self.workers))
        return DEFAULT_CHUNK_SIZE

    def collect(self, words: Iterable[str], query: str, max_distance: int) -> list[Match]:
        chunk_size = self.get_chunk_size(words)
        with self.executor_class(max_workers=self.workers) as executor:
            futures = [
                executor.submit(match_words, chunk, query, max_distance)
                for chunk in iter_chunks(words, chunk_size)
            ]
            self.log.debug("scanning %d chunks of up to %d words on %d workers", len(futures), chunk_size, self.workers)
            matches: list[Match] = []
            for future in futures:
                matches.extend(future.result())
        return matches


def iter_chunks(words: Iterable[str], size: int) -> Iterator[list[str]]:
    iterator = iter(words)
    while True:
        chunk = list(itertools.islice(iterator, size))
        if not chunk:
            return
        yield chunk


class ScanStrategy(Enum):
    sequential = "sequential"
    parallel = "parallel"


def get_scanner(
    strategy: ScanStrategy | str | None = None,
    workers: int | None = None,
    processes: bool = False,
) -> Scanner:
    """Scanner for `strategy`, or the one selected by SPELLING_PARALLEL_SCAN when not given"""
    if strategy is None:
        strategy = ScanStrategy.parallel if envdefault.SPELLING_PARALLEL_SCAN else ScanStrategy.sequential
    strategy = ScanStrategy(strategy)

    if strategy is ScanStrategy.sequential:
        return SequentialScanner()
    elif strategy is ScanStrategy.parallel:
        if workers is None:
            workers = env_count("SPELLING_WORKERS", envdefault.SPELLING_WORKERS, minimum=1)
        return ParallelScanner(workers=workers, executor_class=ProcessPoolExecutor if processes else ThreadPoolExecutor)
    else:
        assert_never(strategy)


def spellcheck(
    dictionary: str | Iterable[str],
    query: str,
    max_distance: int,
    *,
    scanner: Scanner | None = None,
) -> list[Match]:
    """All dictionary words within `max_distance` edits of `query`, closest first.

    `dictionary` is either newline separated text or an iterable of words; ties
    keep dictionary order and duplicates are reported once per occurrence.
    """
    max_distance = check_count("max_distance", max_distance)
    if isinstance(dictionary, str):
        dictionary = iter_words(dictionary)
    if scanner is None:
        scanner = get_scanner()
    return scanner.scan(dictionary, query, max_distance)
