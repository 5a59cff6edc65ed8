# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx
from .cliarg import arg, non_negative_int, positive_int
from .distance import distance
from .scanner import check_count, env_count, get_scanner, Scanner, ScanStrategy
from .speller import DEFAULT_MAX_DISTANCE, SpellChecker
from spelling import envdefault
from typing import Any

CHECK_COLUMNS = ["word", "distance"]
CONFIG_KEYS = ("dictionary", "max_distance", "workers")


class SpellingCLI(argx.CommandLineTool):
    def __init__(self) -> None:
        argx.CommandLineTool.__init__(self, "spelling")

    def get_dictionary_source(self) -> str:
        """Dictionary given as cmdline argument, in the config file or in the environment"""
        source = getattr(self.args, "dictionary", None) or self.config.get("dictionary") or envdefault.SPELLING_DICTIONARY
        if not source:
            raise argx.UserError(
                "Specify dictionary: use --dictionary in the command line, the dictionary item in the config file "
                "or the SPELLING_DICTIONARY environment variable."
            )
        return source

    def get_max_distance(self) -> int:
        value: Any = getattr(self.args, "max_distance", None)
        if value is None:
            value = self.config.get("max_distance")
        if value is None:
            value = env_count("SPELLING_MAX_DISTANCE", envdefault.SPELLING_MAX_DISTANCE)
        if value is None:
            value = DEFAULT_MAX_DISTANCE
        return check_count("max_distance", value)

    def get_workers(self) -> int | None:
        value: Any = getattr(self.args, "workers", None)
        if value is None:
            value = self.config.get("workers")
        if value is None:
            value = env_count("SPELLING_WORKERS", envdefault.SPELLING_WORKERS, minimum=1)
        return None if value is None else check_count("workers", value, minimum=1)

    def get_request_timeout(self) -> float | None:
        timeout = getattr(self.args, "request_timeout", None)
        if timeout is None and envdefault.SPELLING_REQUEST_TIMEOUT:
            try:
                timeout = float(envdefault.SPELLING_REQUEST_TIMEOUT)
            except ValueError as ex:
                raise argx.UserError(
                    f"Invalid number in environment variable SPELLING_REQUEST_TIMEOUT: "
                    f"{envdefault.SPELLING_REQUEST_TIMEOUT!r}"
                ) from ex
        return timeout

    def get_scanner(self) -> Scanner:
        if self.args.sequential:
            return get_scanner(ScanStrategy.sequential)
        return get_scanner(workers=self.get_workers(), processes=self.args.processes)

    def load_checker(self) -> SpellChecker:
        source = self.get_dictionary_source()
        checker = SpellChecker.from_source(
            source,
            skip_blank=self.args.skip_blank,
            scanner=self.get_scanner(),
            timeout=self.get_request_timeout(),
        )
        self.log.debug("loaded %d words from %r using %s", len(checker), source, checker.scanner.__class__.__name__)
        return checker

    @arg.json
    @arg.request_timeout
    @arg.skip_blank
    @arg.processes
    @arg.workers
    @arg.sequential
    @arg.max_distance
    @arg.dictionary
    @arg.queries
    def check(self) -> None:
        """List dictionary words within the maximum edit distance of each query, closest first"""
        checker = self.load_checker()
        max_distance = self.get_max_distance()
        multiple = len(self.args.queries) > 1
        rows = []
        for query in self.args.queries:
            for match in checker.check(query, max_distance):
                row = {"word": match.word, "distance": match.distance}
                if multiple:
                    row["query"] = query
                rows.append(row)

        layout = ["query"] + CHECK_COLUMNS if multiple else CHECK_COLUMNS
        self.print_response(rows, json=self.args.json, table_layout=layout)

    @arg.request_timeout
    @arg.skip_blank
    @arg.processes
    @arg.workers
    @arg.sequential
    @arg.max_distance
    @arg.dictionary
    @arg.query
    def suggest(self) -> None:
        """Print the closest dictionary word"""
        checker = self.load_checker()
        max_distance = self.get_max_distance()
        suggestion = checker.suggest(self.args.query, max_distance)
        if suggestion is None:
            raise argx.UserError(f"No suggestion for {self.args.query!r} within edit distance {max_distance}")
        print(suggestion)

    @arg("target", help="Second word")
    @arg("source", help="First word")
    def distance(self) -> None:
        """Print the Levenshtein distance between two words"""
        print(distance(self.args.source, self.args.target))

    @arg.json
    def config__show(self) -> None:
        """Show the configuration file contents"""
        if self.args.json:
            self.print_response(dict(self.config))
            return
        rows = [{"key": key, "value": self.config[key]} for key in sorted(self.config)]
        self.print_response(rows, json=False, table_layout=["key", "value"])

    @arg("--workers", type=positive_int, help="Default worker pool size")
    @arg("--max-distance", type=non_negative_int, help="Default maximum edit distance")
    @arg("--dictionary", metavar="SOURCE", help="Default dictionary file, http(s) URL or '-'")
    def config__set(self) -> None:
        """Store defaults in the configuration file"""
        changes = {key: getattr(self.args, key) for key in CONFIG_KEYS if getattr(self.args, key) is not None}
        if not changes:
            raise argx.UserError("Nothing to set: give at least one of --dictionary, --max-distance or --workers")
        self.config.update(changes)
        self.config.save()
        self.log.info("Configuration saved to %r", self.config.file_path)


if __name__ == "__main__":
    SpellingCLI().main()
