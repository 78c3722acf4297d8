"""
Guessing: solve a kubraya even when some hints have no known associations.

Every part gets an extra "unknown" marker as a candidate. Combinations with
few enough markers are turned into full-word regexes (marker -> ``.+``) and
scanned across the dictionaries, fewest unknowns first.

Example (marker ``???``): amateur_psi_6_thanks with nothing known for psi

    pro ??? mi ty   ->  ^pro.+mity$   ->  proximity
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Sequence, Tuple

from kubrai.combinations import combinations, count_combinations
from kubrai.config import KubraiConfig
from kubrai.dictionaries import progress, rank_by_frequency
from kubrai.solver import Solver

logger = logging.getLogger(__name__)

WILDCARD = ".+"
EXPLAIN_ARROW = " -> "


def more_exist_trailer(max_results: int) -> str:
    return f"(First {max_results} shown, more exist)"


def allow_unknowns(kub_assoc: Sequence[Sequence[str]], marker: str) -> List[List[str]]:
    return [list(candidates) + [marker] for candidates in kub_assoc]


def word_guess_to_regexp(comb: Sequence[str], marker: str) -> str:
    """Anchored regex: marker parts become ``.+``, every other part matches literally."""
    body = "".join(WILDCARD if part == marker else re.escape(part) for part in comb)
    return "^" + body + "$"


def count_unknowns(comb: Sequence[str], marker: str) -> int:
    return sum(1 for part in comb if part == marker)


def is_comb_guessable(comb: Sequence[str], marker: str, unknowns_limit: int) -> bool:
    unknowns = count_unknowns(comb, marker)
    # All-marker combinations would match every word.
    return unknowns <= unknowns_limit and unknowns < len(comb)


def filter_guessable_combs(combs, marker: str, unknowns_limit: int) -> List[List[str]]:
    return [comb for comb in combs if is_comb_guessable(comb, marker, unknowns_limit)]


def sort_combs_by_best_chances(combs: List[List[str]], marker: str) -> List[List[str]]:
    return sorted(combs, key=lambda comb: count_unknowns(comb, marker))


def count_unknowns_in_word(word: str, marker: str) -> int:
    """Markers in the guessed pattern; for explained results only the part before the arrow counts."""
    pattern = word.split(EXPLAIN_ARROW, 1)[0]
    return pattern.count(marker)


def sort_by_unknowns_in_word(words: List[str], marker: str) -> List[str]:
    return sorted(words, key=lambda word: count_unknowns_in_word(word, marker))


class Guesser:
    def __init__(self, solver: Solver, config: KubraiConfig):
        self.solver = solver
        self.dictionaries = solver.dictionaries
        self.config = config

    def guess(
        self,
        kubraya: str,
        max_results: int | None = None,
        unknowns_limit: int | None = None,
        explain: bool | None = None,
    ) -> Tuple[List[str], bool]:
        cfg = self.config
        if max_results is None:
            max_results = cfg.guess_max_results
        if unknowns_limit is None:
            unknowns_limit = cfg.guess_unknowns_limit
        if explain is None:
            explain = cfg.guess_explain_results
        marker = cfg.unknown_marker

        kub_assoc, complete = self.solver.build_kub_assoc(kubraya)
        if complete:
            res, ok = self.solver.solve(kubraya)
            if ok:
                return res, True

        kub_assoc = allow_unknowns(kub_assoc, marker)
        logger.debug("Guessing %s over %d combinations", kubraya, count_combinations(kub_assoc))
        combs = filter_guessable_combs(combinations(kub_assoc), marker, unknowns_limit)
        combs = sort_combs_by_best_chances(combs, marker)

        results: Dict[str, bool] = {}
        explains: Dict[str, str] = {}
        for comb in progress(combs, f"Guessing {kubraya}", disable=not cfg.show_progress):
            word_guess = "".join(comb)
            word_regexp = word_guess_to_regexp(comb, marker)

            for word in self.dictionaries.regex_search(word_regexp, max_results):
                if word not in results:
                    if explain:
                        explains[word] = word_guess
                    results[word] = True
                if len(results) == max_results:
                    break
            if len(results) == max_results:
                break

        if not results:
            return [], False

        keys = list(results)
        if explain:
            keys = [explains[key] + EXPLAIN_ARROW + key for key in keys]
            keys = sort_by_unknowns_in_word(keys, marker)
        elif cfg.rank_by_frequency:
            keys = rank_by_frequency(keys, cfg.wordfreq_lang)

        if 0 < max_results <= len(keys):
            keys.append(more_exist_trailer(max_results))
        return keys, True
