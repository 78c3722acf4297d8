"""Exact solving: every hint must have associations, every glued word must be a dictionary word."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from kubrai.associations import AssociationStore
from kubrai.combinations import combinations
from kubrai.config import KubraiConfig
from kubrai.dictionaries import DictionaryIndex, rank_by_frequency
from kubrai.kubraya import split_kubraya

logger = logging.getLogger(__name__)


class Solver:
    def __init__(self, associations: AssociationStore, dictionaries: DictionaryIndex, config: KubraiConfig):
        self.associations = associations
        self.dictionaries = dictionaries
        self.config = config

    def split(self, kubraya: str) -> List[str]:
        return split_kubraya(kubraya, self.config.separator, self.config.lowercase)

    def build_kub_assoc(self, kubraya: str) -> Tuple[List[List[str]], bool]:
        """Association list per token, plus whether every token had at least one."""
        kub_assoc = [self.associations.get(part) for part in self.split(kubraya)]
        complete = all(kub_assoc)
        return kub_assoc, complete

    def solve(self, kubraya: str, max_results: int | None = None) -> Tuple[List[str], bool]:
        if max_results is None:
            max_results = self.config.solve_max_results

        kub_assoc, complete = self.build_kub_assoc(kubraya)
        if not complete:
            logger.debug("Not every part of %s has associations", kubraya)
            return [], False

        results: Dict[str, bool] = {}
        for comb in combinations(kub_assoc):
            word = "".join(comb)
            if word in results or not self.dictionaries.exact_search(word, 1):
                continue
            results[word] = True
            if 0 < max_results <= len(results):
                break

        if not results:
            return [], False

        words = list(results)
        if self.config.rank_by_frequency:
            words = rank_by_frequency(words, self.config.wordfreq_lang)
        return words, True
