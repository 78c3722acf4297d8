#!/usr/bin/env python3
"""
Kubrai command line.

Usage:
    kubrai policeman_why               # solve (argument contains the separator)
    kubrai policeman                   # view associations of one word
    kubrai add policeman cop           # learn an association
    kubrai addsolution policeman_why cop_y
    kubrai guess amateur_psi_6_thanks  # solve with wildcards for unknown parts
    kubrai searchdict copy
    kubrai playbook [NAME]
    kubrai builddict [N]
    kubrai --properties DIR policeman_why

The verb may appear anywhere among the arguments; every other argument is a
noun. Answers are printed HTTP-style when nothing useful can be returned
(400 BAD REQUEST, 404 NOT FOUND, 501 NOT IMPLEMENTED).
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from kubrai.assocfile import build_assoc_string
from kubrai.associations import AssociationStore
from kubrai.config import KubraiConfig
from kubrai.dictionaries import DictionaryIndex, build_wordfreq_dictionary
from kubrai.errors import KubraiError, PuzzleError
from kubrai.guesser import Guesser
from kubrai.kubraya import is_kubraya, normalize, split_kubraya
from kubrai.playbooks import assoc_file_location, dicts_dir, list_playbooks, set_current_playbook
from kubrai.properties import Properties, detect_properties_dir
from kubrai.solver import Solver

logger = logging.getLogger(__name__)

# ============================================================================ #
#                              VERBS                                           #
# ============================================================================ #

V_ADD = "add"
V_ADD_BOTH = "addboth"
V_ADD_SOLUTION = "addsolution"
V_BUILD_DICT = "builddict"
V_GUESS = "guess"
V_HINT = "hint"
V_PLAY = "play"
V_PLAYBOOK = "playbook"
V_REMOVE = "remove"
V_REMOVE_BOTH = "removeboth"
V_SEARCH_DICT = "searchdict"
V_SOLVE = "solve"
V_UNDO = "undo"
V_VIEW = "view"

# verb -> minimum number of nouns
VERBS: Dict[str, int] = {
    V_ADD: 2,
    V_ADD_BOTH: 2,
    V_ADD_SOLUTION: 2,
    V_REMOVE: 2,
    V_REMOVE_BOTH: 2,
    V_VIEW: 1,
    V_SEARCH_DICT: 1,
    V_SOLVE: 1,
    V_GUESS: 1,
    V_HINT: 0,
    V_PLAY: 0,
    V_UNDO: 0,
    V_PLAYBOOK: 0,
    V_BUILD_DICT: 0,
}

BAD_REQUEST = "400 BAD REQUEST"
NOT_FOUND = "404 NOT FOUND"
NOT_IMPLEMENTED = "501 NOT IMPLEMENTED"

WORDFREQ_DICT_NAME = "wordfreq"


def find_exact_verb(args: Sequence[str]) -> str:
    for arg in args:
        if arg in VERBS:
            return arg
    return ""


def guess_verb(args: Sequence[str], separator: str) -> str:
    if len(args) == 0:
        return V_PLAY
    if len(args) == 1:
        return V_SOLVE if is_kubraya(args[0], separator) else V_VIEW
    return ""


def parse_verb(args: Sequence[str], separator: str) -> str:
    return find_exact_verb(args) or guess_verb(args, separator)


def extract_nouns(verb: str, args: Sequence[str]) -> List[str]:
    return [arg for arg in args if arg != verb]


# ============================================================================ #
#                              COMMANDS                                        #
# ============================================================================ #

class Kubrai:
    """One invocation: configuration plus lazily loaded playbook data."""

    def __init__(self, props: Properties, config: KubraiConfig | None = None):
        self.props = props
        self.config = config or KubraiConfig.from_properties(props)
        self._store: AssociationStore | None = None
        self._dicts: DictionaryIndex | None = None

    @property
    def store(self) -> AssociationStore:
        if self._store is None:
            self._store = AssociationStore.open(assoc_file_location(self.config), self.config)
        return self._store

    @property
    def dicts(self) -> DictionaryIndex:
        if self._dicts is None:
            self._dicts = DictionaryIndex.from_directory(
                dicts_dir(self.config), self.config.dicts_ext, show_progress=self.config.show_progress
            )
        return self._dicts

    def solver(self) -> Solver:
        return Solver(self.store, self.dicts, self.config)

    def guesser(self) -> Guesser:
        return Guesser(self.solver(), self.config)

    def canonize(self, word: str) -> str:
        return normalize(word, self.config.lowercase)

    def commit(self) -> None:
        if self._store is not None and self._store.dirty:
            self._store.save()

    # -- associations ------------------------------------------------------ #

    def run_add(self, a: str, b: str) -> List[str]:
        return self.store.insert(self.canonize(a), self.canonize(b))

    def run_add_both(self, a: str, b: str) -> Tuple[List[str], List[str]]:
        return self.run_add(a, b), self.run_add(b, a)

    def run_smart_add(self, a: str, b: str) -> Dict[str, List[str]]:
        """Add one association, or both directions for short words, or a whole solution."""
        separator = self.config.separator
        if is_kubraya(a, separator) and is_kubraya(b, separator):
            return self.run_add_solution(a, b)

        a, b = self.canonize(a), self.canonize(b)
        if len(a) <= self.config.auto_both_maxlen:
            res_a, res_b = self.run_add_both(a, b)
            return {a: res_a, b: res_b}
        return {a: self.run_add(a, b)}

    def run_add_solution(self, src: str, target: str) -> Dict[str, List[str]]:
        parts_src = split_kubraya(src, self.config.separator, self.config.lowercase)
        parts_target = split_kubraya(target, self.config.separator, self.config.lowercase)
        if len(parts_src) != len(parts_target):
            raise PuzzleError(
                f"{src} has {len(parts_src)} parts but {target} has {len(parts_target)}"
            )

        res: Dict[str, List[str]] = {}
        for part_src, part_target in zip(parts_src, parts_target):
            res.update(self.run_smart_add(part_src, part_target))
        return res

    def run_remove(self, a: str, b: str) -> List[str]:
        return self.store.remove(self.canonize(a), self.canonize(b))

    def run_remove_both(self, a: str, b: str) -> Tuple[List[str], List[str]]:
        return self.run_remove(a, b), self.run_remove(b, a)

    def run_view(self, a: str) -> List[str]:
        return self.store.view(self.canonize(a))

    # -- dictionaries ------------------------------------------------------ #

    def run_search_dict(self, word: str) -> Dict[str, int]:
        return self.dicts.exact_search(self.canonize(word), self.config.searchdict_max_results)

    def run_solve(self, kubraya: str) -> Tuple[List[str], bool]:
        res, ok = self.solver().solve(kubraya)
        if not ok and self.config.solve_auto_guess:
            logger.info("Nothing solved for %s, guessing", kubraya)
            return self.guesser().guess(kubraya)
        return res, ok

    def run_guess(self, kubraya: str) -> Tuple[List[str], bool]:
        return self.guesser().guess(kubraya)

    def run_build_dict(self, limit: int) -> str:
        path = dicts_dir(self.config) / (WORDFREQ_DICT_NAME + self.config.dicts_ext)
        count = build_wordfreq_dictionary(
            path,
            limit=limit,
            lang=self.config.wordfreq_lang,
            lowercase=self.config.lowercase,
            show_progress=self.config.show_progress,
        )
        return f"{path}: {count} words"

    # -- playbooks --------------------------------------------------------- #

    def run_playbook(self, nouns: Sequence[str]) -> str:
        config = self.config
        if nouns:
            name = nouns[0]
            if not set_current_playbook(self.props, config, name):
                return NOT_FOUND
            config = dataclasses.replace(config, playbook_current=name)
        return "\n".join(list_playbooks(config))

    # -- dispatch ---------------------------------------------------------- #

    def assoc_line(self, key: str, values: Sequence[str]) -> str:
        return build_assoc_string(key, values, self.config.key_separator, self.config.value_separator)

    def run_command(self, verb: str, nouns: Sequence[str]) -> str:
        if verb not in VERBS:
            return f"{NOT_IMPLEMENTED}\n{verb}"
        if len(nouns) < VERBS[verb]:
            return BAD_REQUEST

        if verb in (V_ADD, V_ADD_SOLUTION):
            if verb == V_ADD:
                res = self.run_smart_add(nouns[0], nouns[1])
            else:
                res = self.run_add_solution(nouns[0], nouns[1])
            self.commit()
            return "\n".join(self.assoc_line(k, v) for k, v in res.items())

        if verb in (V_ADD_BOTH, V_REMOVE_BOTH):
            a, b = self.canonize(nouns[0]), self.canonize(nouns[1])
            if verb == V_ADD_BOTH:
                res_a, res_b = self.run_add_both(a, b)
            else:
                res_a, res_b = self.run_remove_both(a, b)
            self.commit()
            return self.assoc_line(a, res_a) + "\n" + self.assoc_line(b, res_b)

        if verb == V_REMOVE:
            res = self.run_remove(nouns[0], nouns[1])
            self.commit()
            return self.assoc_line(self.canonize(nouns[0]), res)

        if verb == V_VIEW:
            return self.assoc_line(self.canonize(nouns[0]), self.run_view(nouns[0]))

        if verb == V_SEARCH_DICT:
            found = self.run_search_dict(nouns[0])
            if not found:
                return NOT_FOUND
            return "\n".join(f"{name}: {line}" for name, line in found.items())

        if verb in (V_SOLVE, V_GUESS):
            runner = self.run_solve if verb == V_SOLVE else self.run_guess
            words, ok = runner(nouns[0])
            return "\n".join(words) if ok else NOT_FOUND

        if verb == V_PLAYBOOK:
            return self.run_playbook(nouns)

        if verb == V_BUILD_DICT:
            limit = self.config.build_dict_size
            if nouns:
                try:
                    limit = int(nouns[0])
                except ValueError:
                    return BAD_REQUEST
            return self.run_build_dict(limit)

        return f"{NOT_IMPLEMENTED}\n{verb}"


# ============================================================================ #
#                              MAIN                                            #
# ============================================================================ #

def setup_logging() -> None:
    level = getattr(logging, os.environ.get("KUBRAI_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s : %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubrai",
        description="Solve kubraya word puzzles from learned associations and dictionaries",
        epilog="verbs: " + ", ".join(sorted(VERBS)),
    )
    parser.add_argument("args", nargs="*", help="Verb and nouns in any order, e.g. 'add policeman cop'")
    parser.add_argument("--properties", default=None, help="Properties directory (default: autodetect)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    ns = build_parser().parse_args(argv)
    args = list(ns.args)

    props_dir = Path(ns.properties) if ns.properties else detect_properties_dir()
    app = Kubrai(Properties(props_dir))
    verb = parse_verb(args, app.config.separator)
    if not verb:
        print(BAD_REQUEST)
        return 0

    try:
        answer = app.run_command(verb, extract_nouns(verb, args))
    except KubraiError as exc:
        logger.error("%s", exc)
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
