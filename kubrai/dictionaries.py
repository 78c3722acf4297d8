"""
Word dictionaries.

Features
- Loads every ``*<ext>`` file of a directory as one named word list.
- Exact lookup (which dictionaries contain a word, and on which line).
- Full-word regex scan across all dictionaries.
- Builds a dictionary file from the wordfreq top-N list and ranks words by
  Zipf frequency.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Pattern, Union

from tqdm import tqdm
from wordfreq import top_n_list, zipf_frequency

from kubrai.errors import PersistenceError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def progress(iterable, desc="", disable=False):
    return tqdm(iterable, desc=desc, ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:20}|', disable=disable)


# ============================================================================ #
#                              LOADING                                         #
# ============================================================================ #

def read_file_to_list(path: PathLike) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return [line.rstrip("\r\n") for line in handle]
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"Unable to read dictionary {path}: {exc}") from exc


def list_dictionary_files(directory: PathLike, ext: str) -> List[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        raise PersistenceError(f"Dictionaries directory not found: {directory}")
    return sorted(p for p in directory.iterdir() if p.is_file() and p.name.endswith(ext))


def load_dicts(directory: PathLike, ext: str, *, show_progress: bool = False) -> Dict[str, List[str]]:
    files = list_dictionary_files(directory, ext)
    dicts: Dict[str, List[str]] = {}
    for path in progress(files, "Loading dictionaries", disable=not show_progress):
        dicts[path.name] = read_file_to_list(path)
    logger.info("Loaded %d dictionaries from %s", len(dicts), directory)
    return dicts


# ============================================================================ #
#                              SEARCH                                          #
# ============================================================================ #

class DictionaryIndex:
    """Named word lists, searched in place."""

    def __init__(self, dicts: Mapping[str, List[str]]):
        self.dicts: Dict[str, List[str]] = dict(dicts)

    @classmethod
    def from_directory(cls, directory: PathLike, ext: str, *, show_progress: bool = False) -> "DictionaryIndex":
        return cls(load_dicts(directory, ext, show_progress=show_progress))

    def exact_search(self, word: str, max_results: int) -> Dict[str, int]:
        """Map dictionary name -> first line holding ``word``, for at most ``max_results`` dictionaries."""
        results: Dict[str, int] = {}
        if max_results <= 0:
            return results

        for name, words in self.dicts.items():
            for line, dict_word in enumerate(words):
                if dict_word == word:
                    results[name] = line
                    break
            if len(results) == max_results:
                break
        return results

    def contains(self, word: str) -> bool:
        return bool(self.exact_search(word, 1))

    def regex_search(self, pattern: Union[str, Pattern[str]], max_results: int) -> List[str]:
        """Words fully matching ``pattern``, in dictionary order, at most ``max_results``."""
        results: List[str] = []
        if max_results <= 0:
            return results

        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        for words in self.dicts.values():
            for dict_word in words:
                if regex.fullmatch(dict_word):
                    results.append(dict_word)
                    if len(results) == max_results:
                        return results
        return results

    def __len__(self) -> int:
        return len(self.dicts)


# ============================================================================ #
#                              WORDFREQ                                        #
# ============================================================================ #

@lru_cache(maxsize=None)
def get_zipf(word: str, lang: str = "en") -> float:
    return zipf_frequency(word, lang)


def rank_by_frequency(words: Iterable[str], lang: str = "en") -> List[str]:
    """Most common words first; equally common words keep their order."""
    return sorted(words, key=lambda word: -get_zipf(word, lang))


def build_wordfreq_dictionary(
    path: PathLike,
    *,
    limit: int,
    lang: str = "en",
    lowercase: bool = True,
    show_progress: bool = False,
) -> int:
    """Write the top ``limit`` wordfreq words of ``lang`` to ``path``. Returns the word count."""
    seen = set()
    words: List[str] = []
    for word in progress(top_n_list(lang, limit, wordlist="best"), "Building dictionary", disable=not show_progress):
        if not word.isalpha():
            continue
        word = word.lower() if lowercase else word.upper()
        if word in seen:
            continue
        seen.add(word)
        words.append(word)

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Unable to write dictionary {path}: {exc}") from exc
    logger.info("Wrote %d words to %s", len(words), path)
    return len(words)
