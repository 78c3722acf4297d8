"""
Learned associations: token -> substitutions, shortest first.

Each value list is kept ordered by length with ties in insertion order.
It is only ever changed one element at a time, never re-sorted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

from kubrai.assocfile import load_assoc, save_assoc
from kubrai.config import KubraiConfig

logger = logging.getLogger(__name__)


def add_before_first_longer(value: str, seq: Sequence[str]) -> List[str]:
    """Insert ``value`` in front of the first strictly longer entry, or append it.

    Returns the list unchanged if ``value`` is already present before that point.
    """
    longer = -1
    for i, existing in enumerate(seq):
        if existing == value:
            return list(seq)
        if len(existing) > len(value):
            longer = i
            break

    if longer == -1:
        return list(seq) + [value]
    return list(seq[:longer]) + [value] + list(seq[longer:])


def remove_by_value(value: str, seq: Sequence[str]) -> List[str]:
    result = list(seq)
    if value in result:
        result.remove(value)
    return result


class AssociationStore:
    """In-memory association table bound to its file."""

    def __init__(self, path: Union[str, Path], config: KubraiConfig, assoc: Dict[str, List[str]] | None = None):
        self.path = Path(path)
        self.config = config
        self._assoc: Dict[str, List[str]] = {k: list(v) for k, v in (assoc or {}).items()}
        self.dirty = False

    @classmethod
    def open(cls, path: Union[str, Path], config: KubraiConfig) -> "AssociationStore":
        store = cls(path, config)
        store.load()
        return store

    def load(self) -> "AssociationStore":
        self._assoc = load_assoc(self.path, self.config.key_separator, self.config.value_separator)
        self.dirty = False
        logger.info("Loaded %d associations from %s", len(self._assoc), self.path)
        return self

    def save(self) -> None:
        save_assoc(
            self.path,
            self._assoc,
            self.config.key_separator,
            self.config.value_separator,
            self.config.backup_depth,
        )
        self.dirty = False

    def get(self, token: str) -> List[str]:
        return list(self._assoc.get(token, []))

    view = get

    def insert(self, key: str, value: str) -> List[str]:
        if key == value and not self.config.allow_self_association:
            return self.get(key)

        current = self._assoc.get(key, [])
        updated = add_before_first_longer(value, current)
        if updated != current:
            self._assoc[key] = updated
            self.dirty = True
        return self.get(key)

    def remove(self, key: str, value: str) -> List[str]:
        if key not in self._assoc:
            return []

        remaining = remove_by_value(value, self._assoc[key])
        if len(remaining) == len(self._assoc[key]):
            return remaining

        self.dirty = True
        if remaining:
            self._assoc[key] = remaining
        else:
            del self._assoc[key]
        return remaining

    def keys(self) -> Iterable[str]:
        return self._assoc.keys()

    def as_dict(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._assoc.items()}

    def __contains__(self, token: object) -> bool:
        return token in self._assoc

    def __len__(self) -> int:
        return len(self._assoc)
