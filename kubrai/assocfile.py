"""
Association file format and backup rotation.

One line per key:

    key<key_sep>value1<val_sep>value2...

Before every save the previous file is kept as ``<file>.1.bak`` and older
copies move up one generation, up to ``backup_depth`` generations.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Union

from kubrai.errors import PersistenceError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_BACKUP_DEPTH = 10


def backup_name(path: PathLike, backup_num: int) -> str:
    return f"{path}.{backup_num}.bak"


def rotate_backups(path: PathLike, depth: int = DEFAULT_BACKUP_DEPTH) -> None:
    depth = max(depth, 1)
    oldest = Path(backup_name(path, depth))
    if oldest.exists():
        oldest.unlink()

    for i in range(depth - 1, 0, -1):
        src = Path(backup_name(path, i))
        if src.exists():
            os.replace(src, backup_name(path, i + 1))


def backup_file(path: PathLike, depth: int = DEFAULT_BACKUP_DEPTH) -> None:
    if not Path(path).exists():
        return
    rotate_backups(path, depth)
    os.replace(path, backup_name(path, 1))
    logger.info("Backed up %s", path)


def build_assoc_string(key: str, values: Sequence[str], key_sep: str = ":", val_sep: str = ",") -> str:
    return key + key_sep + val_sep.join(values)


def parse_assoc_line(line: str, key_sep: str, val_sep: str) -> tuple[str, List[str]]:
    key, sep, rest = line.partition(key_sep)
    if not sep:
        raise PersistenceError(f"Malformed association line (no '{key_sep}'): {line!r}")
    return key, [value for value in rest.split(val_sep) if value]


def load_assoc(path: PathLike, key_sep: str = ":", val_sep: str = ",") -> Dict[str, List[str]]:
    """Read an association file. A file that does not exist yet is an empty table."""
    path = Path(path)
    if not path.exists():
        logger.info("No association file at %s, starting empty", path)
        return {}

    assoc: Dict[str, List[str]] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                key, values = parse_assoc_line(line, key_sep, val_sep)
                assoc[key] = values
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"Unable to read association file {path}: {exc}") from exc
    return assoc


def save_assoc(
    path: PathLike,
    assoc: Mapping[str, Sequence[str]],
    key_sep: str = ":",
    val_sep: str = ",",
    backup_depth: int = DEFAULT_BACKUP_DEPTH,
) -> None:
    path = Path(path)
    try:
        backup_file(path, backup_depth)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            for key in sorted(assoc):
                handle.write(build_assoc_string(key, assoc[key], key_sep, val_sep) + "\n")
    except OSError as exc:
        raise PersistenceError(f"Unable to save association file {path}: {exc}") from exc
    logger.info("Saved %d associations to %s", len(assoc), path)
