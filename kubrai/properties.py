"""
Property directory reader/writer.

Every property lives in its own file inside a properties directory: the file
name is the property name and the file content is the value. Lookups never
fail - a missing file or an unparsable value logs a warning and yields the
property's default.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Union

logger = logging.getLogger(__name__)

PropertyValue = Union[str, int, bool]

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

PROPERTIES_ENV = "KUBRAI_PROPERTIES"
PROPERTIES_SUBDIR = "properties"
HOME_PROPERTIES = Path.home() / ".kubrai" / PROPERTIES_SUBDIR

BOOL_ON = "ON"
BOOL_OFF = "OFF"

DEFAULTS: Dict[str, PropertyValue] = {
    "SolveKubrayaSeparator": "_",
    "GuessUnknownMarker": "???",
    "AddAutoLowercase": True,
    "AddValMayEqualKey": False,
    "AddAutoBothMaxlen": 0,
    "AssocFileKeySeparator": ":",
    "AssocFileValSeparator": ",",
    "AssocFileBackupDepth": 10,
    "DictsExt": ".txt",
    "PlaybooksDir": "./playbooks",
    "PlaybookCurrent": "default",
    "SolveMaxResults": 10,
    "SolveAutoGuess": False,
    "GuessMaxResults": 10,
    "GuessUnknownsLimit": 1,
    "GuessExplainResults": False,
    "SearchDictDefaultMaxResults": 10,
    "RankByFrequency": True,
    "WordfreqLang": "en",
    "BuildDictSize": 50000,
    "ShowProgress": False,
}


def detect_properties_dir() -> Path:
    """Find the properties directory: env override, then ./properties, then ~/.kubrai."""
    override = os.environ.get(PROPERTIES_ENV)
    if override:
        return Path(override)

    candidates = [Path.cwd() / PROPERTIES_SUBDIR, HOME_PROPERTIES]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate

    logger.warning("No properties dir detected, using defaults (looked in %s)",
                   ", ".join(str(c) for c in candidates))
    return candidates[0]


class Properties:
    """String/int/bool view over a properties directory."""

    def __init__(self, path: Union[str, Path], defaults: Mapping[str, PropertyValue] | None = None):
        self.path = Path(path)
        self.defaults = dict(DEFAULTS if defaults is None else defaults)

    def _default(self, name: str, fallback: PropertyValue) -> PropertyValue:
        return self.defaults.get(name, fallback)

    def _read(self, name: str) -> str | None:
        try:
            raw = (self.path / name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("File read error: %s", exc)
            return None
        return raw.strip(" \n")

    def as_string(self, name: str) -> str:
        value = self._read(name)
        if value is None:
            return str(self._default(name, ""))
        return value

    def as_int(self, name: str) -> int:
        value = self._read(name)
        if value is None:
            return int(self._default(name, 0))
        try:
            return int(value)
        except ValueError as exc:
            logger.warning("Convert to int error: %s", exc)
            return int(self._default(name, 0))

    def as_bool(self, name: str) -> bool:
        value = self._read(name)
        if value is None:
            return bool(self._default(name, False))
        value = value.strip()
        if value == BOOL_ON:
            return True
        if value == BOOL_OFF:
            return False
        logger.warning("Non-bool: %s", value)
        return bool(self._default(name, False))

    def set(self, name: str, value: PropertyValue) -> None:
        if isinstance(value, bool):
            value = BOOL_ON if value else BOOL_OFF
        self.path.mkdir(parents=True, exist_ok=True)
        (self.path / name).write_text(str(value), encoding="utf-8")

    def set_many(self, props: Mapping[str, PropertyValue]) -> None:
        for name, value in props.items():
            self.set(name, value)
