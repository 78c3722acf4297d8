"""
Playbook directories.

    <PlaybooksDir>/<name>/associations/associations.txt
    <PlaybooksDir>/<name>/dicts/*<DictsExt>
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from kubrai.config import KubraiConfig
from kubrai.errors import PersistenceError
from kubrai.properties import Properties

ASSOC_FILE_LOCATION = Path("associations") / "associations.txt"
DICTS_DIR = "dicts"


def playbook_dir(config: KubraiConfig, name: str | None = None) -> Path:
    return Path(config.playbooks_dir) / (name or config.playbook_current)


def assoc_file_location(config: KubraiConfig) -> Path:
    return playbook_dir(config) / ASSOC_FILE_LOCATION


def dicts_dir(config: KubraiConfig) -> Path:
    return playbook_dir(config) / DICTS_DIR


def list_playbooks(config: KubraiConfig) -> List[str]:
    root = Path(config.playbooks_dir)
    if not root.is_dir():
        raise PersistenceError(f"Playbooks directory not found: {root}")

    lines = []
    for entry in sorted(p for p in root.iterdir() if p.is_dir()):
        mark = "* " if entry.name == config.playbook_current else "  "
        lines.append(mark + entry.name)
    return lines


def set_current_playbook(props: Properties, config: KubraiConfig, name: str) -> bool:
    """Switch to an existing playbook. Returns False if there is no such directory."""
    if not playbook_dir(config, name).is_dir():
        return False
    props.set("PlaybookCurrent", name)
    return True
