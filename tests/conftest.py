"""
Pytest configuration and fixtures for kubrai tests
"""

import dataclasses
from pathlib import Path

import pytest

from kubrai.assocfile import save_assoc
from kubrai.associations import AssociationStore
from kubrai.config import KubraiConfig
from kubrai.properties import Properties


@pytest.fixture
def config():
    """Lowercase puzzles, default markers, no frequency ranking"""
    return KubraiConfig(lowercase=True, rank_by_frequency=False)


@pytest.fixture
def make_config(config):
    def _make(**overrides):
        return dataclasses.replace(config, **overrides)
    return _make


@pytest.fixture
def make_store(tmp_path, config):
    """Build an in-memory association store backed by a temporary file"""
    def _make(assoc=None, cfg=None):
        return AssociationStore(tmp_path / "associations.txt", cfg or config, assoc)
    return _make


@pytest.fixture
def write_lines():
    def _write(path: Path, lines):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def playbook(tmp_path, write_lines):
    """Properties dir plus a 'default' playbook with one dictionary and a few associations"""
    props_dir = tmp_path / "properties"
    playbooks_dir = tmp_path / "playbooks"
    props = Properties(props_dir)
    props.set_many({
        "PlaybooksDir": str(playbooks_dir),
        "PlaybookCurrent": "default",
        "DictsExt": ".test",
        "AddAutoLowercase": True,
        "AddAutoBothMaxlen": 3,
        "RankByFrequency": False,
        "SolveMaxResults": 3,
        "GuessMaxResults": 2,
        "GuessUnknownsLimit": 2,
        "GuessExplainResults": False,
    })

    default = playbooks_dir / "default"
    write_lines(default / "dicts" / "dict.test", [
        "boycott", "copy", "proximity", "terminator", "boyscout", "cowboy",
    ])
    save_assoc(default / "associations" / "associations.txt", {
        "policeman": ["cop", "thief"],
        "why": ["y", "not", "ask"],
        "girl": ["boy"],
        "tea": ["t", "coffee"],
    })
    (playbooks_dir / "spare").mkdir()
    return props
