"""Puzzle strings: case normalization and splitting into hint tokens."""

from __future__ import annotations

from typing import List


def normalize(token: str, lowercase: bool = True) -> str:
    token = token.strip(" ")
    return token.lower() if lowercase else token.upper()


def is_kubraya(text: str, separator: str) -> bool:
    return separator in text


def split_kubraya(kubraya: str, separator: str, lowercase: bool = True) -> List[str]:
    """Normalize every part of ``kubraya`` and return them in puzzle order."""
    return [normalize(part, lowercase) for part in kubraya.split(separator)]
