"""Readers for grid and word list files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import InputFileError


def _read_entries(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFileError(f"Cannot read {path}: {exc}") from exc
    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    return _read_entries(path)


def parse_grid_file(path: Path) -> List[str]:
    """Read grid rows from a file, one row per line.

    Blank lines and # comments are skipped. Spaces inside a row are dropped so
    that ``A B C D E`` and ``ABCDE`` describe the same row.
    """
    return ["".join(line.split()) for line in _read_entries(path)]
