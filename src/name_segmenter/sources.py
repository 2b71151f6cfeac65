"""Loading of surname and given-name word lists."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

import ftfy


def load_word_list(path: str | Path, *, fix_encoding: bool = False) -> List[str]:
    """Read a JSON array (``.json``) or a one-entry-per-line file (``.txt``).

    With `fix_encoding`, mis-decoded text is repaired before parsing.
    """

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".json", ".txt"}:
        raise ValueError(f"Unsupported word list format: '{suffix}'")

    text = path.read_text(encoding="utf-8", errors="replace")
    if fix_encoding:
        text = ftfy.fix_text(text)
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of strings in '{path}'")
        entries = [str(item) for item in data if item is not None]
    else:
        entries = text.splitlines()
    return [entry.strip() for entry in entries if entry.strip()]


def merge_word_lists(*lists: Iterable[str]) -> List[str]:
    """Return the union of `lists`, longest entries first."""

    merged = {entry.strip().upper() for words in lists for entry in words if entry and entry.strip()}
    return sorted(merged, key=lambda entry: (-len(entry), entry))
