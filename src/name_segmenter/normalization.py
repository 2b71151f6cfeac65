"""Name normalization helpers."""

from __future__ import annotations

import re
from typing import List

import ftfy
from unidecode import unidecode


_MULTI_SPACE_PATTERN = re.compile(r"\s+")

# Connectors kept lower-case inside a name ("Juan de la O").
PARTICLES = frozenset(
    {"DE", "LA", "DEL", "LOS", "LAS", "Y", "DA", "DOS", "DAS", "DO", "VON", "VAN", "DER", "SAN", "SANTA"}
)


def normalize_name(text: object, *, fix_encoding: bool = False, fold_accents: bool = False) -> str:
    """Return `text` trimmed, uppercased and single-spaced.

    With `fix_encoding`, mojibake such as ``"SÃ¡enz"`` is repaired first.
    With `fold_accents`, the result is transliterated to plain ASCII.
    """

    raw = str(text or "")
    if fix_encoding and raw:
        raw = ftfy.fix_text(raw)
    if fold_accents:
        raw = unidecode(raw)
    collapsed = _MULTI_SPACE_PATTERN.sub(" ", raw.upper())
    return collapsed.strip()


def tokenize(normalized: str) -> List[str]:
    """Split an already normalized name into its words."""

    if not normalized:
        return []
    return normalized.split(" ")
