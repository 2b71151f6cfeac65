"""Read-only reference data used by the segmenter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Mapping

from .normalization import normalize_name, tokenize


_EXCLUDED_GIVEN_TOKENS = frozenset({"DEL", "LOS", "LAS", "SAN", "MARIA", "JOSE"})


@dataclass(frozen=True)
class CompoundDictionary:
    """Set of multi-word surname phrases such as ``"DE LA O"``."""

    entries: FrozenSet[str] = frozenset()
    max_words: int = field(init=False)

    def __post_init__(self) -> None:
        longest = max((len(tokenize(entry)) for entry in self.entries), default=0)
        object.__setattr__(self, "max_words", longest)

    @classmethod
    def from_sources(
        cls,
        sources: Iterable[Iterable[str]],
        *,
        fix_encoding: bool = False,
        fold_accents: bool = False,
    ) -> "CompoundDictionary":
        """Flatten one or more surname lists into a dictionary.

        Blank entries and single words are dropped; duplicates collapse.
        """

        entries = set()
        for source in sources:
            for raw in source:
                phrase = normalize_name(raw, fix_encoding=fix_encoding, fold_accents=fold_accents)
                if len(tokenize(phrase)) >= 2:
                    entries.add(phrase)
        return cls(frozenset(entries))

    def contains(self, phrase: str) -> bool:
        return phrase in self.entries

    def __contains__(self, phrase: object) -> bool:
        return phrase in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries, key=lambda entry: (-len(tokenize(entry)), entry)))


@dataclass(frozen=True)
class GivenNameReference:
    """Set of single tokens known to be first or middle names."""

    tokens: FrozenSet[str] = frozenset()

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[str],
        *,
        fix_encoding: bool = False,
        fold_accents: bool = False,
    ) -> "GivenNameReference":
        normalized = (
            normalize_name(token, fix_encoding=fix_encoding, fold_accents=fold_accents) for token in tokens
        )
        return cls(frozenset(token for token in normalized if token and " " not in token))

    @classmethod
    def from_frequencies(
        cls,
        counts: Mapping[str, int],
        min_frequency: int = 500,
        *,
        fix_encoding: bool = False,
        fold_accents: bool = False,
    ) -> "GivenNameReference":
        """Keep the tokens seen more than `min_frequency` times.

        Very short tokens and connectors that also open compound surnames
        (``DEL``, ``SAN``...) are left out, as are ``MARIA`` and ``JOSE``, which
        appear inside too many compound phrases to be useful as evidence.
        """

        kept = []
        for token, count in counts.items():
            normalized = normalize_name(token, fix_encoding=fix_encoding, fold_accents=fold_accents)
            if count <= min_frequency or len(normalized) <= 2:
                continue
            if normalized in _EXCLUDED_GIVEN_TOKENS or " " in normalized:
                continue
            kept.append(normalized)
        return cls(frozenset(kept))

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)
