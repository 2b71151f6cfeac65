"""Core segmentation of full names into given name and surnames."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .arbitration import AcceptAllArbitrator, Arbitrator, GivenNameArbitrator
from .dictionary import CompoundDictionary, GivenNameReference
from .normalization import normalize_name, tokenize


@dataclass(frozen=True)
class SegmentedName:
    """A full name split into a given name and up to two surnames."""

    full_name: str
    given_name: str = ""
    surname1: str = ""
    surname2: str = ""
    is_compound: bool = False

    def tokens(self) -> List[str]:
        parts = [self.given_name, self.surname1, self.surname2]
        return tokenize(" ".join(part for part in parts if part))

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)

    def to_natural(self) -> str:
        from .formatting import to_natural

        return to_natural(self).full_name

    def to_standard(self) -> str:
        from .formatting import to_standard

        return to_standard(self).full_name

    def to_full_hyphen(self) -> str:
        from .formatting import to_full_hyphen

        return to_full_hyphen(self).full_name


@dataclass
class SegmenterConfig:
    """Normalization options shared by the input and the reference data."""

    fix_encoding: bool = False
    fold_accents: bool = False


class NameSegmenter:
    """Split Latin-American full names, honoring compound surnames."""

    def __init__(
        self,
        dictionaries: Sequence[Iterable[str]] = (),
        given_names: Iterable[str] | GivenNameReference | None = None,
        *,
        arbitrator: Arbitrator | None = None,
        config: SegmenterConfig | None = None,
    ) -> None:
        self.config = config or SegmenterConfig()
        self.dictionary = CompoundDictionary.from_sources(dictionaries, **self._normalize_options)

        self.given_names: Optional[GivenNameReference] = None
        if isinstance(given_names, GivenNameReference):
            self.given_names = given_names
        elif given_names is not None:
            self.given_names = GivenNameReference.from_tokens(given_names, **self._normalize_options)

        if arbitrator is not None:
            self.arbitrator: Arbitrator = arbitrator
        elif self.given_names:
            self.arbitrator = GivenNameArbitrator(self.given_names)
        else:
            self.arbitrator = AcceptAllArbitrator()

    @property
    def _normalize_options(self) -> Dict[str, bool]:
        return {"fix_encoding": self.config.fix_encoding, "fold_accents": self.config.fold_accents}

    def normalize(self, text: object) -> str:
        return normalize_name(text, **self._normalize_options)

    def parse(self, full_name: object) -> SegmentedName:
        """Return the segmentation of `full_name`. Never raises."""

        original = self.normalize(full_name)
        remainder = original
        surname1 = ""
        surname2 = ""
        is_compound = False

        found = self.find_compound_suffix(remainder)
        if found:
            surname2 = found
            remainder = remainder[: len(remainder) - len(found)].strip()
            is_compound = True
        elif " " in remainder:
            remainder, surname2 = remainder.rsplit(" ", 1)

        found = self.find_compound_suffix(remainder)
        if found:
            surname1 = found
            remainder = remainder[: len(remainder) - len(found)].strip()
            is_compound = True
        elif remainder:
            head, _, surname1 = remainder.rpartition(" ")
            remainder = head

        given_name = remainder
        if not given_name and surname1:
            given_name, surname1, surname2 = surname1, surname2, ""

        # A move is only honored while a second surname can take the freed slot.
        decision = self.arbitrator.arbitrate(given_name, surname1)
        if decision.moved_to_given_name and surname2:
            given_name = decision.new_given_name
            surname1 = decision.new_surname1
            if not surname1:
                surname1, surname2 = surname2, ""

        return SegmentedName(
            full_name=original,
            given_name=given_name,
            surname1=surname1,
            surname2=surname2,
            is_compound=is_compound,
        )

    def parse_many(self, names: Iterable[object]) -> List[SegmentedName]:
        return [self.parse(name) for name in names]

    def find_compound_suffix(self, text: str) -> str | None:
        """Return the longest accepted dictionary phrase ending `text`."""

        tokens = tokenize(text)
        if len(tokens) < 2:
            return None

        window = min(len(tokens), self.dictionary.max_words)
        for size in range(window, 1, -1):
            candidate = " ".join(tokens[-size:])
            remaining_text = " ".join(tokens[:-size])
            if self.dictionary.contains(candidate) and self.arbitrator.is_valid(candidate, remaining_text):
                return candidate
        return None


__all__ = [
    "NameSegmenter",
    "SegmentedName",
    "SegmenterConfig",
]
