"""Display formats for segmented names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List

from .normalization import PARTICLES

if TYPE_CHECKING:
    from .segmenter import SegmentedName


_MULTI_HYPHEN_PATTERN = re.compile(r"-+")


class OutputFormat(str, Enum):
    NATURAL = "natural"
    STANDARD = "hyphenated-surname"
    FULL_HYPHEN = "hyphenated-full"


@dataclass(frozen=True)
class FormattedName:
    """Display projection of a :class:`SegmentedName`."""

    given_name: str
    surname: str
    full_name: str


def title_case(text: str, *, lower_particles: bool = True) -> str:
    """Capitalize each word of `text`, including letters after a hyphen.

    With `lower_particles`, connectors such as ``de`` or ``van`` stay
    lower-case unless they open the string.
    """

    words: List[str] = []
    for position, word in enumerate(text.lower().split()):
        if lower_particles and position > 0 and word.upper() in PARTICLES:
            words.append(word)
            continue
        words.append("-".join(piece[:1].upper() + piece[1:] for piece in word.split("-")))
    return " ".join(words)


def _hyphenate(text: str) -> str:
    return _MULTI_HYPHEN_PATTERN.sub("-", text.replace(" ", "-")).strip("-")


def to_natural(parsed: "SegmentedName") -> FormattedName:
    """Space-separated name, particles lowered across the whole name."""

    given_words = parsed.given_name.replace("-", " ").split()
    surname_words = f"{parsed.surname1} {parsed.surname2}".replace("-", " ").split()
    cased = title_case(" ".join(given_words + surname_words)).split()
    given = " ".join(cased[: len(given_words)])
    surname = " ".join(cased[len(given_words) :])
    return FormattedName(given_name=given, surname=surname, full_name=" ".join(cased))


def to_standard(parsed: "SegmentedName") -> FormattedName:
    """Given name followed by both surnames joined with hyphens."""

    given = title_case(parsed.given_name, lower_particles=False)
    surname1 = _hyphenate(title_case(parsed.surname1, lower_particles=False))
    surname2 = _hyphenate(title_case(parsed.surname2, lower_particles=False))
    surname = _hyphenate(f"{surname1}-{surname2}")
    return FormattedName(given_name=given, surname=surname, full_name=f"{given} {surname}".strip())


def to_full_hyphen(parsed: "SegmentedName") -> FormattedName:
    """Every word of the name joined with hyphens."""

    parts = [parsed.given_name, parsed.surname1, parsed.surname2]
    cased = title_case(" ".join(part for part in parts if part), lower_particles=False)
    given = _hyphenate(title_case(parsed.given_name, lower_particles=False))
    surname = _hyphenate(title_case(f"{parsed.surname1} {parsed.surname2}", lower_particles=False))
    return FormattedName(given_name=given, surname=surname, full_name=_hyphenate(cased))


_FORMATTERS: Dict[OutputFormat, Callable[["SegmentedName"], FormattedName]] = {
    OutputFormat.NATURAL: to_natural,
    OutputFormat.STANDARD: to_standard,
    OutputFormat.FULL_HYPHEN: to_full_hyphen,
}


def format_name(parsed: "SegmentedName", fmt: OutputFormat | str = OutputFormat.STANDARD) -> FormattedName:
    """Render `parsed` in `fmt`; unknown format names raise ValueError."""

    return _FORMATTERS[OutputFormat(fmt)](parsed)
