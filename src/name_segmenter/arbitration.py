"""Surname arbitration heuristics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .dictionary import GivenNameReference
from .normalization import PARTICLES, tokenize


@dataclass(frozen=True)
class ArbitrationResult:
    """Outcome of :meth:`Arbitrator.arbitrate`."""

    moved_to_given_name: bool
    new_given_name: str
    new_surname1: str


class Arbitrator(Protocol):
    """Policy deciding between compound-surname and given-name readings."""

    def is_valid(self, candidate: str, remaining_text: str) -> bool:
        ...

    def arbitrate(self, given_name: str, surname1: str) -> ArbitrationResult:
        ...


class AcceptAllArbitrator:
    """Honor every dictionary match and never reclassify tokens."""

    def is_valid(self, candidate: str, remaining_text: str) -> bool:
        return True

    def arbitrate(self, given_name: str, surname1: str) -> ArbitrationResult:
        return ArbitrationResult(False, given_name, surname1)


class GivenNameArbitrator:
    """Veto or correct surname choices using known given-name tokens."""

    def __init__(self, reference: GivenNameReference) -> None:
        self.reference = reference

    def is_valid(self, candidate: str, remaining_text: str) -> bool:
        """Return True when `candidate` should be read as a compound surname.

        A phrase opening with a known given name ("JOSE MARIA") is treated as
        given names. When nothing is left to the left of the phrase, it is also
        rejected if all of its non-particle words are given names
        ("DEL CARMEN" at the start of the name).
        """

        words = tokenize(candidate)
        if not words:
            return False
        if words[0] in self.reference:
            return False
        if not remaining_text.strip():
            content = [word for word in words if word not in PARTICLES]
            if content and all(word in self.reference for word in content):
                return False
        return True

    def arbitrate(self, given_name: str, surname1: str) -> ArbitrationResult:
        """Move a lone given-name token out of `surname1`."""

        unchanged = ArbitrationResult(False, given_name, surname1)
        if not given_name:
            return unchanged
        words = tokenize(surname1)
        if len(words) != 1 or words[0] not in self.reference:
            return unchanged
        return ArbitrationResult(True, f"{given_name} {surname1}", "")
