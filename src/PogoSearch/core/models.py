"""Shared value types for segmentation, translation and language detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class SearchType(str, Enum):
    """How a query segment is being used, derived from its punctuation.

    - MOVE: prefix carries the move marker ``@`` (e.g. ``@psychic``)
    - SEARCH: postfix carries a number, range dash or star (e.g. ``cp10-``)
    - NAME: anything else (species names, types, keywords)
    """

    MOVE = "M"
    SEARCH = "S"
    NAME = "N"

    @classmethod
    def parse(cls, value: str) -> SearchType:
        """Parse a letter code (``M``) or a name (``Move``), case-insensitive.

        Raises:
            ValueError: If value is not a known search type.
        """
        text = value.strip().upper()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise ValueError(f"Unknown search type: {value!r}")


@dataclass(frozen=True, slots=True)
class Segment:
    """One non-operator piece of a search string split around its term.

    Attributes:
        prefix: Leading markers, numbers and whitespace (``!``, ``+``, ``@``, ``#``...).
        core: The translatable term; may be empty.
        postfix: Trailing numbers, ranges, stars and whitespace.
    """

    prefix: str
    core: str
    postfix: str

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.core}{self.postfix}"

    @property
    def is_tag(self) -> bool:
        return "#" in self.prefix

    @property
    def is_translatable(self) -> bool:
        return bool(self.core) and not self.is_tag


class SegmentOutcome(str, Enum):
    TRANSLATED = "translated"
    UNTRANSLATED = "untranslated"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class SegmentDiagnostic:
    """What the translator did with one segment.

    ``search_type`` is None for skipped segments (tags, bare markers).
    """

    segment: Segment
    search_type: SearchType | None
    outcome: SegmentOutcome
    replacement: str


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Translated search string plus the advisories collected on the way."""

    text: str
    source: str
    target: str
    warnings: Sequence[str] = ()
    diagnostics: Sequence[SegmentDiagnostic] = ()


class DetectionStatus(str, Enum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class LanguageDetection:
    """Outcome of source-language detection.

    Attributes:
        candidates: Languages consistent with every term, in catalog order.
        language: Language chosen to translate from.
        status: Shape of the candidate set.
    """

    candidates: tuple[str, ...]
    language: str
    status: DetectionStatus

    @property
    def message(self) -> str:
        if self.status is DetectionStatus.NONE:
            return (
                "No language found! You may be using strings from different languages. "
                "Try picking the source language manually."
            )
        if self.status is DetectionStatus.ALL:
            return "No translation needed: the string should work the same in all languages."
        if self.status is DetectionStatus.MULTIPLE:
            return (
                f"Multiple languages: all translatable phrases belong to [{', '.join(self.candidates)}]. "
                f"Translating from {self.language}."
            )
        return f"Language detected: {self.language}"
