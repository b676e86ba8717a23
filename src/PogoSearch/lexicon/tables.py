"""Sparse side tables layered over the term catalog.

- ``OverlapTable``: when one surface form maps to two concepts in the same
  language, pins each position to the search type it is valid for.
- ``WarningTable``: advisories for surface forms whose meaning is ambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from PogoSearch.core.models import SearchType
from PogoSearch.lexicon.catalog import ConceptId
from PogoSearch.lexicon.segment import fold_term


class OverlapTable:
    """``(concept, language) -> SearchType`` overrides."""

    def __init__(self, entries: Mapping[tuple[ConceptId, str], SearchType] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __len__(self) -> int:
        return len(self._entries)

    def override(self, concept: ConceptId, language: str) -> SearchType | None:
        return self._entries.get((concept, language))

    def permits(self, concept: ConceptId, language: str, search_type: SearchType) -> bool:
        """Return True unless an override pins this position to another search type."""
        pinned = self.override(concept, language)
        return pinned is None or pinned is search_type


@dataclass(frozen=True, slots=True)
class WarningEntry:
    """Advisory for an ambiguous term.

    Attributes:
        qualifier: Search type the advisory is limited to; None matches any.
        source_message: Shown when the term appears in the input language.
        target_message: Shown when the term is produced in the output language.
    """

    qualifier: SearchType | None
    source_message: str
    target_message: str

    def applies_to(self, search_type: SearchType) -> bool:
        return self.qualifier is None or self.qualifier is search_type


class WarningTable:
    """``(folded term, language) -> WarningEntry``.

    Terms are keyed with ``fold_term``, the rule catalog lookups use, so a
    term that resolves without its accents still finds its advisory.
    """

    def __init__(self, entries: Iterable[tuple[str, str, WarningEntry]] = ()) -> None:
        self._entries = MappingProxyType(
            {(fold_term(term), language): entry for term, language, entry in entries}
        )

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, term: str, language: str) -> WarningEntry | None:
        return self._entries.get((fold_term(term), language))
