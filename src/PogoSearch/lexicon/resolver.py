"""Term resolution over the catalog and its side tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from PogoSearch.core.models import SearchType
from PogoSearch.lexicon.catalog import ConceptId, TermCatalog
from PogoSearch.lexicon.tables import OverlapTable, WarningEntry, WarningTable
from PogoSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Term catalog bundled with its overlap and warning tables.

    Loaded once and shared read-only by the translator and the detector.
    """

    catalog: TermCatalog
    overlaps: OverlapTable = field(default_factory=OverlapTable)
    warnings: WarningTable = field(default_factory=WarningTable)

    @property
    def languages(self) -> tuple[str, ...]:
        return self.catalog.languages

    @property
    def canonical(self) -> str:
        return self.catalog.canonical

    def resolve(self, term: str, language: str, search_type: SearchType) -> ConceptId | None:
        """Find the concept ``term`` denotes in ``language`` for this search type.

        Candidates are visited in catalog order; a candidate pinned by the
        overlap table to a different search type is skipped.

        Returns:
            The first permitted concept, or None when nothing matches.
        """
        for concept in self.catalog.candidates(term, language):
            if self.overlaps.permits(concept, language, search_type):
                return concept
            log.debug(
                "Skipping %r in %s at concept %s: pinned to %s, segment is %s",
                term,
                language,
                self.catalog.key(concept),
                self.overlaps.override(concept, language).name,
                search_type.name,
            )
        return None

    def languages_for(self, term: str, search_type: SearchType) -> tuple[str, ...]:
        """Return the languages (catalog order) in which ``term`` resolves."""
        return tuple(
            language for language in self.catalog.languages if self.resolve(term, language, search_type) is not None
        )

    def warning_for(self, term: str, language: str, search_type: SearchType) -> WarningEntry | None:
        entry = self.warnings.lookup(term, language)
        if entry is None or not entry.applies_to(search_type):
            return None
        return entry
