"""Index-aligned term catalog.

Every supported language has an ordered tuple of surface forms. Position
``i`` is the same concept in every language; ``ConceptId`` names that
position. The alignment invariant is checked once, here, and all lookups go
through this class.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NewType, Sequence

from PogoSearch.lexicon.segment import fold_term

ConceptId = NewType("ConceptId", int)


class TermCatalog:
    """Read-only per-language term lists sharing concept positions.

    Args:
        terms: Mapping of language name to its ordered surface forms.
            Insertion order defines the catalog language order.
        canonical: Pivot language used for detection and parsing.
        keys: Optional readable key per concept (defaults to the position).
        locales: Optional language -> locale code mapping.

    Raises:
        ValueError: If lists differ in length, the canonical language is
            missing, or keys do not match the concept count.
    """

    def __init__(
        self,
        terms: Mapping[str, Sequence[str]],
        *,
        canonical: str,
        keys: Sequence[str] | None = None,
        locales: Mapping[str, str] | None = None,
    ) -> None:
        if canonical not in terms:
            raise ValueError(f"Canonical language {canonical!r} is not in the catalog")

        size = len(terms[canonical])
        for language, forms in terms.items():
            if len(forms) != size:
                raise ValueError(
                    f"Term list for {language} has {len(forms)} entries, expected {size} (as {canonical})"
                )
        if keys is not None and len(keys) != size:
            raise ValueError(f"Concept keys have {len(keys)} entries, expected {size}")
        if keys is not None and len(set(keys)) != len(keys):
            raise ValueError("Concept keys must be unique")

        languages = [canonical] + [lang for lang in terms if lang != canonical]
        self._languages: tuple[str, ...] = tuple(languages)
        self._canonical = canonical
        self._terms: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {lang: tuple(terms[lang]) for lang in languages}
        )
        self._keys: tuple[str, ...] = tuple(keys) if keys is not None else tuple(str(i) for i in range(size))
        self._key_index = {key: ConceptId(i) for i, key in enumerate(self._keys)}
        self._locales = MappingProxyType(dict(locales or {}))
        self._index = MappingProxyType({lang: _build_index(forms) for lang, forms in self._terms.items()})

    def __len__(self) -> int:
        return len(self._keys)

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    @property
    def canonical(self) -> str:
        return self._canonical

    def has_language(self, language: str) -> bool:
        return language in self._terms

    def require_language(self, language: str) -> None:
        """Raise ValueError for a language the catalog does not know."""
        if language not in self._terms:
            raise ValueError(f"Unknown language: {language!r} (expected one of {list(self._languages)})")

    def locale(self, language: str) -> str:
        return self._locales.get(language, "en")

    def terms(self, language: str) -> tuple[str, ...]:
        self.require_language(language)
        return self._terms[language]

    def term(self, concept: ConceptId, language: str) -> str:
        return self.terms(language)[concept]

    def key(self, concept: ConceptId) -> str:
        return self._keys[concept]

    def concept_for_key(self, key: str) -> ConceptId:
        """Return the concept registered under ``key``.

        Raises:
            KeyError: If no concept uses that key.
        """
        return self._key_index[key]

    def candidates(self, term: str, language: str) -> tuple[ConceptId, ...]:
        """Return every concept whose surface form in ``language`` matches ``term``.

        Matching ignores case and Latin accents. Results are in ascending
        position order, exactly what a linear scan would visit.
        """
        self.require_language(language)
        return self._index[language].get(fold_term(term), ())

    def contains(self, term: str, language: str) -> bool:
        return bool(self.candidates(term, language))


def _build_index(forms: Sequence[str]) -> Mapping[str, tuple[ConceptId, ...]]:
    index: dict[str, list[ConceptId]] = {}
    for position, form in enumerate(forms):
        index.setdefault(fold_term(form), []).append(ConceptId(position))
    return {key: tuple(ids) for key, ids in index.items()}
