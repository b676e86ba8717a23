"""Source-language detection for unlabeled search strings."""

from __future__ import annotations

from PogoSearch.core.models import DetectionStatus, LanguageDetection
from PogoSearch.lexicon.resolver import Lexicon
from PogoSearch.lexicon.segment import (
    classify_search_type,
    fold_term,
    is_separator,
    split_segment,
    split_separators,
)
from PogoSearch.utils.log import log


class LanguageDetector:
    """Intersect, term by term, the languages each term belongs to.

    Args:
        lexicon: Lexicon to resolve terms against.
        skip_unknown: Ignore terms found in no language instead of letting
            them empty the result.
    """

    def __init__(self, lexicon: Lexicon, *, skip_unknown: bool = False) -> None:
        self.lexicon = lexicon
        self.skip_unknown = skip_unknown

    def detect(self, text: str) -> frozenset[str]:
        """Return every language consistent with all translatable terms.

        An empty set means no single language explains the string; the full
        language set means it contains nothing language-specific.
        """
        languages = set(self.lexicon.languages)
        checked: set[tuple[str, str]] = set()

        for piece in split_separators(text or ""):
            if not piece or is_separator(piece):
                continue
            segment = split_segment(piece)
            if not segment.is_translatable:
                continue

            search_type = classify_search_type(segment)
            key = (fold_term(segment.core), search_type.value)
            if key in checked:
                continue
            checked.add(key)

            term_languages = self.lexicon.languages_for(segment.core, search_type)
            log.debug("Languages for %r: %s", piece, list(term_languages))
            if not term_languages and self.skip_unknown:
                continue
            languages.intersection_update(term_languages)
            if not languages:
                break

        return frozenset(languages)

    def choose(self, text: str) -> LanguageDetection:
        """Detect and pick the language to translate from.

        A single candidate is used as is. Otherwise the canonical language
        is preferred when it is a candidate or when nothing matched, and the
        first candidate in catalog order is used in the remaining cases.
        """
        found = self.detect(text)
        candidates = tuple(language for language in self.lexicon.languages if language in found)
        canonical = self.lexicon.canonical

        if not candidates:
            return LanguageDetection(candidates, canonical, DetectionStatus.NONE)
        if len(candidates) == 1:
            return LanguageDetection(candidates, candidates[0], DetectionStatus.SINGLE)

        status = DetectionStatus.ALL if len(candidates) == len(self.lexicon.languages) else DetectionStatus.MULTIPLE
        language = canonical if canonical in candidates else candidates[0]
        return LanguageDetection(candidates, language, status)
