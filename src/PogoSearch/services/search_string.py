"""Search-string service: canonicalize, analyze and localize search strings.

Analysis always runs on the canonical-language rendition of a string, since
conflict groups are written in canonical terms.
"""

from __future__ import annotations

from dataclasses import dataclass

from PogoSearch.core.models import LanguageDetection, TranslationResult
from PogoSearch.core.query import ValidationReport
from PogoSearch.lexicon.resolver import Lexicon
from PogoSearch.query.conflicts import ConflictRules
from PogoSearch.query.validation import validate_search_string
from PogoSearch.translation.detect import LanguageDetector
from PogoSearch.translation.engine import Translator
from PogoSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class CanonicalText:
    """A search string rendered in the canonical language.

    Attributes:
        text: Canonical-language search string.
        language: Language the input was read as.
        detection: Detection outcome, or None when the source was given.
        translation: Underlying translation result.
    """

    text: str
    language: str
    detection: LanguageDetection | None
    translation: TranslationResult


@dataclass(frozen=True, slots=True)
class SearchAnalysis:
    canonical: CanonicalText
    report: ValidationReport

    @property
    def valid(self) -> bool:
        return self.report.valid


class SearchStringService:
    """Coordinate detection, translation and validation."""

    def __init__(
        self,
        lexicon: Lexicon,
        rules: ConflictRules,
        translator: Translator,
        detector: LanguageDetector,
    ) -> None:
        self.lexicon = lexicon
        self.rules = rules
        self.translator = translator
        self.detector = detector

    def to_canonical(self, text: str, *, source: str | None = None) -> CanonicalText:
        """Translate ``text`` into the canonical language.

        Args:
            text: Search string.
            source: Source language; detected from ``text`` when None.

        Returns:
            Canonical rendition with detection details.

        Raises:
            ValueError: If ``source`` is not a catalog language.
        """
        detection = None
        if source is None:
            detection = self.detector.choose(text)
            source = detection.language
            log.debug("Detection for %r: %s", text, detection.message)

        result = self.translator.translate(text, source, self.lexicon.canonical)
        return CanonicalText(text=result.text, language=source, detection=detection, translation=result)

    def analyze(self, text: str, *, source: str | None = None) -> SearchAnalysis:
        """Canonicalize ``text`` then run syntax validation and parsing on it."""
        canonical = self.to_canonical(text, source=source)
        report = validate_search_string(canonical.text, self.rules)
        log.debug("Analysis of %r: valid=%s", canonical.text, report.valid)
        return SearchAnalysis(canonical=canonical, report=report)

    def localize(
        self,
        text: str,
        *,
        target: str,
        source: str | None = None,
        lowercase: bool = False,
    ) -> TranslationResult:
        """Translate ``text`` into ``target``, detecting the source when omitted.

        Raises:
            ValueError: If a language is not in the catalog.
        """
        self.lexicon.catalog.require_language(target)
        if source is None:
            detection = self.detector.choose(text)
            source = detection.language
            log.debug("Detection for %r: %s", text, detection.message)
        return self.translator.translate(text, source, target, lowercase=lowercase)
