"""Cross-language search-string translation.

Terms are resolved to a concept in the source language and replaced by the
same concept's surface form in the target language. Operators, prefixes
(``!``, ``@``, numbers...) and postfixes (ranges, stars) are kept as they
are, so the output tokenizes to the same operator/term shape as the input.
Anything that cannot be resolved is copied through unchanged.
"""

from __future__ import annotations

from PogoSearch.core.models import (
    SearchType,
    Segment,
    SegmentDiagnostic,
    SegmentOutcome,
    TranslationResult,
)
from PogoSearch.lexicon.resolver import Lexicon
from PogoSearch.lexicon.segment import (
    classify_search_type,
    fold_term,
    is_separator,
    lower_for_locale,
    split_segment,
    split_separators,
)
from PogoSearch.utils.log import log


class _WarningCollector:
    """Accumulate advisories, each key at most once per translation call."""

    def __init__(self) -> None:
        self._seen: set[tuple[str, str]] = set()
        self.messages: list[str] = []

    def add(self, key: tuple[str, str], message: str) -> None:
        if key in self._seen:
            return
        self._seen.add(key)
        self.messages.append(message)


class Translator:
    """Translate search strings between catalog languages."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    def translate(self, text: str, source: str, target: str, *, lowercase: bool = False) -> TranslationResult:
        """Translate ``text`` from ``source`` to ``target``.

        Args:
            text: Search string in the source language.
            source: Source language name.
            target: Target language name.
            lowercase: Lower-case the output using the target locale.

        Returns:
            Translated text with warnings (source-side before target-side,
            discovery order) and one diagnostic per non-separator piece.

        Raises:
            ValueError: If either language is not in the catalog.
        """
        catalog = self.lexicon.catalog
        catalog.require_language(source)
        catalog.require_language(target)

        if not text or source == target:
            return TranslationResult(text=text, source=source, target=target)

        collector = _WarningCollector()
        diagnostics: list[SegmentDiagnostic] = []
        out: list[str] = []

        for piece in split_separators(text):
            if not piece or is_separator(piece):
                out.append(piece)
                continue
            diagnostic = self._translate_piece(piece, source, target, collector)
            diagnostics.append(diagnostic)
            out.append(diagnostic.replacement)

        translated = "".join(out)
        if lowercase:
            translated = lower_for_locale(translated, catalog.locale(target))

        log.debug("Translated %s -> %s: %r -> %r", source, target, text, translated)
        return TranslationResult(
            text=translated,
            source=source,
            target=target,
            warnings=tuple(collector.messages),
            diagnostics=tuple(diagnostics),
        )

    def _translate_piece(
        self,
        piece: str,
        source: str,
        target: str,
        collector: _WarningCollector,
    ) -> SegmentDiagnostic:
        segment = split_segment(piece)

        if not segment.is_translatable:
            self._check_tag(segment, target, collector)
            log.debug("Translation: %r does not need a translation (%s_%s_%s)", piece, *_parts(segment))
            return SegmentDiagnostic(segment, None, SegmentOutcome.SKIPPED, piece)

        search_type = classify_search_type(segment)
        concept = self.lexicon.resolve(segment.core, source, search_type)
        if concept is None:
            log.debug("Translation: could not translate %r (%s_%s_%s) %s", piece, *_parts(segment), search_type.value)
            return SegmentDiagnostic(segment, search_type, SegmentOutcome.UNTRANSLATED, piece)

        translated_core = self.lexicon.catalog.term(concept, target)
        self._check_warnings(segment.core, translated_core, source, target, search_type, collector)

        replacement = f"{segment.prefix}{translated_core}{segment.postfix}"
        log.debug("Translation: %r -> %r (%s_%s_%s) %s", segment.core, translated_core, *_parts(segment), search_type.value)
        return SegmentDiagnostic(segment, search_type, SegmentOutcome.TRANSLATED, replacement)

    def _check_warnings(
        self,
        core: str,
        translated_core: str,
        source: str,
        target: str,
        search_type: SearchType,
        collector: _WarningCollector,
    ) -> None:
        entry = self.lexicon.warning_for(core, source, search_type)
        if entry is not None:
            collector.add((fold_term(core), source), entry.source_message)

        entry = self.lexicon.warning_for(translated_core, target, search_type)
        if entry is not None:
            collector.add((fold_term(translated_core), target), entry.target_message)

    def _check_tag(self, segment: Segment, target: str, collector: _WarningCollector) -> None:
        """Warn when a ``#tag`` reads as a catalog phrase in the target language."""
        if not (segment.is_tag and segment.core and not segment.postfix):
            return
        if self.lexicon.catalog.contains(segment.core, target):
            collector.add(
                (f"#{fold_term(segment.core)}", target),
                f"WARNING: Tag '{segment.core}' will conflict with a phrase in {target}",
            )


def _parts(segment: Segment) -> tuple[str, str, str]:
    return segment.prefix, segment.core, segment.postfix
