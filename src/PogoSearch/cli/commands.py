"""Command implementations for the PogoSearch CLI.

Encapsulates what each command does, separated from CLI parameter handling
(``ui``) and from output formatting (``renderers``). ``execute`` returns
whether the command's verdict was positive; only ``validate`` and ``parse``
can return False.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PogoSearch.query.builder import build_search_string
from PogoSearch.query.validation import validate_search_string
from PogoSearch.renderers import OutputWriter
from PogoSearch.services.search_string import SearchStringService
from PogoSearch.utils.log import log


@dataclass(slots=True)
class ValidateCommand:
    """Check syntax and conflicts of a canonical-language search string."""

    service: SearchStringService
    output_writer: OutputWriter
    text: str

    def execute(self) -> bool:
        report = validate_search_string(self.text, self.service.rules)
        log.debug("Validated %r: valid=%s", self.text, report.valid)
        self.output_writer.write_report(self.text, report)
        return report.valid


@dataclass(slots=True)
class ParseCommand:
    """Translate a search string to the canonical language, then validate it.

    The source language is detected when ``source`` is None.
    """

    service: SearchStringService
    output_writer: OutputWriter
    text: str
    source: str | None = None

    def execute(self) -> bool:
        analysis = self.service.analyze(self.text, source=self.source)
        self.output_writer.write_analysis(analysis)
        return analysis.valid


@dataclass(slots=True)
class TranslateCommand:
    """Translate a search string into a target language."""

    service: SearchStringService
    output_writer: OutputWriter
    text: str
    target: str
    source: str | None = None
    lowercase: bool = False

    def execute(self) -> bool:
        result = self.service.localize(
            self.text,
            target=self.target,
            source=self.source,
            lowercase=self.lowercase,
        )
        log.debug("Translated with %d warning(s)", len(result.warnings))
        self.output_writer.write_translation(result)
        return True


@dataclass(slots=True)
class DetectCommand:
    service: SearchStringService
    output_writer: OutputWriter
    text: str

    def execute(self) -> bool:
        self.output_writer.write_detection(self.service.detector.choose(self.text))
        return True


@dataclass(slots=True)
class LanguagesCommand:
    service: SearchStringService
    output_writer: OutputWriter

    def execute(self) -> bool:
        self.output_writer.write_languages(self.service.lexicon.catalog)
        return True


@dataclass(slots=True)
class BuildCommand:
    """Assemble a search string from included and excluded terms.

    Conflicts in the assembled string are logged as warnings; the string is
    written regardless.
    """

    service: SearchStringService
    output_writer: OutputWriter
    include: tuple[str, ...] = field(default_factory=tuple)
    exclude: tuple[str, ...] = field(default_factory=tuple)

    def execute(self) -> bool:
        text = build_search_string(self.include, self.exclude)
        report = validate_search_string(text, self.service.rules)
        for message in report.messages:
            log.warning("%s", message)
        self.output_writer.write_search_string(text)
        return True
