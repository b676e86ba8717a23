"""Base class for output writers.

Separates command control flow from output formatting so commands can be
tested without capturing text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PogoSearch.core.models import LanguageDetection, TranslationResult
    from PogoSearch.core.query import ValidationReport
    from PogoSearch.lexicon.catalog import TermCatalog
    from PogoSearch.services.search_string import SearchAnalysis


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_report(self, text: str, report: ValidationReport) -> None:
        """Write the validation of a canonical search string.

        Args:
            text: The validated search string.
            report: Syntax and parse outcome.
        """

    @abstractmethod
    def write_analysis(self, analysis: SearchAnalysis) -> None:
        """Write a canonicalized and validated search string."""

    @abstractmethod
    def write_translation(self, result: TranslationResult) -> None:
        """Write a translated search string and its warnings."""

    @abstractmethod
    def write_detection(self, detection: LanguageDetection) -> None:
        """Write detected candidate languages."""

    @abstractmethod
    def write_languages(self, catalog: TermCatalog) -> None:
        """Write the supported languages."""

    @abstractmethod
    def write_search_string(self, text: str) -> None:
        """Write an assembled search string."""
