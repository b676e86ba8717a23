"""Translation engine and language detector."""

from __future__ import annotations

from PogoSearch.translation.detect import LanguageDetector
from PogoSearch.translation.engine import Translator

__all__ = ["LanguageDetector", "Translator"]
