"""JSON output renderers.

Render results into JSON-serializable objects. Provides JsonOutputWriter,
which prints one JSON document per command.
"""

from __future__ import annotations

import json
from typing import Any

import click

from PogoSearch.core.models import LanguageDetection, TranslationResult
from PogoSearch.core.query import ValidationReport
from PogoSearch.lexicon.catalog import TermCatalog
from PogoSearch.renderers.base import OutputWriter
from PogoSearch.renderers.console import render_ast
from PogoSearch.services.search_string import SearchAnalysis


def render_report_json(text: str, report: ValidationReport) -> dict[str, Any]:
    """Render a validation report into a JSON-serializable dict.

    Args:
        text: The validated search string.
        report: Syntax and parse outcome.

    Returns:
        A dict with the verdict, syntax errors, filters and conflicts.
        ``parse`` is None when the syntax pre-checks failed.
    """
    parse = None
    if report.parse is not None:
        parse = {
            "ast": render_ast(report.parse.ast) if report.parse.ast is not None else None,
            "included": list(report.parse.included),
            "excluded": list(report.parse.excluded),
            "conflicts": [
                {
                    "kind": conflict.kind.value,
                    "message": conflict.message,
                    "filters": list(conflict.filters),
                }
                for conflict in report.parse.conflicts
            ],
        }
    return {
        "search_string": text,
        "valid": report.valid,
        "syntax_errors": [{"code": issue.code.value, "message": issue.message} for issue in report.syntax.errors],
        "parse": parse,
    }


def render_translation_json(result: TranslationResult) -> dict[str, Any]:
    return {
        "text": result.text,
        "source": result.source,
        "target": result.target,
        "warnings": list(result.warnings),
        "segments": [
            {
                "segment": diagnostic.segment.text,
                "type": diagnostic.search_type.value if diagnostic.search_type else None,
                "outcome": diagnostic.outcome.value,
                "replacement": diagnostic.replacement,
            }
            for diagnostic in result.diagnostics
        ],
    }


def render_detection_json(detection: LanguageDetection) -> dict[str, Any]:
    return {
        "candidates": list(detection.candidates),
        "language": detection.language,
        "status": detection.status.value,
        "message": detection.message,
    }


def render_analysis_json(analysis: SearchAnalysis) -> dict[str, Any]:
    """Render a canonicalized and validated search string."""
    canonical = analysis.canonical
    payload = render_report_json(canonical.text, analysis.report)
    payload["input_language"] = canonical.language
    payload["detection"] = render_detection_json(canonical.detection) if canonical.detection else None
    payload["translation"] = render_translation_json(canonical.translation)
    return payload


def render_languages_json(catalog: TermCatalog) -> list[dict[str, Any]]:
    return [
        {
            "name": language,
            "locale": catalog.locale(language),
            "canonical": language == catalog.canonical,
        }
        for language in catalog.languages
    ]


def _echo(payload: Any) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


class JsonOutputWriter(OutputWriter):
    """Write results to stdout as JSON documents."""

    def write_report(self, text: str, report: ValidationReport) -> None:
        _echo(render_report_json(text, report))

    def write_analysis(self, analysis: SearchAnalysis) -> None:
        _echo(render_analysis_json(analysis))

    def write_translation(self, result: TranslationResult) -> None:
        _echo(render_translation_json(result))

    def write_detection(self, detection: LanguageDetection) -> None:
        _echo(render_detection_json(detection))

    def write_languages(self, catalog: TermCatalog) -> None:
        _echo(render_languages_json(catalog))

    def write_search_string(self, text: str) -> None:
        _echo({"search_string": text})
