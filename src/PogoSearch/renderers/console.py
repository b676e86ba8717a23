"""Console text renderers.

Turn analysis, translation and detection results into human-friendly text
blocks. Provides the ConsoleOutputWriter used by CLI commands.
"""

from __future__ import annotations

import click

from PogoSearch.core.models import LanguageDetection, TranslationResult
from PogoSearch.core.query import And, Filter, Node, Not, Or, ValidationReport
from PogoSearch.lexicon.catalog import TermCatalog
from PogoSearch.renderers.base import OutputWriter
from PogoSearch.services.search_string import SearchAnalysis


def render_ast(node: Node | None) -> str:
    """Render an AST in prefix form, e.g. ``OR(AND(fire, NOT(shiny)), water)``."""
    if node is None:
        return "-"
    if isinstance(node, Filter):
        return node.term
    if isinstance(node, Not):
        return f"NOT({node.filter.term})"
    if isinstance(node, And):
        return f"AND({render_ast(node.left)}, {render_ast(node.right)})"
    if isinstance(node, Or):
        return f"OR({render_ast(node.left)}, {render_ast(node.right)})"
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _fmt_terms(terms: tuple[str, ...]) -> str:
    return ", ".join(terms) if terms else "-"


def render_report_text(text: str, report: ValidationReport) -> str:
    """Render the validation of a canonical search string.

    Args:
        text: The validated search string.
        report: Syntax and parse outcome.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [
        f"Search string: {text}",
        f"Valid: {'yes' if report.valid else 'no'}",
    ]
    if report.parse is not None:
        lines.append(f"Included: {_fmt_terms(report.parse.included)}")
        lines.append(f"Excluded: {_fmt_terms(report.parse.excluded)}")
        lines.append(f"AST: {render_ast(report.parse.ast)}")
    messages = report.messages
    if messages:
        lines.append("Issues:")
        lines.extend(f"  - {message}" for message in messages)
    return "\n".join(lines) + "\n"


def render_analysis_text(analysis: SearchAnalysis) -> str:
    """Render a canonicalized and validated search string."""
    canonical = analysis.canonical
    lines = [f"Input language: {canonical.language}"]
    if canonical.detection is not None:
        lines.append(f"Detection: {canonical.detection.message}")
    lines.extend(canonical.translation.warnings)
    return "\n".join(lines) + "\n" + render_report_text(canonical.text, analysis.report)


def render_translation_text(result: TranslationResult) -> str:
    """Render a translation: the translated string, then its warnings."""
    lines = [result.text]
    lines.extend(result.warnings)
    return "\n".join(lines) + "\n"


def render_detection_text(detection: LanguageDetection) -> str:
    lines = [
        f"Candidates: {_fmt_terms(detection.candidates)}",
        detection.message,
    ]
    return "\n".join(lines) + "\n"


def render_languages_text(catalog: TermCatalog) -> str:
    lines = []
    for language in catalog.languages:
        marker = " [canonical]" if language == catalog.canonical else ""
        lines.append(f"{language} ({catalog.locale(language)}){marker}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to stdout as text."""

    def write_report(self, text: str, report: ValidationReport) -> None:
        click.echo(render_report_text(text, report), nl=False)

    def write_analysis(self, analysis: SearchAnalysis) -> None:
        click.echo(render_analysis_text(analysis), nl=False)

    def write_translation(self, result: TranslationResult) -> None:
        click.echo(render_translation_text(result), nl=False)

    def write_detection(self, detection: LanguageDetection) -> None:
        click.echo(render_detection_text(detection), nl=False)

    def write_languages(self, catalog: TermCatalog) -> None:
        click.echo(render_languages_text(catalog), nl=False)

    def write_search_string(self, text: str) -> None:
        click.echo(text)
