"""Output renderers for command results.

Provides the OutputWriter abstraction and console/JSON implementations,
plus a factory that picks one from the configured format.
"""

from __future__ import annotations

from PogoSearch.renderers.base import OutputWriter
from PogoSearch.renderers.console import (
    ConsoleOutputWriter,
    render_analysis_text,
    render_ast,
    render_detection_text,
    render_languages_text,
    render_report_text,
    render_translation_text,
)
from PogoSearch.renderers.json import (
    JsonOutputWriter,
    render_analysis_json,
    render_detection_json,
    render_languages_json,
    render_report_json,
    render_translation_json,
)


def create_output_writer(output_format: str) -> OutputWriter:
    """Create output writer for a format name.

    Args:
        output_format: ``console`` or ``json``.

    Returns:
        Matching OutputWriter instance.

    Raises:
        ValueError: If the format is unknown.
    """
    if output_format == "console":
        return ConsoleOutputWriter()
    if output_format == "json":
        return JsonOutputWriter()
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "create_output_writer",
    "render_analysis_json",
    "render_analysis_text",
    "render_ast",
    "render_detection_json",
    "render_detection_text",
    "render_languages_json",
    "render_languages_text",
    "render_report_json",
    "render_report_text",
    "render_translation_json",
    "render_translation_text",
]
