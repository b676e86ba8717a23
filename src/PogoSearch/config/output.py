"""Output domain configuration for command rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PogoSearch.config.common import expect_str, get_optional_value, get_section

OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the optional ``output`` section."""
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        format=expect_str(get_optional_value(section, "format", "console"), "output.format").strip().lower(),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If the format is unknown.
    """
    if config.format not in OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of {list(OUTPUT_FORMATS)}: {config.format}")
