"""Catalog domain configuration (where the term catalog is loaded from)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PogoSearch.config.common import (
    expect_float,
    expect_str,
    get_optional_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Catalog location settings.

    Attributes:
        path: Catalog file path or http(s) URL; empty means the bundled catalog.
        path_env: Environment variable that overrides ``path`` when set.
        timeout: Request timeout in seconds for remote catalogs.
    """

    path: str
    path_env: str
    timeout: float


def load_catalog(raw: Mapping[str, Any]) -> CatalogConfig:
    """Load the optional ``catalog`` section."""
    section = get_section(raw, "catalog", required=False)
    return CatalogConfig(
        path=expect_str(get_optional_value(section, "path", "") or "", "catalog.path").strip(),
        path_env=expect_str(get_optional_value(section, "path_env", "") or "", "catalog.path_env").strip(),
        timeout=expect_float(get_optional_value(section, "timeout", 30), "catalog.timeout"),
    )


def check_catalog(config: CatalogConfig) -> None:
    """Validate catalog domain constraints.

    Raises:
        ValueError: If values violate catalog constraints.
    """
    if config.timeout <= 0:
        raise ValueError("catalog.timeout must be positive")
