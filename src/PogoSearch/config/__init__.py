"""Public configuration API for PogoSearch."""

from __future__ import annotations

from PogoSearch.config.app import (
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from PogoSearch.config.catalog import CatalogConfig
from PogoSearch.config.output import OutputConfig
from PogoSearch.config.query import QueryConfig
from PogoSearch.config.runtime import RuntimeConfig
from PogoSearch.config.translation import AUTO_SOURCE, TranslationConfig

__all__ = [
    "AUTO_SOURCE",
    "RuntimeConfig",
    "CatalogConfig",
    "QueryConfig",
    "TranslationConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
    "check_cross_domain",
]
