"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

import yaml

from PogoSearch.config.catalog import CatalogConfig, check_catalog, load_catalog
from PogoSearch.config.output import OutputConfig, check_output, load_output
from PogoSearch.config.query import QueryConfig, check_query, load_query
from PogoSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from PogoSearch.config.translation import TranslationConfig, check_translation, load_translation


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    catalog: CatalogConfig
    query: QueryConfig
    translation: TranslationConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    catalog = load_catalog(raw)
    query = load_query(raw)
    translation = load_translation(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_catalog(catalog)
    check_query(query)
    check_translation(translation)
    check_output(output)

    config = AppConfig(
        runtime=runtime,
        catalog=catalog,
        query=query,
        translation=translation,
        output=output,
    )
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path | None = None, default_path: Path | None = None) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: User config file; ``None`` uses the defaults alone.
        default_path: Defaults file; ``None`` uses the bundled ``default.yml``.
    """
    if default_path is None:
        default_text = resources.files("PogoSearch.data").joinpath("default.yml").read_text(encoding="utf-8")
    else:
        default_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(default_text)
    if config_path is None or config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    if config.translation.source == config.translation.target:
        raise ValueError("translation.source and translation.target must differ")
    names = [group.name for group in (*config.query.global_exclusive, *config.query.and_exclusive)]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"query group names must be unique: {duplicates}")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
