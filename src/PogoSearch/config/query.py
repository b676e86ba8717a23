"""Query domain configuration: mutually exclusive filter groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PogoSearch.config.common import (
    expect_list,
    expect_mapping,
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)
from PogoSearch.query.conflicts import DEFAULT_RULES, ConflictGroup


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store validated conflict groups.

    Attributes:
        global_exclusive: Groups whose members conflict anywhere in a string.
        and_exclusive: Groups whose members conflict only when AND-combined.
    """

    global_exclusive: tuple[ConflictGroup, ...]
    and_exclusive: tuple[ConflictGroup, ...]


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load the optional ``query`` section.

    Missing keys fall back to the built-in groups (shadow/purified and the
    star ratings).

    Raises:
        TypeError: If config types are invalid.
        ValueError: If group entries miss required keys.
    """
    section = get_section(raw, "query", required=False)
    return QueryConfig(
        global_exclusive=_parse_groups(section, "global_exclusive", DEFAULT_RULES.global_exclusive),
        and_exclusive=_parse_groups(section, "and_exclusive", DEFAULT_RULES.and_exclusive),
    )


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If a group has fewer than two terms.
    """
    for key, groups in (("query.global_exclusive", config.global_exclusive), ("query.and_exclusive", config.and_exclusive)):
        for idx, group in enumerate(groups):
            if len(group.terms) < 2:
                raise ValueError(f"{key}[{idx}].terms must include at least two distinct terms")


def _parse_groups(section: Mapping[str, Any], field: str, default: Any) -> tuple[ConflictGroup, ...]:
    if field not in section:
        return tuple(default)

    config_key = f"query.{field}"
    groups: list[ConflictGroup] = []
    for idx, item in enumerate(expect_list(section[field], config_key)):
        item_key = f"{config_key}[{idx}]"
        entry = expect_mapping(item, item_key)
        name = expect_str(get_required_value(entry, "name", f"{item_key}.name"), f"{item_key}.name").strip()
        terms = expect_str_list(get_required_value(entry, "terms", f"{item_key}.terms"), f"{item_key}.terms")
        # Tokens are lower-cased before parsing, so group terms must be too.
        normalized = tuple(dict.fromkeys(term.strip().lower() for term in terms if term.strip()))
        groups.append(ConflictGroup(name=name or f"group {idx}", terms=normalized))
    return tuple(groups)
