"""Assemble search strings from filter lists."""

from __future__ import annotations

from typing import Iterable


def build_search_string(included: Iterable[str], excluded: Iterable[str] = ()) -> str:
    """Combine included terms (OR) and excluded terms (each negated, AND).

    ``build_search_string(["fire", "water"], ["shiny"])`` gives
    ``"fire,water&!shiny"``. Blank and repeated terms are dropped.
    """
    include = _clean(included)
    exclude = _clean(excluded)

    parts: list[str] = []
    if include:
        parts.append(",".join(include))
    if exclude:
        parts.append("&".join(f"!{term}" for term in exclude))
    return "&".join(parts)


def _clean(terms: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(term.strip() for term in terms if term.strip()))
