"""Filter extraction and semantic conflict detection over a parsed AST.

Two kinds of mutually exclusive groups are checked:

- global groups (shadow / purified): no entity is ever in two of these
  states, so any two members anywhere in the string conflict, even in
  different OR branches;
- AND groups (star ratings): two members conflict when they meet under an
  AND node. ``3*,4*`` is fine, ``3*&4*`` is not. Terms are collected from
  the whole subtree under each AND, nested ORs included.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from PogoSearch.core.query import And, Conflict, ConflictKind, Filter, Node, Not, Or


@dataclass(frozen=True, slots=True)
class ConflictGroup:
    """Terms of which an entity can satisfy at most one."""

    name: str
    terms: tuple[str, ...]

    def present(self, terms: Iterable[str]) -> tuple[str, ...]:
        """Return the group members found in ``terms``, in group order."""
        found = set(terms)
        return tuple(term for term in self.terms if term in found)


@dataclass(frozen=True, slots=True)
class ConflictRules:
    global_exclusive: Sequence[ConflictGroup] = field(default_factory=tuple)
    and_exclusive: Sequence[ConflictGroup] = field(default_factory=tuple)


DEFAULT_RULES = ConflictRules(
    global_exclusive=(ConflictGroup("shadow states", ("shadow", "purified")),),
    and_exclusive=(ConflictGroup("star ratings", ("0*", "1*", "2*", "3*", "4*")),),
)


def extract_filters(node: Node | None) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split the AST's terms into included and excluded.

    Returns:
        ``(included, excluded)``, each duplicate-free in first-seen order.
    """
    included: list[str] = []
    excluded: list[str] = []
    _collect(node, included, excluded)
    return _unique(included), _unique(excluded)


def detect_conflicts(node: Node | None, rules: ConflictRules = DEFAULT_RULES) -> list[Conflict]:
    """Report mutually exclusive filter combinations.

    Args:
        node: AST root (None yields no conflicts).
        rules: Exclusive groups to check.

    Returns:
        Conflicts, each reported once, global ones first.
    """
    if node is None:
        return []

    conflicts: list[Conflict] = []

    all_included, _ = extract_filters(node)
    for group in rules.global_exclusive:
        members = group.present(all_included)
        if len(members) > 1:
            conflicts.append(
                Conflict(
                    kind=ConflictKind.MUTUALLY_EXCLUSIVE,
                    filters=members,
                    message=(
                        f"Cannot be both {' and '.join(members)} - "
                        f"{group.name} are mutually exclusive in any combination"
                    ),
                )
            )

    for and_node in _and_nodes(node):
        left, _ = extract_filters(and_node.left)
        right, _ = extract_filters(and_node.right)
        for group in rules.and_exclusive:
            members = group.present(left + right)
            if len(members) < 2:
                continue
            conflict = Conflict(
                kind=ConflictKind.MUTUALLY_EXCLUSIVE,
                filters=members,
                message=(
                    f"Cannot be both {' AND '.join(members)} - "
                    f"{group.name} are mutually exclusive when using &"
                ),
            )
            if conflict not in conflicts:
                conflicts.append(conflict)

    return conflicts


def _collect(node: Node | None, included: list[str], excluded: list[str]) -> None:
    if node is None:
        return
    if isinstance(node, Filter):
        included.append(node.term)
    elif isinstance(node, Not):
        excluded.append(node.filter.term)
    elif isinstance(node, (And, Or)):
        _collect(node.left, included, excluded)
        _collect(node.right, included, excluded)


def _and_nodes(node: Node) -> Iterable[And]:
    """Yield every AND node, pre-order."""
    if isinstance(node, And):
        yield node
    if isinstance(node, (And, Or)):
        yield from _and_nodes(node.left)
        yield from _and_nodes(node.right)


def _unique(terms: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(terms))
