"""Decide which nodes produce artifacts."""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ

from doxywiki.model import COMPOUND_KINDS, Kind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from doxywiki.model import Node

InclusionPredicate = typ.Callable[["Node", "cabc.Collection[str]"], bool]


def _include_file(node: Node, files_filter: cabc.Collection[str]) -> bool:
    """Accept files whose extension appears in a non-empty allow-list."""
    if not files_filter:
        return True
    _root, ext = posixpath.splitext(node.name)
    return ext in files_filter


INCLUSION_PREDICATES: typ.Final[dict[Kind, InclusionPredicate]] = {
    Kind.FILE: _include_file,
}


def is_main_page(node: Node, main_page_name: str) -> bool:
    """Return ``True`` for the page rendered at the output root."""
    return node.kind is Kind.PAGE and node.refid == main_page_name


def should_include(node: Node, files_filter: cabc.Collection[str] = ()) -> bool:
    """Apply the per-kind inclusion predicate; kinds without one always pass."""
    if node.kind is Kind.INDEX:
        return False
    predicate = INCLUSION_PREDICATES.get(node.kind)
    if predicate is None:
        return True
    return predicate(node, files_filter)


@dc.dataclass(frozen=True, slots=True)
class Selection:
    """Inclusion (``filter``) and exclusion (``skip``) kind sets.

    A node yields an artifact when its kind is in ``filter``, is not in
    ``skip`` and passes :func:`should_include`. Traversal still descends into
    nodes that do not qualify.
    """

    filter: frozenset[Kind]
    skip: frozenset[Kind] = frozenset()

    @classmethod
    def of(
        cls, filter: cabc.Iterable[Kind], skip: cabc.Iterable[Kind] = ()  # noqa: A002
    ) -> Selection:
        """Build a selection from any iterables of kinds."""
        return cls(frozenset(filter), frozenset(skip))

    def accepts(self, node: Node, files_filter: cabc.Collection[str] = ()) -> bool:
        """Return ``True`` when ``node`` should produce an artifact."""
        return (
            node.kind in self.filter
            and node.kind not in self.skip
            and should_include(node, files_filter)
        )


ALL_COMPOUNDS: typ.Final[Selection] = Selection(COMPOUND_KINDS)


__all__ = [
    "ALL_COMPOUNDS",
    "INCLUSION_PREDICATES",
    "Selection",
    "is_main_page",
    "should_include",
]
