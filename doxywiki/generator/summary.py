"""Table-of-contents sections and placeholder splicing for summary files."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from doxywiki._constants import SUMMARY_PLACEHOLDER
from doxywiki.model import FolderCategory, Kind

from .selection import Selection

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class SummarySection:
    """One top-level grouping of the generated table of contents."""

    category: FolderCategory
    selection: Selection


DEFAULT_SECTIONS: typ.Final[tuple[SummarySection, ...]] = (
    SummarySection(
        FolderCategory.CLASSES,
        Selection.of(
            (
                Kind.NAMESPACE,
                Kind.CLASS,
                Kind.INTERFACE,
                Kind.STRUCT,
                Kind.UNION,
                Kind.JAVAENUM,
            ),
            skip=(Kind.NAMESPACE,),
        ),
    ),
    SummarySection(FolderCategory.NAMESPACES, Selection.of((Kind.NAMESPACE,))),
    SummarySection(FolderCategory.MODULES, Selection.of((Kind.MODULE,))),
    SummarySection(FolderCategory.PAGES, Selection.of((Kind.PAGE,))),
    SummarySection(FolderCategory.FILES, Selection.of((Kind.DIR, Kind.FILE))),
    SummarySection(FolderCategory.EXAMPLES, Selection.of((Kind.EXAMPLE,))),
)


def sections_for(categories: cabc.Iterable[FolderCategory]) -> list[SummarySection]:
    """Return the default sections for ``categories`` in the order given."""
    by_category = {section.category: section for section in DEFAULT_SECTIONS}
    return [by_category[category] for category in categories]


@dc.dataclass(frozen=True, slots=True)
class Placeholder:
    """Location of the summary placeholder inside a template."""

    offset: int
    indent: int


def find_placeholder(text: str) -> Placeholder:
    """Locate the first placeholder and count the spaces directly before it.

    When the template has no placeholder the offset is the end of the text.
    """
    offset = text.find(SUMMARY_PLACEHOLDER)
    if offset == -1:
        offset = len(text)
    indent = 0
    while indent < offset and text[offset - indent - 1] == " ":
        indent += 1
    return Placeholder(offset, indent)


def bullet(indent: int, label: str, target: str) -> str:
    """Return one Markdown list item linking ``label`` to ``target``."""
    return f"{' ' * indent}* [{label}]({target})\n"


def splice(text: str, placeholder: Placeholder, lines: cabc.Sequence[str]) -> str:
    """Replace the placeholder in ``text`` with ``lines``.

    The first line is written without leading spaces because the template
    already carries them. Text around the placeholder is kept verbatim.
    """
    block = "".join(lines)
    if lines:
        block = block[placeholder.indent :]
    head = text[: placeholder.offset]
    tail = text[placeholder.offset + len(SUMMARY_PLACEHOLDER) :]
    return f"{head}{block}{tail}"


__all__ = [
    "DEFAULT_SECTIONS",
    "Placeholder",
    "SummarySection",
    "bullet",
    "find_placeholder",
    "sections_for",
    "splice",
]
