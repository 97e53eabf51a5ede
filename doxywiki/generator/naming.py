"""Wiki-safe, collision-free filenames for documentation nodes.

Every output mode asks :class:`NamingRegistry` for a node's filename, so the
registry is the single source of truth for ``refid -> filename`` within a run.
Names are derived from titles (or qualified paths for files), reduced to a
character set that survives wiki hosts such as Azure DevOps, and suffixed with
``-1``, ``-2``, ... when two nodes of the same category would otherwise share a
name.

Examples
--------
>>> from doxywiki.model import Kind, Node
>>> registry = NamingRegistry()
>>> registry.resolve(Node(refid="p1", kind=Kind.PAGE, name="a", title="Intro"))
'Intro'
>>> registry.resolve(Node(refid="p2", kind=Kind.PAGE, name="b", title="Intro"))
'Intro-1'
>>> wiki_safe_name("std::vector<T>")
'std%3A%3Avector%3CT%3E'
"""

from __future__ import annotations

import types
import typing as typ

from doxywiki._constants import ENCODED_CHARACTERS, MAX_NAME_LENGTH, SAFE_PUNCTUATION
from doxywiki.logging import get_logger

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from doxywiki.model import FolderCategory, Node

logger = get_logger("naming")


def _encode(text: str) -> str:
    """Keep safe ASCII, percent-encode reserved characters and drop the rest."""
    pieces: list[str] = []
    for char in text:
        if char.isascii() and (char.isalnum() or char in SAFE_PUNCTUATION):
            pieces.append(char)
        elif char in ENCODED_CHARACTERS:
            pieces.append(ENCODED_CHARACTERS[char])
    return "".join(pieces)


def _strip_dots(text: str) -> str:
    """Remove a single leading and a single trailing period."""
    if text.startswith("."):
        text = text[1:]
    if text.endswith("."):
        text = text[:-1]
    return text


def _truncate(text: str, limit: int = MAX_NAME_LENGTH) -> str:
    """Cut ``text`` to ``limit`` characters without splitting a ``%XX`` sequence."""
    cut = text[:limit]
    tail = cut[-2:]
    if "%" in tail:
        cut = cut[: len(cut) - len(tail) + tail.index("%")]
    return cut


def wiki_safe_name(text: str) -> str:
    """Return ``text`` reduced to a wiki-safe filename of at most 200 characters.

    Parameters
    ----------
    text : str
        Arbitrary display name, title or path.

    Returns
    -------
    str
        ``[A-Za-z0-9_.+-]`` characters kept as-is, ``: < > * ? | "`` encoded as
        ``%XX``, everything else removed; one leading and one trailing period
        stripped; truncated to 200 characters without splitting an
        encoded sequence. May be empty.
    """
    return _truncate(_strip_dots(_encode(text)))


class NamingRegistry:
    """Resolve and remember one unique filename per refid.

    Uniqueness is enforced among nodes sharing the same
    :attr:`~doxywiki.model.Node.category`; equal names in different categories
    are allowed. The registry belongs to a single generator run and is not
    safe to share between concurrent runs.
    """

    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._taken: set[tuple[FolderCategory | None, str]] = set()

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, refid: object) -> bool:
        return refid in self._names

    @property
    def mapping(self) -> cabc.Mapping[str, str]:
        """Return a read-only view of the ``refid -> filename`` mapping."""
        return types.MappingProxyType(self._names)

    def filename_for(self, refid: str) -> str:
        """Return the resolved filename for ``refid``, or the refid itself."""
        return self._names.get(refid, refid)

    def build(self, root: Node) -> None:
        """Resolve every node below ``root`` in depth-first pre-order."""
        for node in root.walk():
            self.resolve(node)
        logger.info("Wiki name mapping built with %d entries.", len(self._names))

    def resolve(self, node: Node) -> str:
        """Return the filename for ``node``, computing it on first request.

        Parameters
        ----------
        node : Node
            Node to name. Files and directories are named after their
            qualified path; other kinds after their title, falling back to
            the short name, then to the refid.

        Returns
        -------
        str
            Stable filename without extension.
        """
        existing = self._names.get(node.refid)
        if existing is not None:
            return existing

        seed = node.qualified_name if node.is_file_or_dir else (node.title or node.name)
        base = _strip_dots(_encode(seed))
        if not base:
            logger.debug("Empty wiki name for '%s', using refid instead.", node.refid)
            base = _strip_dots(node.refid)

        category = node.category
        candidate = _truncate(base)
        suffix = 0
        while (category, candidate) in self._taken:
            suffix += 1
            tail = f"-{suffix}"
            candidate = _truncate(base, MAX_NAME_LENGTH - len(tail)) + tail
            logger.debug("Duplicate name in '%s', trying '%s'.", category, candidate)

        self._names[node.refid] = candidate
        self._taken.add((category, candidate))
        logger.debug("Added mapping: '%s' -> '%s'", node.refid, candidate)
        return candidate


__all__ = ["NamingRegistry", "wiki_safe_name"]
