"""Documentation object model consumed by the generator.

The tree is produced upstream (normally from a Doxygen XML export) and handed
to :class:`~doxywiki.generator.Generator` fully built. Generation never mutates
it. :func:`load_tree` decodes the JSON form of the tree used by the CLI.

Examples
--------
>>> from doxywiki.model import Kind, Node
>>> root = Node(refid="index", kind=Kind.INDEX, name="index")
>>> Node(refid="classFoo", kind=Kind.CLASS, name="Foo").category
<FolderCategory.CLASSES: 'classes'>
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ
from pathlib import Path

import msgspec

from .errors import OutputFileError, TreeLoadError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class Kind(enum.StrEnum):
    """Entity types emitted by the upstream parser."""

    INDEX = "index"
    CLASS = "class"
    STRUCT = "struct"
    UNION = "union"
    INTERFACE = "interface"
    NAMESPACE = "namespace"
    MODULE = "group"
    DIR = "dir"
    FILE = "file"
    PAGE = "page"
    EXAMPLE = "example"
    JAVAENUM = "javaenum"
    DEFINE = "define"
    ENUM = "enum"
    ENUMVALUE = "enumvalue"
    FUNCTION = "function"
    VARIABLE = "variable"
    TYPEDEF = "typedef"
    FRIEND = "friend"
    SIGNAL = "signal"
    SLOT = "slot"
    PROPERTY = "property"
    EVENT = "event"


class FolderCategory(enum.StrEnum):
    """Output grouping that decides a node's folder and index membership."""

    CLASSES = "classes"
    NAMESPACES = "namespaces"
    MODULES = "modules"
    PAGES = "pages"
    FILES = "files"
    EXAMPLES = "examples"


KIND_CATEGORIES: typ.Final[cabc.Mapping[Kind, FolderCategory]] = {
    Kind.CLASS: FolderCategory.CLASSES,
    Kind.STRUCT: FolderCategory.CLASSES,
    Kind.UNION: FolderCategory.CLASSES,
    Kind.INTERFACE: FolderCategory.CLASSES,
    Kind.JAVAENUM: FolderCategory.CLASSES,
    Kind.NAMESPACE: FolderCategory.NAMESPACES,
    Kind.MODULE: FolderCategory.MODULES,
    Kind.PAGE: FolderCategory.PAGES,
    Kind.DIR: FolderCategory.FILES,
    Kind.FILE: FolderCategory.FILES,
    Kind.EXAMPLE: FolderCategory.EXAMPLES,
}

COMPOUND_KINDS: typ.Final[frozenset[Kind]] = frozenset(KIND_CATEGORIES)


@dc.dataclass(slots=True)
class Node:
    """One documentation entity and the entities it owns.

    Attributes
    ----------
    refid : str
        Identifier assigned by the parser; unique across the tree.
    kind : Kind
        Entity type.
    name : str
        Short name (``Foo`` for ``ns::Foo``, ``a.hpp`` for ``src/a.hpp``).
    title : str
        Explicit title; set for pages, groups and examples.
    qualified_name : str
        Fully qualified name; the path for files and directories.
    url : str
        Link to the entity as computed upstream.
    brief : str
        One-line description shown in index listings.
    children : list[Node]
        Owned child entities in document order.
    """

    refid: str
    kind: Kind
    name: str
    title: str = ""
    qualified_name: str = ""
    url: str = ""
    brief: str = ""
    children: list[Node] = dc.field(default_factory=list)

    @property
    def is_file_or_dir(self) -> bool:
        """Return ``True`` for file and directory nodes."""
        return self.kind in (Kind.FILE, Kind.DIR)

    @property
    def category(self) -> FolderCategory | None:
        """Return the output category, or ``None`` for member kinds."""
        return KIND_CATEGORIES.get(self.kind)

    def walk(self) -> cabc.Iterator[Node]:
        """Yield every descendant in depth-first pre-order, excluding ``self``."""
        for child in self.children:
            yield child
            yield from child.walk()


def load_tree(path: Path) -> Node:
    """Decode a JSON node tree from ``path``.

    Parameters
    ----------
    path : Path
        JSON document whose objects mirror :class:`Node` field names.

    Returns
    -------
    Node
        The root node.

    Raises
    ------
    OutputFileError
        If the file cannot be read.
    TreeLoadError
        If the JSON is malformed, does not match the node schema, or repeats a
        refid.
    """
    try:
        payload = Path(path).read_bytes()
    except OSError as exc:
        raise OutputFileError(path, "reading") from exc
    try:
        root = msgspec.json.decode(payload, type=Node)
    except msgspec.DecodeError as exc:
        msg = f"Invalid node tree in '{path}': {exc}"
        raise TreeLoadError(msg) from exc

    seen: set[str] = {root.refid}
    for node in root.walk():
        if node.refid in seen:
            msg = f"Duplicate refid '{node.refid}' in '{path}'."
            raise TreeLoadError(msg)
        seen.add(node.refid)
    return root


__all__ = [
    "COMPOUND_KINDS",
    "KIND_CATEGORIES",
    "FolderCategory",
    "Kind",
    "Node",
    "load_tree",
]
