"""Lower nodes into plain template data."""

from __future__ import annotations

import typing as typ

from .selection import is_main_page

if typ.TYPE_CHECKING:
    from doxywiki.config import GeneratorConfig
    from doxywiki.model import Node

    from .naming import NamingRegistry


class NodeConverter:
    """Convert :class:`~doxywiki.model.Node` objects into template context dicts.

    Parameters
    ----------
    config : GeneratorConfig
        Supplies folder names and the page extension used to build links.
    registry : NamingRegistry, optional
        Shared naming registry for cross-references. When ``None`` nodes are
        linked by refid.
    """

    def __init__(
        self, config: GeneratorConfig, registry: NamingRegistry | None = None
    ) -> None:
        self.config = config
        self.registry = registry

    def filename(self, node: Node) -> str:
        """Return the filename (without extension) other pages use for ``node``."""
        if self.registry is None:
            return node.refid
        return self.registry.filename_for(node.refid)

    def link(self, node: Node) -> str:
        """Return the output-root relative link to ``node``'s page."""
        page = f"{self.filename(node)}.{self.config.file_ext}"
        category = node.category
        if (
            category is None
            or not self.config.use_folders
            or is_main_page(node, self.config.main_page_name)
        ):
            return page
        return f"{self.config.category(category).folder}/{page}"

    def convert(self, node: Node) -> dict[str, typ.Any]:
        """Return the brief form used in listings and indexes."""
        return {
            "refid": node.refid,
            "kind": str(node.kind),
            "name": node.name,
            "title": node.title or node.name,
            "qualified_name": node.qualified_name,
            "url": node.url,
            "brief": node.brief,
            "filename": self.filename(node),
            "link": self.link(node),
        }

    def convert_full(self, node: Node) -> dict[str, typ.Any]:
        """Return the full form used to render a node's own page."""
        data = self.convert(node)
        data["category"] = str(node.category) if node.category else None
        data["root"] = "../" * data["link"].count("/")
        data["children"] = [self.convert(child) for child in node.children]
        return data


__all__ = ["NodeConverter"]
