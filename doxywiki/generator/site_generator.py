"""High-level orchestration for documentation artifact generation.

This module walks a :class:`~doxywiki.model.Node` tree and emits every
artifact doxywiki produces: rendered pages, raw JSON dumps, category index
pages, ``manifest.json`` and a spliced summary. All modes share one traversal
shape (depth-first, pre-order, descending through nodes that are not selected)
and one :class:`~doxywiki.generator.naming.NamingRegistry`, so every artifact
and every cross-reference agrees on filenames.

Example
-------
>>> from pathlib import Path
>>> from doxywiki.config import load_config
>>> from doxywiki.model import load_tree
>>> from doxywiki.generator import Generator
>>> config = load_config(Path("doxywiki.yaml"))  # doctest: +SKIP
>>> generator = Generator(config, load_tree(Path("tree.json")))  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
[PosixPath('docs/Classes/Foo.md'), ...]
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from doxywiki._constants import JSON_INDENT, MANIFEST_FILENAME
from doxywiki.errors import OutputFileError
from doxywiki.logging import get_logger
from doxywiki.model import Kind

from .converter import NodeConverter
from .naming import NamingRegistry
from .renderer import TemplateRenderer, write_output
from .selection import ALL_COMPOUNDS, Selection, is_main_page, should_include
from .summary import bullet, find_placeholder, sections_for, splice

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from doxywiki.config import GeneratorConfig
    from doxywiki.model import FolderCategory, Node

    from .summary import SummarySection

logger = get_logger("generator")

NodePredicate = typ.Callable[["Node"], bool]


class Generator:
    """Emit pages, JSON dumps, indexes, the manifest and the summary for a tree."""

    def __init__(
        self,
        config: GeneratorConfig,
        root: Node,
        *,
        registry: NamingRegistry | None = None,
        converter: NodeConverter | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the generator for a single run.

        Parameters
        ----------
        config : GeneratorConfig
            Output layout, naming mode, filters and template tables.
        root : Node
            Root of the documentation tree; never mutated.
        registry : NamingRegistry, optional
            Naming registry for this run; a fresh one is created by default.
        converter : NodeConverter, optional
            Node lowering; defaults to :class:`NodeConverter` sharing the
            registry when wiki naming is enabled.
        renderer : TemplateRenderer, optional
            Template renderer writing beneath ``config.output_dir``.
        """
        self.config = config
        self.root = root
        self.registry = registry if registry is not None else NamingRegistry()
        if converter is None:
            converter = NodeConverter(
                config, self.registry if config.use_wiki_names else None
            )
        self.converter = converter
        if renderer is None:
            renderer = TemplateRenderer(
                config.output_dir, templates_dir=config.templates_dir
            )
        self.renderer = renderer
        if config.use_wiki_names:
            logger.info("Wiki naming conventions enabled. Building mapping...")
            self.registry.build(root)

    def run(self, *, json_only: bool = False) -> list[Path]:
        """Generate every configured artifact and return the written paths.

        Parameters
        ----------
        json_only : bool, optional
            Dump raw JSON for every compound plus the manifest instead of
            rendering pages, indexes and the summary.
        """
        written: list[Path] = []
        if json_only:
            written.extend(self.dump_json(ALL_COMPOUNDS))
            written.append(self.write_manifest())
            return written

        sections = sections_for(self.config.sections)
        for section in sections:
            written.extend(self.render_pages(section.selection))
            index_selection = Selection(section.selection.filter)
            written.append(self.render_index(section.category, index_selection))
        written.append(self.write_manifest())
        if self.config.summary_input and self.config.summary_output:
            written.append(
                self.write_summary(
                    self.config.summary_input, self.config.summary_output, sections
                )
            )
        return written

    def filename(self, node: Node) -> str:
        """Return the filename (without extension) for ``node``."""
        if self.config.use_wiki_names:
            return self.registry.resolve(node)
        return node.refid

    def page_path(self, node: Node) -> str:
        """Return ``node``'s page path relative to the output directory."""
        return self.converter.link(node)

    def index_path(self, category: FolderCategory) -> str:
        """Return the category index path relative to the output directory."""
        settings = self.config.category(category)
        page = f"{settings.index_name}.{self.config.file_ext}"
        if self.config.index_in_folders:
            return f"{settings.folder}/{page}"
        return page

    def select(self, selection: Selection) -> cabc.Iterator[Node]:
        """Yield every selected node in depth-first pre-order."""
        for node in self.root.walk():
            if selection.accepts(node, self.config.files_filter):
                yield node

    def render_pages(self, selection: Selection) -> list[Path]:
        """Render one page per selected node through its kind's template.

        Raises
        ------
        GeneratorConfigError
            If a selected node's kind has no template.
        OutputFileError
            If a page cannot be written.
        """
        written: list[Path] = []
        for node in self.select(selection):
            data = self.converter.convert_full(node)
            template_id = self.config.template_for(node.kind)
            written.append(self.renderer.render(template_id, self.page_path(node), data))
        return written

    def dump_json(self, selection: Selection) -> list[Path]:
        """Write the lowered data of each selected node to ``<filename>.json``."""
        written: list[Path] = []
        for node in self.select(selection):
            data = self.converter.convert_full(node)
            path = self.config.output_dir / f"{self.filename(node)}.json"
            written.append(write_output(path, _dump(data)))
        return written

    def write_manifest(self) -> Path:
        """Write the nested description of the whole tree to ``manifest.json``."""
        data = self.manifest_tree(self.root)
        return write_output(self.config.output_dir / MANIFEST_FILENAME, _dump(data))

    def manifest_tree(self, node: Node) -> list[dict[str, typ.Any]]:
        """Return manifest entries for the included nodes below ``node``."""
        entries: list[dict[str, typ.Any]] = []
        for child in self._nearest(node, self._is_included):
            entry: dict[str, typ.Any] = {"kind": str(child.kind), "name": child.name}
            if child.kind is Kind.MODULE:
                entry["title"] = child.title
            entry["url"] = child.url
            nested = self.manifest_tree(child)
            if nested:
                entry["children"] = nested
            entries.append(entry)
        return entries

    def render_index(self, category: FolderCategory, selection: Selection) -> Path:
        """Render the alphabetical index page for ``category``."""
        settings = self.config.category(category)
        path = self.index_path(category)
        data = {
            "title": settings.index_title,
            "name": settings.index_title,
            "root": "../" * path.count("/"),
            "children": self.index_tree(self.root, selection),
        }
        return self.renderer.render(settings.index_template, path, data)

    def index_tree(self, node: Node, selection: Selection) -> list[dict[str, typ.Any]]:
        """Return sorted, nested index entries for selected nodes below ``node``."""
        accepts = self._accepts(selection)
        entries: list[dict[str, typ.Any]] = []
        for child in sorted(self._nearest(node, accepts), key=lambda item: item.name):
            data = self.converter.convert(child)
            nested = self.index_tree(child, selection)
            if nested:
                data["children"] = nested
            entries.append(data)
        return entries

    def write_summary(
        self,
        input_file: Path,
        output_file: Path,
        sections: cabc.Sequence[SummarySection],
    ) -> Path:
        """Splice the generated table of contents into a summary template.

        Raises
        ------
        OutputFileError
            If the template cannot be read or the output cannot be written.
        """
        try:
            template = Path(input_file).read_text(encoding="utf-8")
        except OSError as exc:
            raise OutputFileError(input_file, "reading") from exc
        placeholder = find_placeholder(template)
        lines = self.summary_lines(sections, placeholder.indent)
        return write_output(Path(output_file), splice(template, placeholder, lines))

    def summary_lines(
        self, sections: cabc.Sequence[SummarySection], indent: int = 0
    ) -> tuple[str, ...]:
        """Return the summary bullets: one per section followed by its nodes."""
        lines: list[str] = []
        for section in sections:
            settings = self.config.category(section.category)
            lines.append(bullet(indent, settings.index_title, self.index_path(section.category)))
            lines.extend(self._summary_branch(self.root, section, settings.folder, 1))
        return tuple(lines)

    def _summary_branch(
        self, node: Node, section: SummarySection, folder: str, depth: int
    ) -> tuple[str, ...]:
        lines: list[str] = []
        for child in self._nearest(node, self._accepts(section.selection)):
            if is_main_page(child, self.config.main_page_name):
                continue
            target = f"{folder}/{self.filename(child)}.{self.config.file_ext}"
            lines.append(bullet(2 * depth, child.name, target))
            lines.extend(self._summary_branch(child, section, folder, depth + 1))
        return tuple(lines)

    def _accepts(self, selection: Selection) -> NodePredicate:
        files_filter = self.config.files_filter
        return lambda node: selection.accepts(node, files_filter)

    def _is_included(self, node: Node) -> bool:
        return should_include(node, self.config.files_filter)

    def _nearest(self, node: Node, predicate: NodePredicate) -> tuple[Node, ...]:
        """Return matching descendants, looking through non-matching nodes."""
        found: list[Node] = []
        for child in node.children:
            if predicate(child):
                found.append(child)
            else:
                found.extend(self._nearest(child, predicate))
        return tuple(found)


def _dump(data: object) -> str:
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


__all__ = ["Generator"]
