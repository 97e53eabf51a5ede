"""Dataclasses describing generator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from doxywiki.errors import GeneratorConfigError
from doxywiki.model import FolderCategory, Kind


@dc.dataclass(slots=True)
class CategoryConfig:
    """Folder and index naming for one output category."""

    folder: str
    index_name: str
    index_title: str
    index_template: str


@dc.dataclass(slots=True)
class GeneratorConfig:
    """A fully resolved generator configuration sourced from YAML or code.

    Attributes
    ----------
    output_dir : Path
        Root directory that receives every artifact.
    file_ext : str
        Extension (without the dot) for rendered pages and indexes.
    use_folders : bool
        Place pages under their category folder.
    use_wiki_names : bool
        Derive filenames from names and titles instead of refids.
    index_in_folders : bool
        Place category index pages inside their category folder.
    main_page_name : str
        Refid of the page rendered at the output root.
    files_filter : list[str]
        Allowed file extensions (with the leading dot); empty allows all.
    templates : dict[Kind, str]
        Template identifier used for each renderable kind.
    categories : dict[FolderCategory, CategoryConfig]
        Folder and index naming per category.
    sections : list[FolderCategory]
        Categories generated by a full run, in order.
    templates_dir : Path | None
        Directory holding ``<template>.jinja`` files; packaged templates
        are used when ``None``.
    summary_input : Path | None
        Summary template containing the ``{{doxygen}}`` placeholder.
    summary_output : Path | None
        Destination of the spliced summary.
    """

    output_dir: Path
    file_ext: str = "md"
    use_folders: bool = True
    use_wiki_names: bool = False
    index_in_folders: bool = False
    main_page_name: str = "indexpage"
    files_filter: list[str] = dc.field(default_factory=list)
    templates: dict[Kind, str] = dc.field(default_factory=lambda: dict(DEFAULT_TEMPLATES))
    categories: dict[FolderCategory, CategoryConfig] = dc.field(
        default_factory=lambda: default_categories()
    )
    sections: list[FolderCategory] = dc.field(default_factory=lambda: list(FolderCategory))
    templates_dir: Path | None = None
    summary_input: Path | None = None
    summary_output: Path | None = None

    def template_for(self, kind: Kind) -> str:
        """Return the template identifier for ``kind``.

        Raises
        ------
        GeneratorConfigError
            If no template is configured for the kind.
        """
        try:
            return self.templates[kind]
        except KeyError as exc:
            msg = f"No template configured for kind '{kind}'."
            raise GeneratorConfigError(msg) from exc

    def category(self, category: FolderCategory) -> CategoryConfig:
        """Return folder and index naming for ``category``."""
        try:
            return self.categories[category]
        except KeyError as exc:  # pragma: no cover - defaults cover all categories
            msg = f"No settings configured for category '{category}'."
            raise GeneratorConfigError(msg) from exc


DEFAULT_TEMPLATES: dict[Kind, str] = {
    Kind.CLASS: "kind_class",
    Kind.STRUCT: "kind_class",
    Kind.UNION: "kind_class",
    Kind.INTERFACE: "kind_class",
    Kind.JAVAENUM: "kind_class",
    Kind.NAMESPACE: "kind_nonclass",
    Kind.MODULE: "kind_nonclass",
    Kind.FILE: "kind_file",
    Kind.DIR: "kind_file",
    Kind.PAGE: "kind_page",
    Kind.EXAMPLE: "kind_example",
}


def default_categories() -> dict[FolderCategory, CategoryConfig]:
    """Return fresh category settings matching the upstream defaults."""
    return {
        FolderCategory.CLASSES: CategoryConfig(
            "Classes", "index_classes", "Classes", "index_classes"
        ),
        FolderCategory.NAMESPACES: CategoryConfig(
            "Namespaces", "index_namespaces", "Namespaces", "index_namespaces"
        ),
        FolderCategory.MODULES: CategoryConfig(
            "Modules", "index_groups", "Modules", "index_groups"
        ),
        FolderCategory.PAGES: CategoryConfig(
            "Pages", "index_pages", "Pages", "index_pages"
        ),
        FolderCategory.FILES: CategoryConfig(
            "Files", "index_files", "Files", "index_files"
        ),
        FolderCategory.EXAMPLES: CategoryConfig(
            "Examples", "index_examples", "Examples", "index_examples"
        ),
    }


__all__ = [
    "DEFAULT_TEMPLATES",
    "CategoryConfig",
    "GeneratorConfig",
    "GeneratorConfigError",
    "default_categories",
]
