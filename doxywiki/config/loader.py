"""Load generator configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from doxywiki.errors import GeneratorConfigError

from .helpers import (
    _merge_categories,
    _merge_templates,
    _normalize_extensions,
    _optional_path,
    _parse_sections,
)
from .models import DEFAULT_TEMPLATES, GeneratorConfig, default_categories


def load_config(path: Path, *, output_dir: Path | None = None) -> GeneratorConfig:
    """Load the YAML configuration describing how documentation is generated.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.
    output_dir : Path, optional
        Override for ``output_dir``; makes the key optional in the file.

    Returns
    -------
    GeneratorConfig
        Configuration with defaults applied and overrides merged.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    GeneratorConfigError
        If ``output_dir`` is missing or a kind or category name is unknown.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from doxywiki.config import load_config
    >>> config = load_config(Path("doxywiki.yaml"))  # doctest: +SKIP
    >>> config.file_ext  # doctest: +SKIP
    'md'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_config(raw, output_dir=output_dir)


def build_config(
    raw: typ.Mapping[str, typ.Any], *, output_dir: Path | None = None
) -> GeneratorConfig:
    """Build a :class:`GeneratorConfig` from an already parsed mapping."""
    resolved_output = output_dir or _optional_path(raw.get("output_dir"))
    if resolved_output is None:
        msg = "Configuration is missing 'output_dir'."
        raise GeneratorConfigError(msg)

    file_ext = str(raw.get("file_ext", "md")).lstrip(".") or "md"
    return GeneratorConfig(
        output_dir=resolved_output,
        file_ext=file_ext,
        use_folders=bool(raw.get("use_folders", True)),
        use_wiki_names=bool(raw.get("use_wiki_names", False)),
        index_in_folders=bool(raw.get("index_in_folders", False)),
        main_page_name=str(raw.get("main_page_name", "indexpage")),
        files_filter=_normalize_extensions(raw.get("files_filter")),
        templates=_merge_templates(DEFAULT_TEMPLATES, raw.get("templates")),
        categories=_merge_categories(default_categories(), raw.get("categories")),
        sections=_parse_sections(raw.get("folders_to_generate")),
        templates_dir=_optional_path(raw.get("templates_dir")),
        summary_input=_optional_path(raw.get("summary_input")),
        summary_output=_optional_path(raw.get("summary_output")),
    )


__all__ = ["build_config", "load_config"]
