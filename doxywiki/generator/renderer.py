"""Render template data into files beneath the output directory."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from doxywiki._constants import TEMPLATE_SUFFIX
from doxywiki.errors import GeneratorConfigError, OutputFileError
from doxywiki.logging import get_logger

logger = get_logger("renderer")

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def write_output(path: Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories as needed.

    Raises
    ------
    OutputFileError
        If the directory cannot be created or the file cannot be written.
    """
    logger.info("Rendering %s", path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputFileError(path, "writing") from exc
    return path


class TemplateRenderer:
    """Render Jinja templates identified by name into output files."""

    def __init__(self, output_dir: Path, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        output_dir : Path
            Directory that relative output paths are resolved against.
        templates_dir : Path, optional
            Directory containing ``<template>.jinja`` files; defaults to the
            package templates.
        """
        self.output_dir = output_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, template_id: str, path: str | Path, data: typ.Mapping[str, typ.Any]) -> Path:
        """Render ``template_id`` with ``data`` into ``output_dir / path``.

        Returns
        -------
        Path
            The written file.

        Raises
        ------
        GeneratorConfigError
            If the template does not exist.
        OutputFileError
            If the output file cannot be written.
        """
        try:
            template = self.env.get_template(f"{template_id}{TEMPLATE_SUFFIX}")
        except TemplateNotFound as exc:
            msg = f"Template '{template_id}' not found in '{self.templates_dir}'."
            raise GeneratorConfigError(msg) from exc
        return write_output(self.output_dir / path, template.render(**data))


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateRenderer", "write_output"]
