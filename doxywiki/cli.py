"""Cyclopts CLI entrypoint for generating doxywiki documentation artifacts.

The ``doxywiki`` console script loads a serialized documentation tree and a
YAML configuration, then writes rendered pages, category indexes, the manifest
and an optional summary (or raw JSON dumps with ``--json``).

Examples
--------
Generate Markdown pages for a tree exported to ``build/tree.json``:

>>> from doxywiki.cli import app
>>> app.run(
...     ["generate", "--tree", "build/tree.json", "--config", "doxywiki.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_config
from .generator import Generator
from .logging import configure_logging
from .model import load_tree

DEFAULT_CONFIG = Path("doxywiki.yaml")

app = App(name="doxywiki", config=cyclopts.config.Env("DOXYWIKI_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Generate documentation artifacts from a serialized node tree.")
def generate(
    *,
    tree: typ.Annotated[
        Path, Parameter(help="Path to the JSON node tree", env_var="DOXYWIKI_TREE")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to generator config", env_var="DOXYWIKI_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="DOXYWIKI_OUTPUT_DIR"),
    ] = None,
    json: typ.Annotated[  # noqa: A002
        bool, Parameter(help="Dump raw JSON and the manifest instead of pages")
    ] = False,
    summary_input: typ.Annotated[
        Path | None, Parameter(help="Summary template with a {{doxygen}} placeholder")
    ] = None,
    summary_output: typ.Annotated[
        Path | None, Parameter(help="Where to write the spliced summary")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
    log_file: typ.Annotated[
        Path | None, Parameter(help="Also write log records to this file")
    ] = None,
) -> None:
    """Generate documentation for the tree described by ``tree``.

    Parameters
    ----------
    tree : Path
        JSON document describing the node tree.
    config : Path, optional
        Path to the YAML configuration file (overridable via
        ``DOXYWIKI_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    json : bool, optional
        Write ``<name>.json`` per compound plus ``manifest.json`` instead of
        rendered pages.
    summary_input, summary_output : Path or None, optional
        Overrides for the summary template and destination.
    verbose : bool, optional
        Log each naming decision at DEBUG level.
    log_file : Path or None, optional
        Extra log sink with timestamps.

    Returns
    -------
    None
        Writes artifacts and prints the generated paths.

    Raises
    ------
    ValueError
        If only one of ``summary_input``/``summary_output`` is supplied.
    """
    configure_logging(verbose=verbose, log_file=log_file)
    if (summary_input is None) != (summary_output is None):
        msg = "summary_input and summary_output must be supplied together."
        raise ValueError(msg)

    generator_config = load_config(config, output_dir=output_dir)
    if summary_input and summary_output:
        generator_config = dc.replace(
            generator_config, summary_input=summary_input, summary_output=summary_output
        )

    generator = Generator(generator_config, load_tree(tree))
    for path in generator.run(json_only=json):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``doxywiki`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
