"""Tests for the ``doxywiki generate`` command."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from doxywiki.cli import generate
from doxywiki.model import Kind
from tests._helpers import make_node, make_root


@pytest.fixture
def cli_inputs(tmp_path: Path) -> dict[str, Path]:
    """Write a tree, a config and a summary template for the CLI."""
    tree = make_root(
        make_node("classFoo", Kind.CLASS, "Foo", url="Classes/Foo.md"),
        make_node("intro", Kind.PAGE, "intro", title="Getting started"),
    )
    tree_path = tmp_path / "tree.json"
    tree_path.write_bytes(msgspec_json.encode(tree))
    config_path = tmp_path / "doxywiki.yaml"
    config_path.write_text(
        f"output_dir: {tmp_path / 'docs'}\nuse_wiki_names: true\n", encoding="utf-8"
    )
    summary_path = tmp_path / "SUMMARY.tmpl"
    summary_path.write_text("# API\n\n{{doxygen}}\n", encoding="utf-8")
    return {"tree": tree_path, "config": config_path, "summary": summary_path}


def test_generate_writes_pages_and_summary(
    cli_inputs: dict[str, Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The command renders pages, indexes, the manifest and the summary."""
    generate(
        tree=cli_inputs["tree"],
        config=cli_inputs["config"],
        summary_input=cli_inputs["summary"],
        summary_output=tmp_path / "SUMMARY.md",
    )

    docs = tmp_path / "docs"
    assert (docs / "Classes" / "Foo.md").exists()
    assert (docs / "Pages" / "Gettingstarted.md").exists()
    assert (docs / "index_classes.md").exists()
    assert (docs / "manifest.json").exists()
    summary = (tmp_path / "SUMMARY.md").read_text(encoding="utf-8")
    assert "* [Foo](Classes/Foo.md)" in summary
    assert "wrote" in capsys.readouterr().out


def test_generate_json_mode(cli_inputs: dict[str, Path], tmp_path: Path) -> None:
    """``--json`` dumps nodes and the manifest into an overridden directory."""
    out = tmp_path / "json"
    generate(tree=cli_inputs["tree"], config=cli_inputs["config"], output_dir=out, json=True)

    assert json.loads((out / "Foo.json").read_text(encoding="utf-8"))["name"] == "Foo"
    manifest: list[dict[str, typ.Any]] = json.loads(
        (out / "manifest.json").read_text(encoding="utf-8")
    )
    assert [entry["name"] for entry in manifest] == ["Foo", "intro"]
    assert not (out / "Classes").exists()


def test_generate_requires_both_summary_paths(cli_inputs: dict[str, Path]) -> None:
    """Supplying only one summary path is rejected."""
    with pytest.raises(ValueError, match="summary"):
        generate(
            tree=cli_inputs["tree"],
            config=cli_inputs["config"],
            summary_input=cli_inputs["summary"],
        )


def test_generate_writes_log_file(cli_inputs: dict[str, Path], tmp_path: Path) -> None:
    """``--log-file`` mirrors rendering progress into a file."""
    log_file = tmp_path / "run.log"
    generate(tree=cli_inputs["tree"], config=cli_inputs["config"], log_file=log_file)

    contents = log_file.read_text(encoding="utf-8")
    assert "Rendering" in contents
    assert "Wiki naming conventions enabled" in contents
