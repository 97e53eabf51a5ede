"""Shared fixtures for doxywiki tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from doxywiki.config import GeneratorConfig
from doxywiki.model import Kind, Node
from tests._helpers import make_node, make_root


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    """Return a default configuration writing into a temporary directory."""
    return GeneratorConfig(output_dir=tmp_path / "out")


@pytest.fixture
def sample_tree() -> Node:
    """Return a small tree covering namespaces, classes, files and pages."""
    return make_root(
        make_node(
            "namespacegeo",
            Kind.NAMESPACE,
            "geo",
            make_node(
                "classgeo_1_1Point",
                Kind.CLASS,
                "Point",
                make_node("pointx", Kind.VARIABLE, "x"),
                qualified_name="geo::Point",
                brief="A 2D point.",
            ),
            make_node(
                "structgeo_1_1Size",
                Kind.STRUCT,
                "Size",
                qualified_name="geo::Size",
            ),
            qualified_name="geo",
        ),
        make_node(
            "dir_src",
            Kind.DIR,
            "src",
            make_node("file_a_cpp", Kind.FILE, "a.cpp", qualified_name="src/a.cpp"),
            make_node("file_b_hpp", Kind.FILE, "b.hpp", qualified_name="src/b.hpp"),
            qualified_name="src",
        ),
        make_node("indexpage", Kind.PAGE, "indexpage", title="Overview"),
        make_node("intro", Kind.PAGE, "intro", title="Introduction"),
    )
