"""Load and validate doxywiki generator configuration.

This subpackage parses the project's YAML configuration, merges the upstream
defaults for kind templates and category folders with any overrides, and
produces a :class:`GeneratorConfig` that the generator consumes. The primary
entry point is :func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from doxywiki.config import load_config
>>> config = load_config(Path("doxywiki.yaml"))  # doctest: +SKIP
>>> config.category(FolderCategory.CLASSES).folder  # doctest: +SKIP
'Classes'
"""

from .loader import build_config, load_config
from .models import (
    DEFAULT_TEMPLATES,
    CategoryConfig,
    GeneratorConfig,
    GeneratorConfigError,
    default_categories,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "CategoryConfig",
    "GeneratorConfig",
    "GeneratorConfigError",
    "build_config",
    "default_categories",
    "load_config",
]
