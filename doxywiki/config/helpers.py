"""Utility helpers shared by the doxywiki configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from doxywiki.errors import GeneratorConfigError
from doxywiki.model import FolderCategory, Kind

from .models import CategoryConfig


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, otherwise ``None``."""
    if value is None:
        return None
    text = str(value).strip()
    return Path(text) if text else None


def _parse_kind(value: object) -> Kind:
    """Convert a YAML key into a :class:`Kind`, accepting ``module`` for groups."""
    text = str(value).strip().lower()
    if text == "module":
        return Kind.MODULE
    try:
        return Kind(text)
    except ValueError as exc:
        msg = f"Unknown node kind '{value}'."
        raise GeneratorConfigError(msg) from exc


def _parse_category(value: object) -> FolderCategory:
    """Convert a YAML key into a :class:`FolderCategory`."""
    text = str(value).strip().lower()
    try:
        return FolderCategory(text)
    except ValueError as exc:
        msg = f"Unknown folder category '{value}'."
        raise GeneratorConfigError(msg) from exc


def _normalize_extensions(value: object | None) -> list[str]:
    """Normalize ``files_filter`` entries so each carries a leading dot."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        msg = "'files_filter' must be a list of extensions."
        raise GeneratorConfigError(msg)
    normalized: list[str] = []
    for entry in value:
        text = str(entry).strip()
        if not text:
            continue
        normalized.append(text if text.startswith(".") else f".{text}")
    return normalized


def _merge_templates(
    base: typ.Mapping[Kind, str], override: typ.Mapping[str, typ.Any] | None
) -> dict[Kind, str]:
    """Merge YAML template overrides into the default kind table."""
    merged = dict(base)
    if not override:
        return merged
    for key, template in override.items():
        merged[_parse_kind(key)] = str(template)
    return merged


def _merge_categories(
    base: typ.Mapping[FolderCategory, CategoryConfig],
    override: typ.Mapping[str, typ.Any] | None,
) -> dict[FolderCategory, CategoryConfig]:
    """Merge per-category overrides into the default category settings."""
    merged = dict(base)
    if not override:
        return merged
    for key, payload in override.items():
        category = _parse_category(key)
        if not isinstance(payload, dict):
            msg = f"Category '{key}' must be a mapping."
            raise GeneratorConfigError(msg)
        current = merged[category]
        merged[category] = CategoryConfig(
            folder=str(payload.get("folder", current.folder)),
            index_name=str(payload.get("index_name", current.index_name)),
            index_title=str(payload.get("index_title", current.index_title)),
            index_template=str(payload.get("index_template", current.index_template)),
        )
    return merged


def _parse_sections(value: object | None) -> list[FolderCategory]:
    """Return the categories to generate, defaulting to all of them."""
    if value is None:
        return list(FolderCategory)
    if not isinstance(value, list):
        msg = "'folders_to_generate' must be a list of categories."
        raise GeneratorConfigError(msg)
    return [_parse_category(entry) for entry in value]
