"""Traversal, naming and rendering of documentation artifacts."""

from .converter import NodeConverter
from .naming import NamingRegistry, wiki_safe_name
from .renderer import TemplateRenderer
from .selection import ALL_COMPOUNDS, Selection, should_include
from .site_generator import Generator
from .summary import DEFAULT_SECTIONS, SummarySection

__all__ = [
    "ALL_COMPOUNDS",
    "DEFAULT_SECTIONS",
    "Generator",
    "NamingRegistry",
    "NodeConverter",
    "Selection",
    "SummarySection",
    "TemplateRenderer",
    "should_include",
    "wiki_safe_name",
]
