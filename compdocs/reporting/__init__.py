"""Markdown reports over parsed components and generated examples."""

from __future__ import annotations

from .renderer import ReportRenderer
from .summaries import (
    ComponentSummary,
    ReportError,
    analysis_to_dict,
    list_components,
    select_examples,
)

__all__ = [
    "ComponentSummary",
    "ReportError",
    "ReportRenderer",
    "analysis_to_dict",
    "list_components",
    "select_examples",
]
