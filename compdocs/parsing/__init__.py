"""Declaration-file parsing: metadata extraction, interface parsing and name matching."""

from __future__ import annotations

from .factory import ComponentParser, ComponentParserFactory
from .interfaces import InterfaceParser
from .matcher import ComponentMatcher, kebab_case_name, normalize_component_name
from .metadata import MetadataExtractor
from .status import determine_component_status, get_recommendation

__all__ = [
    "ComponentMatcher",
    "ComponentParser",
    "ComponentParserFactory",
    "InterfaceParser",
    "MetadataExtractor",
    "determine_component_status",
    "get_recommendation",
    "kebab_case_name",
    "normalize_component_name",
]
