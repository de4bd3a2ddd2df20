"""Synthesize plausible example values for component properties."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..models import ComponentPurpose, Property, SemanticAnalysis

BREADCRUMB_LIST = '[{"href": "/", "label": "Home"}, {"label": "Current Page"}]'
OPTION_LIST = '[{"label": "Option 1", "value": "1"}, {"label": "Option 2", "value": "2"}]'
EMPTY_LIST = "[]"

EXACT = "exact"
CONTAINS = "contains"

# (match mode, property-name key, value); evaluated in order per purpose.
PURPOSE_VALUES: Dict[ComponentPurpose, Tuple[Tuple[str, str, str], ...]] = {
    ComponentPurpose.ACTION: (
        (EXACT, "text", "Submit Application"),
        (EXACT, "label", "Submit your application"),
        (CONTAINS, "submit", "true"),
        (EXACT, "type", "submit"),
    ),
    ComponentPurpose.NOTIFICATION: (
        (CONTAINS, "headline", "Important Update"),
        (EXACT, "status", "info"),
        (EXACT, "visible", "true"),
    ),
    ComponentPurpose.INPUT: (
        (EXACT, "label", "Email Address"),
        (EXACT, "name", "email"),
        (EXACT, "required", "true"),
    ),
    ComponentPurpose.NAVIGATION: (
        (EXACT, "label", "Navigation"),
        (CONTAINS, "href", "/example-page"),
    ),
    ComponentPurpose.CONTAINER: ((CONTAINS, "headline", "Service Information"),),
}

SCREEN_READER_LABEL = "Descriptive label for screen readers"
GENERIC_STRING = "Example value"
STRING_VALUES: Dict[str, str] = {
    "text": "Click me",
    "headline": "Important Notice",
    "status": "info",
}


class ValueGenerator:
    """Ordered guard chain: arrays, unions, purpose table, then type keywords."""

    def generate_contextual_value(
        self, prop: Property, analysis: SemanticAnalysis
    ) -> Optional[str]:
        name = prop.name.lower()
        type_text = prop.type.lower()

        if "array" in type_text or "[]" in type_text:
            if "breadcrumb" in name:
                return BREADCRUMB_LIST
            if "option" in name:
                return OPTION_LIST
            return EMPTY_LIST

        if "|" in type_text:
            option = first_union_option(type_text)
            if option is not None:
                return option

        curated = _lookup_purpose_value(analysis.inferred_purpose, name)
        if curated is not None:
            return curated

        return _value_from_type(name, type_text)


def first_union_option(type_text: str) -> Optional[str]:
    """Return the first member of a ``|`` union other than ``undefined``, unquoted."""
    options = [part.strip().replace('"', "").replace("'", "") for part in type_text.split("|")]
    meaningful = [option for option in options if option and option != "undefined"]
    return meaningful[0] if meaningful else None


def _lookup_purpose_value(purpose: ComponentPurpose, name: str) -> Optional[str]:
    for mode, key, value in PURPOSE_VALUES.get(purpose, ()):
        if mode == EXACT and name == key:
            return value
        if mode == CONTAINS and key in name:
            return value
    return None


def _value_from_type(name: str, type_text: str) -> Optional[str]:
    if "boolean" in type_text:
        return "true"
    if "number" in type_text:
        if "level" in name:
            return "2"
        if "timeout" in name:
            return "5000"
        return "1"
    if "object" in type_text:
        return "{}"
    if "string" in type_text:
        if "aria" in name or "label" in name:
            return SCREEN_READER_LABEL
        return STRING_VALUES.get(name, GENERIC_STRING)
    return None


__all__ = ["PURPOSE_VALUES", "ValueGenerator", "first_union_option"]
