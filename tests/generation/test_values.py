"""Tests for contextual example values."""

from __future__ import annotations

import pytest

from compdocs.generation.values import (
    BREADCRUMB_LIST,
    OPTION_LIST,
    ValueGenerator,
    first_union_option,
)
from compdocs.models import ComponentPurpose, Property, SemanticAnalysis


def _value(name: str, type_text: str, purpose: ComponentPurpose = ComponentPurpose.DISPLAY):
    prop = Property(name=name, type=type_text, optional=True)
    return ValueGenerator().generate_contextual_value(prop, SemanticAnalysis(inferred_purpose=purpose))


def test_array_types() -> None:
    assert _value("breadcrumbList", "Array<Breadcrumb>") == BREADCRUMB_LIST
    assert _value("options", "Option[]") == OPTION_LIST
    assert _value("items", "string[]") == "[]"


def test_union_types_return_first_meaningful_option() -> None:
    assert _value("status", '"info" | "warning" | "error"') == "info"
    assert _value("status", 'undefined | "continue"') == "continue"
    # Type text is compared lower-cased, so the option comes back lower-cased too.
    assert _value("variant", '"Primary" | "Secondary"') == "primary"


def test_union_wins_over_purpose_table() -> None:
    assert _value("text", '"Save" | "Cancel"', ComponentPurpose.ACTION) == "save"


def test_union_without_options_falls_through() -> None:
    assert first_union_option(" | undefined") is None
    assert _value("flag", "| undefined") is None


@pytest.mark.parametrize(
    ("purpose", "name", "type_text", "expected"),
    [
        (ComponentPurpose.ACTION, "text", "string", "Submit Application"),
        (ComponentPurpose.ACTION, "label", "string", "Submit your application"),
        (ComponentPurpose.ACTION, "autoSubmit", "boolean", "true"),
        (ComponentPurpose.ACTION, "type", "string", "submit"),
        (ComponentPurpose.NOTIFICATION, "headline", "string", "Important Update"),
        (ComponentPurpose.NOTIFICATION, "status", "string", "info"),
        (ComponentPurpose.INPUT, "label", "string", "Email Address"),
        (ComponentPurpose.INPUT, "name", "string", "email"),
        (ComponentPurpose.INPUT, "required", "boolean", "true"),
        (ComponentPurpose.NAVIGATION, "label", "string", "Navigation"),
        (ComponentPurpose.NAVIGATION, "linkHref", "string", "/example-page"),
        (ComponentPurpose.CONTAINER, "headline", "string", "Service Information"),
    ],
)
def test_purpose_table(purpose, name, type_text, expected) -> None:
    assert _value(name, type_text, purpose) == expected


@pytest.mark.parametrize(
    ("name", "type_text", "expected"),
    [
        ("disabled", "boolean", "true"),
        ("headingLevel", "number", "2"),
        ("timeout", "number", "5000"),
        ("count", "number", "1"),
        ("config", "object", "{}"),
        ("aria-describedby", "string", "Descriptive label for screen readers"),
        ("label", "string", "Descriptive label for screen readers"),
        ("text", "string", "Click me"),
        ("headline", "string", "Important Notice"),
        ("status", "string", "info"),
        ("trigger", "string", "Example value"),
        ("custom", "CustomType", None),
    ],
)
def test_type_keyword_fallback(name, type_text, expected) -> None:
    assert _value(name, type_text) == expected
