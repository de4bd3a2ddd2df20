"""Tests for composite component detection."""

from __future__ import annotations

from compdocs.generation.composite import (
    ACTION_GROUP,
    COLLAPSIBLE_CONTAINER,
    FORM_CHOICE_GROUP,
    CompositeDetector,
    child_prop_value,
)
from compdocs.models import ChildProp, CompositeInfo, SemanticAnalysis


def test_radio_group_is_a_choice_group() -> None:
    info = CompositeDetector().detect_composite_component("va-radio-group", SemanticAnalysis())

    assert info is not None
    assert info.type == FORM_CHOICE_GROUP
    assert info.child_element == "va-radio-option"
    assert info.child_count == 3
    assert [prop.name for prop in info.child_props] == ["label", "name", "value"]


def test_radio_children_markup() -> None:
    detector = CompositeDetector()
    info = detector.detect_composite_component("va-radio-group", SemanticAnalysis())
    children = detector.generate_composite_children(info)

    assert children == (
        '\n  <va-radio-option label="Sojourner Truth" name="group" value="1"></va-radio-option>'
        '\n  <va-radio-option label="Frederick Douglass" name="group" value="2"></va-radio-option>'
        '\n  <va-radio-option label="Booker T. Washington" name="group" value="3"></va-radio-option>'
        "\n"
    )


def test_checkbox_uses_checkbox_option() -> None:
    info = CompositeDetector().detect_composite_component("va-checkbox-group")
    assert info is not None and info.child_element == "va-checkbox-option"


def test_accordion_and_button_group() -> None:
    detector = CompositeDetector()

    accordion = detector.detect_composite_component("va-accordion", SemanticAnalysis())
    assert accordion is not None and accordion.type == COLLAPSIBLE_CONTAINER
    assert detector.generate_composite_children(accordion) == (
        '\n  <va-accordion-item header="Section 1"></va-accordion-item>'
        '\n  <va-accordion-item header="Section 2"></va-accordion-item>\n'
    )

    group = detector.detect_composite_component("va-button-group", SemanticAnalysis())
    assert group is not None and group.type == ACTION_GROUP
    assert 'text="Continue"' in detector.generate_composite_children(group)
    assert 'text="Back"' in detector.generate_composite_children(group)


def test_plain_components_are_not_composite() -> None:
    assert CompositeDetector().detect_composite_component("va-button", SemanticAnalysis()) is None


def test_labels_fall_back_past_the_fixed_list() -> None:
    info = CompositeInfo(
        type=FORM_CHOICE_GROUP,
        child_element="va-radio-option",
        child_count=6,
        child_props=[ChildProp("label", True)],
    )
    assert child_prop_value(info, info.child_props[0], 4) == "George Washington Carver"
    assert child_prop_value(info, info.child_props[0], 5) == "Option 5"


def test_unknown_child_prop_gets_indexed_value() -> None:
    info = CompositeInfo(type=ACTION_GROUP, child_element="va-button", child_count=2)
    assert child_prop_value(info, ChildProp("icon", False), 2) == "value-2"


def test_slot_content_only_with_slots() -> None:
    detector = CompositeDetector()
    assert detector.generate_slot_content(SemanticAnalysis(has_slots=True)) == (
        "\n  <!-- Slot content goes here -->\n"
    )
    assert detector.generate_slot_content(SemanticAnalysis()) == ""
