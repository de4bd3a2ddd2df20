"""Detect composite components and generate their child markup."""

from __future__ import annotations

from typing import List, Optional

from ..models import ChildProp, CompositeInfo, SemanticAnalysis

FORM_CHOICE_GROUP = "form-choice-group"
COLLAPSIBLE_CONTAINER = "collapsible-container"
ACTION_GROUP = "action-group"

CHOICE_LABELS: tuple[str, ...] = (
    "Sojourner Truth",
    "Frederick Douglass",
    "Booker T. Washington",
    "George Washington Carver",
)
CHOICE_GROUP_NAME = "group"
ACTION_TEXTS: tuple[str, ...] = ("Continue", "Back")
SLOT_PLACEHOLDER = "\n  <!-- Slot content goes here -->\n"


class CompositeDetector:
    """Tag-name dispatch for components that need generated children."""

    def detect_composite_component(
        self, tag_name: str, analysis: Optional[SemanticAnalysis] = None
    ) -> Optional[CompositeInfo]:
        if "radio" in tag_name or "checkbox" in tag_name:
            return CompositeInfo(
                type=FORM_CHOICE_GROUP,
                child_element="va-radio-option" if "radio" in tag_name else "va-checkbox-option",
                child_count=3,
                child_props=[
                    ChildProp("label", True),
                    ChildProp("name", True),
                    ChildProp("value", True),
                ],
            )

        if "accordion" in tag_name:
            return CompositeInfo(
                type=COLLAPSIBLE_CONTAINER,
                child_element="va-accordion-item",
                child_count=2,
                child_props=[ChildProp("header", True)],
            )

        if "button-group" in tag_name:
            return CompositeInfo(
                type=ACTION_GROUP,
                child_element="va-button",
                child_count=2,
                child_props=[ChildProp("text", True)],
            )

        return None

    def generate_composite_children(self, info: CompositeInfo) -> str:
        children: List[str] = []
        for index in range(1, info.child_count + 1):
            attributes = "".join(
                f' {prop.name}="{child_prop_value(info, prop, index)}"' for prop in info.child_props
            )
            children.append(f"\n  <{info.child_element}{attributes}></{info.child_element}>")
        return "".join(children) + "\n"

    def generate_slot_content(self, analysis: SemanticAnalysis) -> str:
        return SLOT_PLACEHOLDER if analysis.has_slots else ""


def child_prop_value(info: CompositeInfo, prop: ChildProp, index: int) -> str:
    """Value of ``prop`` on the ``index``-th (1-based) generated child."""
    name = prop.name.lower()

    if info.type == FORM_CHOICE_GROUP:
        if name == "label":
            if index <= len(CHOICE_LABELS):
                return CHOICE_LABELS[index - 1]
            return f"Option {index}"
        if name == "name":
            return CHOICE_GROUP_NAME
        if name == "value":
            return str(index)
    elif info.type == COLLAPSIBLE_CONTAINER:
        if name == "header":
            return f"Section {index}"
    elif info.type == ACTION_GROUP:
        if name == "text":
            return ACTION_TEXTS[0] if index == 1 else ACTION_TEXTS[1]

    return f"value-{index}"


__all__ = [
    "ACTION_GROUP",
    "COLLAPSIBLE_CONTAINER",
    "CompositeDetector",
    "FORM_CHOICE_GROUP",
    "child_prop_value",
]
