"""Derive a component purpose and content strategy from its classification."""

from __future__ import annotations

from typing import Sequence

from ..models import ComponentPurpose, ContentStrategy, SemanticAnalysis
from .constants import (
    ACTION_TERMS,
    FORM_ACTION_TERM,
    LABEL_TERM,
    NAVIGATION_TERMS,
    NOTIFICATION_TERMS,
)


def _visible_names_contain(analysis: SemanticAnalysis, terms: Sequence[str]) -> bool:
    return any(
        term in prop.name.lower() for prop in analysis.visible_text_props for term in terms
    )


class PurposeInference:
    """Ordered decision lists; the first branch that matches decides."""

    def infer_purpose_from_properties(self, analysis: SemanticAnalysis) -> ComponentPurpose:
        if analysis.is_form_related:
            if _visible_names_contain(analysis, (FORM_ACTION_TERM,)):
                return ComponentPurpose.ACTION
            return ComponentPurpose.INPUT

        if _visible_names_contain(analysis, NOTIFICATION_TERMS):
            return ComponentPurpose.NOTIFICATION

        if _visible_names_contain(analysis, NAVIGATION_TERMS):
            return ComponentPurpose.NAVIGATION

        if _visible_names_contain(analysis, ACTION_TERMS):
            return ComponentPurpose.ACTION

        if analysis.has_slots or len(analysis.visible_text_props) > 2:
            return ComponentPurpose.CONTAINER

        return ComponentPurpose.DISPLAY

    def determine_content_strategy(self, analysis: SemanticAnalysis) -> ContentStrategy:
        if analysis.is_form_related and _visible_names_contain(analysis, (LABEL_TERM,)):
            return ContentStrategy.FORM_LABEL

        if analysis.visible_text_props:
            return ContentStrategy.VISIBLE_FIRST

        if analysis.has_slots:
            return ContentStrategy.STRUCTURE_FIRST

        return ContentStrategy.UNKNOWN


__all__ = ["PurposeInference"]
