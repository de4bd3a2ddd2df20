"""Run the property classifier and purpose inference over a whole component."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import ComponentData, Property, SemanticAnalysis
from .classifier import PropertyClassifier
from .purpose import PurposeInference


class SemanticAnalyzer:
    def __init__(
        self,
        classifier: Optional[PropertyClassifier] = None,
        purpose_inference: Optional[PurposeInference] = None,
    ) -> None:
        self.classifier = classifier or PropertyClassifier()
        self.purpose_inference = purpose_inference or PurposeInference()

    def analyze_component_semantics(
        self, component: ComponentData, properties: Sequence[Property] | None = None
    ) -> SemanticAnalysis:
        """Classify every property, then infer purpose and content strategy."""
        if properties is None:
            properties = component.properties

        analysis = self.classify(properties)
        analysis.inferred_purpose = self.purpose_inference.infer_purpose_from_properties(analysis)
        analysis.content_strategy = self.purpose_inference.determine_content_strategy(analysis)
        return analysis

    def classify(self, properties: Sequence[Property]) -> SemanticAnalysis:
        """Fill the classification lists and flags, leaving purpose at its defaults."""
        analysis = SemanticAnalysis()
        classifier = self.classifier

        for prop in properties:
            name = prop.name.lower()
            type_text = prop.type.lower()

            if not prop.optional:
                analysis.required_props.append(prop)

            if classifier.is_visible_content_prop(name, type_text):
                analysis.visible_text_props.append(prop)

            if classifier.is_accessibility_prop(name, type_text):
                analysis.accessibility_props.append(prop)
                analysis.has_accessibility_enhancements = True

            if classifier.is_state_prop(name, type_text):
                analysis.state_props.append(prop)
                analysis.has_states = True

            if classifier.is_config_prop(name, type_text):
                analysis.config_props.append(prop)

            if classifier.is_event_prop(name):
                analysis.event_props.append(prop)
                analysis.is_interactive = True

            if classifier.is_slot_prop(name):
                analysis.slot_props.append(prop)
                analysis.has_slots = True

            if classifier.is_form_related_prop(name):
                analysis.is_form_related = True

            if classifier.is_conditional_prop(name):
                analysis.has_conditional_content = True

        return analysis


__all__ = ["SemanticAnalyzer"]
