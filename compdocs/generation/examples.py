"""Assemble usage examples from a component's semantic analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..analysis.classifier import PropertyClassifier
from ..analysis.semantic import SemanticAnalyzer
from ..models import (
    ComponentData,
    ContentStrategy,
    Example,
    ExampleType,
    Property,
    SemanticAnalysis,
)
from .composite import CompositeDetector
from .values import ValueGenerator

DEFAULT_FRAMEWORK = "html"
ACCESSIBLE_FALLBACK = "Accessible description"
FORM_FALLBACK = "form-value"


@dataclass
class ExampleOptions:
    """Caller options for example generation.

    ``framework``, ``include_description`` and ``example_types`` are carried
    for the presentation layer; generation itself always emits every
    applicable example as HTML.
    """

    framework: str = DEFAULT_FRAMEWORK
    include_description: bool = True
    example_types: List[str] = field(default_factory=lambda: [ExampleType.BASIC.value])
    analysis: Optional[SemanticAnalysis] = None


class ExampleGenerator:
    def __init__(
        self,
        value_generator: Optional[ValueGenerator] = None,
        composite_detector: Optional[CompositeDetector] = None,
        classifier: Optional[PropertyClassifier] = None,
    ) -> None:
        self.value_generator = value_generator or ValueGenerator()
        self.composite_detector = composite_detector or CompositeDetector()
        self.classifier = classifier or PropertyClassifier()

    def generate_examples(
        self, component: ComponentData, options: Optional[ExampleOptions] = None
    ) -> List[Example]:
        """Basic usage first, then state, accessibility and form examples when applicable."""
        options = options or ExampleOptions()
        tag_name = component.tag_name
        analysis = options.analysis or self._fallback_analysis(component.properties)

        examples = [self._basic_example(tag_name, analysis)]
        if analysis.has_states:
            examples.append(self._state_example(tag_name, analysis))
        if analysis.has_accessibility_enhancements:
            examples.append(self._accessibility_example(tag_name, analysis))
        if analysis.is_form_related:
            examples.append(self._form_example(tag_name, analysis))
        return examples

    def _fallback_analysis(self, properties: Sequence[Property]) -> SemanticAnalysis:
        # Without a precomputed analysis the purpose stays DISPLAY and the strategy UNKNOWN.
        return SemanticAnalyzer(classifier=self.classifier).classify(properties)

    def _value(self, prop: Property, analysis: SemanticAnalysis) -> Optional[str]:
        return self.value_generator.generate_contextual_value(prop, analysis)

    def _basic_example(self, tag_name: str, analysis: SemanticAnalysis) -> Example:
        attributes: List[str] = []

        for prop in analysis.required_props:
            value = self._value(prop, analysis)
            if not value:
                continue
            if "boolean" in prop.type and value == "true":
                attributes.append(prop.name)
            else:
                attributes.append(f'{prop.name}="{value}"')

        if analysis.content_strategy is ContentStrategy.VISIBLE_FIRST:
            for prop in analysis.visible_text_props[:2]:
                if prop in analysis.required_props:
                    continue
                value = self._value(prop, analysis)
                if value:
                    attributes.append(f'{prop.name}="{value}"')
        elif analysis.content_strategy is ContentStrategy.FORM_LABEL:
            label_prop = next(
                (prop for prop in analysis.visible_text_props if "label" in prop.name.lower()),
                None,
            )
            if label_prop is not None and label_prop not in analysis.required_props:
                value = self._value(label_prop, analysis)
                if value:
                    attributes.append(f'{label_prop.name}="{value}"')

        attribute_string = " " + " ".join(attributes) if attributes else ""

        composite = self.composite_detector.detect_composite_component(tag_name, analysis)
        if composite is not None:
            content = self.composite_detector.generate_composite_children(composite)
        else:
            content = self.composite_detector.generate_slot_content(analysis)

        return Example(
            title="Basic Usage",
            description=(
                f"Basic implementation of the {tag_name} component with essential properties."
            ),
            code=f"<{tag_name}{attribute_string}>{content}</{tag_name}>",
            framework=DEFAULT_FRAMEWORK,
            purpose=ExampleType.BASIC,
        )

    def _state_example(self, tag_name: str, analysis: SemanticAnalysis) -> Example:
        lines = ["<!-- Default state -->", f"<{tag_name}></{tag_name}>", ""]
        for prop in analysis.state_props[:2]:
            lines.append(f"<!-- {prop.name} state -->")
            lines.append(f"<{tag_name} {prop.name}></{tag_name}>")

        return Example(
            title="State Variations",
            description=f"Examples showing different states of the {tag_name} component.",
            code="\n".join(lines),
            framework=DEFAULT_FRAMEWORK,
            purpose=ExampleType.STATE,
        )

    def _accessibility_example(self, tag_name: str, analysis: SemanticAnalysis) -> Example:
        attributes = " ".join(
            f'{prop.name}="{self._value(prop, analysis) or ACCESSIBLE_FALLBACK}"'
            for prop in analysis.accessibility_props[:2]
        )
        return Example(
            title="Accessibility Enhanced",
            description=f"{tag_name} component with enhanced accessibility features.",
            code=f"<{tag_name} {attributes}></{tag_name}>",
            framework=DEFAULT_FRAMEWORK,
            purpose=ExampleType.ACCESSIBILITY,
        )

    def _form_example(self, tag_name: str, analysis: SemanticAnalysis) -> Example:
        form_props = [
            prop for prop in analysis.required_props if self.classifier.is_form_related_prop(prop.name)
        ]
        attributes = " ".join(
            f'{prop.name}="{self._value(prop, analysis) or FORM_FALLBACK}"' for prop in form_props
        )
        return Example(
            title="Form Context",
            description=f"{tag_name} component used within a form context.",
            code=f"<form>\n  <{tag_name} {attributes} required></{tag_name}>\n</form>",
            framework=DEFAULT_FRAMEWORK,
            purpose=ExampleType.FORM,
        )


__all__ = ["ExampleGenerator", "ExampleOptions"]
