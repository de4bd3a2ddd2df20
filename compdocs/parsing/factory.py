"""Public entry points composing extraction, matching, analysis and generation."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ..analysis.semantic import SemanticAnalyzer
from ..generation.examples import ExampleGenerator, ExampleOptions
from ..logging import get_logger
from ..models import (
    ComponentBlock,
    ComponentData,
    ComponentStatus,
    Example,
    MaturityLevel,
    Property,
    SemanticAnalysis,
)
from .interfaces import InterfaceParser
from .matcher import ComponentMatcher
from .metadata import MetadataExtractor
from .status import determine_component_status, get_recommendation


class ComponentParserFactory:
    """Wires the pipeline stages together; holds no per-call state."""

    def __init__(self, interface_prefix: str = "Va", tag_prefix: str = "va-") -> None:
        self.metadata_extractor = MetadataExtractor(interface_prefix, tag_prefix)
        self.interface_parser = InterfaceParser()
        self.component_matcher = ComponentMatcher(tag_prefix)
        self.semantic_analyzer = SemanticAnalyzer()
        self.example_generator = ExampleGenerator()
        self.logger = get_logger("parsing.factory")

    def parse_component_metadata(self, content: str) -> Dict[str, ComponentData]:
        """Return ``name -> ComponentData`` in declaration-file order."""
        components: Dict[str, ComponentData] = {}

        for block in self.metadata_extractor.extract_component_blocks(content):
            components[block.component_name] = self.build_component(block)

        self.logger.debug("Parsed %d components", len(components))
        return components

    def build_component(self, block: ComponentBlock) -> ComponentData:
        return ComponentData(
            name=block.component_name,
            tag_name=block.tag_name,
            status=self.determine_component_status(block.maturity_category, block.maturity_level),
            maturity_level=MaturityLevel.coerce(block.maturity_level),
            recommendation=self.get_recommendation(block.maturity_category, block.maturity_level),
            properties=self.interface_parser.parse_interface_properties(block.interface_body),
        )

    def find_component_by_name(
        self, component_name: str, components: Mapping[str, ComponentData]
    ) -> Optional[ComponentData]:
        return self.component_matcher.find_component_by_name(component_name, components)

    def get_suggested_component_names(
        self, input_name: str, components: Mapping[str, ComponentData]
    ) -> List[str]:
        return self.component_matcher.get_suggested_component_names(input_name, components)

    def generate_examples(
        self, component: ComponentData, options: Optional[ExampleOptions] = None
    ) -> List[Example]:
        options = options or ExampleOptions()
        analysis = self.analyze_component_semantics(component)
        return self.example_generator.generate_examples(
            component,
            ExampleOptions(
                framework=options.framework,
                include_description=options.include_description,
                example_types=list(options.example_types),
                analysis=analysis,
            ),
        )

    def extract_component_blocks(self, content: str) -> List[ComponentBlock]:
        return self.metadata_extractor.extract_component_blocks(content)

    def parse_interface_properties(self, interface_body: str) -> List[Property]:
        return self.interface_parser.parse_interface_properties(interface_body)

    def determine_component_status(
        self, maturity_category: Optional[str], maturity_level: Optional[str]
    ) -> ComponentStatus:
        return determine_component_status(maturity_category, maturity_level)

    def get_recommendation(
        self, maturity_category: Optional[str], maturity_level: Optional[str]
    ) -> str:
        return get_recommendation(maturity_category, maturity_level)

    def analyze_component_semantics(
        self, component: ComponentData, properties: Sequence[Property] | None = None
    ) -> SemanticAnalysis:
        return self.semantic_analyzer.analyze_component_semantics(component, properties)


class ComponentParser(ComponentParserFactory):
    """Stable facade used by callers; adds reading declarations from disk."""

    def parse_file(self, path: Path) -> Dict[str, ComponentData]:
        return self.parse_component_metadata(path.read_text(encoding="utf-8"))

    def read_blocks(self, path: Path) -> List[ComponentBlock]:
        return self.extract_component_blocks(path.read_text(encoding="utf-8"))


__all__ = ["ComponentParser", "ComponentParserFactory"]
