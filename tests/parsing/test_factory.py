"""Tests for the public parser facade."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

from compdocs.models import ComponentData, ComponentStatus, ExampleType, MaturityLevel
from compdocs.parsing.factory import ComponentParser, ComponentParserFactory
from compdocs.parsing.status import determine_component_status, get_recommendation
from tests._fixtures.declarations import SAMPLE_DECLARATIONS, write_declarations

BUTTON_SOURCE = (
    "/** @componentName Button\n * @maturityCategory use\n * @maturityLevel best_practice */\n"
    "interface VaButton { text: string; disabled?: boolean; }"
)


def test_single_button_scenario(factory: ComponentParserFactory) -> None:
    components = factory.parse_component_metadata(BUTTON_SOURCE)

    assert list(components) == ["Button"]
    button = components["Button"]
    assert button.tag_name == "va-button"
    assert button.status is ComponentStatus.RECOMMENDED
    assert button.maturity_level is MaturityLevel.BEST_PRACTICE
    assert [prop.name for prop in button.properties] == ["text", "disabled"]

    examples = factory.generate_examples(button)
    assert examples[0].title == "Basic Usage"
    assert "va-button" in examples[0].code


def test_parse_preserves_file_order(components: Dict[str, ComponentData]) -> None:
    assert list(components) == ["Button", "Alert - expandable", "File input multiple", "Radio"]
    assert components["Alert - expandable"].status is ComponentStatus.USE_WITH_CAUTION
    assert components["File input multiple"].status is ComponentStatus.STABLE


def test_parsing_is_idempotent(factory: ComponentParserFactory) -> None:
    first = factory.parse_component_metadata(SAMPLE_DECLARATIONS)
    second = factory.parse_component_metadata(SAMPLE_DECLARATIONS)
    assert first == second


def test_optional_flag_matches_declaration(components: Dict[str, ComponentData]) -> None:
    button = components["Button"]
    assert {prop.name: prop.optional for prop in button.properties} == {
        "text": False,
        "disabled": True,
        "submit": True,
    }
    analysis = ComponentParserFactory().analyze_component_semantics(button)
    assert all(not prop.optional for prop in analysis.required_props)


def test_empty_input_produces_no_components(factory: ComponentParserFactory) -> None:
    assert factory.parse_component_metadata("") == {}


@pytest.mark.parametrize(
    ("category", "level", "expected"),
    [
        ("caution", "best_practice", ComponentStatus.USE_WITH_CAUTION),
        ("CAUTION", "deployed", ComponentStatus.USE_WITH_CAUTION),
        ("use", "best_practice", ComponentStatus.RECOMMENDED),
        ("use", "deployed", ComponentStatus.STABLE),
        ("use", "candidate", ComponentStatus.EXPERIMENTAL),
        ("use", "available", ComponentStatus.AVAILABLE_WITH_ISSUES),
        ("use", "deprecated", ComponentStatus.DEPRECATED),
        ("use", "proposal", ComponentStatus.UNKNOWN),
        (None, None, ComponentStatus.UNKNOWN),
    ],
)
def test_determine_component_status(category, level, expected) -> None:
    assert determine_component_status(category, level) is expected


def test_recommendation_text() -> None:
    assert get_recommendation("caution", "best_practice").startswith("Use with caution")
    assert get_recommendation("use", "deployed") == "Stable and safe to use in production applications"
    assert get_recommendation("use", "mystery") == "Status unknown - verify maturity level before use"


def test_unknown_maturity_level_is_coerced() -> None:
    source = (
        "/**\n * @componentName Tag\n * @maturityCategory use\n * @maturityLevel proposal\n */\n"
        "interface VaTag {\n  text: string;\n}\n"
    )
    tag = ComponentParserFactory().parse_component_metadata(source)["Tag"]
    assert tag.maturity_level is MaturityLevel.UNKNOWN
    assert tag.status is ComponentStatus.UNKNOWN


def test_component_parser_reads_files(tmp_path: Path) -> None:
    path = write_declarations(tmp_path)
    parser = ComponentParser()

    components = parser.parse_file(path)
    blocks = parser.read_blocks(path)

    assert list(components) == [block.component_name for block in blocks]
    assert parser.find_component_by_name("file-input-multiple", components) is components["File input multiple"]


def test_generate_examples_uses_full_analysis(components: Dict[str, ComponentData]) -> None:
    examples = ComponentParserFactory().generate_examples(components["File input multiple"])
    purposes = [example.purpose for example in examples]

    assert purposes[0] is ExampleType.BASIC
    assert ExampleType.FORM in purposes
