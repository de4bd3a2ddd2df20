"""Tests for markdown report rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from compdocs.generation.examples import ExampleOptions
from compdocs.models import ComponentData, ComponentStatus, MaturityLevel
from compdocs.parsing.factory import ComponentParserFactory
from compdocs.reporting.renderer import ReportRenderer, framework_notes
from compdocs.reporting.summaries import list_components
from tests._fixtures.declarations import SAMPLE_DECLARATIONS


def test_render_properties(components: Dict[str, ComponentData]) -> None:
    output = ReportRenderer().render_properties(components["Button"], include_examples=True)

    assert output.startswith("# Button Component Properties\n")
    assert "**Tag Name:** `va-button`" in output
    assert "**Status:** RECOMMENDED" in output
    assert "## Properties (3 total)" in output
    assert "### Required Properties (1)" in output
    assert "### Optional Properties (2)" in output
    assert "- **Description:** The text displayed on the button." in output
    assert '- **Example:** `disabled` or `disabled="true"`' in output
    assert '<va-button text="value"></va-button>' in output
    assert output.endswith("\n")


def test_render_properties_without_descriptions(components: Dict[str, ComponentData]) -> None:
    output = ReportRenderer().render_properties(components["Button"], include_description=False)
    assert "**Description:**" not in output
    assert "**Example:**" not in output


def test_render_properties_for_empty_component() -> None:
    component = ComponentData(
        name="Divider",
        tag_name="va-divider",
        status=ComponentStatus.STABLE,
        maturity_level=MaturityLevel.DEPLOYED,
        recommendation="",
    )
    output = ReportRenderer().render_properties(component)
    assert "**No properties found for this component.**" in output
    assert "Usage Summary" not in output


def test_render_examples(
    factory: ComponentParserFactory, components: Dict[str, ComponentData]
) -> None:
    button = components["Button"]
    examples = factory.generate_examples(button, ExampleOptions())
    output = ReportRenderer().render_examples(button, examples)

    assert output.startswith("# Button Component Examples\n")
    assert "## Examples (3 total)" in output
    assert "### 1. Basic Usage" in output
    assert "### 3. Accessibility Enhanced" in output
    assert '```html\n<va-button text="Click me"></va-button>\n```' in output
    assert "- **Required Properties:** `text`" in output
    assert "Usage Notes" not in output


def test_render_examples_with_framework_notes(
    factory: ComponentParserFactory, components: Dict[str, ComponentData]
) -> None:
    button = components["Button"]
    examples = factory.generate_examples(button, ExampleOptions())[:1]
    output = ReportRenderer().render_examples(
        button, examples, framework="react", include_description=False
    )

    assert "For REACT usage" in output
    assert "**React Usage Notes:**" in output
    assert "- Import the component: `import 'va-button'`" in output
    assert "Basic implementation of" not in output


def test_framework_notes_unknown_framework_is_empty() -> None:
    assert framework_notes("html", "va-button") == []
    assert framework_notes("react", "va-card")[1] == (
        "Boolean props can be written as `{true}` or just the prop name"
    )


def test_render_component_list(factory: ComponentParserFactory) -> None:
    summaries = list_components(factory.extract_component_blocks(SAMPLE_DECLARATIONS))
    output = ReportRenderer().render_component_list(summaries)

    assert output.startswith("# Components (4 total)\n")
    assert "## Status Summary" in output
    assert "USE_WITH_CAUTION: 1 | RECOMMENDED: 1 | STABLE: 2" in output
    assert "## STABLE (2 components)" in output
    assert "### File input multiple" in output
    assert "- **Usage:** `file-input-multiple` or `File input multiple`" in output
    assert "- **Maturity Category:** caution" in output


def test_render_component_list_brief(factory: ComponentParserFactory) -> None:
    summaries = list_components(factory.extract_component_blocks(SAMPLE_DECLARATIONS))
    output = ReportRenderer().render_component_list(summaries, include_metadata=False)

    assert "## Status Summary" not in output
    assert "- **Button** - `button` - RECOMMENDED" in output


def test_render_not_found(factory: ComponentParserFactory, components: Dict[str, ComponentData]) -> None:
    suggestions = factory.get_suggested_component_names("buton", components)
    output = ReportRenderer().render_not_found("buton", suggestions, components)

    assert output.startswith('**Component "buton" not found.**')
    assert "**Did you mean:**" in output
    assert "- Button\n" in output
    assert "**All available components:**" in output
    assert "- Radio" in output


def test_templates_dir_overrides_packaged_templates(tmp_path: Path) -> None:
    (tmp_path / "not_found.md.j2").write_text("missing {{ requested }}", encoding="utf-8")
    output = ReportRenderer(tmp_path).render_not_found("x", [], {})
    assert output == "missing x\n"
