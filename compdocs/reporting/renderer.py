"""Render markdown reports from Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ComponentData, Example
from .summaries import (
    ComponentSummary,
    group_by_status,
    minimum_usage,
    property_example_hint,
)

FRAMEWORK_NOTES: Dict[str, List[str]] = {
    "react": [
        "Use `className` instead of `class`",
        "Boolean props can be written as `{{true}}` or just the prop name",
        "Event handlers use camelCase (e.g., `onClick`)",
        "Import the component: `import '{tag_name}'`",
    ],
    "vue": [
        "Use `v-bind:` or `:` for dynamic props",
        'Boolean props can be written as `:prop="true"` or just the prop name',
        "Event handlers use `@` syntax (e.g., `@click`)",
        "Import the component in your Vue component",
    ],
    "angular": [
        'Use `[prop]="value"` for property binding',
        'Boolean props can be written as `[prop]="true"` or just the prop name',
        'Event handlers use `(event)="handler()"` syntax',
        "Import the component in your Angular module",
    ],
}


def framework_notes(framework: str, tag_name: str) -> List[str]:
    return [note.format(tag_name=tag_name) for note in FRAMEWORK_NOTES.get(framework, [])]


class ReportRenderer:
    """Renders component listings, property tables and examples as markdown."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render_component_list(
        self, summaries: Sequence[ComponentSummary], *, include_metadata: bool = True
    ) -> str:
        groups = group_by_status(summaries)
        return self._render(
            "components.md.j2",
            total=len(summaries),
            groups=groups,
            include_metadata=include_metadata,
        )

    def render_properties(
        self,
        component: ComponentData,
        *,
        include_description: bool = True,
        include_examples: bool = False,
    ) -> str:
        properties = component.properties
        rows = [
            {
                "property": prop,
                "hint": property_example_hint(prop) if include_examples else None,
            }
            for prop in properties
        ]
        return self._render(
            "properties.md.j2",
            component=component,
            required=[row for row in rows if not row["property"].optional],
            optional=[row for row in rows if row["property"].optional],
            total=len(properties),
            include_description=include_description,
            minimum_usage=minimum_usage(component.tag_name, properties),
        )

    def render_examples(
        self,
        component: ComponentData,
        examples: Sequence[Example],
        *,
        framework: str = "html",
        include_description: bool = True,
    ) -> str:
        return self._render(
            "examples.md.j2",
            component=component,
            examples=examples,
            framework=framework,
            notes=framework_notes(framework, component.tag_name),
            include_description=include_description,
            required_names=[prop.name for prop in component.properties if not prop.optional],
        )

    def render_not_found(
        self, requested: str, suggestions: Sequence[str], components: Mapping[str, ComponentData]
    ) -> str:
        return self._render(
            "not_found.md.j2",
            requested=requested,
            suggestions=suggestions,
            available=sorted(components),
        )

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context).strip() + "\n"

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["FRAMEWORK_NOTES", "ReportRenderer", "framework_notes"]
