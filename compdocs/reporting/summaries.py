"""Selection and summary helpers feeding the markdown reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..generation.values import first_union_option
from ..models import (
    ComponentBlock,
    ComponentStatus,
    Example,
    ExampleType,
    Property,
    SemanticAnalysis,
)
from ..parsing.matcher import kebab_case_name
from ..parsing.status import determine_component_status, get_recommendation

ALL_TYPES = "all"
FRAMEWORKS: tuple[str, ...] = ("html", "react", "vue", "angular")
SORT_KEYS: tuple[str, ...] = ("name", "status", "maturityLevel")


class ReportError(ValueError):
    """Raised for report options outside the supported vocabulary."""


@dataclass
class ComponentSummary:
    """One row of the component listing."""

    name: str
    tag_name: str
    status: ComponentStatus
    maturity_category: str
    maturity_level: str
    recommendation: str
    usage_name: str


def resolve_example_types(requested: Iterable[str]) -> List[ExampleType]:
    """Expand ``all`` and validate every requested example type."""
    resolved: List[ExampleType] = []
    for raw in requested:
        value = raw.strip().lower()
        if value == ALL_TYPES:
            return list(ExampleType)
        try:
            example_type = ExampleType(value)
        except ValueError as exc:
            raise ReportError(f"Unknown example type: {raw}") from exc
        if example_type not in resolved:
            resolved.append(example_type)
    return resolved


def select_examples(examples: Sequence[Example], requested: Iterable[str]) -> List[Example]:
    """Keep requested example purposes, falling back to the basic examples."""
    wanted = resolve_example_types(requested)
    selected = [example for example in examples if example.purpose in wanted]
    if selected:
        return selected
    return [example for example in examples if example.purpose is ExampleType.BASIC]


def validate_framework(framework: str) -> str:
    value = framework.strip().lower()
    if value not in FRAMEWORKS:
        raise ReportError(f"Unsupported framework: {framework}")
    return value


def summarize_blocks(blocks: Iterable[ComponentBlock]) -> List[ComponentSummary]:
    return [
        ComponentSummary(
            name=block.component_name,
            tag_name=block.tag_name,
            status=determine_component_status(block.maturity_category, block.maturity_level),
            maturity_category=block.maturity_category,
            maturity_level=block.maturity_level,
            recommendation=get_recommendation(block.maturity_category, block.maturity_level),
            usage_name=kebab_case_name(block.component_name),
        )
        for block in blocks
    ]


def list_components(
    blocks: Iterable[ComponentBlock],
    *,
    status: Optional[str] = None,
    category: Optional[str] = None,
    sort_by: str = "name",
) -> List[ComponentSummary]:
    """Filter by status and name substring, then sort."""
    if sort_by not in SORT_KEYS:
        raise ReportError(f"Unknown sort key: {sort_by}")

    summaries = summarize_blocks(blocks)

    if status and status != ALL_TYPES:
        try:
            wanted_status = ComponentStatus(status.upper())
        except ValueError as exc:
            raise ReportError(f"Unknown status: {status}") from exc
        summaries = [summary for summary in summaries if summary.status is wanted_status]

    if category:
        needle = category.lower()
        summaries = [summary for summary in summaries if needle in summary.name.lower()]

    if sort_by == "status":
        summaries.sort(key=lambda summary: summary.status.value)
    elif sort_by == "maturityLevel":
        summaries.sort(key=lambda summary: summary.maturity_level)
    else:
        summaries.sort(key=lambda summary: summary.name.lower())
    return summaries


def group_by_status(
    summaries: Iterable[ComponentSummary],
) -> Dict[ComponentStatus, List[ComponentSummary]]:
    """Group in first-seen order so the listing follows the chosen sort."""
    groups: Dict[ComponentStatus, List[ComponentSummary]] = {}
    for summary in summaries:
        groups.setdefault(summary.status, []).append(summary)
    return groups


def property_example_hint(prop: Property) -> Optional[str]:
    """Short markdown hint showing how to set ``prop`` as an attribute."""
    name = prop.name.lower()
    type_text = prop.type.lower()

    if "boolean" in type_text:
        return f"`{prop.name}` or `{prop.name}=\"true\"`"
    if "string" in type_text:
        if "text" in name or "title" in name or "headline" in name:
            return f'`{prop.name}="Example text"`'
        if "url" in name or "href" in name:
            return f'`{prop.name}="https://example.com"`'
        if "id" in name:
            return f'`{prop.name}="unique-id"`'
        return f'`{prop.name}="value"`'
    if "number" in type_text:
        return f'`{prop.name}="1"`'
    if "|" in type_text:
        option = first_union_option(type_text)
        if option is not None:
            return f'`{prop.name}="{option}"`'
    return None


def minimum_usage(tag_name: str, properties: Sequence[Property]) -> Optional[str]:
    """Markup using only required properties, or None when nothing is required."""
    required = [prop for prop in properties if not prop.optional]
    if not required:
        return None
    valued = [f'{prop.name}="value"' for prop in required if "boolean" not in prop.type]
    flags = [prop.name for prop in required if "boolean" in prop.type]
    attributes = " ".join(valued + flags)
    opening = f"<{tag_name} {attributes}>" if attributes else f"<{tag_name}>"
    return f"{opening}</{tag_name}>"


def analysis_to_dict(analysis: SemanticAnalysis) -> Dict[str, object]:
    """JSON-serialisable view of a semantic analysis (property names only)."""

    def _names(props: Sequence[Property]) -> List[str]:
        return [prop.name for prop in props]

    return {
        "visible_text_props": _names(analysis.visible_text_props),
        "accessibility_props": _names(analysis.accessibility_props),
        "state_props": _names(analysis.state_props),
        "config_props": _names(analysis.config_props),
        "event_props": _names(analysis.event_props),
        "required_props": _names(analysis.required_props),
        "slot_props": _names(analysis.slot_props),
        "is_form_related": analysis.is_form_related,
        "is_interactive": analysis.is_interactive,
        "has_states": analysis.has_states,
        "has_conditional_content": analysis.has_conditional_content,
        "has_accessibility_enhancements": analysis.has_accessibility_enhancements,
        "has_slots": analysis.has_slots,
        "inferred_purpose": analysis.inferred_purpose.value,
        "content_strategy": analysis.content_strategy.value,
    }


__all__ = [
    "ComponentSummary",
    "ReportError",
    "analysis_to_dict",
    "group_by_status",
    "list_components",
    "minimum_usage",
    "property_example_hint",
    "resolve_example_types",
    "select_examples",
    "summarize_blocks",
    "validate_framework",
]
