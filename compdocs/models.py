"""Core data models shared across compdocs components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ComponentStatus(str, Enum):
    """Recommendation status derived from maturity metadata."""

    RECOMMENDED = "RECOMMENDED"
    STABLE = "STABLE"
    EXPERIMENTAL = "EXPERIMENTAL"
    AVAILABLE_WITH_ISSUES = "AVAILABLE_WITH_ISSUES"
    USE_WITH_CAUTION = "USE_WITH_CAUTION"
    DEPRECATED = "DEPRECATED"
    UNKNOWN = "UNKNOWN"


class MaturityLevel(str, Enum):
    """Values accepted by the ``@maturityLevel`` annotation."""

    BEST_PRACTICE = "best_practice"
    DEPLOYED = "deployed"
    CANDIDATE = "candidate"
    AVAILABLE = "available"
    DEPRECATED = "deprecated"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Optional[str]) -> "MaturityLevel":
        lowered = (value or "").strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return cls.UNKNOWN


class MaturityCategory(str, Enum):
    """Values accepted by the ``@maturityCategory`` annotation."""

    USE = "use"
    CAUTION = "caution"


class ComponentPurpose(str, Enum):
    """High-level role inferred from a component's properties."""

    ACTION = "action"
    NOTIFICATION = "notification"
    INPUT = "input"
    NAVIGATION = "navigation"
    CONTAINER = "container"
    DISPLAY = "display"


class ContentStrategy(str, Enum):
    """Rule deciding which optional properties surface in the basic example."""

    VISIBLE_FIRST = "visible-first"
    FORM_LABEL = "form-label"
    STRUCTURE_FIRST = "structure-first"
    UNKNOWN = "unknown"


class ExampleType(str, Enum):
    """Category of a generated usage example."""

    BASIC = "basic"
    STATE = "state"
    ACCESSIBILITY = "accessibility"
    FORM = "form"


@dataclass
class ComponentBlock:
    """One JSDoc metadata comment paired with the interface that follows it."""

    interface_name: str
    interface_body: str
    component_name: str
    maturity_category: str
    maturity_level: str
    tag_name: str
    guidance_href: Optional[str] = None
    translations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Property:
    """A single declared property of a component interface."""

    name: str
    type: str
    optional: bool
    description: Optional[str] = None


@dataclass
class ComponentData:
    """Parsed component with derived governance status."""

    name: str
    tag_name: str
    status: ComponentStatus
    maturity_level: MaturityLevel
    recommendation: str
    properties: List[Property] = field(default_factory=list)


@dataclass
class SemanticAnalysis:
    """Heuristic classification of a component's properties.

    Classification lists overlap: a required ``aria-label`` appears in both
    ``required_props`` and ``accessibility_props``.
    """

    visible_text_props: List[Property] = field(default_factory=list)
    accessibility_props: List[Property] = field(default_factory=list)
    state_props: List[Property] = field(default_factory=list)
    config_props: List[Property] = field(default_factory=list)
    event_props: List[Property] = field(default_factory=list)
    required_props: List[Property] = field(default_factory=list)
    slot_props: List[Property] = field(default_factory=list)
    is_form_related: bool = False
    is_interactive: bool = False
    has_states: bool = False
    has_conditional_content: bool = False
    has_accessibility_enhancements: bool = False
    has_slots: bool = False
    inferred_purpose: ComponentPurpose = ComponentPurpose.DISPLAY
    content_strategy: ContentStrategy = ContentStrategy.UNKNOWN


@dataclass
class Example:
    """Generated usage example with literal markup."""

    title: str
    description: str
    code: str
    framework: str = "html"
    purpose: ExampleType = ExampleType.BASIC


@dataclass(frozen=True)
class ChildProp:
    name: str
    required: bool


@dataclass
class CompositeInfo:
    """Describes the child elements a composite component needs."""

    type: str
    child_element: str
    child_count: int
    child_props: List[ChildProp] = field(default_factory=list)


__all__ = [
    "ChildProp",
    "ComponentBlock",
    "ComponentData",
    "ComponentPurpose",
    "ComponentStatus",
    "CompositeInfo",
    "ContentStrategy",
    "Example",
    "ExampleType",
    "MaturityCategory",
    "MaturityLevel",
    "Property",
    "SemanticAnalysis",
]
