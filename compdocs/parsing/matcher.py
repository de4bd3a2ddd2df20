"""Forgiving lookup of components by user-supplied names."""

from __future__ import annotations

import re
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from ..logging import get_logger
from ..models import ComponentData

SUGGESTION_LIMIT = 5
SUGGESTION_WORDS: Tuple[str, ...] = ("button", "input", "alert", "form", "text", "file")

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")
_SPACED_HYPHEN = re.compile(r"\s*-\s*")
_WORD_SPLIT = re.compile(r"[\s-]+")


def normalize_component_name(name: str) -> str:
    """Lower-case, hyphenate whitespace runs and drop anything outside ``[a-z0-9-]``."""
    return _NON_SLUG.sub("", _WHITESPACE.sub("-", name.lower()))


def kebab_case_name(name: str) -> str:
    """``"Alert - expandable"`` -> ``"alert-expandable"``."""
    return _WHITESPACE.sub("-", _SPACED_HYPHEN.sub("-", name.lower()))


class ComponentMatcher:
    """Resolves names such as ``file-input-multiple`` to ``File input multiple``.

    Components are visited in declaration order and each one is tried against
    every rule in priority order; the first component that matches any rule wins.
    """

    def __init__(self, tag_prefix: str = "va-") -> None:
        self.tag_prefix = tag_prefix
        self.logger = get_logger("parsing.matcher")
        self._rules: Sequence[Tuple[str, Callable[[str, ComponentData], bool]]] = (
            ("case-insensitive", self._matches_case_insensitive),
            ("normalized", self._matches_normalized),
            ("kebab", self._matches_kebab),
            ("hyphen-collapsed", self._matches_hyphen_collapsed),
            ("words", self._matches_words),
        )

    def find_component_by_name(
        self, component_name: str, components: Mapping[str, ComponentData]
    ) -> Optional[ComponentData]:
        exact = components.get(component_name)
        if exact is not None:
            return exact

        for component in components.values():
            for rule_name, rule in self._rules:
                if rule(component_name, component):
                    self.logger.debug(
                        "Matched %r to %r via %s rule", component_name, component.name, rule_name
                    )
                    return component

        self.logger.debug("No component matched %r", component_name)
        return None

    def get_suggested_component_names(
        self, input_name: str, components: Mapping[str, ComponentData]
    ) -> List[str]:
        needle = input_name.lower()
        scored: List[Tuple[str, int]] = []

        for component in components.values():
            candidate = component.name.lower()
            score = 0

            if needle in candidate or candidate in needle:
                score += 10

            for word in SUGGESTION_WORDS:
                if word in needle and word in candidate:
                    score += 5

            score += max(0, 5 - abs(len(needle) - len(candidate)))

            if score > 0:
                scored.append((component.name, score))

        scored.sort(key=lambda item: item[1], reverse=True)
        return [name for name, _ in scored[:SUGGESTION_LIMIT]]

    # ------------------------------------------------------------------
    # Matching rules

    def _matches_case_insensitive(self, name: str, component: ComponentData) -> bool:
        lowered = name.lower()
        return (
            component.name.lower() == lowered
            or component.tag_name.lower() == f"{self.tag_prefix}{lowered}"
        )

    def _matches_normalized(self, name: str, component: ComponentData) -> bool:
        normalized = normalize_component_name(name)
        if normalize_component_name(component.name) == normalized:
            return True
        return component.tag_name.replace(self.tag_prefix, "", 1) == normalized

    def _matches_kebab(self, name: str, component: ComponentData) -> bool:
        return _WHITESPACE.sub("-", name.lower()) == _WHITESPACE.sub("-", component.name.lower())

    def _matches_hyphen_collapsed(self, name: str, component: ComponentData) -> bool:
        return kebab_case_name(name) == kebab_case_name(component.name)

    def _matches_words(self, name: str, component: ComponentData) -> bool:
        input_words = _WORD_SPLIT.split(name.lower())
        component_words = _WORD_SPLIT.split(component.name.lower())
        return len(input_words) == len(component_words) and input_words == component_words


__all__ = [
    "ComponentMatcher",
    "SUGGESTION_WORDS",
    "kebab_case_name",
    "normalize_component_name",
]
