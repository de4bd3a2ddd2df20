"""Heuristic predicates assigning properties to semantic roles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import constants


@dataclass(frozen=True)
class ClassifierVocabulary:
    """Substring tables consulted by :class:`PropertyClassifier`."""

    visible_content: Sequence[str] = constants.VISIBLE_CONTENT_PATTERNS
    accessibility: Sequence[str] = constants.ACCESSIBILITY_PATTERNS
    state: Sequence[str] = constants.STATE_PATTERNS
    config: Sequence[str] = constants.CONFIG_PATTERNS
    form: Sequence[str] = constants.FORM_PATTERNS
    conditional: Sequence[str] = constants.CONDITIONAL_PATTERNS
    event_prefix: str = constants.EVENT_PREFIX
    slot_marker: str = constants.SLOT_MARKER


DEFAULT_VOCABULARY = ClassifierVocabulary()


def _contains_any(name: str, patterns: Sequence[str]) -> bool:
    return any(pattern in name for pattern in patterns)


class PropertyClassifier:
    """Stateless role predicates over a property name and its type text.

    Roles overlap on purpose: ``disabled`` is both accessibility and state.
    The one exception is visible content, which yields to accessibility so
    that ``aria-label`` is not counted as visible text.
    """

    def __init__(self, vocabulary: ClassifierVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def is_visible_content_prop(self, prop_name: str, prop_type: str) -> bool:
        name = prop_name.lower()
        return _contains_any(name, self.vocabulary.visible_content) and not self.is_accessibility_prop(
            prop_name, prop_type
        )

    def is_accessibility_prop(self, prop_name: str, prop_type: str) -> bool:
        return _contains_any(prop_name.lower(), self.vocabulary.accessibility)

    def is_state_prop(self, prop_name: str, prop_type: str) -> bool:
        if _contains_any(prop_name.lower(), self.vocabulary.state):
            return True
        return "boolean" in prop_type.lower() and not self.is_config_prop(prop_name, prop_type)

    def is_config_prop(self, prop_name: str, prop_type: str) -> bool:
        return _contains_any(prop_name.lower(), self.vocabulary.config)

    def is_event_prop(self, prop_name: str) -> bool:
        return prop_name.lower().startswith(self.vocabulary.event_prefix)

    def is_slot_prop(self, prop_name: str) -> bool:
        return self.vocabulary.slot_marker in prop_name.lower()

    def is_form_related_prop(self, prop_name: str) -> bool:
        return _contains_any(prop_name.lower(), self.vocabulary.form)

    def is_conditional_prop(self, prop_name: str) -> bool:
        return _contains_any(prop_name.lower(), self.vocabulary.conditional)


__all__ = ["ClassifierVocabulary", "DEFAULT_VOCABULARY", "PropertyClassifier"]
