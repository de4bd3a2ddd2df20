"""Fixed vocabularies used to classify component properties."""

from __future__ import annotations

VISIBLE_CONTENT_PATTERNS: tuple[str, ...] = (
    "text",
    "label",
    "headline",
    "title",
    "message",
    "content",
    "description",
    "placeholder",
    "value",
    "children",
    "header",
    "footer",
    "caption",
    "summary",
    "detail",
)

ACCESSIBILITY_PATTERNS: tuple[str, ...] = (
    "aria-",
    "role",
    "tabindex",
    "alt",
    "title",
    "describedby",
    "labelledby",
    "live",
    "atomic",
    "relevant",
    "busy",
    "disabled",
    "readonly",
)

STATE_PATTERNS: tuple[str, ...] = (
    "disabled",
    "loading",
    "error",
    "success",
    "warning",
    "active",
    "selected",
    "checked",
    "expanded",
    "collapsed",
    "visible",
    "hidden",
    "open",
    "closed",
    "focused",
)

CONFIG_PATTERNS: tuple[str, ...] = (
    "size",
    "variant",
    "theme",
    "color",
    "type",
    "format",
    "layout",
    "position",
    "align",
    "direction",
    "orientation",
)

FORM_PATTERNS: tuple[str, ...] = (
    "name",
    "value",
    "required",
    "validation",
    "error",
    "invalid",
    "valid",
    "pattern",
    "min",
    "max",
    "step",
    "multiple",
    "accept",
    "autocomplete",
)

CONDITIONAL_PATTERNS: tuple[str, ...] = (
    "show",
    "hide",
    "if",
    "when",
    "unless",
    "conditional",
)

EVENT_PREFIX = "on"
SLOT_MARKER = "slot"

# Substrings of visible-text property names that steer purpose inference.
NOTIFICATION_TERMS: tuple[str, ...] = ("alert", "message", "notification")
NAVIGATION_TERMS: tuple[str, ...] = ("link", "href", "nav")
ACTION_TERMS: tuple[str, ...] = ("button", "click")
FORM_ACTION_TERM = "button"
LABEL_TERM = "label"


__all__ = [
    "ACCESSIBILITY_PATTERNS",
    "ACTION_TERMS",
    "CONDITIONAL_PATTERNS",
    "CONFIG_PATTERNS",
    "EVENT_PREFIX",
    "FORM_ACTION_TERM",
    "FORM_PATTERNS",
    "LABEL_TERM",
    "NAVIGATION_TERMS",
    "NOTIFICATION_TERMS",
    "SLOT_MARKER",
    "STATE_PATTERNS",
    "VISIBLE_CONTENT_PATTERNS",
]
