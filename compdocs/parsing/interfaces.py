"""Parse property declarations out of an interface body."""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import Property

_COMMENT_OPEN = re.compile(r"^/\*\*\s*")
_COMMENT_CLOSE = re.compile(r"\s*\*/$")
_COMMENT_STAR = re.compile(r"^\*\s*")

_OPENERS = {"{": "}", "(": ")", "[": "]", "<": ">"}
_CLOSERS = {value: key for key, value in _OPENERS.items()}


class InterfaceParser:
    """Line scanner turning an interface body into ordered ``Property`` records.

    JSDoc lines accumulate into a pending description that attaches to the
    next declaration. Lines that do not look like ``name: type;`` are ignored.
    """

    def parse_interface_properties(self, interface_body: str) -> List[Property]:
        properties: List[Property] = []
        pending_comment: List[str] = []

        for line in interface_body.split("\n"):
            trimmed = line.strip()

            if not trimmed or "interface" in trimmed or trimmed in {"{", "}"}:
                continue

            if trimmed.startswith("/**") or trimmed.startswith("*"):
                cleaned = _COMMENT_STAR.sub("", _COMMENT_CLOSE.sub("", _COMMENT_OPEN.sub("", trimmed)))
                if cleaned:
                    pending_comment.append(cleaned)
                continue

            # A declaration line must end with ";", even when it holds several members.
            if ":" not in trimmed or not trimmed.endswith(";"):
                continue

            for declaration in _split_declarations(trimmed):
                if ":" not in declaration or not declaration.endswith(";"):
                    continue
                prop = self.parse_property_definition(declaration)
                if prop is not None:
                    description = " ".join(pending_comment).strip() or None
                    properties.append(
                        Property(
                            name=prop.name,
                            type=prop.type,
                            optional=prop.optional,
                            description=description,
                        )
                    )
                pending_comment = []

        return properties

    def parse_property_definition(self, line: str) -> Optional[Property]:
        """Split ``name?: type;`` at the first colon."""
        colon = line.find(":")
        if colon == -1:
            return None

        name_part = line[:colon].strip()
        type_part = line[colon + 1 :].strip()
        if type_part.endswith(";"):
            type_part = type_part[:-1].rstrip()

        optional = name_part.endswith("?")
        name = name_part[:-1] if optional else name_part
        if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
            name = name[1:-1]

        return Property(name=name.strip(), type=type_part, optional=optional)


def _split_declarations(line: str) -> List[str]:
    """Split a line holding several ``;``-terminated members at top level only."""
    parts: List[str] = []
    stack: List[str] = []
    start = 0
    for index, char in enumerate(line):
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS and stack and stack[-1] == _CLOSERS[char]:
            stack.pop()
        elif char == ";" and not stack:
            parts.append(line[start : index + 1].strip())
            start = index + 1
    remainder = line[start:].strip()
    if remainder:
        parts.append(remainder)
    return parts


__all__ = ["InterfaceParser"]
