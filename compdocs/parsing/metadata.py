"""Extract component blocks from annotated TypeScript declaration files.

A component block is an ``interface <Prefix><Name> { ... }`` declaration
paired with the JSDoc comment that precedes it::

    /**
     * @componentName Button
     * @maturityCategory use
     * @maturityLevel best_practice
     * @guidanceHref /components/button
     * @translations button.submit
     */
    interface VaButton {
      text: string;
    }

Interfaces without ``@componentName``, ``@maturityCategory`` and
``@maturityLevel`` are skipped rather than reported as errors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..logging import get_logger
from ..models import ComponentBlock

_COMMENT_PATTERN = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)

_TAG_PATTERNS = {
    "component_name": re.compile(r"@componentName\s+(.+)"),
    "maturity_category": re.compile(r"@maturityCategory\s+(.+)"),
    "maturity_level": re.compile(r"@maturityLevel\s+(.+)"),
    "guidance_href": re.compile(r"@guidanceHref\s+(.+)"),
}
_TRANSLATIONS_PATTERN = re.compile(r"@translations\s+(.+)")


@dataclass
class JSDocMetadata:
    """Tagged fields read from a single JSDoc comment body."""

    component_name: Optional[str] = None
    maturity_category: Optional[str] = None
    maturity_level: Optional[str] = None
    guidance_href: Optional[str] = None
    translations: List[str] = field(default_factory=list)


class MetadataExtractor:
    """Pairs every prefixed interface with its nearest preceding JSDoc comment."""

    def __init__(self, interface_prefix: str = "Va", tag_prefix: str = "va-") -> None:
        self.interface_prefix = interface_prefix
        self.tag_prefix = tag_prefix
        self._interface_pattern = re.compile(
            rf"interface\s+({re.escape(interface_prefix)}\w+)(?:\s+extends\s+[^{{;]+?)?\s*\{{"
        )
        self.logger = get_logger("parsing.metadata")

    def extract_component_blocks(self, content: str) -> List[ComponentBlock]:
        blocks: List[ComponentBlock] = []

        for match in self._interface_pattern.finditer(content):
            interface_name = match.group(1)
            interface_body = _read_body(content, match.end())
            if interface_body is None:
                self.logger.debug("Skipping %s: unterminated interface body", interface_name)
                continue

            comments = _COMMENT_PATTERN.findall(content, 0, match.start())
            if not comments:
                self.logger.debug("Skipping %s: no preceding JSDoc comment", interface_name)
                continue

            # Nearest preceding comment wins, even when it belongs to an earlier interface.
            metadata = self.extract_jsdoc_metadata(comments[-1])
            if not metadata.component_name:
                self.logger.debug("Skipping %s: missing @componentName", interface_name)
                continue
            if not metadata.maturity_category or not metadata.maturity_level:
                self.logger.debug("Skipping %s: missing maturity metadata", interface_name)
                continue

            blocks.append(
                ComponentBlock(
                    interface_name=interface_name,
                    interface_body=interface_body,
                    component_name=metadata.component_name,
                    maturity_category=metadata.maturity_category,
                    maturity_level=metadata.maturity_level,
                    tag_name=f"{self.tag_prefix}{metadata.component_name.lower()}",
                    guidance_href=metadata.guidance_href,
                    translations=metadata.translations,
                )
            )

        self.logger.debug("Extracted %d component blocks", len(blocks))
        return blocks

    def extract_jsdoc_metadata(self, comment: str) -> JSDocMetadata:
        """Read the tagged fields of one JSDoc comment body."""
        metadata = JSDocMetadata()
        for attribute, pattern in _TAG_PATTERNS.items():
            found = pattern.search(comment)
            if found:
                setattr(metadata, attribute, found.group(1).strip())
        metadata.translations = [
            value.strip() for value in _TRANSLATIONS_PATTERN.findall(comment)
        ]
        return metadata


def _read_body(content: str, start: int) -> Optional[str]:
    """Return the text between an opening brace and its matching close brace."""
    depth = 1
    for index in range(start, len(content)):
        char = content[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[start:index]
    return None


__all__ = ["JSDocMetadata", "MetadataExtractor"]
