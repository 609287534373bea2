"""
SectionLocator: Finds the text span that belongs to a named section.

A section starts at a line beginning with one of the synonyms (optionally
preceded by markdown hashes or a section number) that is followed by a
colon or by the end of the line. Text after the colon on the same line is
part of the section. The section ends right before the next heading-like
line or at end of document.

Heading-like lines:
- CJK numeral markers: "二、非功能需求"
- markdown headings: "## Constraints"
- multi-level numbered headings: "3.1 Security"
- a line consisting only of a known section name, numbered or not and
  with or without a colon: "5. Business Rules", "Assumptions:"

Numbered list items belong to the section, including items that end with
a colon and introduce sub-bullets ("1. Supported payment methods:").
"""
import re
from typing import Dict, Iterable, List, Optional, Pattern, Sequence


CJK_NUMERALS = '一二三四五六七八九十'

# Optional decoration in front of a heading name
HEADING_PREFIX = (
    r'[ \t]*(?:\#{1,6}[ \t]*)?(?:\*\*)?'
    rf'(?:[{CJK_NUMERALS}]+[、.．][ \t]*|\d+(?:\.\d+)*[.、)）]?[ \t]+|\d+[.、)）])?'
)

_BOUNDARIES = [
    rf'[{CJK_NUMERALS}]+[、.．]',
    r'\#{1,6}[ \t]',
    r'\d+(?:\.\d+)+\.?[ \t]+\S',
]


def _synonym_regex(name: str) -> str:
    """Escape a heading name, letting internal spaces match any run of blanks."""
    return r'[ \t]+'.join(re.escape(part) for part in name.split())


class SectionLocator:
    """Locates heading-delimited sections in plain text documents."""

    def __init__(self, known_headings: Iterable[str] = ()):
        """
        Args:
            known_headings: Section names that always start a new section
                when they appear alone on a line, numbered or not
        """
        self.known_headings = sorted({h for h in known_headings if h.strip()}, key=len, reverse=True)
        boundaries = list(_BOUNDARIES)
        if self.known_headings:
            names = '|'.join(_synonym_regex(h) for h in self.known_headings)
            boundaries.append(
                rf'{HEADING_PREFIX}(?:{names})(?:\*\*)?[ \t]*(?:[：:](?:\*\*)?)?[ \t]*(?:\n|\Z)'
            )
        self._boundary = '|'.join(f'(?:{b})' for b in boundaries)
        self._patterns: Dict[str, Pattern] = {}

    def _pattern_for(self, heading: str) -> Pattern:
        pattern = self._patterns.get(heading)
        if pattern is None:
            pattern = re.compile(
                rf'^{HEADING_PREFIX}{_synonym_regex(heading)}(?:\*\*)?[ \t]*'
                rf'(?:[：:](?:\*\*)?|(?=\n)|\Z)'
                rf'(.*?)(?=\n[ \t]*(?:{self._boundary})|\Z)',
                re.IGNORECASE | re.MULTILINE | re.DOTALL,
            )
            self._patterns[heading] = pattern
        return pattern

    def locate(self, document: str, heading_synonyms: Sequence[str]) -> Optional[str]:
        """Return the trimmed body of the first synonym's section.

        Args:
            document: Full document text
            heading_synonyms: Alternative heading names, tried in order

        Returns:
            Section text (possibly empty string) or None if no synonym heads
            a section in the document
        """
        if not document:
            return None
        for heading in heading_synonyms:
            match = self._pattern_for(heading).search(document)
            if match:
                return match.group(1).strip()
        return None


def locate_section(document: str, heading_synonyms: List[str]) -> Optional[str]:
    """Locate a section with no extra known headings."""
    return SectionLocator().locate(document, heading_synonyms)
