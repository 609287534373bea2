"""
Regex list item strategies.

Each strategy matches one list style at the start of a line and returns
the item text up to the first CJK sentence terminator or end of line.
Items shorter than the minimum length are dropped as noise.
"""
import re
from typing import List, Pattern

from core.interfaces.item_extractor import IListItemExtractor


ITEM_BODY = r'([^。！？\n]+)'

NUMBERED_MARKER = r'\d+[.)、）]'
BULLET_MARKER = r'[-*•]'

DEFAULT_MIN_ITEM_LENGTH = 6


class RegexListItemExtractor(IListItemExtractor):
    """Extracts items whose line starts with a marker matching a regex."""

    def __init__(self, marker: str, min_length: int = DEFAULT_MIN_ITEM_LENGTH):
        """
        Args:
            marker: Regex for the list marker (without the item body)
            min_length: Items shorter than this are discarded
        """
        self.marker = marker
        self.min_length = min_length
        self._pattern: Pattern = re.compile(
            rf'^[ \t]*(?:{marker})[ \t]*{ITEM_BODY}', re.MULTILINE
        )

    def extract(self, text: str) -> List[str]:
        if not text:
            return []
        items = []
        for match in self._pattern.finditer(text):
            item = match.group(1).strip()
            if len(item) >= self.min_length:
                items.append(item)
        return items


class NumberedItemExtractor(RegexListItemExtractor):
    """'1. text', '2) text', '3、text'."""

    def __init__(self, min_length: int = DEFAULT_MIN_ITEM_LENGTH):
        super().__init__(NUMBERED_MARKER, min_length)


class BulletItemExtractor(RegexListItemExtractor):
    """'- text', '* text', '• text'."""

    def __init__(self, min_length: int = DEFAULT_MIN_ITEM_LENGTH):
        super().__init__(BULLET_MARKER, min_length)


class CombinedItemExtractor(RegexListItemExtractor):
    """Bullet or numbered items, in document order."""

    def __init__(self, min_length: int = DEFAULT_MIN_ITEM_LENGTH):
        super().__init__(f'{BULLET_MARKER}|{NUMBERED_MARKER}', min_length)


class ChainedItemExtractor(IListItemExtractor):
    """Runs several strategies in turn and concatenates their results.

    Functional requirements use numbered items first, then bullets, so
    ids follow that order rather than document order.
    """

    def __init__(self, *extractors: IListItemExtractor):
        if not extractors:
            raise ValueError("ChainedItemExtractor needs at least one extractor")
        self.extractors = extractors

    def extract(self, text: str) -> List[str]:
        items: List[str] = []
        for extractor in self.extractors:
            items.extend(extractor.extract(text))
        return items

