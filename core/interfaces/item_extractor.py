"""
List item extraction interface.

Abstracts how list entries are pulled out of a section so regex-based
extraction can be replaced (layout-aware, NLP-based, ...) without touching
the requirement extractor or the synthesizer.
"""
from abc import ABC, abstractmethod
from typing import List


class IListItemExtractor(ABC):
    """Interface for turning a section of text into list item strings."""

    @abstractmethod
    def extract(self, text: str) -> List[str]:
        """Extract list items from text.

        Args:
            text: Section text (may be empty)

        Returns:
            Item texts with list markers stripped, in document order.
            Empty list when nothing matches.
        """
        pass
