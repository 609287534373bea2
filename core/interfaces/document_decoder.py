"""
Document decoder interface.

Decoders turn a file on disk into the plain UTF-8 text the requirement
extractor works on. Format-specific handling lives entirely behind this
seam.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple, Union


class IDocumentDecoder(ABC):
    """Interface for format-specific document decoding."""

    extensions: Tuple[str, ...] = ()

    @abstractmethod
    def decode(self, path: Union[str, Path]) -> str:
        """Read a document and return its text content.

        Args:
            path: Path to the document

        Returns:
            Decoded text

        Raises:
            DecodeError: If the file cannot be read or parsed
        """
        pass

    def supports(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self.extensions
