"""
Use case: Parse a requirement document into a Requirements aggregate.
"""
from pathlib import Path
from typing import Optional, Union

from core.domain.errors import DecodeError, DocumentParseError
from core.domain.requirements import Requirements
from core.services.logger import get_logger
from core.services.requirement_extractor import RequirementExtractor


class ParseDocumentUseCase:
    """Decode a document file and extract its requirements."""

    def __init__(self, decoder_factory=None, extractor: Optional[RequirementExtractor] = None):
        """Initialize use case with dependencies.

        Args:
            decoder_factory: Object with create_decoder(path); defaults to
                the infrastructure DecoderFactory
            extractor: Requirement extractor
        """
        if decoder_factory is None:
            from infrastructure.decoder_factory import DecoderFactory
            decoder_factory = DecoderFactory()
        self.decoder_factory = decoder_factory
        self.extractor = extractor or RequirementExtractor()
        self._log = get_logger("parser")

    def execute(self, path: Union[str, Path]) -> Requirements:
        """Execute document parsing.

        Args:
            path: Path to the requirement document

        Returns:
            Extracted requirements

        Raises:
            DocumentParseError: If the file is missing, of an unsupported
                format or cannot be decoded
        """
        path = Path(path)
        if not path.is_file():
            self._log.error("document_not_found", path=str(path))
            raise DocumentParseError(f"Document not found: {path}")

        decoder = self.decoder_factory.create_decoder(path)
        try:
            text = decoder.decode(path)
        except DecodeError as e:
            self._log.error("document_decode_failed", path=str(path), error=e.reason)
            raise DocumentParseError(f"Failed to parse document {path.name}: {e.reason}") from e
        except OSError as e:
            self._log.error("document_decode_failed", path=str(path), error=str(e))
            raise DocumentParseError(f"Failed to parse document {path.name}: {e}") from e

        self._log.info("document_decoded", path=str(path), chars=len(text))
        return self.extractor.extract(text)


def parse_document(path: Union[str, Path]) -> Requirements:
    """Parse a document with the default decoders and extractor."""
    return ParseDocumentUseCase().execute(path)
