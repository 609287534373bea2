"""
Decoder factory for format-agnostic document input.

Selects the decoder implementation from the document's file extension.
"""
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from core.domain.errors import UnsupportedFormatError
from core.interfaces.document_decoder import IDocumentDecoder
from infrastructure.decoding import DocxDecoder, HtmlDecoder, PdfDecoder, TextDecoder


class DecoderFactory:
    """
    Factory for creating format-appropriate decoder instances.

    Supports:
    - Plain text and markdown (.txt, .md, .markdown)
    - HTML (.html, .htm)
    - Word (.docx)
    - PDF (.pdf)
    """

    def __init__(self, decoders: Optional[Sequence[IDocumentDecoder]] = None):
        self._decoders: Dict[str, IDocumentDecoder] = {}
        for decoder in decoders or (TextDecoder(), HtmlDecoder(), DocxDecoder(), PdfDecoder()):
            self.register(decoder)

    def register(self, decoder: IDocumentDecoder) -> None:
        """Register a decoder for all of its extensions (later wins)."""
        for extension in decoder.extensions:
            self._decoders[extension.lower()] = decoder

    @property
    def supported_extensions(self) -> List[str]:
        return sorted(self._decoders)

    def create_decoder(self, path: Union[str, Path]) -> IDocumentDecoder:
        """
        Pick the decoder for a document.

        Args:
            path: Document path

        Returns:
            Decoder implementation

        Raises:
            UnsupportedFormatError: If no decoder handles the extension
        """
        extension = Path(path).suffix.lower()
        decoder = self._decoders.get(extension)
        if decoder is None:
            raise UnsupportedFormatError(extension, self.supported_extensions)
        return decoder


def decode_document(path: Union[str, Path]) -> str:
    """Convenience function to decode a document with the default decoders."""
    return DecoderFactory().create_decoder(path).decode(path)
