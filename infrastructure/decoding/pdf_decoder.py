"""
PDF decoder built on pypdf.
"""
from pathlib import Path
from typing import Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from core.domain.errors import DecodeError
from core.interfaces.document_decoder import IDocumentDecoder
from core.services.logger import get_logger


class PdfDecoder(IDocumentDecoder):
    """Extracts the text layer of every page, pages separated by newlines."""

    extensions = ('.pdf',)

    def __init__(self):
        self._log = get_logger("decoder")

    def decode(self, path: Union[str, Path]) -> str:
        try:
            reader = PdfReader(str(path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except PdfReadError as e:
            raise DecodeError(str(path), f"not a readable PDF ({e})") from e
        except OSError as e:
            raise DecodeError(str(path), e.strerror or str(e)) from e

        text = '\n'.join(pages)
        if not text.strip():
            self._log.warning("pdf_without_text_layer", path=str(path), pages=len(pages))
        self._log.debug("document_decoded", path=str(path), format="pdf", pages=len(pages), chars=len(text))
        return text
