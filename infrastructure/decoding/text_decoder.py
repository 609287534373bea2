"""
Plain text and markdown decoder.

Markdown is passed through unrendered: the extractor understands '#'
headings and '-' / '1.' list markers directly.
"""
from pathlib import Path
from typing import Union

from core.domain.errors import DecodeError
from core.interfaces.document_decoder import IDocumentDecoder
from core.services.logger import get_logger


class TextDecoder(IDocumentDecoder):
    """Reads UTF-8 text files (a leading BOM is dropped)."""

    extensions = ('.txt', '.md', '.markdown')

    def __init__(self, encoding: str = 'utf-8-sig'):
        self.encoding = encoding
        self._log = get_logger("decoder")

    def decode(self, path: Union[str, Path]) -> str:
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(str(path), f"not valid {self.encoding} text ({e.reason})") from e
        except OSError as e:
            raise DecodeError(str(path), e.strerror or str(e)) from e

        self._log.debug("document_decoded", path=str(path), format="text", chars=len(text))
        return text
