"""
HTML decoder.

Flattens markup into the plain text layout the extractor expects:
headings become markdown headings, list items become bullet or numbered
lines.
"""
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup

from core.domain.errors import DecodeError
from core.interfaces.document_decoder import IDocumentDecoder
from core.services.logger import get_logger


class HtmlParser:
    """Utility class for turning HTML into structured plain text."""

    @staticmethod
    def normalize_to_text(html_content: str) -> str:
        """Convert HTML to plain text, preserving structure.

        Args:
            html_content: HTML string

        Returns:
            Plain text with headings, list markers and line breaks kept
        """
        if not html_content:
            return ""

        soup = BeautifulSoup(html_content, 'html.parser')

        for tag in soup(['script', 'style']):
            tag.decompose()

        # h1..h6 -> "# " .. "###### "
        for level in range(1, 7):
            for heading in soup.find_all(f'h{level}'):
                heading.string = f"{'#' * level} {heading.get_text(' ', strip=True)}"

        # Convert lists to bullet points / numbered lines
        for lst in soup.find_all(['ul', 'ol']):
            numbered = lst.name == 'ol'
            for index, li in enumerate(lst.find_all('li', recursive=False), start=1):
                text = li.get_text(' ', strip=True)
                if numbered:
                    li.string = f"{index}. {text}"
                elif not text.startswith(('•', '-')):
                    li.string = f"• {text}"
                else:
                    li.string = text

        text = soup.get_text(separator='\n')

        # Clean up whitespace while preserving structure
        lines = [line.strip() for line in text.split('\n') if line.strip()]
        return '\n'.join(lines)


class HtmlDecoder(IDocumentDecoder):
    """Reads .html / .htm files."""

    extensions = ('.html', '.htm')

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding
        self._log = get_logger("decoder")

    def decode(self, path: Union[str, Path]) -> str:
        try:
            html_content = Path(path).read_text(encoding=self.encoding, errors='replace')
        except OSError as e:
            raise DecodeError(str(path), e.strerror or str(e)) from e

        text = HtmlParser.normalize_to_text(html_content)
        self._log.debug("document_decoded", path=str(path), format="html", chars=len(text))
        return text
