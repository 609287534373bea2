"""
Word (.docx) decoder built on python-docx.
"""
import re
from pathlib import Path
from typing import List, Union
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from core.domain.errors import DecodeError
from core.interfaces.document_decoder import IDocumentDecoder
from core.services.logger import get_logger


_HEADING_STYLE = re.compile(r'^(?:Heading|Title)\s*(\d*)$', re.IGNORECASE)


class DocxDecoder(IDocumentDecoder):
    """
    Reads paragraphs and tables of a .docx file.

    Heading styles are rendered as markdown headings and list styles as
    bullet / numbered lines so sections and items survive the conversion.
    """

    extensions = ('.docx',)

    def __init__(self):
        self._log = get_logger("decoder")

    def decode(self, path: Union[str, Path]) -> str:
        try:
            document = Document(str(path))
        except (PackageNotFoundError, BadZipFile, KeyError, ValueError) as e:
            raise DecodeError(str(path), f"not a readable .docx file ({e})") from e
        except OSError as e:
            raise DecodeError(str(path), e.strerror or str(e)) from e

        lines: List[str] = []
        list_number = 0
        for paragraph in document.paragraphs:
            text = paragraph.text.strip()
            if not text:
                continue
            style = paragraph.style.name if paragraph.style is not None else ''

            heading = _HEADING_STYLE.match(style)
            if heading:
                level = int(heading.group(1) or 1)
                lines.append(f"{'#' * min(level, 6)} {text}")
                list_number = 0
            elif style.startswith('List Number'):
                list_number += 1
                lines.append(f"{list_number}. {text}")
            elif style.startswith('List'):
                lines.append(f"- {text}")
            else:
                lines.append(text)
                list_number = 0

        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(' | '.join(cells))

        text = '\n'.join(lines)
        self._log.debug("document_decoded", path=str(path), format="docx", chars=len(text))
        return text
