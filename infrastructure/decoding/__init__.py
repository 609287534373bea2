"""
Document decoders - turn requirement documents into plain text.
"""
from .text_decoder import TextDecoder
from .html_decoder import HtmlDecoder, HtmlParser
from .docx_decoder import DocxDecoder
from .pdf_decoder import PdfDecoder

__all__ = [
    'TextDecoder',
    'HtmlDecoder',
    'HtmlParser',
    'DocxDecoder',
    'PdfDecoder',
]
