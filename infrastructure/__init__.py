"""
Infrastructure layer - implementations of interfaces.

Contains:
- decoding: Document decoders (text, markdown, HTML, Word, PDF)
- export: Output generators (CSV, JSON, HTML)
- decoder_factory: Extension-based decoder selection
"""
from .decoding import (
    TextDecoder,
    HtmlDecoder,
    HtmlParser,
    DocxDecoder,
    PdfDecoder
)
from .export import (
    CSVGenerator,
    CSVConfig,
    JSONGenerator,
    HTMLReportGenerator
)
from .decoder_factory import (
    DecoderFactory,
    decode_document
)

__all__ = [
    # Decoding
    'TextDecoder',
    'HtmlDecoder',
    'HtmlParser',
    'DocxDecoder',
    'PdfDecoder',
    # Export
    'CSVGenerator',
    'CSVConfig',
    'JSONGenerator',
    'HTMLReportGenerator',
    # Decoder Factory
    'DecoderFactory',
    'decode_document',
]
