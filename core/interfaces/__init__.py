"""
Interfaces for dependency inversion.

Concrete extractors, builders, decoders and exporters depend on these
abstractions rather than on each other.
"""
from .item_extractor import IListItemExtractor
from .test_generator import ITestCaseBuilder
from .document_decoder import IDocumentDecoder
from .output_generator import IOutputGenerator, ICSVGenerator

__all__ = [
    # Extraction interfaces
    'IListItemExtractor',
    # Generator interfaces
    'ITestCaseBuilder',
    # Input interfaces
    'IDocumentDecoder',
    # Output interfaces
    'IOutputGenerator',
    'ICSVGenerator',
]
