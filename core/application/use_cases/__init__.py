"""
Application use cases.
"""
from .generate_test_cases import GenerateTestCasesUseCase, TestCaseGenerator, generate_test_cases
from .parse_document import ParseDocumentUseCase, parse_document

__all__ = [
    'GenerateTestCasesUseCase',
    'TestCaseGenerator',
    'generate_test_cases',
    'ParseDocumentUseCase',
    'parse_document',
]
