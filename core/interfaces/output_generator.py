"""
Output generator interfaces for test artifacts.

Abstracts the output generation for different formats.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from core.domain.report import ReportMetadata
from core.domain.test_case import TestCase


class IOutputGenerator(ABC):
    """Base interface for output generation."""

    extension: str = ""

    @abstractmethod
    def generate(
        self,
        test_cases: Sequence[TestCase],
        output_path: str,
        metadata: Optional[ReportMetadata] = None
    ) -> str:
        """Generate output file from test cases.

        Args:
            test_cases: List of test case objects
            output_path: Path for output file
            metadata: Report header; formats without one ignore it

        Returns:
            Path to generated file
        """
        pass

    @abstractmethod
    def generate_string(
        self,
        test_cases: Sequence[TestCase],
        metadata: Optional[ReportMetadata] = None
    ) -> str:
        """Render test cases without touching the filesystem."""
        pass


class ICSVGenerator(IOutputGenerator):
    """Interface for CSV file generation."""

    @abstractmethod
    def generate_from_dicts(
        self,
        test_cases: List[Dict],
        output_file: str,
        include_headers: bool = True
    ) -> str:
        """Generate CSV file from test case wire dictionaries.

        Args:
            test_cases: List of test case dictionaries
            output_file: Path for output CSV
            include_headers: Whether to include header row

        Returns:
            Path to generated CSV file
        """
        pass
