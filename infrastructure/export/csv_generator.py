"""
CSV Generator Module

Generates spreadsheet-ready CSV files from synthesized test cases.
Supports dependency injection for output settings.
"""
import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, TextIO

from core.domain.report import ReportMetadata
from core.domain.test_case import TestCase, to_dicts
from core.interfaces.output_generator import ICSVGenerator
from core.services.logger import get_logger


@dataclass
class CSVConfig:
    """Configuration for CSV generation."""
    tag_separator: str = ";"
    include_bom: bool = False  # lets spreadsheet tools detect UTF-8 for CJK text


class ICSVConfig(Protocol):
    """Protocol for CSV configuration."""
    @property
    def tag_separator(self) -> str: ...
    @property
    def include_bom(self) -> bool: ...


class CSVGenerator(ICSVGenerator):
    """
    Generates test case CSV files.

    CSV Structure:
    - One header row per test case with its metadata
    - Followed by step-per-row entries
    - Metadata columns blank on step rows
    - Newlines in text are replaced with spaces
    """

    extension = ".csv"

    # CSV column headers
    HEADERS = [
        'ID', 'Title', 'Description', 'Type', 'Category', 'Priority',
        'Requirement ID', 'Preconditions', 'Step', 'Step Action', 'Step Expected',
        'Expected Result', 'Postconditions', 'Test Data', 'Environment', 'Tags'
    ]

    def __init__(self, config: Optional[ICSVConfig] = None):
        """
        Initialize CSV generator with optional configuration.

        Args:
            config: Configuration object with tag_separator, include_bom
        """
        config = config or CSVConfig()
        self._tag_separator = config.tag_separator
        self._include_bom = config.include_bom
        self._log = get_logger("export")

    def generate(
        self,
        test_cases: Sequence[TestCase],
        output_path: str,
        metadata: Optional[ReportMetadata] = None
    ) -> str:
        """Write test cases to a CSV file and return its path. CSV has no report header."""
        return self.generate_from_dicts(to_dicts(test_cases), output_path)

    def generate_from_dicts(
        self,
        test_cases: List[Dict],
        output_file: str,
        include_headers: bool = True
    ) -> str:
        """
        Generate CSV from test case wire dictionaries.

        Args:
            test_cases: List of test case dictionaries
            output_file: Output file path
            include_headers: Whether to write the column header line

        Returns:
            Path to the written file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        encoding = 'utf-8-sig' if self._include_bom else 'utf-8'
        with open(output_file, 'w', newline='', encoding=encoding) as f:
            self._write(f, test_cases, include_headers)

        self._log.log_export("csv", str(output_file), len(test_cases))
        return str(output_file)

    def generate_string(self, test_cases: Sequence[TestCase], metadata: Optional[ReportMetadata] = None) -> str:
        """
        Generate CSV content as a string.

        Args:
            test_cases: Test cases to render

        Returns:
            CSV content as string
        """
        output = io.StringIO()
        self._write(output, to_dicts(test_cases), include_headers=True)
        return output.getvalue()

    def _write(self, f: TextIO, test_cases: Iterable[Dict], include_headers: bool) -> None:
        if include_headers:
            f.write(','.join(self.HEADERS) + '\n')
        for tc in test_cases:
            for row in self._rows(tc):
                f.write(','.join(self._format_csv_value(val) for val in row) + '\n')

    def _rows(self, tc: Dict) -> Iterable[List[str]]:
        """Header row for a test case, then one row per step."""
        yield [
            tc.get('id', ''),
            self._clean_text(tc.get('title', '')),
            self._clean_text(tc.get('description', '')),
            tc.get('type', ''),
            tc.get('category', ''),
            tc.get('priority', ''),
            tc.get('requirementId', ''),
            self._clean_text(tc.get('preconditions', '')),
            '',  # Step
            '',  # Step Action
            '',  # Step Expected
            self._clean_text(tc.get('expectedResult', '')),
            self._clean_text(tc.get('postconditions', '')),
            self._clean_text(tc.get('testData', '')),
            tc.get('environment', ''),
            self._tag_separator.join(sorted(tc.get('tags', []))),
        ]

        for idx, step in enumerate(tc.get('steps', []), start=1):
            yield [
                '', '', '', '', '', '', '', '',
                str(step.get('step', idx)),
                self._clean_text(step.get('action', '')),
                self._clean_text(step.get('expectedResult', '')),
                '', '', '', '', '',
            ]

    @staticmethod
    def _clean_text(text: str) -> str:
        """
        Clean text for CSV: replace newlines with spaces.

        Args:
            text: Input text

        Returns:
            Cleaned text safe for CSV
        """
        if not text:
            return ""
        text = text.replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')
        return ' '.join(text.split())

    @staticmethod
    def _format_csv_value(value) -> str:
        """
        Format CSV value: quote only when needed.

        Args:
            value: Value to format

        Returns:
            Properly quoted/escaped CSV value
        """
        if value == '' or value is None:
            return ''
        # Use csv module to properly escape quotes and commas
        output = io.StringIO()
        csv.writer(output, quoting=csv.QUOTE_MINIMAL).writerow([str(value)])
        return output.getvalue().rstrip('\n\r')
