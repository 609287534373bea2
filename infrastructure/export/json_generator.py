"""
JSON Generator Module

Writes a JSON report: {metadata, statistics, requirements, testCases}.
Test cases are wire records (camelCase field names, steps as
{step, action, expectedResult} objects, tags as a sorted list).
"""
import json
from pathlib import Path
from typing import Optional, Sequence

from core.domain.report import ReportMetadata, build_report
from core.domain.test_case import TestCase
from core.interfaces.output_generator import IOutputGenerator
from core.services.logger import get_logger


class JSONGenerator(IOutputGenerator):
    """Generates JSON test case reports."""

    extension = ".json"

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self._log = get_logger("export")

    def generate(
        self,
        test_cases: Sequence[TestCase],
        output_path: str,
        metadata: Optional[ReportMetadata] = None
    ) -> str:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.generate_string(test_cases, metadata))
            f.write('\n')

        self._log.log_export("json", str(output_path), len(test_cases))
        return str(output_path)

    def generate_string(self, test_cases: Sequence[TestCase], metadata: Optional[ReportMetadata] = None) -> str:
        return json.dumps(
            build_report(test_cases, metadata),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )
