"""
Report domain objects.

Metadata and statistics shared by the JSON and HTML reports.
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional

from core.domain.requirements import Requirements
from core.domain.test_case import TestCase


REPORT_VERSION = "1.0.0"
DEFAULT_AUTHOR = "Auto-generated"
DEFAULT_PROJECT_NAME = "Unnamed Project"


@dataclass(frozen=True)
class ReportMetadata:
    """Header information written at the top of every report."""
    project_name: str = DEFAULT_PROJECT_NAME
    version: str = REPORT_VERSION
    author: str = DEFAULT_AUTHOR
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    requirements: Optional[Requirements] = None

    @classmethod
    def for_requirements(cls, requirements: Requirements, **kwargs) -> 'ReportMetadata':
        """Metadata named after the document title."""
        kwargs.setdefault("project_name", requirements.title)
        return cls(requirements=requirements, **kwargs)

    def to_dict(self, total_test_cases: int) -> Dict[str, object]:
        return {
            "projectName": self.project_name,
            "version": self.version,
            "author": self.author,
            "generatedAt": self.generated_at.isoformat(),
            "totalTestCases": total_test_cases,
        }


@dataclass(frozen=True)
class ReportStatistics:
    """Test case counts overall and per type, priority and category."""
    total: int
    by_type: Dict[str, int]
    by_priority: Dict[str, int]
    by_category: Dict[str, int]

    @classmethod
    def from_test_cases(cls, test_cases: Iterable[TestCase]) -> 'ReportStatistics':
        cases = list(test_cases)
        # keys keep first-seen order
        return cls(
            total=len(cases),
            by_type=dict(Counter(tc.type.value for tc in cases)),
            by_priority=dict(Counter(tc.priority for tc in cases)),
            by_category=dict(Counter(tc.category.value for tc in cases)),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "total": self.total,
            "byType": dict(self.by_type),
            "byPriority": dict(self.by_priority),
            "byCategory": dict(self.by_category),
        }


def build_report(test_cases: Iterable[TestCase], metadata: Optional[ReportMetadata] = None) -> Dict[str, object]:
    """Assemble the {metadata, statistics, requirements, testCases} report document.

    Args:
        test_cases: Generated test cases in output order
        metadata: Report header; defaults are used when omitted

    Returns:
        Plain dictionary ready for JSON serialization
    """
    cases = list(test_cases)
    metadata = metadata or ReportMetadata()
    return {
        "metadata": metadata.to_dict(len(cases)),
        "statistics": ReportStatistics.from_test_cases(cases).to_dict(),
        "requirements": metadata.requirements.to_dict() if metadata.requirements else {},
        "testCases": [tc.to_dict() for tc in cases],
    }
