"""
Unit tests for report metadata and statistics.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.application.use_cases import generate_test_cases
from core.domain import (
    GenerationOptions,
    ReportMetadata,
    ReportStatistics,
    Requirements,
    build_report,
)


GENERATED_AT = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)


class TestReportMetadata:
    """Test report header values."""

    def test_defaults(self):
        """Test default project name, version and author."""
        metadata = ReportMetadata(generated_at=GENERATED_AT)
        assert metadata.to_dict(3) == {
            "projectName": "Unnamed Project",
            "version": "1.0.0",
            "author": "Auto-generated",
            "generatedAt": "2024-05-01T08:30:00+00:00",
            "totalTestCases": 3,
        }

    def test_for_requirements_uses_title(self):
        """Test project name comes from the document title."""
        reqs = Requirements.empty(title="Library System")
        metadata = ReportMetadata.for_requirements(reqs)
        assert metadata.project_name == "Library System"
        assert metadata.requirements is reqs

    def test_for_requirements_overrides(self):
        """Test explicit values win over the title."""
        metadata = ReportMetadata.for_requirements(Requirements.empty(), project_name="Shop", author="QA")
        assert (metadata.project_name, metadata.author) == ("Shop", "QA")

    def test_generated_at_is_timezone_aware(self):
        """Test generation time defaults to an aware UTC timestamp."""
        assert ReportMetadata().generated_at.tzinfo is not None


class TestReportStatistics:
    """Test counting of test cases."""

    def test_counts(self):
        """Test totals per type, priority and category."""
        cases = generate_test_cases(Requirements.empty(), GenerationOptions.all_enabled(priority="low"))
        stats = ReportStatistics.from_test_cases(cases)
        assert stats.total == 4 + 4 + 4 + 5
        assert stats.by_type == {"boundary": 4, "negative": 4, "performance": 4, "security": 5}
        assert stats.by_category == stats.by_type
        assert sum(stats.by_priority.values()) == stats.total

    def test_empty(self):
        """Test statistics of no test cases."""
        assert ReportStatistics.from_test_cases([]).to_dict() == {
            "total": 0, "byType": {}, "byPriority": {}, "byCategory": {},
        }


def test_build_report():
    """Test report document keys and contents."""
    reqs = Requirements.empty(title="Library System")
    cases = generate_test_cases(reqs)
    report = build_report(cases, ReportMetadata.for_requirements(reqs, generated_at=GENERATED_AT))
    assert list(report) == ["metadata", "statistics", "requirements", "testCases"]
    assert report["metadata"]["totalTestCases"] == len(cases)
    assert report["statistics"]["byCategory"] == {"boundary": 4}
    assert report["requirements"]["title"] == "Library System"
    assert report["testCases"][0]["id"] == "TC_0001"
