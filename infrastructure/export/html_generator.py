"""
HTML Report Generator Module

Writes a single self-contained HTML page: report header, statistics cards,
type distribution, the extracted requirements and one card per test case.
Type and priority selects filter the cards in the browser.
"""
from html import escape
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from core.domain.report import ReportMetadata, ReportStatistics
from core.domain.requirements import Requirements
from core.domain.test_case import TestCase, TestType
from core.interfaces.output_generator import IOutputGenerator
from core.services.logger import get_logger


TYPE_LABELS: Dict[str, str] = {
    TestType.FUNCTIONAL.value: "Functional",
    TestType.ACCEPTANCE.value: "Acceptance",
    TestType.BOUNDARY.value: "Boundary",
    TestType.NEGATIVE.value: "Negative",
    TestType.PERFORMANCE.value: "Performance",
    TestType.SECURITY.value: "Security",
    TestType.NON_FUNCTIONAL.value: "Non-functional",
}

PRIORITY_LABELS: Dict[str, str] = {
    "high": "High",
    "medium": "Medium",
    "low": "Low",
}

STYLE = """
body { font-family: -apple-system, "Segoe UI", "Microsoft YaHei", sans-serif; margin: 0; background: #f5f6f8; color: #222; }
.container { max-width: 1100px; margin: 0 auto; padding: 24px; }
header { background: #2f5597; color: #fff; padding: 24px; border-radius: 8px; }
header h1 { margin: 0 0 8px 0; }
.meta span { margin-right: 24px; }
.stats { display: flex; gap: 16px; margin: 24px 0; }
.stat-card { flex: 1; background: #fff; border-radius: 8px; padding: 16px; text-align: center; }
.stat-card .value { font-size: 28px; font-weight: bold; }
.stat-card.high .value { color: #c0392b; }
.stat-card.medium .value { color: #d68910; }
.stat-card.low .value { color: #1e8449; }
section { background: #fff; border-radius: 8px; padding: 16px 24px; margin-bottom: 24px; }
.filters select { margin-right: 12px; padding: 4px; }
.test-case { border: 1px solid #dde1e6; border-radius: 6px; padding: 12px 16px; margin-top: 12px; }
.test-case h3 { margin: 0 0 8px 0; font-size: 16px; }
.badge { display: inline-block; padding: 2px 8px; border-radius: 10px; font-size: 12px; margin-right: 6px; background: #e8ecf3; }
.priority-high { background: #f9d6d2; }
.priority-medium { background: #fbe8c8; }
.priority-low { background: #d5f0dc; }
.tag { display: inline-block; padding: 1px 6px; margin-right: 4px; font-size: 12px; background: #eef; border-radius: 4px; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #dde1e6; padding: 6px 8px; text-align: left; vertical-align: top; }
th { background: #f0f2f5; }
"""

SCRIPT = """
function filterTestCases() {
  var type = document.getElementById('type-filter').value;
  var priority = document.getElementById('priority-filter').value;
  var cards = document.querySelectorAll('.test-case');
  for (var i = 0; i < cards.length; i++) {
    var card = cards[i];
    var visible = (!type || card.dataset.type === type) &&
                  (!priority || card.dataset.priority === priority);
    card.style.display = visible ? '' : 'none';
  }
}
"""


class HTMLReportGenerator(IOutputGenerator):
    """Generates a browsable HTML test case report."""

    extension = ".html"

    def __init__(self, title_suffix: str = "Test Case Report"):
        self.title_suffix = title_suffix
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

        self._log.log_export("html", str(output_path), len(test_cases))
        return str(output_path)

    def generate_string(self, test_cases: Sequence[TestCase], metadata: Optional[ReportMetadata] = None) -> str:
        """
        Render the full HTML document.

        Args:
            test_cases: Test cases in output order
            metadata: Report header; defaults are used when omitted

        Returns:
            HTML page as a string
        """
        metadata = metadata or ReportMetadata()
        stats = ReportStatistics.from_test_cases(test_cases)
        page_title = escape(f"{metadata.project_name} - {self.title_suffix}")

        sections = [
            self._render_header(metadata, stats),
            self._render_statistics(stats),
            self._render_distribution(stats),
        ]
        if metadata.requirements is not None:
            sections.append(self._render_requirements(metadata.requirements))
        sections.append(self._render_test_cases(test_cases, stats))

        body = "\n".join(sections)
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{page_title}</title>
<style>{STYLE}</style>
</head>
<body>
<div class="container">
{body}
</div>
<script>{SCRIPT}</script>
</body>
</html>
"""

    def _render_header(self, metadata: ReportMetadata, stats: ReportStatistics) -> str:
        generated = metadata.generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
        return f"""<header>
<h1>{escape(metadata.project_name)}</h1>
<div class="meta">
<span>Version: {escape(metadata.version)}</span>
<span>Author: {escape(metadata.author)}</span>
<span>Generated: {escape(generated)}</span>
<span>Test cases: {stats.total}</span>
</div>
</header>"""

    def _render_statistics(self, stats: ReportStatistics) -> str:
        cards = [self._stat_card("total", "Total", stats.total)]
        for priority, label in PRIORITY_LABELS.items():
            cards.append(self._stat_card(priority, f"{label} priority", stats.by_priority.get(priority, 0)))
        return '<div class="stats">\n' + "\n".join(cards) + "\n</div>"

    @staticmethod
    def _stat_card(css_class: str, label: str, value: int) -> str:
        return f'<div class="stat-card {css_class}"><div class="value">{value}</div><div>{escape(label)}</div></div>'

    def _render_distribution(self, stats: ReportStatistics) -> str:
        rows = "\n".join(
            f"<tr><td>{escape(TYPE_LABELS.get(test_type, test_type))}</td><td>{count}</td></tr>"
            for test_type, count in stats.by_type.items()
        )
        return f"""<section id="type-distribution">
<h2>Test Type Distribution</h2>
<table>
<tr><th>Type</th><th>Count</th></tr>
{rows}
</table>
</section>"""

    def _render_requirements(self, requirements: Requirements) -> str:
        parts = [f"<p>{escape(requirements.description)}</p>"]

        if requirements.functional_requirements:
            parts.append("<h3>Functional Requirements</h3>")
            parts.append(self._list(
                f"{fr.id}: {fr.description}" for fr in requirements.functional_requirements
            ))
        if requirements.non_functional_requirements:
            parts.append("<h3>Non-Functional Requirements</h3>")
            parts.append(self._list(
                f"{nfr.id} [{nfr.type.value}]: {nfr.description}"
                for nfr in requirements.non_functional_requirements
            ))
        if requirements.user_stories:
            parts.append("<h3>User Stories</h3>")
            parts.append(self._list(
                f"{s.id}: As a {s.role}, I want {s.goal}, so that {s.benefit}"
                for s in requirements.user_stories
            ))
        if requirements.acceptance_criteria:
            parts.append("<h3>Acceptance Criteria</h3>")
            parts.append(self._list(f"{ac.id}: {ac.description}" for ac in requirements.acceptance_criteria))

        content = "\n".join(parts)
        return f"""<section id="requirements">
<h2>Requirements</h2>
{content}
</section>"""

    @staticmethod
    def _list(items) -> str:
        return "<ul>\n" + "\n".join(f"<li>{escape(item)}</li>" for item in items) + "\n</ul>"

    def _render_test_cases(self, test_cases: Sequence[TestCase], stats: ReportStatistics) -> str:
        type_options = "".join(
            f'<option value="{escape(t)}">{escape(TYPE_LABELS.get(t, t))}</option>' for t in stats.by_type
        )
        priority_options = "".join(
            f'<option value="{p}">{label}</option>' for p, label in PRIORITY_LABELS.items()
        )
        cards = "\n".join(self._render_case(tc) for tc in test_cases)
        return f"""<section id="test-cases">
<h2>Test Cases</h2>
<div class="filters">
<select id="type-filter" onchange="filterTestCases()"><option value="">All types</option>{type_options}</select>
<select id="priority-filter" onchange="filterTestCases()"><option value="">All priorities</option>{priority_options}</select>
</div>
{cards}
</section>"""

    def _render_case(self, tc: TestCase) -> str:
        steps = "\n".join(
            f"<tr><td>{step.step}</td><td>{escape(step.action)}</td><td>{escape(step.expected_result)}</td></tr>"
            for step in tc.steps
        )
        tags = "".join(f'<span class="tag">{escape(tag)}</span>' for tag in sorted(tc.tags))
        fields: List[str] = []
        for label, value in (
            ("Description", tc.description),
            ("Preconditions", tc.preconditions),
            ("Expected result", tc.expected_result),
            ("Postconditions", tc.postconditions),
            ("Test data", tc.test_data),
            ("Environment", tc.environment),
        ):
            if value:
                fields.append(f"<p><strong>{label}:</strong> {escape(value)}</p>")
        details = "\n".join(fields)

        type_value = escape(tc.type.value)
        priority = escape(tc.priority)
        return f"""<div class="test-case" id="{escape(tc.id)}" data-type="{type_value}" data-priority="{priority}">
<h3>{escape(tc.id)}: {escape(tc.title)}</h3>
<span class="badge">{escape(TYPE_LABELS.get(tc.type.value, tc.type.value))}</span><span class="badge priority-{priority}">{escape(PRIORITY_LABELS.get(tc.priority, tc.priority))}</span><span class="badge">{escape(tc.requirement_id)}</span>
{details}
<table>
<tr><th>#</th><th>Action</th><th>Expected</th></tr>
{steps}
</table>
<div>{tags}</div>
</div>"""
