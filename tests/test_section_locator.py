"""
Unit tests for SectionLocator.

Tests heading detection and section boundaries.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.services import SectionLocator, locate_section


MARKDOWN_DOC = """# Shop

## Functional Requirements
1. Users can browse products
2. Users can pay by card

## Constraints
- Runs on Linux servers
"""


class TestSectionLocator:
    """Test locating sections by heading synonyms."""

    def setup_method(self):
        """Set up test fixtures."""
        self.locator = SectionLocator()

    def test_markdown_heading(self):
        """Test section under a markdown heading ends at the next heading."""
        section = self.locator.locate(MARKDOWN_DOC, ["Functional Requirements"])
        assert section == "1. Users can browse products\n2. Users can pay by card"

    def test_last_section_runs_to_end(self):
        """Test last section extends to end of document."""
        assert self.locator.locate(MARKDOWN_DOC, ["Constraints"]) == "- Runs on Linux servers"

    def test_colon_heading_keeps_same_line_text(self):
        """Test text after the heading colon belongs to the section."""
        doc = "验收标准：页面加载完成后显示列表\n"
        assert self.locator.locate(doc, ["验收标准"]) == "页面加载完成后显示列表"

    def test_missing_heading_returns_none(self):
        """Test None is returned when no synonym is found."""
        assert self.locator.locate(MARKDOWN_DOC, ["Business Rules"]) is None

    def test_empty_document(self):
        """Test empty document has no sections."""
        assert self.locator.locate("", ["Constraints"]) is None

    def test_heading_must_start_a_line(self):
        """Test synonym inside running text is not a heading."""
        doc = "The Functional Requirements: are listed elsewhere\n"
        assert self.locator.locate(doc, ["Functional Requirements"]) is None

    def test_case_insensitive(self):
        """Test heading match ignores case."""
        doc = "FUNCTIONAL REQUIREMENTS:\n- Users can browse products\n"
        assert self.locator.locate(doc, ["Functional Requirements"]) == "- Users can browse products"

    def test_bold_heading(self):
        """Test markdown bold around the heading."""
        doc = "**Functional Requirements:**\n- Users can browse products\n"
        assert self.locator.locate(doc, ["Functional Requirements"]) == "- Users can browse products"

    def test_synonyms_tried_in_order(self):
        """Test later synonyms are tried when earlier ones are absent."""
        doc = "Features:\n- Users can browse products\n"
        assert self.locator.locate(doc, ["功能要求", "Features"]) == "- Users can browse products"

    def test_cjk_numeral_headings(self):
        """Test CJK numeral markers end a section."""
        doc = "一、功能需求\n1. 用户可以登录系统\n二、非功能需求\n1. 系统响应时间小于两秒\n"
        assert self.locator.locate(doc, ["功能需求"]) == "1. 用户可以登录系统"
        assert self.locator.locate(doc, ["非功能需求"]) == "1. 系统响应时间小于两秒"

    def test_multi_level_numbered_headings(self):
        """Test multi-level numbered headings end a section."""
        doc = "3.1 Functional Requirements\n1. Users can browse products\n3.2 Performance\n- Pages load quickly\n"
        assert self.locator.locate(doc, ["Functional Requirements"]) == "1. Users can browse products"

    def test_numbered_items_do_not_end_section(self):
        """Test plain numbered items stay inside the section."""
        doc = "功能需求:\n1. 用户可以登录系统\n2. 用户可以注销"
        assert self.locator.locate(doc, ["功能需求"]) == "1. 用户可以登录系统\n2. 用户可以注销"

    def test_numbered_item_ending_with_colon_stays_in_section(self):
        """Test an item introducing sub-bullets does not end the section."""
        doc = (
            "## Functional Requirements\n"
            "1. The system must support the following payment methods:\n"
            "- credit card payments\n"
            "2. Users can view order history\n"
        )
        assert self.locator.locate(doc, ["Functional Requirements"]) == (
            "1. The system must support the following payment methods:\n"
            "- credit card payments\n"
            "2. Users can view order history"
        )

    def test_unknown_label_line_stays_in_section(self):
        """Test a label line that names no section is section content."""
        doc = "Functional Requirements:\n- Users can browse products\nNotes:\n- Drafted in March\n"
        assert self.locator.locate(doc, ["Functional Requirements"]) == (
            "- Users can browse products\nNotes:\n- Drafted in March"
        )


class TestKnownHeadings:
    """Test known section names acting as boundaries."""

    def test_numbered_known_heading_ends_section(self):
        """Test a numbered known heading starts a new section."""
        locator = SectionLocator(known_headings=["Functional Requirements", "Business Rules"])
        doc = (
            "1. Functional Requirements\n"
            "1. Users can browse products\n"
            "2. Business Rules\n"
            "- Orders ship in two days\n"
        )
        assert locator.locate(doc, ["Functional Requirements"]) == "1. Users can browse products"
        assert locator.locate(doc, ["Business Rules"]) == "- Orders ship in two days"

    def test_without_known_headings_numbered_heading_is_an_item(self):
        """Test a numbered heading is just an item when the name is unknown."""
        doc = "Functional Requirements:\n1. Users can browse products\n2. Business Rules\n"
        section = SectionLocator().locate(doc, ["Functional Requirements"])
        assert section == "1. Users can browse products\n2. Business Rules"

    def test_known_label_line_ends_section(self):
        """Test a known heading written as a label line ends the section."""
        locator = SectionLocator(known_headings=["Functional Requirements", "Notes"])
        doc = "Functional Requirements:\n- Users can browse products\nNotes:\n- Drafted in March\n"
        assert locator.locate(doc, ["Functional Requirements"]) == "- Users can browse products"

    def test_bold_known_label_ends_section(self):
        """Test bold known heading with a colon ends the section."""
        locator = SectionLocator(known_headings=["Constraints", "Assumptions"])
        doc = "Constraints:\n- Runs on Linux servers\n**Assumptions:**\n- Users have modern devices\n"
        assert locator.locate(doc, ["Constraints"]) == "- Runs on Linux servers"

    def test_empty_section_returns_empty_string(self):
        """Test a heading directly followed by another heading gives ''."""
        locator = SectionLocator(known_headings=["Constraints", "Assumptions"])
        doc = "Constraints:\nAssumptions:\n- Users have modern devices\n"
        assert locator.locate(doc, ["Constraints"]) == ""


def test_locate_section_helper():
    """Test module-level helper uses a default locator."""
    assert locate_section(MARKDOWN_DOC, ["Constraints"]) == "- Runs on Linux servers"
