"""
Unit tests for PatternClassifier.

Tests keyword-based priority and non-functional type classification.
"""
import pytest
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.domain import NFRType, Priority
from core.services import PatternClassifier, classify_nfr_type, classify_priority


class TestPriorityClassification:
    """Test priority keyword tables."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = PatternClassifier()

    @pytest.mark.parametrize("text", [
        "用户必须登录后才能下单",
        "核心支付流程",
        "Critical: payments are captured",
        "The system MUST keep an audit trail",
    ])
    def test_high_keywords(self, text):
        """Test high priority keywords."""
        assert self.classifier.classify_priority(text) == Priority.HIGH

    @pytest.mark.parametrize("text", [
        "可选的主题切换",
        "Optional dark mode",
        "A nice to have export",
    ])
    def test_low_keywords(self, text):
        """Test low priority keywords."""
        assert self.classifier.classify_priority(text) == Priority.LOW

    def test_medium_when_nothing_matches(self):
        """Test medium priority when no keyword matches."""
        assert self.classifier.classify_priority("用户可以注销") == Priority.MEDIUM
        assert self.classifier.classify_priority("") == Priority.MEDIUM

    def test_high_wins_over_low(self):
        """Test high keywords are checked before low ones."""
        assert self.classifier.classify_priority("Critical but optional") == Priority.HIGH

    def test_literal_substring_matching(self):
        """Test keywords match as plain substrings."""
        # "allow" contains "low"
        assert self.classifier.classify_priority("Admins allow guests") == Priority.LOW


class TestNFRTypeClassification:
    """Test non-functional type keyword tables."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = PatternClassifier()

    @pytest.mark.parametrize("text,expected", [
        ("系统响应时间小于2秒", NFRType.PERFORMANCE),
        ("Page response time under 2 seconds", NFRType.PERFORMANCE),
        ("数据传输必须加密", NFRType.SECURITY),
        ("Passwords are encrypted at rest", NFRType.SECURITY),
        ("界面易用", NFRType.USABILITY),
        ("99.9% uptime per month", NFRType.RELIABILITY),
        ("Works in every major browser", NFRType.COMPATIBILITY),
        ("Support dark mode theme", NFRType.OTHER),
    ])
    def test_types(self, text, expected):
        """Test each NFR type keyword table."""
        assert self.classifier.classify_nfr_type(text) == expected

    def test_first_table_wins(self):
        """Test first matching NFR table wins."""
        assert self.classifier.classify_nfr_type("Security scan latency") == NFRType.PERFORMANCE

    def test_case_insensitive(self):
        """Test keyword matching ignores case."""
        assert self.classifier.classify_nfr_type("SECURITY AUDIT") == NFRType.SECURITY


class TestInputValidationKeywords:
    """Test detection of data entry requirements."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = PatternClassifier()

    def test_english_keywords(self):
        """Test English input validation keywords."""
        assert self.classifier.requires_input_validation("Users can submit an order")
        assert self.classifier.requires_input_validation("Fill the shipping address")

    def test_cjk_keywords(self):
        """Test CJK input validation keywords."""
        assert self.classifier.requires_input_validation("用户填写注册表单")

    def test_no_keywords(self):
        """Test text without input keywords."""
        assert not self.classifier.requires_input_validation("Users can view the dashboard")


@dataclass
class CustomKeywords:
    high_priority_keywords: List[str] = field(default_factory=lambda: ["p0"])
    low_priority_keywords: List[str] = field(default_factory=lambda: ["p3"])
    nfr_type_keywords: List[Tuple[NFRType, List[str]]] = field(
        default_factory=lambda: [(NFRType.USABILITY, ["ux"])]
    )
    input_validation_keywords: List[str] = field(default_factory=lambda: ["upload"])


class TestCustomKeywordConfig:
    """Test keyword table overrides."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = PatternClassifier(CustomKeywords())

    def test_custom_tables_replace_defaults(self):
        """Test injected keyword config replaces the defaults."""
        assert self.classifier.classify_priority("P0 checkout") == Priority.HIGH
        assert self.classifier.classify_priority("critical checkout") == Priority.MEDIUM
        assert self.classifier.classify_nfr_type("UX review") == NFRType.USABILITY
        assert self.classifier.classify_nfr_type("security review") == NFRType.OTHER
        assert self.classifier.requires_input_validation("upload avatar")


def test_module_level_helpers():
    """Test module-level classification helpers."""
    assert classify_priority("关键业务") == Priority.HIGH
    assert classify_nfr_type("系统稳定运行") == NFRType.RELIABILITY
