"""
Unit tests for the regex list item strategies.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.interfaces import IListItemExtractor
from core.services import (
    BulletItemExtractor,
    ChainedItemExtractor,
    CombinedItemExtractor,
    NumberedItemExtractor,
)


class TestNumberedItemExtractor:
    """Test numbered list items."""

    def setup_method(self):
        """Set up test fixtures."""
        self.extractor = NumberedItemExtractor()

    def test_marker_styles(self):
        """Test numbered marker styles."""
        text = "1. 用户可以登录系统\n2) Users can browse\n3、用户可以注销系统"
        assert self.extractor.extract(text) == ["用户可以登录系统", "Users can browse", "用户可以注销系统"]

    def test_stops_at_cjk_sentence_end(self):
        """Test item text stops at a CJK sentence terminator."""
        assert self.extractor.extract("1. 用户可以登录系统。然后跳转首页") == ["用户可以登录系统"]

    def test_short_items_dropped(self):
        """Test items below the minimum length are dropped."""
        assert self.extractor.extract("1. 注销\n2. abc de") == ["abc de"]

    def test_marker_must_start_a_line(self):
        """Test markers in the middle of a line are ignored."""
        assert self.extractor.extract("See item 1. for the details") == []

    def test_empty_text(self):
        """Test empty text gives no items."""
        assert self.extractor.extract("") == []

    def test_custom_min_length(self):
        """Test custom minimum item length."""
        assert NumberedItemExtractor(min_length=2).extract("1. 注销") == ["注销"]


class TestBulletItemExtractor:
    """Test bullet list items."""

    def setup_method(self):
        """Set up test fixtures."""
        self.extractor = BulletItemExtractor()

    def test_marker_styles(self):
        """Test bullet marker styles."""
        text = "- Users can browse products\n* Admins can ban users\n• 管理员可以导出报表"
        assert self.extractor.extract(text) == [
            "Users can browse products",
            "Admins can ban users",
            "管理员可以导出报表",
        ]

    def test_indented_bullets(self):
        """Test indented bullets are matched."""
        assert self.extractor.extract("  - Nested item text") == ["Nested item text"]

    def test_ignores_numbered_items(self):
        """Test bullet strategy skips numbered items."""
        assert self.extractor.extract("1. Numbered requirement") == []


class TestCompositeExtractors:
    """Test combined and chained strategies."""

    TEXT = "- Bullet requirement one\n1. Numbered requirement two"

    def test_combined_keeps_document_order(self):
        """Test combined strategy keeps document order."""
        assert CombinedItemExtractor().extract(self.TEXT) == [
            "Bullet requirement one",
            "Numbered requirement two",
        ]

    def test_chained_runs_strategies_in_turn(self):
        """Test chained strategies run one after the other."""
        chained = ChainedItemExtractor(NumberedItemExtractor(), BulletItemExtractor())
        assert chained.extract(self.TEXT) == [
            "Numbered requirement two",
            "Bullet requirement one",
        ]

    def test_chained_requires_extractors(self):
        """Test chained extractor needs at least one strategy."""
        with pytest.raises(ValueError):
            ChainedItemExtractor()

    def test_strategies_implement_interface(self):
        """Test strategies implement IListItemExtractor."""
        assert isinstance(CombinedItemExtractor(), IListItemExtractor)
        assert isinstance(ChainedItemExtractor(BulletItemExtractor()), IListItemExtractor)
