"""
PatternClassifier: Keyword-based requirement classification.

Assigns priorities and non-functional categories by literal,
case-insensitive substring containment over fixed keyword tables.
First match wins; tables are checked in declaration order.
"""
from typing import List, Optional, Protocol, Sequence, Tuple

from core.domain.requirements import NFRType, Priority


class IKeywordConfig(Protocol):
    """Protocol for keyword table overrides."""
    @property
    def high_priority_keywords(self) -> Sequence[str]: ...
    @property
    def low_priority_keywords(self) -> Sequence[str]: ...
    @property
    def nfr_type_keywords(self) -> Sequence[Tuple[NFRType, Sequence[str]]]: ...
    @property
    def input_validation_keywords(self) -> Sequence[str]: ...


class PatternClassifier:
    """Pure, total keyword classifiers with configurable tables."""

    DEFAULT_HIGH_PRIORITY_KEYWORDS = [
        '必须', '关键', '重要', '核心', 'critical', 'high', 'must'
    ]

    DEFAULT_LOW_PRIORITY_KEYWORDS = [
        '可选', '建议', '优化', 'optional', 'low', 'nice to have'
    ]

    # Checked in this order
    DEFAULT_NFR_TYPE_KEYWORDS: List[Tuple[NFRType, List[str]]] = [
        (NFRType.PERFORMANCE, ['性能', '响应', 'performance', 'response time', 'latency', 'throughput']),
        (NFRType.SECURITY, ['安全', '加密', 'security', 'encrypt']),
        (NFRType.USABILITY, ['可用性', '易用', 'usability', 'user-friendly']),
        (NFRType.RELIABILITY, ['可靠性', '稳定', 'reliability', 'availability', 'uptime']),
        (NFRType.COMPATIBILITY, ['兼容性', '兼容', 'compatibility', 'browser']),
    ]

    DEFAULT_INPUT_VALIDATION_KEYWORDS = [
        '输入', '录入', '填写', '提交', '表单',
        'input', 'enter', 'fill', 'submit', 'form'
    ]

    def __init__(self, keyword_config: Optional[IKeywordConfig] = None):
        """
        Initialize classifier with optional keyword overrides.

        Args:
            keyword_config: Replacement keyword tables
        """
        self._config = keyword_config

    @property
    def high_priority_keywords(self) -> Sequence[str]:
        if self._config:
            return self._config.high_priority_keywords
        return self.DEFAULT_HIGH_PRIORITY_KEYWORDS

    @property
    def low_priority_keywords(self) -> Sequence[str]:
        if self._config:
            return self._config.low_priority_keywords
        return self.DEFAULT_LOW_PRIORITY_KEYWORDS

    @property
    def nfr_type_keywords(self) -> Sequence[Tuple[NFRType, Sequence[str]]]:
        if self._config:
            return self._config.nfr_type_keywords
        return self.DEFAULT_NFR_TYPE_KEYWORDS

    @property
    def input_validation_keywords(self) -> Sequence[str]:
        if self._config:
            return self._config.input_validation_keywords
        return self.DEFAULT_INPUT_VALIDATION_KEYWORDS

    @staticmethod
    def contains_any(text: str, keywords: Sequence[str]) -> bool:
        """Case-insensitive literal substring check."""
        if not text:
            return False
        lowered = text.lower()
        return any(keyword.lower() in lowered for keyword in keywords)

    def classify_priority(self, text: str) -> Priority:
        """High keywords win over low keywords; otherwise medium."""
        if self.contains_any(text, self.high_priority_keywords):
            return Priority.HIGH
        if self.contains_any(text, self.low_priority_keywords):
            return Priority.LOW
        return Priority.MEDIUM

    def classify_nfr_type(self, text: str) -> NFRType:
        """First category whose keyword set matches; OTHER when none does."""
        for nfr_type, keywords in self.nfr_type_keywords:
            if self.contains_any(text, keywords):
                return nfr_type
        return NFRType.OTHER

    def requires_input_validation(self, text: str) -> bool:
        """True when the requirement mentions data entry."""
        return self.contains_any(text, self.input_validation_keywords)


_default_classifier = PatternClassifier()


def classify_priority(text: str) -> Priority:
    """Classify with the default keyword tables."""
    return _default_classifier.classify_priority(text)


def classify_nfr_type(text: str) -> NFRType:
    """Classify with the default keyword tables."""
    return _default_classifier.classify_nfr_type(text)
