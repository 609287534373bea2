"""
Test Case domain entity.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Tuple
from enum import Enum


class TestType(str, Enum):
    """Test case types."""
    __test__ = False
    FUNCTIONAL = "functional"
    ACCEPTANCE = "acceptance"
    BOUNDARY = "boundary"
    NEGATIVE = "negative"
    PERFORMANCE = "performance"
    SECURITY = "security"
    NON_FUNCTIONAL = "non-functional"


class TestCategory(str, Enum):
    """Generator category that produced a test case."""
    __test__ = False
    FUNCTIONAL = "functional"
    USER_STORY = "user-story"
    ACCEPTANCE = "acceptance"
    BOUNDARY = "boundary"
    NEGATIVE = "negative"
    PERFORMANCE = "performance"
    SECURITY = "security"
    NON_FUNCTIONAL = "non-functional"


@dataclass(frozen=True)
class TestStep:
    """Represents a single test step."""
    __test__ = False
    step: int
    action: str
    expected_result: str

    def to_dict(self) -> Dict[str, object]:
        return {"step": self.step, "action": self.action, "expectedResult": self.expected_result}


def number_steps(steps: Iterable[Tuple[str, str]]) -> Tuple[TestStep, ...]:
    """Turn (action, expected) pairs into steps numbered 1..n."""
    return tuple(
        TestStep(step=index, action=action, expected_result=expected)
        for index, (action, expected) in enumerate(steps, start=1)
    )


@dataclass(frozen=True)
class TestCase:
    """Self-contained test case record."""
    __test__ = False
    id: str
    title: str
    description: str
    type: TestType
    priority: str
    requirement_id: str
    preconditions: str
    steps: Tuple[TestStep, ...]
    expected_result: str
    postconditions: str
    test_data: str
    environment: str
    category: TestCategory
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate test case after initialization."""
        if not self.id:
            raise ValueError("Test case id cannot be empty")
        if not self.title:
            raise ValueError("Test case title cannot be empty")
        if not self.steps:
            raise ValueError("Test case must have at least one step")
        if not isinstance(self.steps, tuple):
            object.__setattr__(self, "steps", tuple(self.steps))
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))
        numbers = [s.step for s in self.steps]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"Test case {self.id} steps must be numbered 1..n, got {numbers}")

    @property
    def number(self) -> int:
        """Numeric suffix of the id (TC_0042 -> 42)."""
        return int(self.id.rsplit("_", 1)[-1])

    def to_dict(self) -> Dict[str, object]:
        """Wire representation consumed by renderers and persistence."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "priority": self.priority,
            "requirementId": self.requirement_id,
            "preconditions": self.preconditions,
            "steps": [s.to_dict() for s in self.steps],
            "expectedResult": self.expected_result,
            "postconditions": self.postconditions,
            "testData": self.test_data,
            "environment": self.environment,
            "category": self.category.value,
            "tags": sorted(self.tags),
        }


def to_dicts(test_cases: Iterable[TestCase]) -> List[Dict[str, object]]:
    """Convert test cases to their wire dictionaries, preserving order."""
    return [tc.to_dict() for tc in test_cases]
