"""
Requirement domain entities.

A Requirements aggregate is built once per document by the extractor and
is never mutated afterwards.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Priority(str, Enum):
    """Requirement and test case priority levels."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NFRType(str, Enum):
    """Non-functional requirement categories."""
    PERFORMANCE = "performance"
    SECURITY = "security"
    USABILITY = "usability"
    RELIABILITY = "reliability"
    COMPATIBILITY = "compatibility"
    OTHER = "other"


def format_requirement_id(prefix: str, number: int) -> str:
    """Format a 1-based requirement id, e.g. ("FR", 7) -> "FR_007"."""
    if number < 1:
        raise ValueError(f"Requirement numbers are 1-based, got {number}")
    return f"{prefix}_{number:03d}"


@dataclass(frozen=True)
class RequirementItem:
    """Plain {id, description} entry (acceptance criteria, rules, constraints, assumptions)."""
    id: str
    description: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("Requirement id cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "description": self.description}


@dataclass(frozen=True)
class FunctionalRequirement:
    """Functional requirement extracted from a numbered or bulleted item."""
    id: str
    description: str
    priority: Optional[Priority] = Priority.MEDIUM
    category: str = "functional"

    def __post_init__(self):
        if not self.id:
            raise ValueError("Requirement id cannot be empty")
        if self.priority is not None and not isinstance(self.priority, Priority):
            object.__setattr__(self, "priority", Priority(self.priority))

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "description": self.description,
            "priority": self.priority.value if self.priority else None,
            "category": self.category,
        }


@dataclass(frozen=True)
class NonFunctionalRequirement:
    """Non-functional requirement with its classified type."""
    id: str
    description: str
    type: NFRType = NFRType.OTHER
    category: str = "non-functional"

    def __post_init__(self):
        if not self.id:
            raise ValueError("Requirement id cannot be empty")
        if not isinstance(self.type, NFRType):
            object.__setattr__(self, "type", NFRType(self.type))

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "description": self.description,
            "type": self.type.value,
            "category": self.category,
        }


@dataclass(frozen=True)
class UserStory:
    """'As a <role>, I want <goal>, so that <benefit>' story."""
    id: str
    role: str
    goal: str
    benefit: str
    priority: Priority = Priority.MEDIUM

    def __post_init__(self):
        if not self.id:
            raise ValueError("User story id cannot be empty")
        if not isinstance(self.priority, Priority):
            object.__setattr__(self, "priority", Priority(self.priority))

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "role": self.role,
            "goal": self.goal,
            "benefit": self.benefit,
            "priority": self.priority.value,
        }


@dataclass(frozen=True)
class Requirements:
    """All requirement-like entities extracted from one document."""
    title: str
    description: str
    functional_requirements: Tuple[FunctionalRequirement, ...] = field(default_factory=tuple)
    non_functional_requirements: Tuple[NonFunctionalRequirement, ...] = field(default_factory=tuple)
    user_stories: Tuple[UserStory, ...] = field(default_factory=tuple)
    acceptance_criteria: Tuple[RequirementItem, ...] = field(default_factory=tuple)
    business_rules: Tuple[RequirementItem, ...] = field(default_factory=tuple)
    constraints: Tuple[RequirementItem, ...] = field(default_factory=tuple)
    assumptions: Tuple[RequirementItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists from callers but store immutable tuples
        for name in (
            "functional_requirements", "non_functional_requirements", "user_stories",
            "acceptance_criteria", "business_rules", "constraints", "assumptions",
        ):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def is_empty(self) -> bool:
        """True when no requirement entity of any kind was found."""
        return not any(self.counts().values())

    def counts(self) -> Dict[str, int]:
        """Number of entities per sequence, keyed by wire field name."""
        return {
            "functionalRequirements": len(self.functional_requirements),
            "nonFunctionalRequirements": len(self.non_functional_requirements),
            "userStories": len(self.user_stories),
            "acceptanceCriteria": len(self.acceptance_criteria),
            "businessRules": len(self.business_rules),
            "constraints": len(self.constraints),
            "assumptions": len(self.assumptions),
        }

    def to_dict(self) -> Dict[str, object]:
        """Wire representation with camelCase field names."""
        return {
            "title": self.title,
            "description": self.description,
            "functionalRequirements": [r.to_dict() for r in self.functional_requirements],
            "nonFunctionalRequirements": [r.to_dict() for r in self.non_functional_requirements],
            "userStories": [s.to_dict() for s in self.user_stories],
            "acceptanceCriteria": [i.to_dict() for i in self.acceptance_criteria],
            "businessRules": [i.to_dict() for i in self.business_rules],
            "constraints": [i.to_dict() for i in self.constraints],
            "assumptions": [i.to_dict() for i in self.assumptions],
        }

    @classmethod
    def empty(cls, title: str = "Untitled Project", description: str = "") -> 'Requirements':
        """Aggregate with no entities."""
        return cls(title=title, description=description)


def summarize(requirements: Requirements) -> List[str]:
    """Human readable one-line-per-sequence summary."""
    lines = [f"Title: {requirements.title}", f"Description: {requirements.description}"]
    for name, count in requirements.counts().items():
        lines.append(f"  {name}: {count}")
    return lines
