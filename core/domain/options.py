"""
Generation options for the test case synthesizer.

Options arrive as a mapping from the transport layer (camelCase keys) or
from a YAML profile (snake_case keys). Both spellings are accepted and
unrecognised keys are ignored.
"""
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from core.domain.errors import OptionsValidationError
from core.domain.requirements import Priority


# wire key -> dataclass field
_FIELD_ALIASES = {
    "priority": "priority",
    "includeBoundaryTests": "include_boundary_tests",
    "includeNegativeTests": "include_negative_tests",
    "includePerformanceTests": "include_performance_tests",
    "includeSecurityTests": "include_security_tests",
    "include_boundary_tests": "include_boundary_tests",
    "include_negative_tests": "include_negative_tests",
    "include_performance_tests": "include_performance_tests",
    "include_security_tests": "include_security_tests",
}

_FLAG_FIELDS = (
    "include_boundary_tests",
    "include_negative_tests",
    "include_performance_tests",
    "include_security_tests",
)


@dataclass(frozen=True)
class GenerationOptions:
    """Which optional categories to generate and the fallback priority."""
    priority: str = Priority.MEDIUM.value
    include_boundary_tests: bool = True
    include_negative_tests: bool = False
    include_performance_tests: bool = False
    include_security_tests: bool = False

    def validate(self) -> 'GenerationOptions':
        """Check every field's shape.

        Raises:
            OptionsValidationError: On the first invalid field
        """
        if not isinstance(self.priority, str):
            raise OptionsValidationError("priority", self.priority, "one of high, medium, low")
        if self.priority.lower() not in {p.value for p in Priority}:
            raise OptionsValidationError("priority", self.priority, "one of high, medium, low")
        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise OptionsValidationError(name, value, "a boolean")
        return self

    @property
    def resolved_priority(self) -> str:
        return self.priority.lower()

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[str, Any]],
        defaults: Optional['GenerationOptions'] = None
    ) -> 'GenerationOptions':
        """Build options from a loosely-typed mapping.

        Values are not coerced: a string "false" for a flag is rejected by
        validate() rather than silently treated as truthy. None means the
        field was not given.

        Args:
            data: Mapping with camelCase or snake_case keys
            defaults: Options supplying values for absent keys

        Returns:
            Validated GenerationOptions

        Raises:
            OptionsValidationError: If data is not a mapping or a value is invalid
        """
        base = defaults or cls()
        if data is None:
            return base.validate()
        if not isinstance(data, Mapping):
            raise OptionsValidationError("options", data, "a mapping")

        overrides: Dict[str, Any] = {}
        for key, value in data.items():
            field_name = _FIELD_ALIASES.get(key)
            if field_name is None or value is None:
                continue
            overrides[field_name] = value

        return replace(base, **overrides).validate()

    @classmethod
    def from_yaml(
        cls,
        path: Union[str, Path],
        defaults: Optional['GenerationOptions'] = None
    ) -> 'GenerationOptions':
        """Load options from a YAML profile.

        The profile may hold the keys at top level or under a
        ``generation:`` section.
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, Mapping) and isinstance(data.get("generation"), Mapping):
            data = data["generation"]
        return cls.from_dict(data, defaults=defaults)

    @classmethod
    def all_enabled(cls, priority: str = Priority.MEDIUM.value) -> 'GenerationOptions':
        """Options with every optional category turned on."""
        return cls(
            priority=priority,
            include_boundary_tests=True,
            include_negative_tests=True,
            include_performance_tests=True,
            include_security_tests=True,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority,
            "includeBoundaryTests": self.include_boundary_tests,
            "includeNegativeTests": self.include_negative_tests,
            "includePerformanceTests": self.include_performance_tests,
            "includeSecurityTests": self.include_security_tests,
        }
