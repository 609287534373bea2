"""
Interface for category test case builders.
"""
from abc import ABC, abstractmethod
from typing import List

from core.domain.options import GenerationOptions
from core.domain.requirements import Requirements
from core.domain.test_case import TestCase, TestCategory
from core.services.id_sequence import IdSequence


class ITestCaseBuilder(ABC):
    """Builds the test cases of one category from a Requirements aggregate."""

    category: TestCategory

    @abstractmethod
    def is_applicable(self, requirements: Requirements, options: GenerationOptions) -> bool:
        """Check if this category runs for the given input.

        Args:
            requirements: Extracted requirements
            options: Validated generation options

        Returns:
            True if the builder should contribute cases
        """
        pass

    @abstractmethod
    def build(
        self,
        requirements: Requirements,
        options: GenerationOptions,
        ids: IdSequence
    ) -> List[TestCase]:
        """Generate this category's test cases.

        Args:
            requirements: Extracted requirements
            options: Validated generation options
            ids: Id sequence of the current run; every case consumes one id

        Returns:
            Test cases in generation order
        """
        pass
