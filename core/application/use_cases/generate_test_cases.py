"""
Use case: Generate test cases from extracted requirements.
"""
import time
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from core.domain.errors import GenerationError, OptionsValidationError
from core.domain.options import GenerationOptions
from core.domain.requirements import Requirements
from core.domain.test_case import TestCase
from core.interfaces.test_generator import ITestCaseBuilder
from core.services.id_sequence import IdSequence
from core.services.logger import get_logger
from core.application.use_cases.test_builders import DEFAULT_ENVIRONMENT, default_builders


OptionsInput = Union[GenerationOptions, Mapping[str, Any], None]


class GenerateTestCasesUseCase:
    """
    Test case synthesizer.

    One instance owns one id sequence: build a fresh instance per run when
    ids must start from TC_0001. Builders run in the order given, which
    only affects id assignment.
    """

    def __init__(
        self,
        builders: Optional[Sequence[ITestCaseBuilder]] = None,
        id_sequence: Optional[IdSequence] = None,
        default_options: Optional[GenerationOptions] = None,
        environment: str = DEFAULT_ENVIRONMENT
    ):
        """Initialize use case with dependencies.

        Args:
            builders: Category builders in id assignment order
            id_sequence: Id source for this run
            default_options: Values for options the caller leaves out
            environment: Environment name for cases without a fixed one
        """
        self.builders = tuple(builders) if builders is not None else default_builders(environment)
        self.ids = id_sequence or IdSequence()
        self.default_options = default_options or GenerationOptions()
        self._log = get_logger("synthesizer")

    def resolve_options(self, options: OptionsInput) -> GenerationOptions:
        """Validate caller options once, before any case is built.

        Raises:
            OptionsValidationError: If a value has the wrong shape
        """
        if isinstance(options, GenerationOptions):
            return options.validate()
        return GenerationOptions.from_dict(options, defaults=self.default_options)

    def execute(self, requirements: Requirements, options: OptionsInput = None) -> List[TestCase]:
        """Execute test case generation.

        Args:
            requirements: Extracted requirements aggregate
            options: GenerationOptions or a mapping of option values

        Returns:
            Ordered list of generated test cases

        Raises:
            OptionsValidationError: If options are invalid; nothing is generated
            GenerationError: If requirements is not a Requirements aggregate
        """
        try:
            resolved = self.resolve_options(options)
        except OptionsValidationError as e:
            self._log.warning("invalid_generation_options", field=e.field_name, error=str(e))
            raise
        if not isinstance(requirements, Requirements):
            raise GenerationError(
                f"Expected a Requirements aggregate, got {type(requirements).__name__}"
            )

        start = time.perf_counter()
        test_cases: List[TestCase] = []
        per_category: Dict[str, int] = {}

        for builder in self.builders:
            if not builder.is_applicable(requirements, resolved):
                continue
            built = builder.build(requirements, resolved, self.ids)
            per_category[builder.category.value] = per_category.get(builder.category.value, 0) + len(built)
            test_cases.extend(built)

        self._log.log_generation(
            num_test_cases=len(test_cases),
            per_category=per_category,
            duration_ms=(time.perf_counter() - start) * 1000,
            options=resolved.to_dict(),
        )
        return test_cases


# Alias used by callers that think of this as a component rather than a use case
TestCaseGenerator = GenerateTestCasesUseCase


def generate_test_cases(requirements: Requirements, options: OptionsInput = None) -> List[TestCase]:
    """Generate test cases with a fresh synthesizer, so ids start at TC_0001."""
    return GenerateTestCasesUseCase().execute(requirements, options)
