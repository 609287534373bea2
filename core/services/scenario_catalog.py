"""
Scenario Template Library

Fixed catalogs of canned scenarios used to generate category tests that do
not depend on document content (boundary, negative, performance,
security), plus the step templates for non-functional requirements.

Every scenario kind is a closed enum and every catalog must cover all
members of its enum; this is checked when the module is imported.
Lookups by raw string key (e.g. from an external catalog) fall back to a
single generic step.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, Optional, Sequence, Tuple, Type

from core.domain.requirements import NFRType


StepPair = Tuple[str, str]  # (action, expected result)


class BoundaryScenario(str, Enum):
    MIN = "min-boundary"
    MAX = "max-boundary"
    NULL = "null-boundary"
    LENGTH = "length-boundary"


class NegativeScenario(str, Enum):
    INVALID_INPUT = "invalid-input"
    UNAUTHORIZED = "unauthorized"
    NETWORK_ERROR = "network-error"
    CONCURRENCY = "concurrency"


class PerformanceScenario(str, Enum):
    RESPONSE_TIME = "response-time"
    CONCURRENT_USERS = "concurrent-users"
    LOAD_TEST = "load-test"
    STRESS_TEST = "stress-test"


class SecurityScenario(str, Enum):
    SQL_INJECTION = "sql-injection"
    XSS = "xss"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    ENCRYPTION = "encryption"


@dataclass(frozen=True)
class Scenario:
    """One canned scenario: display name, type key and step template."""
    kind: Enum
    name: str
    steps: Tuple[StepPair, ...]
    test_data: str
    metric: Optional[str] = None

    @property
    def key(self) -> str:
        return self.kind.value


class ScenarioCatalog:
    """Ordered, exhaustive catalog of scenarios for one test category."""

    def __init__(
        self,
        category: str,
        kinds: Type[Enum],
        scenarios: Sequence[Scenario],
        fallback_step: Callable[[str], StepPair],
        fallback_test_data: str
    ):
        missing = [k.value for k in kinds if k not in {s.kind for s in scenarios}]
        if missing:
            raise RuntimeError(f"{category} catalog has no template for: {', '.join(missing)}")
        self.category = category
        self.kinds = kinds
        self._scenarios = tuple(scenarios)
        self._by_key: Dict[str, Scenario] = {s.key: s for s in self._scenarios}
        self._fallback_step = fallback_step
        self._fallback_test_data = fallback_test_data

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def get(self, key: str) -> Optional[Scenario]:
        return self._by_key.get(key)

    def steps_for(self, key: str, name: str) -> Tuple[StepPair, ...]:
        """Step template for a scenario key; unknown keys get one generic step."""
        scenario = self.get(key)
        if scenario is None:
            return (self._fallback_step(name),)
        return scenario.steps

    def test_data_for(self, key: str) -> str:
        scenario = self.get(key)
        return scenario.test_data if scenario else self._fallback_test_data


BOUNDARY_CATALOG = ScenarioCatalog(
    category="boundary",
    kinds=BoundaryScenario,
    scenarios=[
        Scenario(
            BoundaryScenario.MIN, "Minimum value boundary",
            (
                ("Enter the minimum allowed value", "The system accepts the input"),
                ("Enter a value below the minimum", "The system rejects the input and shows an error message"),
            ),
            "Minimum value and values below the minimum",
        ),
        Scenario(
            BoundaryScenario.MAX, "Maximum value boundary",
            (
                ("Enter the maximum allowed value", "The system accepts the input"),
                ("Enter a value above the maximum", "The system rejects the input and shows an error message"),
            ),
            "Maximum value and values above the maximum",
        ),
        Scenario(
            BoundaryScenario.NULL, "Empty value handling",
            (
                ("Enter an empty or null value", "The system handles the empty value correctly"),
            ),
            "Empty, null and undefined values",
        ),
        Scenario(
            BoundaryScenario.LENGTH, "Overlong input",
            (
                ("Enter an overlong string", "The system handles the overlong input correctly"),
            ),
            "Overlong strings and boundary-length data",
        ),
    ],
    fallback_step=lambda name: (f"Run the {name} test", "The system handles the boundary condition correctly"),
    fallback_test_data="Boundary value test data",
)

NEGATIVE_CATALOG = ScenarioCatalog(
    category="negative",
    kinds=NegativeScenario,
    scenarios=[
        Scenario(
            NegativeScenario.INVALID_INPUT, "Invalid input",
            (
                ("Enter data in an invalid format", "The system shows a format error message"),
                ("Enter malicious code", "The system filters out the malicious code"),
            ),
            "Invalid formats, malicious code and special characters",
        ),
        Scenario(
            NegativeScenario.UNAUTHORIZED, "Insufficient permissions",
            (
                ("Attempt access as a user without permission",
                 "The system denies access and reports insufficient permissions"),
            ),
            "User account without permissions",
        ),
        Scenario(
            NegativeScenario.NETWORK_ERROR, "Network failure",
            (
                ("Simulate a network outage", "The system shows a network error message"),
                ("Restore the network connection", "The system reconnects or prompts the user to retry"),
            ),
            "Network failure simulation data",
        ),
        Scenario(
            NegativeScenario.CONCURRENCY, "Concurrent modification",
            (
                ("Have several users modify the same resource at the same time",
                 "The system resolves the concurrency conflict correctly"),
            ),
            "Concurrent operation test data",
        ),
    ],
    fallback_step=lambda name: (f"Run the {name} scenario", "The system handles the error condition correctly"),
    fallback_test_data="Error condition test data",
)


def _performance_steps(name: str, metric: str) -> Tuple[StepPair, ...]:
    return (
        ("Start the performance monitoring tools", "Monitoring tools are running"),
        (f"Run the {name} scenario", "The test load is applied as planned"),
        ("Collect the performance data", "Performance data is collected"),
        ("Analyze the performance metrics", f"Performance metrics meet the target: {metric}"),
    )


def _performance_scenario(kind: PerformanceScenario, name: str, metric: str) -> Scenario:
    return Scenario(
        kind, name, _performance_steps(name, metric),
        f"High-volume test data and load profile for the {name.lower()} test",
        metric=metric,
    )


PERFORMANCE_CATALOG = ScenarioCatalog(
    category="performance",
    kinds=PerformanceScenario,
    scenarios=[
        _performance_scenario(PerformanceScenario.RESPONSE_TIME, "Response time", "response time < 2 seconds"),
        _performance_scenario(PerformanceScenario.CONCURRENT_USERS, "Concurrent users", "supports 100 concurrent users"),
        _performance_scenario(PerformanceScenario.LOAD_TEST, "Load test", "system runs stably under sustained load"),
        _performance_scenario(PerformanceScenario.STRESS_TEST, "Stress test", "system degrades gracefully"),
    ],
    fallback_step=lambda name: (f"Run the {name} scenario", "Performance metrics meet the target"),
    fallback_test_data="Performance test data and load profile",
)

SECURITY_CATALOG = ScenarioCatalog(
    category="security",
    kinds=SecurityScenario,
    scenarios=[
        Scenario(
            SecurityScenario.SQL_INJECTION, "SQL injection",
            (
                ("Enter SQL injection payloads into input fields",
                 "The system filters or escapes the malicious SQL"),
            ),
            "SQL injection payloads for every input field",
        ),
        Scenario(
            SecurityScenario.XSS, "Cross-site scripting (XSS)",
            (
                ("Enter an XSS attack script", "The system filters or escapes the malicious script"),
            ),
            "Script injection payloads and encoded variants",
        ),
        Scenario(
            SecurityScenario.AUTHENTICATION, "Authentication",
            (
                ("Attempt to log in with a weak password", "The system rejects the weak password"),
                ("Attempt a brute-force login", "The system activates its brute-force protection"),
            ),
            "Weak passwords and credential lists for brute-force attempts",
        ),
        Scenario(
            SecurityScenario.AUTHORIZATION, "Authorization",
            (
                ("Attempt to access resources beyond the user's privileges",
                 "The system rejects the privilege escalation"),
            ),
            "Accounts with different roles and protected resource URLs",
        ),
        Scenario(
            SecurityScenario.ENCRYPTION, "Data encryption",
            (
                ("Inspect the encryption of data in transit", "Sensitive data is transmitted encrypted"),
            ),
            "Sensitive records and a traffic capture setup",
        ),
    ],
    fallback_step=lambda name: (f"Run the {name} test", "Security protections work as intended"),
    fallback_test_data="Security test data and attack vectors",
)


# Non-functional requirement templates, selected by NFR type.
# Types without an entry (compatibility, other) use the default template.
NFR_STEP_TEMPLATES: Dict[NFRType, Tuple[StepPair, ...]] = {
    NFRType.PERFORMANCE: (("Run the performance test", "Performance metrics meet the target"),),
    NFRType.SECURITY: (("Run the security test", "Security requirements are met"),),
    NFRType.USABILITY: (("Run the usability test", "The user experience is satisfactory"),),
    NFRType.RELIABILITY: (("Run the reliability test", "The system is stable and reliable"),),
}

NFR_PRECONDITIONS: Dict[NFRType, str] = {
    NFRType.PERFORMANCE: "Performance test environment is configured and monitoring tools are ready",
    NFRType.SECURITY: "Security test environment is isolated and security tools are configured",
    NFRType.USABILITY: "Usability test environment and test participants are ready",
    NFRType.RELIABILITY: "Reliability test environment and long-running test plan are ready",
}

DEFAULT_NFR_PRECONDITION = "Test environment is ready and the required tools are configured"


def nfr_steps(nfr_type: NFRType, description: str) -> Tuple[StepPair, ...]:
    """Step template for a non-functional requirement."""
    template = NFR_STEP_TEMPLATES.get(nfr_type)
    if template is None:
        return ((f"Verify {description}", "The non-functional requirement is met"),)
    return template


def nfr_precondition(nfr_type: NFRType) -> str:
    return NFR_PRECONDITIONS.get(nfr_type, DEFAULT_NFR_PRECONDITION)
