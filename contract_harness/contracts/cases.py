"""Contract case table and registration.

A ``ContractCase`` couples an ``EndpointDescriptor`` with what the response
must look like and with reporting metadata. Cases are collected in a
``CaseRegistry`` which keeps declaration order so test ids stay stable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .assertions import Check, MessageKind, assert_error_shape, assert_status, assert_success_shape
from .descriptor import EndpointDescriptor
from .envelope import ContractOutcome


class Severity(Enum):
    """Reporting severity levels."""
    BLOCKER = "blocker"
    CRITICAL = "critical"
    NORMAL = "normal"
    MINOR = "minor"
    TRIVIAL = "trivial"


@dataclass(frozen=True)
class CaseMetadata:
    """Reporting annotations; they never change how a case executes."""

    feature: str
    title: str
    severity: Severity = Severity.NORMAL
    epic: Optional[str] = None

    def as_properties(self) -> Dict[str, str]:
        """Flatten into string properties for report tools (e.g. JUnit XML)."""
        properties = {
            "feature": self.feature,
            "title": self.title,
            "severity": self.severity.value,
        }
        if self.epic:
            properties["epic"] = self.epic
        return properties


@dataclass(frozen=True)
class SuccessExpectation:
    kind: MessageKind
    checks: Tuple[Check, ...] = ()


@dataclass(frozen=True)
class ErrorExpectation:
    code: int
    message: str


Expectation = Union[SuccessExpectation, ErrorExpectation]


@dataclass(frozen=True)
class ContractCase:
    """One declared call and its expected response contract."""

    name: str
    descriptor: EndpointDescriptor
    expectation: Expectation
    metadata: CaseMetadata

    def verify(self, outcome: ContractOutcome) -> Any:
        """Check status code then envelope shape.

        Returns the ``message`` for success cases so callers can make
        further assertions; ``None`` for error cases.
        """
        assert_status(outcome.status_code, self.descriptor.expected_status)

        if isinstance(self.expectation, SuccessExpectation):
            return assert_success_shape(outcome.envelope, self.expectation.kind, self.expectation.checks)

        assert_error_shape(outcome.envelope, self.expectation.code, self.expectation.message)
        return None


class CaseRegistry:
    """Ordered, name-unique collection of contract cases."""

    def __init__(self):
        self._cases: Dict[str, ContractCase] = {}

    def register(self, case: ContractCase) -> ContractCase:
        if case.name in self._cases:
            raise ValueError(f"Contract case already registered: {case.name}")
        self._cases[case.name] = case
        return case

    def get(self, name: str) -> ContractCase:
        try:
            return self._cases[name]
        except KeyError:
            raise KeyError(f"Unknown contract case: {name}") from None

    def by_feature(self, feature: str) -> List[ContractCase]:
        return [case for case in self._cases.values() if case.metadata.feature == feature]

    def names(self) -> List[str]:
        return list(self._cases)

    def __iter__(self) -> Iterator[ContractCase]:
        return iter(list(self._cases.values()))

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._cases
