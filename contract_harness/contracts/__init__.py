"""Contract execution and checking.

Primary components:
- ``descriptor``: ``EndpointDescriptor`` and path construction.
- ``envelope``: decoded response body and ``ContractOutcome``.
- ``assertions``: ``Check`` factories and envelope shape assertions.
- ``cases``: ``ContractCase`` and ``CaseRegistry``.
- ``client``: ``ContractClient`` running cases over a shared HTTP client.
- ``errors``: ``NetworkError``, ``MalformedResponse``, ``AssertionFailure``.
"""

from .assertions import MessageKind, assert_error_shape, assert_status, assert_success_shape
from .cases import CaseMetadata, CaseRegistry, ContractCase, ErrorExpectation, Severity, SuccessExpectation
from .client import ContractClient
from .descriptor import EndpointDescriptor
from .envelope import ContractOutcome, Envelope
from .errors import AssertionFailure, HarnessError, MalformedResponse, NetworkError

__all__ = [
    "AssertionFailure",
    "CaseMetadata",
    "CaseRegistry",
    "ContractCase",
    "ContractClient",
    "ContractOutcome",
    "EndpointDescriptor",
    "Envelope",
    "ErrorExpectation",
    "HarnessError",
    "MalformedResponse",
    "MessageKind",
    "NetworkError",
    "Severity",
    "SuccessExpectation",
    "assert_error_shape",
    "assert_status",
    "assert_success_shape",
]
