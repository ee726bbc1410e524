"""HTTP API contract-test harness.

Subpackages:
- ``contract_harness.common``: configuration, logging, and metrics.
- ``contract_harness.contracts``: descriptors, envelopes, assertions, cases, client.
- ``contract_harness.suites``: concrete case tables for external APIs.

Notes:
- Suites declare data; execution and checking live in ``contracts``.
"""
