"""Common utilities shared across the harness.

Includes:
- ``config``: pydantic-settings configuration from environment variables.
- ``logging``: structured logging setup with structlog.
- ``metrics``: Prometheus counters and histograms for contract calls.

Import pattern:
- from contract_harness.common.config import HarnessConfig
- from contract_harness.common.logging import configure_logging
"""
