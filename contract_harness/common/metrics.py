"""Metrics collection for contract runs.

Provides a thin convenience wrapper around ``prometheus_client`` so a run
can record how many calls each endpoint received, how long they took, and
which cases failed and why. The exposition text can be pushed to a gateway
or attached to a CI artifact by whatever drives the run.

Design notes
- Metrics and labels are predeclared; ``endpoint`` is the path template,
  not the rendered path, to keep label cardinality bounded
- Each collector owns its registry so tests can create isolated instances
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
import structlog

logger = structlog.get_logger("metrics")


class MetricsCollector:
    """Metrics for contract calls.

    Parameters
    - suite_name: Logical name of the suite being run
    - registry: Optional custom ``CollectorRegistry``
    """

    def __init__(self, suite_name: str, registry: Optional[CollectorRegistry] = None):
        self.suite_name = suite_name
        self.registry = registry or CollectorRegistry()

        self.request_count = Counter(
            'contract_requests_total',
            'Total contract HTTP requests',
            ['endpoint', 'status'],
            registry=self.registry
        )

        self.request_duration = Histogram(
            'contract_request_duration_seconds',
            'Contract HTTP request duration',
            ['endpoint'],
            registry=self.registry
        )

        self.failures = Counter(
            'contract_failures_total',
            'Contract cases that failed, by failure reason',
            ['case', 'reason'],
            registry=self.registry
        )

    def record_request(self, endpoint: str, status: int, duration: float) -> None:
        """Record one HTTP call.

        duration is expected in seconds to match Prometheus histogram units.
        """
        self.request_count.labels(endpoint=endpoint, status=status).inc()
        self.request_duration.labels(endpoint=endpoint).observe(duration)

    def record_failure(self, case: str, reason: str) -> None:
        """Record a failed case; ``reason`` is the exception class name."""
        self.failures.labels(case=case, reason=reason).inc()
        logger.debug("Contract failure recorded", case=case, reason=reason)

    def get_metrics(self) -> str:
        """Get metrics in Prometheus exposition format."""
        return generate_latest(self.registry).decode('utf-8')
