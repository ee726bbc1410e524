"""HTTP execution of contract cases.

``ContractClient`` owns one ``httpx.AsyncClient`` for the whole run. Acquire
it once with ``async with`` (or ``connect``/``disconnect``) and share it
between cases; each case issues exactly one request and gets back a
``ContractOutcome``.
"""

import time
from typing import Any, Optional

import httpx
import structlog

from ..common.config import HarnessConfig
from ..common.logging import case_context
from ..common.metrics import MetricsCollector
from .cases import ContractCase
from .descriptor import EndpointDescriptor
from .envelope import ContractOutcome, Envelope
from .errors import HarnessError, MalformedResponse, NetworkError

logger = structlog.get_logger("contract_client")


class ContractClient:
    """Executes endpoint descriptors against one base URL."""

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        metrics: Optional[MetricsCollector] = None,
    ):
        """Set up the client without opening a connection.

        Parameters
        - config: Harness settings; defaults are read from the environment
        - transport: Optional transport override (e.g. ``httpx.MockTransport``)
        - metrics: Optional collector that receives per-request metrics
        """
        self.config = config or HarnessConfig()
        self.transport = transport
        self.metrics = metrics
        self.client: Optional[httpx.AsyncClient] = None

    @property
    def connected(self) -> bool:
        return self.client is not None

    async def connect(self) -> None:
        """Open the shared HTTP client."""
        if self.client is not None:
            return
        self.client = httpx.AsyncClient(
            base_url=self.config.contract_base_url,
            timeout=self.config.contract_timeout_seconds,
            transport=self.transport,
        )
        logger.info("Contract client connected", base_url=self.config.contract_base_url)

    async def disconnect(self) -> None:
        """Close the shared HTTP client."""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Contract client closed")

    async def __aenter__(self) -> "ContractClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    async def run(self, descriptor: EndpointDescriptor) -> ContractOutcome:
        """Issue the descriptor's request and capture status and body.

        Raises
        - ``NetworkError`` on transport failure or redirect loops (no retry)
        - ``MalformedResponse`` when the body cannot be decoded or is not a
          JSON object
        """
        if self.client is None:
            raise RuntimeError("ContractClient is not connected")

        path = descriptor.build_path()
        start_time = time.perf_counter()
        try:
            response = await self.client.request(descriptor.method, path)
        except httpx.DecodingError as e:
            logger.error("Contract response malformed", path=path, error=str(e))
            raise MalformedResponse(
                f"Response body from {descriptor.method} {path} could not be decoded: {e}"
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Contract request failed",
                method=descriptor.method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NetworkError(f"{descriptor.method} {path} failed: {type(e).__name__}: {e}") from e
        duration = time.perf_counter() - start_time

        if self.metrics:
            self.metrics.record_request(descriptor.path_template, response.status_code, duration)

        logger.info(
            "Contract request completed",
            method=descriptor.method,
            path=path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )

        try:
            envelope = Envelope.from_response(response)
        except MalformedResponse as e:
            logger.error("Contract response malformed", path=path, error=str(e))
            raise

        return ContractOutcome(
            status_code=response.status_code,
            envelope=envelope,
            url=str(response.request.url),
            elapsed_ms=duration * 1000,
        )

    async def execute(self, case: ContractCase) -> Any:
        """Run a case and verify it; returns the success ``message``."""
        with case_context(case.name, feature=case.metadata.feature):
            try:
                outcome = await self.run(case.descriptor)
                return case.verify(outcome)
            except HarnessError as e:
                if self.metrics:
                    self.metrics.record_failure(case.name, type(e).__name__)
                logger.warning("Contract case failed", error=str(e), error_type=type(e).__name__)
                raise
