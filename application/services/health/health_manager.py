from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, List, Optional

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import CheckOutcome, Configuration, HealthReport, ProbeResult, Target
from domain.enums import CheckStatus
from domain.interfaces import IPortChecker
from .timeout_config import TimeoutPolicy

SUCCESS_MESSAGE = "All ports are listening and accessible"

Clock = Callable[[], datetime]


def _local_now() -> datetime:
    return datetime.now().astimezone()


def failure_message(failed: List[CheckOutcome]) -> str:
    names = ", ".join(f"{o.name} ({o.address})" for o in failed)
    return f"Failed ports: [{names}]"


class HealthAggregator:
    """Probes every configured target and folds the results into a report."""

    def __init__(
        self,
        checker: IPortChecker,
        *,
        version: str,
        logger: Optional[StructuredLogger] = None,
        clock: Clock = _local_now,
    ) -> None:
        """Initialize with the probe strategy and the version stamped on reports."""
        self.checker = checker
        self.version = version
        self.logger = logger or get_logger(__name__, service="health")
        self.clock = clock

    async def evaluate(self, configuration: Configuration) -> HealthReport:
        """Probe all targets concurrently and build a fresh report.

        Outcomes keep configuration order. Worst-case latency is the largest
        effective timeout, not the sum.
        """
        policy = TimeoutPolicy.from_server(configuration.server)
        targets = configuration.targets
        probes = await asyncio.gather(*(self._probe(t, policy.for_target(t)) for t in targets))
        outcomes = [self._outcome(t, p) for t, p in zip(targets, probes)]

        failed = [o for o in outcomes if not o.healthy]
        status = CheckStatus.from_bool(not failed)
        report = HealthReport(
            status=status,
            message=SUCCESS_MESSAGE if not failed else failure_message(failed),
            checks=outcomes,
            timestamp=self.clock().isoformat(timespec="seconds"),
            version=self.version,
        )
        if report.healthy:
            self.logger.success(lambda: "health-report", extra={"targets": len(outcomes)})
        else:
            self.logger.warning(lambda: "health-report", extra={"targets": len(outcomes), "failed": len(failed)})
        return report

    async def _probe(self, target: Target, timeout: float) -> ProbeResult:
        try:
            return await self.checker.check(target.host, target.port, timeout)
        except Exception as e:
            # Probe failures are reported, never raised past the aggregator.
            self.logger.error(lambda: "port-check-exception", extra={"address": target.address, "error": str(e)})
            return ProbeResult.failed(target.host, target.port, f"{target.address}: {e}")

    @staticmethod
    def _outcome(target: Target, probe: ProbeResult) -> CheckOutcome:
        return CheckOutcome(
            name=target.name,
            host=target.host,
            port=target.port,
            description=target.description,
            status=CheckStatus.from_bool(probe.success),
            error=None if probe.success else (probe.error or "unreachable"),
        )
