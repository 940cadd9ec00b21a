from __future__ import annotations

import asyncio
import os
import socket
import time
from typing import Optional

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import ProbeResult
from domain.interfaces import IPortChecker


def format_address(host: str, port: int) -> str:
    if ":" in host and not host.startswith("["):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def describe_error(exc: BaseException) -> str:
    """Human-readable cause for a failed connection attempt."""
    if isinstance(exc, socket.gaierror):
        return f"host resolution failed: {exc.strerror or exc}"
    if isinstance(exc, OSError) and exc.errno:
        return os.strerror(exc.errno).lower()
    return str(exc) or type(exc).__name__


class TCPPortChecker(IPortChecker):
    """TCP connect probe.

    Opens a single connection and closes it straight away; nothing is sent
    or read. Resolution and connect share the same timeout budget.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None) -> None:
        self.logger = logger or get_logger(__name__, service="checker")

    async def check(self, host: str, port: int, timeout: float) -> ProbeResult:
        address = format_address(host, port)
        start = time.perf_counter()
        self.logger.debug(lambda: "port-check-start", extra={"address": address, "timeout_s": timeout})
        try:
            _, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout=timeout)
        except asyncio.TimeoutError:
            return self._failed(host, port, start, f"{address}: connection timed out after {timeout:g}s")
        except (OSError, ValueError, OverflowError) as e:
            return self._failed(host, port, start, f"{address}: {describe_error(e)}")

        latency_ms = self._elapsed_ms(start)
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            # The connect already succeeded; a reset on close does not change that.
            self.logger.debug(lambda: "port-check-close-error", extra={"address": address, "error": str(e)})
        self.logger.debug(lambda: "port-check-ok", extra={"address": address, "latency": latency_ms})
        return ProbeResult.ok(host, port, latency_ms)

    def _failed(self, host: str, port: int, start: float, error: str) -> ProbeResult:
        latency_ms = self._elapsed_ms(start)
        self.logger.warning(lambda: "port-check-failed", extra={"error": error, "latency": latency_ms})
        return ProbeResult.failed(host, port, error, latency_ms)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000.0)
