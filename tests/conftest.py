from __future__ import annotations

import asyncio
import socket
import textwrap
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Tuple

import pytest

from domain.entities import AuthSettings, Configuration, ProbeResult, ServerSettings, Target
from domain.interfaces import IPortChecker

# TEST-NET-1: reserved, never routed.
UNROUTABLE_HOST = "192.0.2.1"


@pytest.fixture
def listening_port() -> Iterator[int]:
    """A local TCP port with a listener; the kernel completes handshakes from the backlog."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(16)
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture
def closed_port() -> int:
    """A port that was free a moment ago and has nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    def _write(body: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write


class FakeChecker(IPortChecker):
    """Scripted probe results keyed by (host, port); unknown targets succeed."""

    def __init__(self, failures: Dict[Tuple[str, int], str] | None = None, *, delay: float = 0.0) -> None:
        self.failures = failures or {}
        self.delay = delay
        self.calls: List[Tuple[str, int, float]] = []

    async def check(self, host: str, port: int, timeout: float) -> ProbeResult:
        self.calls.append((host, port, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        error = self.failures.get((host, port))
        if error:
            return ProbeResult.failed(host, port, error)
        return ProbeResult.ok(host, port, 1)


@pytest.fixture
def fake_checker() -> FakeChecker:
    return FakeChecker()


def make_configuration(
    targets: List[Target],
    *,
    default_timeout: float = 2.0,
    auth: AuthSettings | None = None,
) -> Configuration:
    return Configuration(
        server=ServerSettings(default_timeout=default_timeout, auth=auth or AuthSettings()),
        targets=tuple(targets),
    )
