"""Health report entities and their JSON shape."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..enums import CheckStatus


@dataclass
class CheckOutcome:
    """Result of probing one target."""

    name: str
    host: str
    port: int
    description: str
    status: CheckStatus
    error: Optional[str] = None

    @property
    def healthy(self) -> bool:
        return self.status.is_healthy

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def to_dict(self) -> dict:
        """Convert outcome to its wire form; ``error`` only when non-empty."""
        data: Dict[str, Any] = {
            'name': self.name,
            'host': self.host,
            'port': self.port,
            'description': self.description,
            'status': self.status.value,
        }
        if self.error:
            data['error'] = self.error
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'CheckOutcome':
        return cls(
            name=data.get('name', ''),
            host=data.get('host', ''),
            port=int(data.get('port', 0)),
            description=data.get('description', ''),
            status=CheckStatus(data['status']),
            error=data.get('error') or None,
        )


@dataclass
class HealthReport:
    """Aggregate payload of the health endpoint. Built fresh per request."""

    status: CheckStatus
    message: str
    checks: List[CheckOutcome] = field(default_factory=list)
    timestamp: str = ""
    version: str = ""

    @property
    def healthy(self) -> bool:
        return self.status.is_healthy

    @property
    def failed(self) -> List[CheckOutcome]:
        return [c for c in self.checks if not c.healthy]

    def to_dict(self) -> dict:
        return {
            'status': self.status.value,
            'message': self.message,
            'checks': [c.to_dict() for c in self.checks],
            'timestamp': self.timestamp,
            'version': self.version,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'HealthReport':
        return cls(
            status=CheckStatus(data['status']),
            message=data.get('message', ''),
            checks=[CheckOutcome.from_dict(c) for c in data.get('checks') or []],
            timestamp=data.get('timestamp', ''),
            version=data.get('version', ''),
        )
