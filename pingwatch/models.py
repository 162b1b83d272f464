"""
Data models for PingWatch
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


RECENT_LATENCY_CAPACITY = 100


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single echo probe (latency_ms is None on failure)"""
    host: str
    timestamp: datetime = field(default_factory=datetime.now)
    latency_ms: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.latency_ms is not None

    @classmethod
    def failure(cls, host: str, timestamp: Optional[datetime] = None) -> 'ProbeResult':
        return cls(host=host, timestamp=timestamp or datetime.now())


@dataclass
class HostStats:
    """Running aggregate for one monitored host"""
    host: str
    sent: int = 0
    received: int = 0
    lost: int = 0
    min_latency_ms: Optional[float] = None  # None until the first reply
    max_latency_ms: float = 0.0
    sum_latency_ms: float = 0.0
    recent_latencies: deque = field(
        default_factory=lambda: deque(maxlen=RECENT_LATENCY_CAPACITY)
    )

    def add(self, result: ProbeResult):
        """Fold one probe outcome into the counters"""
        self.sent += 1

        if not result.success:
            self.lost += 1
            return

        latency = result.latency_ms
        self.received += 1
        self.sum_latency_ms += latency
        self.recent_latencies.append(latency)

        if self.min_latency_ms is None or latency < self.min_latency_ms:
            self.min_latency_ms = latency
        if latency > self.max_latency_ms:
            self.max_latency_ms = latency

    @property
    def loss_percent(self) -> float:
        if self.sent == 0:
            return 0.0
        return round(100.0 * self.lost / self.sent, 2)

    @property
    def average_latency(self) -> float:
        if self.received == 0:
            return 0.0
        return round(self.sum_latency_ms / self.received, 2)

    @property
    def reported_min(self) -> float:
        return self.min_latency_ms if self.min_latency_ms is not None else 0.0

    @property
    def jitter(self) -> float:
        """Mean absolute difference between consecutive recent latencies"""
        samples = list(self.recent_latencies)
        if len(samples) < 2:
            return 0.0

        deltas = [abs(b - a) for a, b in zip(samples, samples[1:])]
        return round(sum(deltas) / len(deltas), 2)
