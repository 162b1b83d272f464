"""
Per-host running statistics
"""

from typing import Iterable

from .models import HostStats, ProbeResult


class StatsAccumulator:
    """
    Holds one HostStats per configured host.

    Hosts are fixed at construction and kept in configured order.
    Recording is pure in-memory mutation, no I/O.
    """

    def __init__(self, hosts: Iterable[str]):
        self._stats: dict[str, HostStats] = {}
        for host in hosts:
            self._stats[host] = HostStats(host=host)

    def record(self, result: ProbeResult):
        """Fold a probe result into its host's stats"""
        self.get(result.host).add(result)

    def get(self, host: str) -> HostStats:
        try:
            return self._stats[host]
        except KeyError:
            raise KeyError(f"Host is not monitored: {host}") from None

    def hosts(self) -> list[str]:
        return list(self._stats)

    def jitter(self, host: str) -> float:
        return self.get(host).jitter

    def loss_percent(self, host: str) -> float:
        return self.get(host).loss_percent

    def average_latency(self, host: str) -> float:
        return self.get(host).average_latency

    def reported_min(self, host: str) -> float:
        return self.get(host).reported_min

    def reported_max(self, host: str) -> float:
        return self.get(host).max_latency_ms

    def snapshot(self, host: str) -> dict:
        """Reported values for one host, as written to the stats log"""
        stats = self.get(host)
        return {
            "sent": stats.sent,
            "received": stats.received,
            "lost": stats.lost,
            "loss_percent": stats.loss_percent,
            "min_ms": stats.reported_min,
            "max_ms": stats.max_latency_ms,
            "avg_ms": stats.average_latency,
            "jitter_ms": stats.jitter,
        }

    def __iter__(self):
        return iter(self._stats.values())

    def __len__(self):
        return len(self._stats)
