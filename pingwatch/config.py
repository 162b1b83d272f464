"""
Monitoring parameters for PingWatch
"""

from dataclasses import dataclass, field
from pathlib import Path


# Hosts probed every cycle, in this order
HOSTS = (
    "8.8.8.8",
    "1.1.1.1",
    "google.com",
)

THRESHOLD_MS = 500.0  # ms, replies slower than this go to the slow log
PING_DELAY_SECONDS = 1.0  # pause between cycles
STATS_UPDATE_INTERVAL = 10  # cycles between stats snapshots
PROBE_TIMEOUT_MS = 4000  # ms to wait for a single echo reply

RAW_LOG = "raw.txt"
SLOW_LOG = "slow.txt"
STATS_LOG = "stats.txt"


@dataclass(frozen=True)
class MonitorSettings:
    """
    Adjustable monitoring parameters.

    Defaults come from the module constants above; tests and embedding
    code construct their own instances.
    """
    hosts: tuple[str, ...] = HOSTS
    threshold_ms: float = THRESHOLD_MS
    ping_delay_seconds: float = PING_DELAY_SECONDS
    stats_update_interval: int = STATS_UPDATE_INTERVAL
    probe_timeout_ms: int = PROBE_TIMEOUT_MS
    raw_log: Path = field(default_factory=lambda: Path(RAW_LOG))
    slow_log: Path = field(default_factory=lambda: Path(SLOW_LOG))
    stats_log: Path = field(default_factory=lambda: Path(STATS_LOG))

    def __post_init__(self):
        hosts = tuple(self.hosts)
        object.__setattr__(self, 'hosts', hosts)

        if not hosts:
            raise ValueError("At least one host must be configured")

        seen = set()
        for host in hosts:
            if not isinstance(host, str) or not host.strip():
                raise ValueError(f"Invalid host entry: {host!r}")
            if host in seen:
                raise ValueError(f"Duplicate host: {host}")
            seen.add(host)

        if self.threshold_ms < 0:
            raise ValueError("threshold_ms must not be negative")
        if self.ping_delay_seconds < 0:
            raise ValueError("ping_delay_seconds must not be negative")
        if self.stats_update_interval <= 0:
            raise ValueError("stats_update_interval must be positive")
        if self.probe_timeout_ms <= 0:
            raise ValueError("probe_timeout_ms must be positive")

        for name in ('raw_log', 'slow_log', 'stats_log'):
            object.__setattr__(self, name, Path(getattr(self, name)))

    @classmethod
    def default(cls) -> 'MonitorSettings':
        """Settings built from the compiled-in constants"""
        return cls()
