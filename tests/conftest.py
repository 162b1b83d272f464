"""Shared fixtures for PingWatch tests."""

import io
from datetime import datetime, timedelta

import pytest
from rich.console import Console

from pingwatch.config import MonitorSettings
from pingwatch.models import ProbeResult
from pingwatch.output import ConsoleOutput, LogFiles
from pingwatch.probe import BaseProbe


class ScriptedProbe(BaseProbe):
    """Probe that replays a fixed list of latencies per host.

    None in a script means a failed probe. Once a host's script is
    exhausted every further probe fails.
    """

    def __init__(self, scripts, on_probe=None):
        super().__init__(timeout_ms=1000)
        self.scripts = {host: list(values) for host, values in scripts.items()}
        self.on_probe = on_probe
        self.calls = []
        self.closed = False
        self._clock = datetime(2026, 1, 2, 3, 4, 5, 678000)

    def probe(self, host):
        self.calls.append(host)
        if self.on_probe:
            self.on_probe(host, len(self.calls))

        queue = self.scripts.get(host, [])
        latency = queue.pop(0) if queue else None

        self._clock += timedelta(milliseconds=250)
        return ProbeResult(host=host, timestamp=self._clock, latency_ms=latency)

    def close(self):
        self.closed = True


@pytest.fixture
def quiet_output():
    """ConsoleOutput writing into a buffer instead of the terminal."""
    return ConsoleOutput(Console(file=io.StringIO(), width=120))


@pytest.fixture
def make_settings(tmp_path):
    """Factory for settings with log files under tmp_path."""
    def _make(hosts=("10.0.0.1",), **overrides):
        params = dict(
            hosts=hosts,
            threshold_ms=500.0,
            ping_delay_seconds=0,
            stats_update_interval=10,
            raw_log=tmp_path / "raw.txt",
            slow_log=tmp_path / "slow.txt",
            stats_log=tmp_path / "stats.txt",
        )
        params.update(overrides)
        return MonitorSettings(**params)

    return _make


@pytest.fixture
def log_files(tmp_path):
    return LogFiles(tmp_path / "raw.txt", tmp_path / "slow.txt", tmp_path / "stats.txt")


@pytest.fixture
def scripted_probe():
    """Factory for ScriptedProbe instances."""
    return ScriptedProbe
