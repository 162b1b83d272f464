"""
ICMP echo probe backed by the operating system's ping command

- Windows: ping -n 1 -w <ms>
- Linux: ping -c 1 -W <seconds>
- macOS/BSD: ping -c 1 (reply timeout enforced by the watchdog)
"""

import logging
import platform
import re
import subprocess
import threading
import time
from datetime import datetime
from math import ceil
from typing import Optional

from ..models import ProbeResult
from .base import BaseProbe

logger = logging.getLogger(__name__)


# "time<1ms" on Windows for sub-millisecond replies
_LESS_THAN_PATTERN = re.compile(r"time<(\d+)", re.IGNORECASE)
# "time=12.3 ms" (Linux/macOS) or "time=12ms" (Windows)
_LATENCY_PATTERN = re.compile(r"time\s*=\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)

POLL_INTERVAL = 0.1  # seconds between cancellation checks
WATCHDOG_GRACE = 1.0  # seconds on top of the reply timeout


def parse_ping_latency_ms(output: Optional[str]) -> Optional[float]:
    """
    Parse the round-trip time from ping output.

    "time<N" is read as N/2 ms, so "time<1ms" gives 0.5.

    Returns:
        Latency in milliseconds, or None if no reply time is present
    """
    if not output:
        return None

    match = _LESS_THAN_PATTERN.search(output)
    if match:
        return float(match.group(1)) / 2.0

    match = _LATENCY_PATTERN.search(output)
    if match:
        return float(match.group(1))

    return None


class PingProbe(BaseProbe):
    """
    Probe that spawns one system ping per call.

    Every failure mode (non-zero exit, unparsable output, watchdog
    timeout, name resolution failure, missing binary, permission
    error) comes back as a failed ProbeResult.

    Output parsing relies on the English "time" keyword; localized
    ping output is reported as loss.
    """

    def __init__(self, timeout_ms: int = 4000,
                 cancel_event: Optional[threading.Event] = None,
                 system: Optional[str] = None):
        super().__init__(timeout_ms, cancel_event)
        self.system = system or platform.system()

        logger.debug(
            "PingProbe initialized: timeout_ms=%d, system=%s",
            timeout_ms,
            self.system,
        )

    @property
    def watchdog_seconds(self) -> float:
        return self.timeout_ms / 1000.0 + WATCHDOG_GRACE

    def probe(self, host: str) -> ProbeResult:
        """Send one echo request and wait for the reply or a failure"""
        timestamp = datetime.now()

        if not host or not host.strip():
            return ProbeResult.failure(host, timestamp)

        cmd = self._build_ping_command(host)
        logger.debug("Executing ping: %s", cmd)

        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors='replace',
            )
        except OSError as e:
            logger.warning("Ping could not be started: host=%s, error=%s", host, e)
            return ProbeResult.failure(host, timestamp)

        output = self._wait(proc, host)
        if output is None:
            return ProbeResult.failure(host, timestamp)

        if proc.returncode != 0:
            logger.debug("Ping failed: host=%s, returncode=%d", host, proc.returncode)
            return ProbeResult.failure(host, timestamp)

        latency = parse_ping_latency_ms(output)
        if latency is None:
            logger.debug(
                "Parse failed: host=%s, output_preview=%s",
                host,
                output[:100] if output else "(empty)",
            )
            return ProbeResult.failure(host, timestamp)

        return ProbeResult(host=host, timestamp=timestamp, latency_ms=latency)

    def _wait(self, proc: subprocess.Popen, host: str) -> Optional[str]:
        """Collect output, killing the child on watchdog expiry or cancel"""
        deadline = time.monotonic() + self.watchdog_seconds

        while True:
            try:
                output, _ = proc.communicate(timeout=POLL_INTERVAL)
                return output or ""
            except subprocess.TimeoutExpired:
                pass

            if self.cancelled:
                logger.debug("Ping cancelled: host=%s", host)
                self._kill(proc)
                return None

            if time.monotonic() >= deadline:
                logger.debug("Ping watchdog expired: host=%s", host)
                self._kill(proc)
                return None

    def _kill(self, proc: subprocess.Popen):
        proc.kill()
        try:
            proc.communicate(timeout=WATCHDOG_GRACE)
        except subprocess.TimeoutExpired:
            logger.warning("Ping process did not exit after kill: pid=%s", proc.pid)

    def _build_ping_command(self, host: str) -> list[str]:
        """Build the platform-specific ping command"""
        if self.system == "Windows":
            return ["ping", "-n", "1", "-w", str(self.timeout_ms), host]

        if self.system == "Linux":
            timeout_secs = max(1, ceil(self.timeout_ms / 1000.0))
            return ["ping", "-c", "1", "-W", str(timeout_secs), host]

        # macOS -W semantics differ between releases
        return ["ping", "-c", "1", host]
