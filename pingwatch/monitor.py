"""
Monitor loop orchestrator
"""

import logging
import threading
from enum import Enum
from typing import Optional

from .config import MonitorSettings
from .models import ProbeResult
from .output import ConsoleOutput, LogFiles
from .probe import BaseProbe, PingProbe
from .stats import StatsAccumulator

logger = logging.getLogger(__name__)


class MonitorState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"


class Monitor:
    """
    Continuous reachability monitor.

    Probes every configured host once per cycle, strictly one after
    another in configured order, then sleeps. Each instance owns its own
    stats, so independent monitors never share state.

    A stop request (request_stop or KeyboardInterrupt) abandons the
    current cycle and writes exactly one final stats snapshot.
    """

    def __init__(
        self,
        settings: MonitorSettings,
        probe: Optional[BaseProbe] = None,
        log_files: Optional[LogFiles] = None,
        output: Optional[ConsoleOutput] = None,
        stop_event: Optional[threading.Event] = None,
        max_cycles: Optional[int] = None,
    ):
        if max_cycles is not None and max_cycles <= 0:
            raise ValueError("max_cycles must be positive")

        self.settings = settings
        self.hosts = list(settings.hosts)
        self.stats = StatsAccumulator(self.hosts)
        self.stop_event = stop_event or threading.Event()
        self.probe = probe or PingProbe(
            timeout_ms=settings.probe_timeout_ms,
            cancel_event=self.stop_event,
        )
        self.log_files = log_files or LogFiles(
            settings.raw_log, settings.slow_log, settings.stats_log
        )
        self.output = output or ConsoleOutput()
        self.max_cycles = max_cycles

        self.state = MonitorState.IDLE
        self.cycle_count = 0
        self.snapshot_count = 0

    @property
    def stop_requested(self) -> bool:
        return self.stop_event.is_set()

    def request_stop(self):
        """Ask the loop to drain; safe to call from a signal handler"""
        self.stop_event.set()

    def is_slow(self, result: ProbeResult) -> bool:
        return result.success and result.latency_ms > self.settings.threshold_ms

    def run(self):
        """
        Run cycles until a stop is requested (or max_cycles is reached),
        then drain.

        Errors other than an interrupt propagate without a final
        snapshot.
        """
        if self.state is not MonitorState.IDLE:
            raise RuntimeError(f"Monitor cannot run from state {self.state.value}")

        self.state = MonitorState.RUNNING
        logger.info(
            "Monitoring started: %d hosts, delay=%ss, stats_interval=%d",
            len(self.hosts),
            self.settings.ping_delay_seconds,
            self.settings.stats_update_interval,
        )

        try:
            with self.probe:
                self._loop()
        except KeyboardInterrupt:
            logger.info("Interrupted during cycle %d", self.cycle_count + 1)
            self.request_stop()

        self._drain()

    def _loop(self):
        while not self.stop_requested:
            if not self.run_cycle():
                return

            self.cycle_count += 1
            if self.cycle_count % self.settings.stats_update_interval == 0:
                self.write_snapshot()

            if self.max_cycles is not None and self.cycle_count >= self.max_cycles:
                return

            if self.stop_event.wait(self.settings.ping_delay_seconds):
                return

    def run_cycle(self) -> bool:
        """
        Probe each host once, in order.

        Returns:
            False if a stop request cut the cycle short
        """
        for host in self.hosts:
            if self.stop_requested:
                return False

            result = self.probe.probe(host)

            # Result of an interrupted probe is not trustworthy
            if self.stop_requested:
                logger.debug("Discarding probe result after stop: host=%s", host)
                return False

            self.handle_result(result)

        return True

    def handle_result(self, result: ProbeResult):
        """Record a probe outcome and write it everywhere it belongs"""
        self.stats.record(result)
        self.log_files.write_raw(result)

        slow = self.is_slow(result)
        self.output.print_probe(result, slow=slow)

        if slow:
            self.log_files.write_slow(result, self.settings.threshold_ms)
            self.output.print_slow_notice(result, self.settings.threshold_ms)

    def write_snapshot(self, final: bool = False):
        self.log_files.write_stats(self.stats, self.hosts)
        self.snapshot_count += 1
        self.output.print_snapshot_notice(self.cycle_count, final=final)

    def _drain(self):
        self.state = MonitorState.DRAINING
        logger.info("Draining after %d cycles", self.cycle_count)

        self.write_snapshot(final=True)
        self.output.print_summary(self.stats, self.hosts)

        self.state = MonitorState.STOPPED
        logger.info("Monitoring stopped")
