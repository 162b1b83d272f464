"""
Append-only text logs for PingWatch
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..models import ProbeResult
from ..stats import StatsAccumulator
from .report import format_raw_line, format_slow_line, format_stats_block

logger = logging.getLogger(__name__)


class LogFiles:
    """
    Writer for the raw, slow and stats logs.

    Each write opens its file in append mode and closes it again, so
    external readers can tail the files at any time. Write errors are
    not caught here; losing log data is fatal to the monitor.
    """

    def __init__(self, raw_path: Path, slow_path: Path, stats_path: Path):
        self.raw_path = Path(raw_path)
        self.slow_path = Path(slow_path)
        self.stats_path = Path(stats_path)

        for path in (self.raw_path, self.slow_path, self.stats_path):
            path.parent.mkdir(parents=True, exist_ok=True)

    def write_raw(self, result: ProbeResult):
        """One line per probe, success or failure"""
        self._append(self.raw_path, format_raw_line(result) + "\n")

    def write_slow(self, result: ProbeResult, threshold_ms: float):
        """One line for a reply slower than the threshold"""
        self._append(self.slow_path, format_slow_line(result, threshold_ms) + "\n")

    def write_stats(self, stats: StatsAccumulator, hosts: Iterable[str],
                    updated: Optional[datetime] = None):
        """Append a full snapshot block"""
        block = format_stats_block(stats, hosts, updated or datetime.now())
        self._append(self.stats_path, block)
        logger.debug("Stats snapshot written: %s", self.stats_path)

    def _append(self, path: Path, text: str):
        with open(path, 'a', encoding='utf-8') as f:
            f.write(text)
