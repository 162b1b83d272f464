"""
Text formats for the raw, slow and stats logs
"""

import re
from datetime import datetime
from typing import Iterable

from ..models import ProbeResult
from ..stats import StatsAccumulator


BANNER = "=" * 70
SEPARATOR = "-" * 40
LABEL_WIDTH = 18

FAILURE_TEXT = "Request timed out / Host unreachable"


def format_timestamp(ts: datetime) -> str:
    """YYYY-MM-DD HH:mm:ss.fff"""
    return ts.strftime("%Y-%m-%d %H:%M:%S.") + f"{ts.microsecond // 1000:03d}"


def format_latency(latency_ms: float) -> str:
    return f"{latency_ms:.2f}"


def format_threshold(threshold_ms: float) -> str:
    return f"{threshold_ms:g}"


def format_raw_line(result: ProbeResult) -> str:
    prefix = f"[{format_timestamp(result.timestamp)}] {result.host} - "
    if result.success:
        return prefix + f"Reply: {format_latency(result.latency_ms)}ms"
    return prefix + FAILURE_TEXT


def format_slow_line(result: ProbeResult, threshold_ms: float) -> str:
    return (
        f"[{format_timestamp(result.timestamp)}] {result.host} - "
        f"SLOW PING: {format_latency(result.latency_ms)}ms "
        f"(threshold: {format_threshold(threshold_ms)}ms)"
    )


def _stat_line(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}} {value}"


def format_stats_block(stats: StatsAccumulator, hosts: Iterable[str],
                       updated: datetime) -> str:
    """
    Render a full snapshot block for the stats log.

    Hosts appear in the order given. The returned text ends with two
    blank lines so consecutive blocks stay visually apart.
    """
    lines = [
        BANNER,
        f"PING STATISTICS - Updated: {updated.strftime('%Y-%m-%d %H:%M:%S')}",
        BANNER,
    ]

    for host in hosts:
        snap = stats.snapshot(host)
        lines.extend([
            "",
            f"Host: {host}",
            SEPARATOR,
            _stat_line("Packets Sent", str(snap["sent"])),
            _stat_line("Packets Received", str(snap["received"])),
            _stat_line("Packets Lost", f"{snap['lost']} ({snap['loss_percent']:.2f}%)"),
            _stat_line("Min Latency", f"{format_latency(snap['min_ms'])}ms"),
            _stat_line("Max Latency", f"{format_latency(snap['max_ms'])}ms"),
            _stat_line("Avg Latency", f"{format_latency(snap['avg_ms'])}ms"),
            _stat_line("Jitter", f"{format_latency(snap['jitter_ms'])}ms"),
        ])

    lines.extend(["", ""])
    return "\n".join(lines) + "\n"


_HOST_RE = re.compile(r"^Host: (?P<host>.+)$")
_VALUE_RE = re.compile(r"^(?P<label>[A-Za-z ]+):\s+(?P<value>.+)$")
_LOST_RE = re.compile(r"^(?P<count>\d+) \((?P<pct>\d+(?:\.\d+)?)%\)$")

_FIELDS = {
    "Packets Sent": "sent",
    "Packets Received": "received",
    "Min Latency": "min_ms",
    "Max Latency": "max_ms",
    "Avg Latency": "avg_ms",
    "Jitter": "jitter_ms",
}


def parse_stats_block(text: str) -> dict[str, dict]:
    """
    Parse the most recent snapshot block of a stats log.

    Returns:
        {host: {sent, received, lost, loss_percent, min_ms, max_ms,
        avg_ms, jitter_ms}} in the order hosts appear in the block
    """
    start = text.rfind("PING STATISTICS - Updated:")
    if start == -1:
        raise ValueError("No stats block found")

    result: dict[str, dict] = {}
    current = None

    for line in text[start:].splitlines()[2:]:
        line = line.rstrip()
        if not line or line == SEPARATOR:
            continue

        host_match = _HOST_RE.match(line)
        if host_match:
            current = result.setdefault(host_match.group("host"), {})
            continue

        value_match = _VALUE_RE.match(line)
        if not value_match or current is None:
            raise ValueError(f"Unexpected line in stats block: {line!r}")

        label = value_match.group("label")
        value = value_match.group("value")

        if label == "Packets Lost":
            lost = _LOST_RE.match(value)
            if not lost:
                raise ValueError(f"Malformed loss value: {value!r}")
            current["lost"] = int(lost.group("count"))
            current["loss_percent"] = float(lost.group("pct"))
        elif label in ("Packets Sent", "Packets Received"):
            current[_FIELDS[label]] = int(value)
        elif label in _FIELDS:
            current[_FIELDS[label]] = float(value.removesuffix("ms"))
        else:
            raise ValueError(f"Unknown stats field: {label!r}")

    return result
