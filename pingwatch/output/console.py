"""
Rich console output for PingWatch - one colored line per probe
"""

from typing import Iterable, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box

from ..config import MonitorSettings
from ..models import ProbeResult
from ..stats import StatsAccumulator
from .report import format_raw_line, format_threshold, format_latency
from .. import __version__


# Probe line styling
STYLES = {
    'reply': 'green',
    'slow': 'bold yellow',
    'failure': 'red',
    'notice': 'cyan',
}


class ConsoleOutput:
    """
    Rich console output for the monitor loop.

    Features:
    - Real-time per-probe lines (reply / slow / failure colors)
    - Snapshot notices
    - Final statistics table on shutdown
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, settings: MonitorSettings):
        """Print monitor header"""
        content = Text()
        content.append("📡 PingWatch", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Hosts: ", style="dim")
        content.append(", ".join(settings.hosts), style="bold")
        content.append("\n")
        content.append(f"Threshold: {format_threshold(settings.threshold_ms)}ms", style="dim")
        content.append(f"  |  Delay: {settings.ping_delay_seconds:g}s", style="dim")
        content.append(f"  |  Stats every {settings.stats_update_interval} cycles", style="dim")
        content.append("\n")
        content.append(
            f"Logs: {settings.raw_log}, {settings.slow_log}, {settings.stats_log}",
            style="dim"
        )

        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)
        self.console.print("[dim]Press Ctrl+C to stop[/]")
        self.console.print()

    def print_probe(self, result: ProbeResult, slow: bool = False):
        """Print a single probe result in real-time"""
        if not result.success:
            style = STYLES['failure']
        elif slow:
            style = STYLES['slow']
        else:
            style = STYLES['reply']

        self.console.print(Text(format_raw_line(result), style=style))

    def print_slow_notice(self, result: ProbeResult, threshold_ms: float):
        """Annotate a probe that went to the slow log"""
        line = Text("  ⚠️  ")
        line.append(
            f"Slow reply from {result.host} "
            f"({format_latency(result.latency_ms)}ms > {format_threshold(threshold_ms)}ms)",
            style=STYLES['slow']
        )
        line.append(" logged to slow log", style="dim")
        self.console.print(line)

    def print_snapshot_notice(self, cycle_count: int, final: bool = False):
        """Announce a stats snapshot"""
        if final:
            message = f"📊 Final statistics written after {cycle_count} cycles"
        else:
            message = f"📊 Statistics updated (cycle {cycle_count})"
        self.console.print(Text(message, style=STYLES['notice']))

    def print_summary(self, stats: StatsAccumulator, hosts: Iterable[str]):
        """Print final statistics table"""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )

        table.add_column("Host", style="bold")
        table.add_column("Sent", justify="right")
        table.add_column("Recv", justify="right")
        table.add_column("Loss", justify="right")
        table.add_column("Min", justify="right")
        table.add_column("Avg", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Jitter", justify="right")

        for host in hosts:
            snap = stats.snapshot(host)
            loss_style = "red" if snap["lost"] else "green"
            table.add_row(
                host,
                str(snap["sent"]),
                str(snap["received"]),
                Text(f"{snap['loss_percent']:.2f}%", style=loss_style),
                f"{format_latency(snap['min_ms'])}ms",
                f"{format_latency(snap['avg_ms'])}ms",
                f"{format_latency(snap['max_ms'])}ms",
                f"{format_latency(snap['jitter_ms'])}ms",
            )

        self.console.print()
        self.console.print(Panel(table, title=Text("📊 Summary", style="bold"),
                                 border_style="green", padding=(0, 0)))

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")
