"""
Output modules for PingWatch
"""

from .console import ConsoleOutput
from .logfiles import LogFiles
from .report import format_raw_line, format_slow_line, format_stats_block, parse_stats_block

__all__ = [
    'ConsoleOutput',
    'LogFiles',
    'format_raw_line',
    'format_slow_line',
    'format_stats_block',
    'parse_stats_block',
]
