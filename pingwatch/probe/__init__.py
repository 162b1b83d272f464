"""
Probe engines for PingWatch
"""

from .base import BaseProbe
from .icmp import PingProbe, parse_ping_latency_ms

__all__ = ['BaseProbe', 'PingProbe', 'parse_ping_latency_ms']
