"""
PingWatch - Continuous Reachability Monitor

Periodic ICMP probing of a fixed host list with running latency,
jitter and loss statistics written to append-only text logs.
"""

__version__ = "1.0.0"
__author__ = "PingWatch"
