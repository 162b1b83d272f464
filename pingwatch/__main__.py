"""
PingWatch - Continuous Reachability Monitor

Entry point for running as a module:
    python -m pingwatch
"""

from .cli import main

if __name__ == '__main__':
    main()
