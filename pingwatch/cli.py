import logging
import signal
import sys
import threading

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import MonitorSettings
from .monitor import Monitor
from .output import ConsoleOutput


console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Route diagnostic logging to stderr through rich"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def install_stop_handlers(monitor: Monitor):
    """Turn SIGINT/SIGTERM into a graceful drain of the monitor"""
    def stop(signum):
        logger.info("Received signal %d, stopping", signum)
        monitor.request_stop()

    def handle_signal(signum, frame):
        # Event.set() takes a lock the interrupted main thread may hold
        threading.Thread(target=stop, args=(signum,), daemon=True).start()

    signal.signal(signal.SIGINT, handle_signal)
    if hasattr(signal, 'SIGTERM'):
        signal.signal(signal.SIGTERM, handle_signal)


@click.command()
@click.option('-v', '--verbose', is_flag=True,
              help='Show diagnostic logging on stderr')
@click.version_option(version=__version__)
def main(verbose: bool):
    """
    PingWatch - continuous reachability monitor.

    Pings the configured hosts in a loop, appending every reply to
    raw.txt, replies over the latency threshold to slow.txt, and
    periodic statistics to stats.txt in the working directory.

    Stop with Ctrl+C; a final statistics snapshot is written on exit.
    """
    configure_logging(verbose)
    output = ConsoleOutput(console)

    try:
        settings = MonitorSettings.default()
        monitor = Monitor(settings, output=output)
    except (ValueError, OSError) as e:
        output.print_error(str(e))
        sys.exit(1)

    install_stop_handlers(monitor)
    output.print_header(settings)

    try:
        monitor.run()
    except OSError as e:
        output.print_error(f"Cannot write log file: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
