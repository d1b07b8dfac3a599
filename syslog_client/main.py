# syslog_client/main.py
"""Command line entry point for the syslog client."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from colorama import Fore, Style, init
from faker import Faker

from .codes import Severity
from .config import AppConfig, load_config, validate_config
from .interactive import run_interactive
from .errors import SyslogError

# Initialize colorama for Windows compatibility
init(autoreset=True)

SEVERITY_COLORS = {
    Severity.EMERGENCY: Fore.MAGENTA + Style.BRIGHT,
    Severity.ALERT: Fore.MAGENTA,
    Severity.CRITICAL: Fore.RED + Style.BRIGHT,
    Severity.ERROR: Fore.RED,
    Severity.WARNING: Fore.YELLOW,
    Severity.NOTICE: Fore.CYAN,
    Severity.INFORMATIONAL: Fore.GREEN,
    Severity.DEBUG: Fore.WHITE + Style.DIM,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Send RFC 5424 syslog messages over UDP',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Send one informational message to the local collector
  syslog-client "service started"

  # Send to a remote collector on a custom port
  syslog-client --host 192.168.1.100 --port 8514 --severity warning "disk at 90%"

  # Send ten generated messages from local0
  syslog-client --facility local0 --fake --count 10

  # Show what would be sent without sending
  syslog-client --dry-run "hello"

  # Interactive shell
  syslog-client --interactive
        """
    )

    parser.add_argument(
        'message',
        nargs='*',
        help='Message text (words are joined with single spaces)'
    )

    # Destination options
    peer_group = parser.add_argument_group('Destination Options')
    peer_group.add_argument(
        '--host', '-H',
        default=None,
        help='Syslog collector host name or IPv4 address'
    )
    peer_group.add_argument(
        '--port', '-P',
        type=int,
        default=None,
        help='Syslog collector UDP port (default: from config or 514)'
    )

    # Message options
    msg_group = parser.add_argument_group('Message Options')
    msg_group.add_argument(
        '--facility', '-F',
        default=None,
        help='Facility name or code, e.g. daemon, local0, 3'
    )
    msg_group.add_argument(
        '--severity', '-s',
        default='info',
        help='Severity name or code (default: info)'
    )
    msg_group.add_argument(
        '--hostname',
        default=None,
        help='HOSTNAME field (default: from config or this machine)'
    )
    msg_group.add_argument(
        '--app-name',
        default=None,
        help='APP-NAME field (default: from config or syslog-client)'
    )
    msg_group.add_argument(
        '--count', '-c',
        type=int,
        default=1,
        help='Number of datagrams to send (default: 1)'
    )
    msg_group.add_argument(
        '--fake',
        action='store_true',
        help='Generate message text when none is given'
    )
    msg_group.add_argument(
        '--dry-run', '-n',
        action='store_true',
        help='Print formatted lines without sending them'
    )

    # Configuration
    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    config_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    config_group.add_argument(
        '--interactive', '-i',
        action='store_true',
        help='Start the interactive shell'
    )

    return parser.parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    """Override config with command line arguments."""
    if args.host:
        config.peer.host = args.host
    if args.port is not None:
        config.peer.port = args.port
    if args.facility:
        config.client.facility = args.facility
    if args.hostname:
        config.client.hostname = args.hostname
    if args.app_name:
        config.client.app_name = args.app_name


def echo(severity: Severity, line: str) -> None:
    """Print a sent line colored by severity."""
    color = SEVERITY_COLORS.get(severity, Fore.WHITE)
    # Lone surrogates cannot be written to a strict UTF-8 console
    line = line.encode('utf-8', 'backslashreplace').decode('utf-8')
    print(f"{color}{line}{Style.RESET_ALL}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    # Load configuration
    try:
        config = load_config(args.config)
        apply_overrides(config, args)
        validate_config(config)
        severity = Severity.from_name(args.severity)
        client = config.build_client()
    except Exception as e:
        logging.error(f"Failed to load configuration: {e}")
        return 1

    if args.interactive:
        run_interactive(config=config)
        return 0

    if args.count < 1:
        logging.error(f"--count must be at least 1, got {args.count}")
        return 1

    fake = Faker() if args.fake else None
    if not args.message and fake is None:
        logging.error("No message given; pass message text or --fake")
        return 1

    failures = 0
    with client:
        if not args.dry_run:
            try:
                client.open(config.peer.host, config.peer.port)
            except SyslogError as e:
                logging.error(f"Cannot open syslog peer: {e}")
                return 1

        for _ in range(args.count):
            message = ' '.join(args.message) if args.message else fake.sentence()
            now = datetime.now(timezone.utc)
            line = client.format(severity, message, now)
            if not args.dry_run:
                try:
                    client.write(severity, message, now)
                except SyslogError as e:
                    logging.error(f"Send failed: {e}")
                    failures += 1
                    continue
            echo(severity, line)

    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
