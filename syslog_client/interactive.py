# syslog_client/interactive.py
"""Interactive CLI mode for the syslog client."""

import cmd
from typing import Optional

from .client import SyslogClient
from .codes import Severity
from .config import AppConfig, load_config
from .errors import SyslogError


class InteractiveCLI(cmd.Cmd):
    """Interactive command-line interface around one SyslogClient."""

    intro = """
╔═══════════════════════════════════════════════════════════════╗
║             SYSLOG CLIENT - Interactive Mode                  ║
╠═══════════════════════════════════════════════════════════════╣
║  Commands:                                                    ║
║    open [host] [port]        - Open the UDP destination       ║
║    close                     - Close the socket               ║
║    write <severity> <text>   - Send one message               ║
║    status                    - Show client state              ║
║    config                    - Show current configuration     ║
║    help                      - Show this help                 ║
║    quit                      - Exit the program               ║
╚═══════════════════════════════════════════════════════════════╝
"""
    prompt = "syslog> "

    def __init__(self, config_path: str = "config.yaml", config: Optional[AppConfig] = None):
        super().__init__()
        self.config = config if config is not None else load_config(config_path)
        self.client: SyslogClient = self.config.build_client()

    def do_open(self, arg: str) -> None:
        """Open the destination. Usage: open [host] [port]"""
        parts = arg.split()
        host = parts[0] if parts else self.config.peer.host
        port = self.config.peer.port

        if len(parts) > 1:
            try:
                port = int(parts[1])
            except ValueError:
                print(f"Invalid port: {parts[1]}")
                return

        try:
            peer = self.client.open(host, port)
        except SyslogError as e:
            print(f"Open failed: {e}")
            return
        print(f"Opened {peer}")

    def do_close(self, arg: str) -> None:
        """Close the socket."""
        self.client.close()
        print("Closed.")

    def do_write(self, arg: str) -> None:
        """Send a message. Usage: write <severity> <message>"""
        severity_name, _, message = arg.strip().partition(' ')
        if not severity_name:
            print("Usage: write <severity> <message>")
            return

        try:
            severity = Severity.from_name(severity_name)
        except ValueError as e:
            print(e)
            return

        try:
            sent = self.client.write(severity, message)
        except SyslogError as e:
            print(f"Send failed: {e}")
            return
        print(f"Sent {sent} bytes")

    def do_status(self, arg: str) -> None:
        """Show client state."""
        state = f"open -> {self.client.peer}" if self.client.is_open else "closed"
        print(f"Facility:  {self.client.facility.name.lower()} ({int(self.client.facility)})")
        print(f"Hostname:  {self.client.hostname}")
        print(f"App name:  {self.client.app_name}")
        print(f"PROCID:    {self.client.procid}")
        print(f"Socket:    {state}")

    def do_config(self, arg: str) -> None:
        """Show current configuration."""
        print("\n=== Current Configuration ===")
        print(f"Facility:    {self.config.client.facility}")
        print(f"Hostname:    {self.config.client.hostname or '(this machine)'}")
        print(f"App name:    {self.config.client.app_name}")
        print(f"Syslog Host: {self.config.peer.host}:{self.config.peer.port}")
        print()

    def do_quit(self, arg: str) -> bool:
        """Exit the program."""
        self.client.close()
        print("Goodbye!")
        return True

    def do_exit(self, arg: str) -> bool:
        """Exit the program."""
        return self.do_quit(arg)

    def do_EOF(self, arg: str) -> bool:
        print()
        return self.do_quit(arg)

    def emptyline(self) -> None:
        """Do nothing on empty line."""
        pass

    def default(self, line: str) -> None:
        """Handle unknown commands."""
        print(f"Unknown command: {line}")
        print("Type 'help' for available commands.")


def run_interactive(config_path: str = "config.yaml", config: Optional[AppConfig] = None) -> None:
    """Run the interactive CLI."""
    cli = InteractiveCLI(config_path, config=config)
    cli.cmdloop()
