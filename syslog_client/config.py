# syslog_client/config.py
"""Configuration loader and validator."""

import yaml
import os
from dataclasses import dataclass, field
from typing import Optional, Union

from .codes import Facility
from .client import SyslogClient
from .transport import DEFAULT_PORT


@dataclass
class ClientConfig:
    facility: Union[str, int] = "daemon"
    hostname: Optional[str] = None
    app_name: str = "syslog-client"


@dataclass
class PeerConfig:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT


@dataclass
class AppConfig:
    client: ClientConfig = field(default_factory=ClientConfig)
    peer: PeerConfig = field(default_factory=PeerConfig)

    def build_client(self) -> SyslogClient:
        """Create an unopened client with the configured identity."""
        return SyslogClient(
            Facility.from_name(self.client.facility),
            hostname=self.client.hostname,
            app_name=self.client.app_name
        )


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from YAML file."""

    # Default configuration
    default_config = {
        'client': {
            'facility': 'daemon',
            'hostname': None,
            'app_name': 'syslog-client'
        },
        'peer': {
            'host': '127.0.0.1',
            'port': DEFAULT_PORT
        }
    }

    if os.path.exists(config_path):
        with open(config_path, 'r') as f:
            file_config = yaml.safe_load(f) or {}

        if not isinstance(file_config, dict):
            raise ValueError(f"{config_path}: top level must be a mapping")

        # Merge configurations
        for key in default_config:
            section = file_config.get(key)
            if section is None:
                continue
            if not isinstance(section, dict):
                raise ValueError(f"{config_path}: '{key}' must be a mapping")
            unknown = set(section) - set(default_config[key])
            if unknown:
                raise ValueError(f"{config_path}: unknown {key} keys: {', '.join(sorted(unknown))}")
            default_config[key].update(section)

    config = AppConfig(
        client=ClientConfig(**default_config['client']),
        peer=PeerConfig(**default_config['peer'])
    )
    validate_config(config)
    return config


def validate_config(config: AppConfig) -> None:
    """Raise ValueError for settings that can never work."""
    Facility.from_name(config.client.facility)

    port = config.peer.port
    if not isinstance(port, int) or isinstance(port, bool) or not 0 < port <= 65535:
        raise ValueError(f"peer.port must be 1-65535, got {port!r}")

    if not config.peer.host:
        raise ValueError("peer.host must not be empty")
