"""
Host-specific configuration lookup.

Picks `{hostname}-settings.env` when a machine has its own configuration,
otherwise the shared `settings.env`.
"""

import socket
from pathlib import Path


BASE_SETTINGS_FILE = "settings.env"


def get_hostname() -> str:
    """Get the current hostname (without domain)."""
    return socket.gethostname().split('.')[0]


def get_hostname_settings_file() -> str:
    """
    Get the settings file for this host.

    Returns:
        str: `{hostname}-settings.env` if it exists, else `settings.env`
    """
    host_settings = Path(f"{get_hostname()}-settings.env")
    if host_settings.exists():
        return str(host_settings)
    return BASE_SETTINGS_FILE

