from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from .utils.host_config import get_hostname_settings_file


class Settings(BaseSettings):
    # OS commands
    net_executable: str = "net"
    wmic_executable: str = "wmic"
    powershell_executable: str = "powershell"
    command_encoding: str = "utf-8"  # Console output encoding of spawned commands
    command_timeout_seconds: Optional[float] = None  # None = wait for the command to finish

    # `net use` output starts with a fixed block of header lines
    net_use_header_lines: int = 6

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = "logs/windrive.log"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_file=get_hostname_settings_file(), extra="ignore"
    )

    @property
    def log_directory(self) -> Path:
        """Returnerer log directory som Path objekt"""
        return Path(self.log_file_path).parent

