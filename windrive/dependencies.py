from functools import lru_cache
from typing import Dict, Any

from .config import Settings
from .services.command_runner import CommandRunner
from .services.directory_stat import AiofilesWalker, BaseWalker, DirectoryStatAccumulator
from .services.drive_stats import DriveStatsService
from .services.network_drives import NetworkDriveService

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Hent Settings singleton instance."""
    return Settings()


def get_command_runner() -> CommandRunner:
    if "command_runner" not in _singletons:
        _singletons["command_runner"] = CommandRunner(get_settings())
    return _singletons["command_runner"]


def get_walker() -> BaseWalker:
    if "walker" not in _singletons:
        _singletons["walker"] = AiofilesWalker()
    return _singletons["walker"]


def get_directory_stat_accumulator() -> DirectoryStatAccumulator:
    if "directory_stat_accumulator" not in _singletons:
        _singletons["directory_stat_accumulator"] = DirectoryStatAccumulator(
            walker=get_walker()
        )
    return _singletons["directory_stat_accumulator"]


def get_network_drive_service() -> NetworkDriveService:
    if "network_drive_service" not in _singletons:
        _singletons["network_drive_service"] = NetworkDriveService(
            settings=get_settings(),
            command_runner=get_command_runner(),
        )
    return _singletons["network_drive_service"]


def get_drive_stats_service() -> DriveStatsService:
    if "drive_stats_service" not in _singletons:
        _singletons["drive_stats_service"] = DriveStatsService(
            settings=get_settings(),
            command_runner=get_command_runner(),
        )
    return _singletons["drive_stats_service"]


def reset_singletons() -> None:
    """Reset all singleton instances (used by tests)."""
    _singletons.clear()
    get_settings.cache_clear()
