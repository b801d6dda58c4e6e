"""
Network Drive Module

Wraps the Windows `net use` command: mounting shares to the next free
drive letter, unmounting them again and listing what's currently mounted.
"""

from .network_drive_service import NetworkDriveService

__all__ = [
    "NetworkDriveService",
]
