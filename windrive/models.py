from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class FileRecord(BaseModel):
    """
    Snapshot of a single regular file taken while walking a directory.

    `name` mirrors `path` so a record is self-describing when pulled out of
    the `files` mapping of a DirectoryStatResult.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Full path of the file (same as path)")
    path: str = Field(..., description="Full path in the host's native separator form")
    size: int = Field(..., ge=0, description="File size in bytes")
    created_time: datetime = Field(..., description="Birth time, or ctime where the OS has none")
    modified_time: datetime = Field(..., description="Last modification time")
    accessed_time: datetime = Field(..., description="Last access time")
    mode: int = Field(default=0, description="Raw st_mode bits")
    inode: int = Field(default=0, description="st_ino (file index on Windows)")
    device: int = Field(default=0, description="st_dev (volume serial number on Windows)")
    nlink: int = Field(default=1, description="Number of hard links")
    uid: int = Field(default=0, description="Owner user id (0 on Windows)")
    gid: int = Field(default=0, description="Owner group id (0 on Windows)")
    blocks: Optional[int] = Field(None, description="Allocated 512-byte blocks, POSIX only")
    block_size: Optional[int] = Field(None, description="Preferred I/O block size, POSIX only")
    file_attributes: Optional[int] = Field(None, description="FILE_ATTRIBUTE_* bits, Windows only")


class DirectoryStatResult(BaseModel):
    """Aggregated size, file count and per-file metadata of a directory tree."""

    total_size: int = Field(default=0, ge=0, description="Sum of all file sizes in bytes")
    file_count: int = Field(default=0, ge=0, description="Number of files found")
    files: Dict[str, FileRecord] = Field(default_factory=dict, description="Files keyed by path")


class DriveSpace(BaseModel):
    """Free space and total size of a drive, in bytes."""

    free_space: int = Field(..., ge=0)
    size: int = Field(..., ge=0)


class MountedDrive(BaseModel):
    """A drive letter listed by `net use` and the UNC path behind it."""

    letter: str = Field(..., description="Drive letter like Z:")
    unc: str = Field(..., description="UNC path like \\\\server\\share")
    status: Optional[str] = Field(None, description="Connection status reported by net use")


class LogicalDisk(BaseModel):
    """
    A Win32_LogicalDisk object as returned by PowerShell's ConvertTo-Json.

    Only the commonly used properties are typed; everything else WMI reports
    is kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    device_id: str = Field(..., alias="DeviceID")
    free_space: Optional[int] = Field(None, alias="FreeSpace")
    size: Optional[int] = Field(None, alias="Size")
    volume_name: Optional[str] = Field(None, alias="VolumeName")
    drive_type: Optional[int] = Field(None, alias="DriveType")


class NetworkCredentials(BaseModel):
    """`user` and `password` used to log into a network share."""

    user: str = Field(..., min_length=1)
    password: SecretStr

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("Please specify both `user` and `password` for credentials")
        return v


class CommandResult(BaseModel):
    """Buffered outcome of a finished OS command."""

    command: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
