import os


def to_windows_path(path: str) -> str:
    """
    Replace `/` with `\\` so a unix style path can be used as a windows path.

    >>> to_windows_path("some/random/folder")
    'some\\\\random\\\\folder'
    """
    return path.replace("/", "\\")


def to_native_path(path: str) -> str:
    """Replace `/` with the separator of the host running us."""
    if os.sep == "/":
        return path
    return path.replace("/", os.sep)


def to_unc(server: str) -> str:
    return f"//{server}"


def to_unc_path(server: str, share: str) -> str:
    """
    Build a UNC path from a `server` name and a unix style `share` path.

    >>> to_unc_path("server", "some/path/to/a/log")
    '\\\\\\\\server\\\\some\\\\path\\\\to\\\\a\\\\log'
    """
    return to_windows_path(f"{to_unc(server)}/{share}")
