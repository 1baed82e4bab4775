import os
from pathlib import Path

from procsys.util.errors import PathAccessError

DEFAULT_PROC_MOUNT_POINT = "/proc"
DEFAULT_SYS_MOUNT_POINT = "/sys"


def get_proc_mount_point() -> str:
    return os.environ.get("PROCSYS_PROC_MOUNT") or DEFAULT_PROC_MOUNT_POINT


def get_sys_mount_point() -> str:
    return os.environ.get("PROCSYS_SYS_MOUNT") or DEFAULT_SYS_MOUNT_POINT


class FS:
    """
    A pseudo-filesystem mounted at a given root, e.g. /proc or /sys.
    """

    def __init__(self, mount_point: str | Path):
        mount_point = str(mount_point)
        if not os.path.isdir(mount_point):
            raise PathAccessError(mount_point, "mount point is not a directory")
        self.mount_point = mount_point

    def __repr__(self) -> str:
        return f"FS(mount_point={self.mount_point!r})"

    @classmethod
    def proc(cls) -> "FS":
        return cls(get_proc_mount_point())

    @classmethod
    def sys(cls) -> "FS":
        return cls(get_sys_mount_point())

    def path(self, *parts: str) -> str:
        """
        Return the absolute path of parts relative to the mount point.
        """
        return os.path.join(self.mount_point, *parts)


def read_file(path: str) -> str:
    """
    Read a pseudo-file in full and return its contents with surrounding
    whitespace removed.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            return fh.read().strip()
    except OSError as e:
        raise PathAccessError(path, e.strerror or str(e)) from e


def list_files(path: str) -> list[str]:
    """
    Return the sorted names of the non-directory entries under path.
    """
    try:
        with os.scandir(path) as it:
            return sorted(entry.name for entry in it if not entry.is_dir())
    except OSError as e:
        raise PathAccessError(path, e.strerror or str(e)) from e
