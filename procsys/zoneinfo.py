"""
Memory zone information from /proc/zoneinfo (since Linux 2.6.13).

Only the node and zone identifiers are extracted from each "Node" header line,
e.g. "Node 0, zone   Normal".
"""

import logging
from typing import Iterable

from procsys.data.zoneinfo import ZoneInfo
from procsys.util.errors import MalformedInputError, PathAccessError
from procsys.util.system import FS

logger = logging.getLogger(__name__)


def parse_zone_info(lines: Iterable[str]) -> list[ZoneInfo]:
    """
    Parse zoneinfo text, one ZoneInfo per "Node" line, in file order.
    """
    zones: list[ZoneInfo] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.startswith("Node"):
            continue
        parts = line.split()
        if len(parts) < 4:
            raise MalformedInputError(
                f"zoneinfo line {lineno}: expected 'Node <id>, zone <name>', got {line.strip()!r}"
            )
        zones.append(ZoneInfo(node=parts[1].rstrip(","), zone=parts[3].rstrip(",")))

    return zones


def read_zone_info(fs: FS | None = None) -> list[ZoneInfo]:
    """
    Read <proc>/zoneinfo from fs, or from the default proc mount point.
    """
    fs = fs or FS.proc()
    path = fs.path("zoneinfo")
    logger.debug(f"reading {path}")
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            return parse_zone_info(fh)
    except OSError as e:
        raise PathAccessError(path, e.strerror or str(e)) from e
