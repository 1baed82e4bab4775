from dataclasses import dataclass


@dataclass(frozen=True)
class ZoneInfo:
    node: str = ""
    zone: str = ""
