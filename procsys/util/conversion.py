import logging
import re

from procsys.data.cpu import ParseWarning

logger = logging.getLogger(__name__)

# Plain base 10, no "_" separators or non-ASCII digits
DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _warn(
    warnings: list[ParseWarning] | None, path: str, field: str, value: str, message: str
):
    logger.debug(f"{path}: {field}={value!r}: {message}")
    if warnings is not None:
        warnings.append(ParseWarning(path=path, field=field, value=value, message=message))


def _to_int(value: str) -> int:
    if not DECIMAL.fullmatch(value):
        raise ValueError(f"invalid literal for int() with base 10: {value!r}")
    return int(value, 10)


def parse_int(
    value: str,
    path: str = "",
    field: str = "",
    warnings: list[ParseWarning] | None = None,
) -> int | None:
    """
    Convert a trimmed sysfs value to an integer.

    A value that is not a base 10 integer is logged and recorded in warnings,
    and None is returned so the caller can fall back to the field default.
    """
    try:
        return _to_int(value)
    except ValueError as e:
        _warn(warnings, path, field, value, str(e))
        return None


def expand_cpu_range(
    value: str,
    path: str = "",
    field: str = "",
    warnings: list[ParseWarning] | None = None,
) -> list[int]:
    """
    Expand a kernel cpulist such as "0-23,48-71" or "0,2,4-7" into a list of
    integers, keeping the order of the components.

    Malformed components contribute nothing and are recorded in warnings.
    """
    cpus: list[int] = []
    if value == "":
        return cpus

    for component in value.split(","):
        component = component.strip()
        first_raw, sep, last_raw = component.partition("-")
        try:
            first = _to_int(first_raw)
            last = _to_int(last_raw) if sep else first
        except ValueError:
            _warn(warnings, path, field, component, "invalid cpu range component")
            continue
        cpus.extend(range(first, last + 1))

    return cpus
