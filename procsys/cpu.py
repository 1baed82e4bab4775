"""
CPU information from /sys/devices/system/cpu.

See https://www.kernel.org/doc/Documentation/ABI/testing/sysfs-devices-system-cpu,
https://www.kernel.org/doc/Documentation/cpu-freq/user-guide.txt and
https://www.kernel.org/doc/Documentation/cputopology.txt.
"""

import logging
import os
from dataclasses import replace
from typing import TypeVar

from dacite import from_dict

from procsys.data.cpu import (
    CPUFreq,
    CPUInfo,
    CPUInfoGeneric,
    CPUThermalThrottle,
    CPUTopology,
    ParseWarning,
)
from procsys.util import conversion, misc
from procsys.util.errors import PathAccessError
from procsys.util.system import FS, list_files, read_file

logger = logging.getLogger(__name__)

CPU_ROOT = "devices/system/cpu"

Record = TypeVar("Record")

# file name -> value type, the file name doubles as the dataclass field name
GENERIC_FIELDS: dict[str, type] = {
    "kernel_max": int,
    "offline": list,
    "online": list,
    "possible": list,
    "present": list,
}

CPUFREQ_FIELDS: dict[str, type] = {
    "cpuinfo_cur_freq": int,
    "cpuinfo_max_freq": int,
    "cpuinfo_min_freq": int,
    "cpuinfo_transition_latency": int,
    "scaling_available_governors": str,
    "scaling_cur_freq": int,
    "scaling_driver": str,
    "scaling_governor": str,
    "scaling_max_freq": int,
    "scaling_min_freq": int,
    "scaling_setspeed": int,
}

TOPOLOGY_FIELDS: dict[str, type] = {
    "core_id": int,
    "core_siblings": str,
    "core_siblings_list": str,
    "physical_package_id": int,
    "thread_siblings": str,
    "thread_siblings_list": str,
}

THERMAL_THROTTLE_FIELDS: dict[str, type] = {
    "core_throttle_count": int,
    "package_throttle_count": int,
}


def _parse_directory(
    path: str,
    names: list[str],
    fields: dict[str, type],
    data_class: type[Record],
    warnings: list[ParseWarning],
) -> Record:
    """
    Read every recognised file in names and build a data_class from them.

    Read failures raise PathAccessError, conversion failures are recorded in
    warnings and leave the field at its default.
    """
    values: dict[str, object] = {}
    for name in names:
        kind = fields.get(name)
        if kind is None:
            continue

        file_path = os.path.join(path, name)
        value = read_file(file_path)
        if kind is int:
            values[name] = conversion.parse_int(value, file_path, name, warnings)
        elif kind is list:
            values[name] = conversion.expand_cpu_range(value, file_path, name, warnings)
        else:
            values[name] = value

    return from_dict(data_class=data_class, data=values, config=misc.dacite_config())


def _parse_per_cpu(
    fs: FS,
    online: list[int],
    subsystem: str,
    fields: dict[str, type],
    data_class: type[Record],
    warnings: list[ParseWarning],
) -> dict[int, Record]:
    records: dict[int, Record] = {}
    for cpu in online:
        path = fs.path(CPU_ROOT, f"cpu{cpu}", subsystem)
        try:
            names = list_files(path)
        except PathAccessError as e:
            # Not every cpu or platform exposes every subsystem
            logger.debug(f"no {subsystem} information for cpu{cpu}: {e}")
            records[cpu] = data_class()
            continue

        records[cpu] = _parse_directory(path, names, fields, data_class, warnings)

    return records


def parse_cpu_info_generic(fs: FS) -> CPUInfoGeneric:
    warnings: list[ParseWarning] = []
    path = fs.path(CPU_ROOT)
    generic = _parse_directory(
        path, list_files(path), GENERIC_FIELDS, CPUInfoGeneric, warnings
    )
    return replace(generic, warnings=warnings)


def parse_cpu_freq(
    fs: FS, online: list[int], warnings: list[ParseWarning] | None = None
) -> dict[int, CPUFreq]:
    return _parse_per_cpu(
        fs,
        online,
        "cpufreq",
        CPUFREQ_FIELDS,
        CPUFreq,
        warnings if warnings is not None else [],
    )


def parse_cpu_topology(
    fs: FS, online: list[int], warnings: list[ParseWarning] | None = None
) -> dict[int, CPUTopology]:
    return _parse_per_cpu(
        fs,
        online,
        "topology",
        TOPOLOGY_FIELDS,
        CPUTopology,
        warnings if warnings is not None else [],
    )


def parse_cpu_thermal_throttle(
    fs: FS, online: list[int], warnings: list[ParseWarning] | None = None
) -> dict[int, CPUThermalThrottle]:
    return _parse_per_cpu(
        fs,
        online,
        "thermal_throttle",
        THERMAL_THROTTLE_FIELDS,
        CPUThermalThrottle,
        warnings if warnings is not None else [],
    )


def read_cpu_enumeration(fs: FS | None = None) -> CPUInfoGeneric:
    """
    Read kernel_max and the offline, online, possible and present cpu lists.
    """
    return parse_cpu_info_generic(fs or FS.sys())


def read_cpu_info(fs: FS | None = None) -> CPUInfo:
    """
    Read the cpu enumeration and, for every online cpu, its cpufreq, topology
    and thermal_throttle attributes.

    The per-cpu mappings are keyed by cpu number, in online order, and hold a
    default record for a cpu that lacks the subsystem directory.
    """
    fs = fs or FS.sys()
    generic = parse_cpu_info_generic(fs)
    online = generic.online
    logger.debug(f"reading per-cpu information for {len(online)} online cpus")

    warnings: list[ParseWarning] = list(generic.warnings)
    freq = parse_cpu_freq(fs, online, warnings)
    topology = parse_cpu_topology(fs, online, warnings)
    thermal_throttle = parse_cpu_thermal_throttle(fs, online, warnings)

    return CPUInfo(
        generic=generic,
        freq=freq,
        topology=topology,
        thermal_throttle=thermal_throttle,
        warnings=warnings,
    )
