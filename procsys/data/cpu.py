from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParseWarning:
    path: str = ""
    field: str = ""
    value: str = ""
    message: str = ""


@dataclass(frozen=True)
class CPUFreq:
    # /sys/devices/system/cpu/cpu*/cpufreq/*, frequencies in kHz
    cpuinfo_cur_freq: int = 0
    cpuinfo_max_freq: int = 0
    cpuinfo_min_freq: int = 0
    cpuinfo_transition_latency: int = 0  # ns
    scaling_available_governors: str = ""
    scaling_cur_freq: int = 0
    scaling_driver: str = ""
    scaling_governor: str = ""
    scaling_max_freq: int = 0
    scaling_min_freq: int = 0
    scaling_setspeed: int = 0


@dataclass(frozen=True)
class CPUTopology:
    # /sys/devices/system/cpu/cpu*/topology/*
    core_id: int = 0
    core_siblings: str = ""
    core_siblings_list: str = ""
    physical_package_id: int = 0
    thread_siblings: str = ""
    thread_siblings_list: str = ""


@dataclass(frozen=True)
class CPUThermalThrottle:
    # /sys/devices/system/cpu/cpu*/thermal_throttle/*
    core_throttle_count: int = 0
    package_throttle_count: int = 0


@dataclass(frozen=True)
class CPUInfoGeneric:
    # /sys/devices/system/cpu/{kernel_max,offline,online,possible,present}
    kernel_max: int = 0
    offline: list[int] = field(default_factory=list)
    online: list[int] = field(default_factory=list)
    possible: list[int] = field(default_factory=list)
    present: list[int] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)


@dataclass(frozen=True)
class CPUInfo:
    generic: CPUInfoGeneric = field(default_factory=CPUInfoGeneric)
    freq: dict[int, CPUFreq] = field(default_factory=dict)
    topology: dict[int, CPUTopology] = field(default_factory=dict)
    thermal_throttle: dict[int, CPUThermalThrottle] = field(default_factory=dict)
    warnings: list[ParseWarning] = field(default_factory=list)
