"""Shared pytest fixtures for procsys tests."""

import logging

import pytest
from pathlib import Path

from procsys.util.system import FS


ZONEINFO = """\
Node 0, zone      DMA
  per-node stats
      nr_inactive_anon 230981
      nr_active_anon 547580
  pages free     3952
        min      33
        low      41
        high     49
        spanned  4095
        present  3975
        managed  3956
        protection: (0, 2877, 7826, 7826, 7826)
  pagesets
    cpu: 0
              count: 0
              high:  0
              batch: 1
  node_unreclaimable:  0
  start_pfn:           1
Node 0, zone    DMA32
  pages free     204252
        min      19510
        low      21059
        high     22608
  start_pfn:           4096
Node 0, zone   Normal
  pages free     56112
        min      34025
  start_pfn:           1048576
Node 0, zone  Movable
  pages free     0
Node 0, zone   Device
  pages free     0
"""

CPU_TREE = {
    "devices/system/cpu/kernel_max": "2047\n",
    "devices/system/cpu/offline": "16-31,39-88\n",
    "devices/system/cpu/online": "0-15,32-38,89-95\n",
    "devices/system/cpu/possible": "0-127\n",
    "devices/system/cpu/present": "0-95\n",
    "devices/system/cpu/modalias": "cpu:type:x86,ven0002fam0017mod0031:feature:,0000\n",
    "devices/system/cpu/uevent": "",
    "devices/system/cpu/cpuidle/current_driver": "intel_idle\n",
    # AMD Epyc, no thermal_throttle
    "devices/system/cpu/cpu0/cpufreq/affected_cpus": "0\n",
    "devices/system/cpu/cpu0/cpufreq/cpuinfo_cur_freq": "2300000\n",
    "devices/system/cpu/cpu0/cpufreq/cpuinfo_max_freq": "2300000\n",
    "devices/system/cpu/cpu0/cpufreq/cpuinfo_min_freq": "1200000\n",
    "devices/system/cpu/cpu0/cpufreq/cpuinfo_transition_latency": "0\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_available_governors": "performance\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_cur_freq": "2300000\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_driver": "acpi-cpufreq\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_governor": "performance\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_max_freq": "2300000\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_min_freq": "1200000\n",
    "devices/system/cpu/cpu0/cpufreq/scaling_setspeed": "<unsupported>\n",
    "devices/system/cpu/cpu0/topology/core_id": "0\n",
    "devices/system/cpu/cpu0/topology/core_siblings": "00000000,00000000,00000000,00ffffff,000000ff\n",
    "devices/system/cpu/cpu0/topology/core_siblings_list": "0-23,48-71\n",
    "devices/system/cpu/cpu0/topology/physical_package_id": "0\n",
    "devices/system/cpu/cpu0/topology/thread_siblings": "00000000,00000000,00000000,00010000,00000001\n",
    "devices/system/cpu/cpu0/topology/thread_siblings_list": "0,48\n",
    # Intel Skylake
    "devices/system/cpu/cpu1/cpufreq/cpuinfo_cur_freq": "1178125\n",
    "devices/system/cpu/cpu1/cpufreq/cpuinfo_max_freq": "3700000\n",
    "devices/system/cpu/cpu1/cpufreq/cpuinfo_min_freq": "1000000\n",
    "devices/system/cpu/cpu1/cpufreq/cpuinfo_transition_latency": "0\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_available_governors": "performance powersave\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_cur_freq": "1154062\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_driver": "intel_pstate\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_governor": "powersave\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_max_freq": "3700000\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_min_freq": "1000000\n",
    "devices/system/cpu/cpu1/cpufreq/scaling_setspeed": "<unsupported>\n",
    "devices/system/cpu/cpu1/topology/core_id": "1\n",
    "devices/system/cpu/cpu1/topology/core_siblings": "ffff,ffff0000,ffff\n",
    "devices/system/cpu/cpu1/topology/core_siblings_list": "0-15,32-47\n",
    "devices/system/cpu/cpu1/topology/physical_package_id": "0\n",
    "devices/system/cpu/cpu1/topology/thread_siblings": "0002,00000000,00000002\n",
    "devices/system/cpu/cpu1/topology/thread_siblings_list": "1,33\n",
    "devices/system/cpu/cpu1/thermal_throttle/core_throttle_count": "30\n",
    "devices/system/cpu/cpu1/thermal_throttle/package_throttle_count": "45\n",
    # IBM Power8, no thermal_throttle
    "devices/system/cpu/cpu8/cpufreq/cpuinfo_cur_freq": "3690000\n",
    "devices/system/cpu/cpu8/cpufreq/cpuinfo_max_freq": "3690000\n",
    "devices/system/cpu/cpu8/cpufreq/cpuinfo_min_freq": "2061000\n",
    "devices/system/cpu/cpu8/cpufreq/cpuinfo_transition_latency": "0\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_available_governors": "ondemand userspace powersave conservative performance\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_cur_freq": "3690000\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_driver": "powernv-cpufreq\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_governor": "ondemand\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_max_freq": "3690000\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_min_freq": "2061000\n",
    "devices/system/cpu/cpu8/cpufreq/scaling_setspeed": "<unsupported>\n",
    "devices/system/cpu/cpu8/cpufreq/stats/time_in_state": "3690000 1234\n2061000 42\n",
    "devices/system/cpu/cpu8/topology/core_id": "48\n",
    "devices/system/cpu/cpu8/topology/core_siblings": "00000000,00000000,00000000,00000000,03030303\n",
    "devices/system/cpu/cpu8/topology/core_siblings_list": "0-1,8-9,16-17,24-25,32-33\n",
    "devices/system/cpu/cpu8/topology/physical_package_id": "0\n",
    "devices/system/cpu/cpu8/topology/thread_siblings": "00000000,00000000,00000000,00000000,00000300\n",
    "devices/system/cpu/cpu8/topology/thread_siblings_list": "8-9\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (relative path -> contents) under root."""
    for relative, contents in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents)
    return root


@pytest.fixture
def proc_root(tmp_path):
    """Provide a proc fixture tree containing zoneinfo."""
    return write_tree(tmp_path / "proc", {"zoneinfo": ZONEINFO})


@pytest.fixture
def sys_root(tmp_path):
    """Provide a sys fixture tree with cpu0 (AMD), cpu1 (Intel) and cpu8 (Power8)."""
    return write_tree(tmp_path / "sys", CPU_TREE)


@pytest.fixture
def proc_fs(proc_root):
    return FS(proc_root)


@pytest.fixture
def sys_fs(sys_root):
    return FS(sys_root)


@pytest.fixture
def make_sys_fs(tmp_path):
    """Build a sys FS from the default cpu tree with files overridden or removed."""
    def _make_sys_fs(overrides=None, remove=()):
        files = dict(CPU_TREE)
        files.update(overrides or {})
        for relative in remove:
            files.pop(relative)
        return FS(write_tree(tmp_path / "custom-sys", files))
    return _make_sys_fs


@pytest.fixture(autouse=True)
def reset_loggers():
    """Undo log.configure() so caplog keeps seeing procsys records."""
    yield
    for name in ("procsys", "procsys.cli"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
