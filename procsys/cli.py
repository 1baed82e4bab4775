#!/usr/bin/env python3

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import click

from procsys import cpu, zoneinfo
from procsys.util import log
from procsys.util.errors import ProcsysError
from procsys.util.system import FS

context_settings = dict(help_option_names=["-h", "--help"])
logger: logging.Logger = logging.getLogger(__name__)


def render_output(snapshot: object) -> str:
    if isinstance(snapshot, list):
        data: dict[str, object] = {"records": [asdict(item) for item in snapshot]}
    else:
        data = asdict(snapshot)
    return json.dumps({"success": True, **data}, indent=2)


def run(reader, fs_factory):
    try:
        snapshot = reader(fs_factory())
    except ProcsysError as e:
        logger.error(f"read failed: {e}")
        click.echo(json.dumps({"success": False, "error": str(e)}))
        sys.exit(1)

    click.echo(render_output(snapshot))


@click.group(
    help="Dump /proc and /sys hardware state as JSON",
    context_settings=context_settings,
)
@click.option("-d", "--debug", default=False, is_flag=True, help="Enable debug logging")
@click.option(
    "-l",
    "--logfile",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file instead of stderr",
)
@click.option(
    "--proc-root",
    required=False,
    type=click.Path(file_okay=False),
    help="Mount point of the proc filesystem",
)
@click.option(
    "--sys-root",
    required=False,
    type=click.Path(file_okay=False),
    help="Mount point of the sys filesystem",
)
@click.pass_context
def main(ctx, debug: bool, logfile: Path | None, proc_root: str, sys_root: str):
    global logger

    logger = log.configure(debug=debug, name=__name__, logfile=logfile)
    logger.debug(f"entering with proc_root={proc_root} sys_root={sys_root}")

    ctx.ensure_object(dict)
    ctx.obj["proc_fs"] = lambda: FS(proc_root) if proc_root else FS.proc()
    ctx.obj["sys_fs"] = lambda: FS(sys_root) if sys_root else FS.sys()


@main.command(name="zoneinfo", help="Get memory zones from /proc/zoneinfo")
@click.pass_context
def zoneinfo_command(ctx):
    run(zoneinfo.read_zone_info, ctx.obj["proc_fs"])


@main.command(
    name="cpu-enumeration",
    help="Get kernel_max and the offline, online, possible and present cpus",
)
@click.pass_context
def cpu_enumeration_command(ctx):
    run(cpu.read_cpu_enumeration, ctx.obj["sys_fs"])


@main.command(
    name="cpu-info",
    help="Get cpufreq, topology and thermal_throttle for every online cpu",
)
@click.pass_context
def cpu_info_command(ctx):
    run(cpu.read_cpu_info, ctx.obj["sys_fs"])


if __name__ == "__main__":
    main()
