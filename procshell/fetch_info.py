"""Summaries of system and process information read from a procfs tree."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

DAY = 86400
HOUR = 3600
MINUTE = 60

DEFAULT_PROC_ROOT = "/proc"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does, yielding 0 when none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _after_colon(line: str) -> str:
    """Return what follows the first colon, without leading spaces."""
    _, sep, rest = line.partition(":")
    return rest.lstrip(" ") if sep else ""


def _with_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def _first_line(text: str) -> str:
    return text.splitlines(keepends=True)[0] if text else ""


def format_cpu_info(text: str) -> str:
    """Report model names up to and including the first ``cpu cores`` entry."""
    out = []
    for line in text.splitlines(keepends=True):
        if line.startswith("model name"):
            out.append("model name:   " + _with_newline(_after_colon(line)))
        if line.startswith("cpu cores"):
            out.append("cpu cores:   " + _with_newline(_after_colon(line)))
            break
    return "".join(out)


def format_version(text: str) -> str:
    """Report the kernel version string from the first line of a version file."""
    line = _first_line(text)
    if not line:
        return ""
    return "Linux version:" + _with_newline(line[13:])


def format_memory(text: str) -> str:
    """Report the total memory from the first line of a meminfo file."""
    line = _first_line(text)
    if ":" not in line:
        return ""
    return "MemTotal:   " + _with_newline(_after_colon(line))


def format_uptime(text: str) -> str:
    """Report the uptime in days, hours, minutes and seconds."""
    tokens = _first_line(text).split(" ")
    total = _atoi(tokens[0]) if tokens else 0
    days, rest = divmod(total, DAY)
    hours, rest = divmod(rest, HOUR)
    minutes, seconds = divmod(rest, MINUTE)
    return (
        f"Uptime: {days} days, {hours} hours, "
        f"{minutes} minutes, {seconds} seconds\n"
    )


def format_process(pid, status_text: str, cmdline) -> str:
    """Report name, command file, thread count and context switches of a process."""
    if isinstance(cmdline, bytes):
        cmdline = cmdline.decode(errors="replace")
    command = cmdline.split("\0", 1)[0]

    out = [f"Process number:   {pid}\n"]
    switches = 0
    for line in status_text.splitlines(keepends=True):
        if line.startswith("Name"):
            out.append(_with_newline(line))
            out.append(f"Filname (if any):   {command}\n")
        if line.startswith("Threads"):
            _, sep, rest = line.partition(":")
            if sep:
                out.append(f"Threads:   {_atoi(rest)}\n")
        if line.startswith("voluntary_ctxt_switches") or line.startswith(
            "nonvoluntary_ctxt_switches"
        ):
            parts = [part for part in line.split(":") if part]
            if len(parts) > 1:
                switches += _atoi(parts[1])
    out.append(f"Total Context switches:   {switches}\n")
    return "".join(out)


def system_report(proc_root=DEFAULT_PROC_ROOT) -> str:
    """Build the CPU, version, memory and uptime report from ``proc_root``.

    A section whose file cannot be read is left out and the failure is
    reported on standard error.
    """
    root = Path(proc_root)
    sections = (
        ("cpuinfo", format_cpu_info),
        ("version", format_version),
        ("meminfo", format_memory),
        ("uptime", format_uptime),
    )
    out = []
    for name, formatter in sections:
        path = root / name
        try:
            text = path.read_text(errors="replace")
        except OSError as exc:
            print(f"Failed to open {path}: {exc.strerror}", file=sys.stderr)
            continue
        out.append(formatter(text))
    return "".join(out)


def process_report(pid, proc_root=DEFAULT_PROC_ROOT) -> str:
    """Build the report for process ``pid``.

    Raises ProcessLookupError when the process has no entry, and OSError
    when its files cannot be read.
    """
    process_dir = Path(proc_root) / str(pid)
    if not process_dir.exists():
        raise ProcessLookupError(f"Process number {pid} not found")
    cmdline = (process_dir / "cmdline").read_bytes()
    status = (process_dir / "status").read_text(errors="replace")
    return format_process(pid, status, cmdline)


def main(argv=None) -> int:
    """Print the system report, or the report of the process given as argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "fetch-info"
        print(f"Wrong Usage: {program}")
        return 1
    if not args:
        sys.stdout.write(system_report())
        return 0
    try:
        sys.stdout.write(process_report(args[0]))
    except ProcessLookupError as exc:
        print(f"{exc}: No such file or directory", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())