"""Run up to four commands connected by pipes, read one per line."""

from __future__ import annotations

import os
import subprocess
import sys

MAX_COMMANDS = 4
FAILED_START = 2


class PipelineError(Exception):
    """Raised when the commands for a pipeline cannot be read or run."""


def tokenize(line: str) -> list[str]:
    """Split a command line on spaces, dropping empty fields."""
    return [token for token in line.split(" ") if token]


def read_commands(stream) -> list[str]:
    """Read up to four command lines, stopping early at a blank line.

    Raises PipelineError if the input ends before a blank line or the
    fourth command.
    """
    commands = []
    while len(commands) < MAX_COMMANDS:
        line = stream.readline()
        if not line:
            raise PipelineError("input ended before the command list was complete")
        if line[0] in "\n\0":
            break
        commands.append(line[:-1] if line.endswith("\n") else line)
    return commands


def _executable(program: str) -> str:
    # Programs are run by path, without a search of PATH.
    return program if "/" in program else os.path.join(os.curdir, program)


def _start(argv, stdin, stdout):
    if not argv:
        return None
    try:
        return subprocess.Popen(
            argv,
            executable=_executable(argv[0]),
            env={},
            stdin=stdin,
            stdout=stdout,
        )
    except OSError:
        return None


def run_pipeline(commands) -> list[int]:
    """Run the commands with each one's output piped into the next.

    Returns the exit status of every stage in order; a stage that could
    not be started counts as having exited with status 2.
    """
    commands = list(commands)
    if not 1 <= len(commands) <= MAX_COMMANDS:
        raise PipelineError(
            f"expected between 1 and {MAX_COMMANDS} commands, got {len(commands)}"
        )
    processes = []
    previous_read = None
    try:
        for index, command in enumerate(commands):
            last = index == len(commands) - 1
            read_end = write_end = None
            if not last:
                read_end, write_end = os.pipe()
            try:
                processes.append(_start(tokenize(command), previous_read, write_end))
            finally:
                if previous_read is not None:
                    os.close(previous_read)
                    previous_read = None
                if write_end is not None:
                    os.close(write_end)
            previous_read = read_end
    finally:
        if previous_read is not None:
            os.close(previous_read)
    return [FAILED_START if proc is None else proc.wait() for proc in processes]


def main(argv=None) -> int:
    """Read commands from standard input and run them as one pipeline."""
    try:
        run_pipeline(read_commands(sys.stdin))
    except PipelineError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())