"""An interactive shell with a working-directory prompt, ``cd`` and background jobs."""

from __future__ import annotations

import os
import socket
import subprocess
import sys
from dataclasses import dataclass, field

from procshell.pipeline import tokenize


@dataclass
class BackgroundJob:
    """A command started in the background."""

    pid: int
    description: str
    process: subprocess.Popen = field(repr=False, compare=False)

    def finished(self) -> bool:
        return self.process.poll() is not None


class JobTable:
    """The background jobs started by a shell, in the order they were started."""

    def __init__(self) -> None:
        self._jobs: list[BackgroundJob] = []

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self):
        return iter(list(self._jobs))

    def add(self, args) -> BackgroundJob:
        """Start ``args`` in the background and record it.

        The program is looked up on PATH. Raises OSError if it cannot be started.
        """
        args = list(args)
        if not args:
            raise ValueError("no command given")
        cwd = os.getcwd()
        process = subprocess.Popen(args)
        argument = args[1] if len(args) > 1 else ""
        job = BackgroundJob(process.pid, f"{cwd}/{args[0]} {argument}", process)
        self._jobs.append(job)
        return job

    def reap(self) -> list[BackgroundJob]:
        """Remove the jobs that have finished and return them."""
        done = [job for job in self._jobs if job.finished()]
        self._jobs = [job for job in self._jobs if job not in done]
        return done

    def listing(self) -> str:
        """Describe the running jobs, one per line, followed by their total."""
        if not self._jobs:
            return "No background jobs running.\n"
        lines = [f"{job.pid}: {job.description}\n" for job in self._jobs]
        lines.append(f"Total background jobs: {len(self._jobs)}\n")
        return "".join(lines)


def build_prompt() -> str:
    """Return the prompt ``user@host: cwd > ``.

    Raises OSError if the login name or working directory is unavailable.
    """
    username = os.getlogin()
    hostname = socket.gethostname()
    cwd = os.getcwd()
    return f"{username}@{hostname}: {cwd} > "


def expand_home(path: str, home: str) -> str:
    """Replace a leading ``~`` in ``path`` with ``home``."""
    if path.startswith("~"):
        return home + path[1:]
    return path


def change_directory(path: str) -> str:
    """Change the working directory, expanding a leading ``~`` to $HOME.

    Returns the directory changed to; raises OSError on failure.
    """
    if path.startswith("~"):
        path = expand_home(path, os.environ.get("HOME", ""))
        print(f"Changing directory to: {path}")
    os.chdir(path)
    return path


class Shell:
    """Reads command lines and runs them, in the foreground or the background."""

    def __init__(self, jobs: JobTable | None = None, reader=input) -> None:
        self.jobs = jobs if jobs is not None else JobTable()
        self._reader = reader

    def prompt(self) -> str:
        return build_prompt()

    def _report_finished(self) -> None:
        for job in self.jobs.reap():
            print(f"{job.pid} {job.description} has terminated.")

    def run_line(self, line: str) -> bool:
        """Run one command line; return False when the shell should exit."""
        if line == "exit":
            return False
        tokens = tokenize(line)
        if not tokens:
            return True
        command = tokens[0]

        if command == "cd":
            if len(tokens) != 2:
                print("Poor Usage: cd requires exactly one argument", file=sys.stderr)
                return True
            try:
                change_directory(tokens[1])
            except OSError as exc:
                print(f"chdir failed: {exc.strerror}", file=sys.stderr)
            return True

        if command == "bg":
            if len(tokens) < 2:
                print("Poor Usage: bg requires at least one argument", file=sys.stderr)
                return True
            if tokens[1] == "list":
                self._report_finished()
                sys.stdout.write(self.jobs.listing())
                return True
            try:
                self.jobs.add(tokens[1:])
            except OSError as exc:
                print(f"execvp failed in child process: {exc.strerror}", file=sys.stderr)
            return True

        try:
            process = subprocess.Popen(tokens)
        except OSError as exc:
            print(f"execvp failed in child process: {exc.strerror}", file=sys.stderr)
        else:
            process.wait()
        self._report_finished()
        return True

    def run(self) -> int:
        """Prompt and run lines until ``exit`` (status 0) or end of input (status 1)."""
        while True:
            try:
                try:
                    line = self._reader(self.prompt())
                except EOFError:
                    print("readline failed: end of input", file=sys.stderr)
                    return 1
                if not self.run_line(line):
                    return 0
            except KeyboardInterrupt:
                print()


def main(argv=None) -> int:
    """Start an interactive shell."""
    try:
        import readline  # noqa: F401  enables line editing for input()
    except ImportError:
        pass
    try:
        return Shell().run()
    except OSError as exc:
        print(f"shell failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())