# procshell

Three small command-line tools for Linux:

- `ssi`: an interactive shell with `cd`, background jobs and a job listing.
- `pipe4`: reads up to four commands from standard input and runs them as one pipeline.
- `fetch-info`: prints system information, or details of one process, from `/proc`.

## Installation

```
pip install .
```

## ssi

```
ssi
```

The prompt has the form `user@host: /current/dir > `. Supported input:

- `exit`: leave the shell (exit status 0). End of input also leaves it, with status 1.
- `cd PATH`: change directory. A leading `~` expands to `$HOME`. `cd` takes exactly one argument.
- `bg COMMAND [ARGS...]`: start a command in the background.
- `bg list`: list the running background jobs as `PID: CWD/COMMAND FIRST-ARG`, then their total.
- Anything else runs as a foreground command, found through `PATH`, and the shell waits for it.

Finished background jobs are reported (`PID DESCRIPTION has terminated.`) after each
foreground command and before each `bg list`. Ctrl+C drops the current line and shows
a new prompt. The prompt needs a login name; where none is available the shell stops
with status 1.

Command lines are split on spaces only.

## pipe4

```
pipe4
```

Enter one command per line, up to four. A blank line ends the list early; input that
ends before a blank line or a fourth command makes `pipe4` exit with status 1. Each
command is run by its path, not looked up on `PATH` (a bare name means a file in the
current directory), and with an empty environment. The commands then run with each
one's output going to the next one's input:

```
$ printf '/bin/ls -l\n/usr/bin/wc -l\n\n' | pipe4
```

## fetch-info

```
fetch-info          # CPU model and cores, kernel version, total memory, uptime
fetch-info 1234     # name, command file, threads and context switches of process 1234
```

If the process does not exist, `fetch-info` says so and exits with status 1. More than
one argument prints a usage message and exits with status 1.

## Library use

The formatting functions in `procshell.fetch_info` (`format_cpu_info`, `format_version`,
`format_memory`, `format_uptime`, `format_process`) take the text of a `/proc` file and
return the report. They do not touch the filesystem, so they can run on saved snapshots:

```python
from procshell.fetch_info import format_uptime

print(format_uptime("93784.12 1000.00\n"))
# Uptime: 1 days, 2 hours, 3 minutes, 4 seconds
```

`system_report(proc_root)` and `process_report(pid, proc_root)` read from any
directory laid out like `/proc`; `process_report` raises `ProcessLookupError` for a
missing process.

`procshell.pipeline` offers `tokenize`, `read_commands` and `run_pipeline`, which
returns each stage's exit status (2 for a stage that could not be started) and raises
`PipelineError` for fewer than one or more than four commands.

`procshell.shell.Shell` runs single command lines through `run_line`, which returns
`False` for `exit`. Its background jobs live in a `JobTable` with `add`, `reap` and
`listing`.

## Limits

The shell has no pipes, redirection, quoting, variables or scripting: each line is one
command or one of the built-ins above. Pipelines are only available through `pipe4`,
and only up to four stages.

## Tests

```
pip install .[test]
pytest
```