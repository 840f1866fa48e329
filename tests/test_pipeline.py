import io
import sys

import pytest

from procshell.pipeline import PipelineError, read_commands, run_pipeline, tokenize

PY = sys.executable


def test_tokenize_collapses_spaces():
    assert tokenize("  /bin/echo   a b  ") == ["/bin/echo", "a", "b"]


def test_tokenize_empty_line():
    assert tokenize("   ") == []


def test_read_commands_stops_at_blank_line():
    stream = io.StringIO("/bin/ls -l\n/usr/bin/wc\n\n/bin/never\n")
    assert read_commands(stream) == ["/bin/ls -l", "/usr/bin/wc"]


def test_read_commands_reads_at_most_four():
    lines = [f"/bin/cmd{n}" for n in range(6)]
    stream = io.StringIO("\n".join(lines) + "\n")
    assert read_commands(stream) == lines[:4]
    assert stream.readline() == lines[4] + "\n"


def test_read_commands_blank_first_line():
    assert read_commands(io.StringIO("\n")) == []


def test_read_commands_end_of_input_is_error():
    with pytest.raises(PipelineError):
        read_commands(io.StringIO("/bin/ls\n"))


def test_run_pipeline_rejects_zero_commands():
    with pytest.raises(PipelineError):
        run_pipeline([])


def test_run_pipeline_rejects_five_commands():
    with pytest.raises(PipelineError):
        run_pipeline([f"{PY} -c pass"] * 5)


def test_single_command(capfd):
    codes = run_pipeline([f"{PY} -c print('single')"])
    assert codes == [0]
    assert capfd.readouterr().out.strip() == "single"


def test_two_stage_pipe(capfd):
    codes = run_pipeline([f"{PY} -c print('hello')", f"{PY} -c print(input().upper())"])
    assert codes == [0, 0]
    assert capfd.readouterr().out.strip() == "hello".upper()


def test_four_stage_pipe(capfd):
    stage = f"{PY} -c print(input()+'x')"
    codes = run_pipeline([f"{PY} -c print('hi')", stage, stage, stage])
    assert codes == [0] * 4
    out = capfd.readouterr().out.strip()
    assert out.startswith("hi")
    assert out.count("x") == 3


def test_missing_program_reports_status_two():
    assert run_pipeline(["/nonexistent/program arg"]) == [2]


def test_bare_name_is_not_searched_on_path():
    assert run_pipeline(["definitely-not-a-local-file-name"]) == [2]


def test_failed_stage_does_not_stop_others(capfd):
    codes = run_pipeline(["/nonexistent/program", f"{PY} -c print('after')"])
    assert codes[0] == 2
    assert codes[1] == 0
    assert capfd.readouterr().out.strip() == "after"