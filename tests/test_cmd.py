from unittest import mock

from dagflow.cmd import CommandAction
from dagflow.env import EnvVar
from dagflow.state import Content, Input, OutputKind


def run(command, inputs=()):
    return CommandAction(command).run(Input(inputs), EnvVar())


def test_echo_success():
    out = run("echo hello")
    assert not out.is_error()
    assert out.content().value == (["hello"], [])


def test_error_with_exit_code_keeps_stdout():
    out = run("echo testing 123; exit 1")
    assert out.kind is OutputKind.ERR_WITH_EXIT_CODE
    assert out.code == 1
    stdout, _stderr = out.data.get(tuple)
    assert stdout[0] == "testing 123"
    assert out.error_message() == "code: 1"


def test_exit_code_without_output():
    out = run("exit 3")
    assert out.code == 3
    assert out.data.value == ([], [])


def test_stderr_captured():
    out = run("echo err 1>&2")
    assert out.content().value == ([], ["err"])


def test_empty_lines_kept_inside_output():
    out = run("printf 'a\\n\\nb\\n'")
    assert out.content().value == (["a", "", "b"], [])


def test_string_inputs_become_arguments():
    out = run('echo "$0"', [Content(5), Content("hi")])
    assert out.content().value == (["hi"], [])


def test_os_error_reported_with_errno():
    error = FileNotFoundError(2, "No such file or directory")
    with mock.patch("dagflow.cmd.subprocess.run", side_effect=error):
        out = run("anything")
    assert out.kind is OutputKind.ERR_WITH_EXIT_CODE
    assert out.code == 2
    assert out.data.value == str(error)