import asyncio

import pytest

from dagflow.state import Content, ExecState, Input, Output, OutputKind


def test_content_get_matching_type():
    content = Content("3")
    assert content.get(str) == "3"
    assert content.get(int) is None


def test_content_get_tuple():
    content = Content((["out"], ["err"]))
    assert content.get(tuple) == (["out"], ["err"])


def test_output_of_value():
    out = Output.of(10)
    assert out.kind is OutputKind.OUT
    assert not out.is_error()
    assert out.content().get(int) == 10
    assert out.error_message() is None


def test_output_empty():
    out = Output.empty()
    assert not out.is_error()
    assert out.content() is None


def test_output_error():
    out = Output.error("some error messages!")
    assert out.is_error()
    assert out.content() is None
    assert out.error_message() == "some error messages!"


def test_output_error_with_exit_code():
    out = Output.error_with_exit_code(1, Content((["testing 123"], [])))
    assert out.is_error()
    assert out.content() is None
    assert out.code == 1
    assert out.data.get(tuple)[0] == ["testing 123"]
    assert out.error_message() == "code: 1"


def test_output_error_without_code():
    out = Output.error_with_exit_code(None, None)
    assert out.error_message() == "code: "
    assert out.data is None


def test_error_with_exit_code_wraps_raw_content():
    out = Output.error_with_exit_code(2, "boom")
    assert out.data == Content("boom")


def test_input_iteration_preserves_order():
    contents = [Content(1), Content(2), Content(3)]
    inp = Input(contents)
    assert len(inp) == 3
    assert [c.get(int) for c in inp] == [1, 2, 3]


def test_empty_input():
    assert len(Input()) == 0
    assert list(Input()) == []


def test_exec_state_defaults():
    state = ExecState()
    assert state.success is False
    assert state.output == Output.empty()


def test_exec_state_set_output_marks_success():
    state = ExecState()
    state.set_output(Output.of(5))
    assert state.success is True
    assert state.output.content().get(int) == 5
    state.mark_failed()
    assert state.success is False
    state.mark_success()
    assert state.success is True


def test_exec_state_acquire_waits_for_permits():
    async def attempt(state, timeout):
        try:
            await asyncio.wait_for(state.acquire(), timeout=timeout)
        except asyncio.TimeoutError:
            return "blocked"
        return "acquired"

    async def scenario():
        state = ExecState()
        outcomes = [await attempt(state, 0.05)]
        state.add_permits(2)
        outcomes.append(await attempt(state, 1))
        outcomes.append(await attempt(state, 1))
        outcomes.append(await attempt(state, 0.05))
        return outcomes

    assert asyncio.run(scenario()) == ["blocked", "acquired", "acquired", "blocked"]


def test_exec_state_negative_permits():
    with pytest.raises(ValueError):
        ExecState().add_permits(-1)