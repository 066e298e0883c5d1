"""The executable logic carried by a task."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Union

from .env import EnvVar
from .state import Input, Output


class Complex(ABC):
    """Task logic as an object, for logic that keeps its own state."""

    @abstractmethod
    def run(self, input: Input, env: EnvVar) -> Output:
        """Run the logic on the predecessors' outputs."""


Logic = Union[Complex, Callable[[Input, EnvVar], Output]]


class Action:
    """Wraps either a callable or a :class:`Complex` as a task's logic."""

    __slots__ = ("_logic",)

    def __init__(self, logic: Logic | Action) -> None:
        if isinstance(logic, Action):
            logic = logic._logic
        if not isinstance(logic, Complex) and not callable(logic):
            raise TypeError(f"action logic must be callable or Complex, got {logic!r}")
        self._logic = logic

    def run(self, input: Input, env: EnvVar) -> Output:
        if isinstance(self._logic, Complex):
            output = self._logic.run(input, env)
        else:
            output = self._logic(input, env)
        if not isinstance(output, Output):
            raise TypeError(f"action returned {type(output).__name__}, expected Output")
        return output

    def __repr__(self) -> str:
        return f"Action({self._logic!r})"