"""Tasks, the units a DAG schedules, and the global task id allocator."""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .action import Action, Logic
from .env import EnvVar
from .state import Input, Output

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def alloc_id() -> int:
    """Return a new task id, unique within this process."""
    with _id_lock:
        return next(_id_counter)


class Task(ABC):
    """A schedulable unit: an id, a name, its predecessors and its logic."""

    @property
    @abstractmethod
    def id(self) -> int:
        """The unique id of this task."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name of this task."""

    @property
    @abstractmethod
    def precursors(self) -> Sequence[int]:
        """Ids of the tasks that must run before this one."""

    @property
    @abstractmethod
    def action(self) -> Action:
        """The logic this task runs."""

    def __repr__(self) -> str:
        return f"{self.id},\t{self.name},\t{list(self.precursors)}"


def _no_output(_input: Input, _env: EnvVar) -> Output:
    return Output.empty()


class DefaultTask(Task):
    """A general-purpose task whose logic is a callable or a Complex."""

    def __init__(self, name: str | None = None, action: Logic | Action | None = None) -> None:
        self._id = alloc_id()
        self._name = f"Task {self._id}" if name is None else name
        self._precursors: list[int] = []
        self._action = Action(_no_output if action is None else action)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def precursors(self) -> tuple[int, ...]:
        return tuple(self._precursors)

    @property
    def action(self) -> Action:
        return self._action

    @action.setter
    def action(self, logic: Logic | Action) -> None:
        self._action = Action(logic)

    def set_predecessors(self, predecessors: Iterable[Task]) -> None:
        """Make this task run after each of ``predecessors``."""
        self._precursors.extend(task.id for task in predecessors)

    def set_predecessors_by_id(self, ids: Iterable[int]) -> None:
        """Like :meth:`set_predecessors`, but given task ids."""
        self._precursors.extend(ids)

    def __copy__(self) -> DefaultTask:
        clone = object.__new__(DefaultTask)
        clone._id = self._id
        clone._name = self._name
        clone._precursors = list(self._precursors)
        clone._action = self._action
        return clone