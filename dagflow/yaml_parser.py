"""Parser for YAML task configurations.

A configuration has the form::

    dagrs:
      a:
        name: "Task 1"
        after: [b, c]
        cmd: echo a
      b:
        name: "Task 2"
        cmd: echo b
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

import yaml

from .action import Action, Logic
from .cmd import CommandAction
from .errors import FileContentError, ParserError, YamlTaskError
from .parser import Parser, SpecificActions
from .task import Task, alloc_id


class YamlTask(Task):
    """A task defined in a YAML configuration.

    Besides the global task id it keeps the identifier used in the
    configuration and the configuration identifiers of its predecessors.
    """

    def __init__(
        self,
        yaml_id: str,
        precursors: Iterable[str],
        name: str,
        action: Logic | Action,
    ) -> None:
        self._yaml_id = yaml_id
        self._id = alloc_id()
        self._name = name
        self._str_precursors = tuple(precursors)
        self._precursors: tuple[int, ...] = ()
        self._action = Action(action)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def precursors(self) -> tuple[int, ...]:
        return self._precursors

    @property
    def action(self) -> Action:
        return self._action

    @property
    def yaml_id(self) -> str:
        """The identifier of this task in the configuration."""
        return self._yaml_id

    @property
    def str_precursors(self) -> tuple[str, ...]:
        """Configuration identifiers of the predecessor tasks."""
        return self._str_precursors

    def init_precursors(self, ids: Iterable[int]) -> None:
        """Set the predecessor task ids once every task has its id."""
        self._precursors = tuple(ids)


class YamlParser(Parser):
    """The default parser, for YAML configurations rooted at ``dagrs``."""

    def parse_tasks(
        self, file: str | Path, specific_actions: SpecificActions | None = None
    ) -> list[Task]:
        """Read a YAML configuration file and parse it into tasks."""
        return super().parse_tasks(file, specific_actions)

    def parse_tasks_from_str(
        self, content: str, specific_actions: SpecificActions | None = None
    ) -> list[Task]:
        """Parse YAML configuration text into tasks."""
        try:
            documents = list(yaml.safe_load_all(content))
        except yaml.YAMLError as error:
            raise FileContentError.illegal_content(error) from error
        if not documents:
            raise ParserError("No Tasks found")

        root = documents[0]
        entries = root.get("dagrs") if isinstance(root, dict) else None
        if not isinstance(entries, dict):
            raise YamlTaskError.start_word()

        actions = dict(specific_actions or {})
        tasks: list[YamlTask] = []
        ids: dict[str, int] = {}
        for yaml_id, item in entries.items():
            if not isinstance(yaml_id, str):
                raise ParserError("Invalid YAML Node Type")
            task = self._parse_one(yaml_id, item, actions.pop(yaml_id, None))
            ids[yaml_id] = task.id
            tasks.append(task)

        for task in tasks:
            try:
                task.init_precursors(ids[pre] for pre in task.str_precursors)
            except KeyError:
                raise YamlTaskError.not_found_precursor(task.name) from None
        return list(tasks)

    @staticmethod
    def _parse_one(yaml_id: str, item: Any, action: Logic | Action | None) -> YamlTask:
        fields = item if isinstance(item, dict) else {}

        name = fields.get("name")
        if not isinstance(name, str):
            raise YamlTaskError.no_name(yaml_id)

        after = fields.get("after")
        precursors: Sequence[Any] = after if isinstance(after, list) else []
        if not all(isinstance(pre, str) for pre in precursors):
            raise ParserError("Invalid YAML Node Type")

        if action is None:
            cmd = fields.get("cmd")
            if not isinstance(cmd, str):
                raise YamlTaskError.no_script(name)
            action = CommandAction(cmd)
        return YamlTask(yaml_id, precursors, name, action)