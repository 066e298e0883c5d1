"""Interface for turning task configuration files into tasks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Union

from .action import Action, Logic
from .errors import ConfigFileNotFoundError
from .task import Task

SpecificActions = Mapping[str, Union[Logic, Action]]


def load_file(file: str | Path) -> str:
    """Return the whole text of a configuration file."""
    return Path(file).read_text(encoding="utf-8")


class Parser(ABC):
    """Turns a configuration into a list of tasks with dependencies.

    ``specific_actions`` maps a task's identifier in the configuration to
    logic supplied by the caller. That logic is used in place of whatever
    the configuration would otherwise define for the task.
    """

    def parse_tasks(
        self, file: str | Path, specific_actions: SpecificActions | None = None
    ) -> list[Task]:
        """Read ``file`` and parse its content into tasks.

        Raises a :class:`~dagflow.errors.ParserError` if the file cannot be
        read or its content is invalid.
        """
        try:
            content = load_file(file)
        except (OSError, UnicodeDecodeError) as error:
            raise ConfigFileNotFoundError(error) from error
        return self.parse_tasks_from_str(content, specific_actions)

    @abstractmethod
    def parse_tasks_from_str(
        self, content: str, specific_actions: SpecificActions | None = None
    ) -> list[Task]:
        """Parse configuration text into tasks."""