"""Variables shared by every task of one DAG job."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from .state import Content

T = TypeVar("T")


class EnvVar:
    """Named values set before a job runs and read by its tasks."""

    def __init__(self) -> None:
        self._variables: dict[str, Content] = {}

    def set(self, name: str, value: Any) -> None:
        self._variables[name] = Content(value)

    def get(self, name: str, kind: type[T] = object) -> T | None:
        """Return the variable if it exists and is an instance of ``kind``."""
        content = self._variables.get(name)
        return None if content is None else content.get(kind)

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        values = {name: c.value for name, c in self._variables.items()}
        return f"EnvVar({values!r})"