"""Task inputs, outputs and per-task execution state."""

from __future__ import annotations

import asyncio
import enum
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Content:
    """A value produced by a task or stored in the environment."""

    value: Any

    def get(self, kind: type[T]) -> T | None:
        """Return the value if it is an instance of ``kind``, else None."""
        return self.value if isinstance(self.value, kind) else None


class OutputKind(enum.Enum):
    OUT = "out"
    ERR = "err"
    ERR_WITH_EXIT_CODE = "err_with_exit_code"


@dataclass(frozen=True)
class Output:
    """The result of running a task: a value, nothing, or an error."""

    kind: OutputKind
    data: Content | None = None
    message: str | None = None
    code: int | None = None

    @classmethod
    def of(cls, value: Any) -> Output:
        return cls(OutputKind.OUT, data=Content(value))

    @classmethod
    def empty(cls) -> Output:
        return cls(OutputKind.OUT)

    @classmethod
    def error(cls, message: str) -> Output:
        return cls(OutputKind.ERR, message=message)

    @classmethod
    def error_with_exit_code(cls, code: int | None, content: Any = None) -> Output:
        if content is not None and not isinstance(content, Content):
            content = Content(content)
        return cls(OutputKind.ERR_WITH_EXIT_CODE, data=content, code=code)

    def is_error(self) -> bool:
        return self.kind is not OutputKind.OUT

    def content(self) -> Content | None:
        """The produced content; None for errors and empty outputs."""
        return self.data if self.kind is OutputKind.OUT else None

    def error_message(self) -> str | None:
        if self.kind is OutputKind.OUT:
            return None
        if self.kind is OutputKind.ERR:
            return self.message
        return f"code: {'' if self.code is None else self.code}"


class Input:
    """The outputs of a task's predecessors, in dependency order."""

    def __init__(self, contents: Iterable[Content] = ()) -> None:
        self._contents = tuple(contents)

    def __iter__(self) -> Iterator[Content]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return f"Input({list(self._contents)!r})"


class ExecState:
    """Success flag, output and availability semaphore of one task."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._success = False
        self._output = Output.empty()
        self._semaphore = asyncio.Semaphore(0)

    @property
    def success(self) -> bool:
        return self._success

    @property
    def output(self) -> Output:
        with self._lock:
            return self._output

    def set_output(self, output: Output) -> None:
        with self._lock:
            self._success = True
            self._output = output

    def mark_success(self) -> None:
        self._success = True

    def mark_failed(self) -> None:
        self._success = False

    def add_permits(self, count: int) -> None:
        """Make the output available to ``count`` more waiters."""
        if count < 0:
            raise ValueError("permit count cannot be negative")
        for _ in range(count):
            self._semaphore.release()

    async def acquire(self) -> None:
        """Wait for a permit; the permit is consumed, never returned."""
        await self._semaphore.acquire()