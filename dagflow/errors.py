"""Errors raised while building, parsing and running DAG jobs."""

from __future__ import annotations


class DagError(Exception):
    """Base of every error raised while building or running a DAG."""


class ParserError(DagError):
    """A task configuration could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Parsing error: {message}")
        self.message = message


class RelyTaskIllegalError(DagError):
    """A task depends on a task that is not part of the job."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"Task[{task_name}] dependency task not exist.")
        self.task_name = task_name


class LoopGraphError(DagError):
    """The task dependencies contain a cycle."""

    def __init__(self) -> None:
        super().__init__("Illegal directed a cyclic graph, loop Detect!")


class EmptyJobError(DagError):
    """The job has no tasks, or it can no longer run."""

    def __init__(self) -> None:
        super().__init__("There are no tasks in the job.")


class TaskError(DagError):
    """A task reported an error while running."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Task error: {message}")
        self.message = message


class YamlTaskError(ParserError):
    """A task entry in a YAML configuration is malformed."""

    @classmethod
    def start_word(cls) -> YamlTaskError:
        return cls("File content is not start with 'dagrs'.")

    @classmethod
    def no_name(cls, task_id: str) -> YamlTaskError:
        return cls(f"Task has no name field. [{task_id}]")

    @classmethod
    def not_found_precursor(cls, task_name: str) -> YamlTaskError:
        return cls(f"Task cannot find the specified predecessor. [{task_name}]")

    @classmethod
    def no_script(cls, task_name: str) -> YamlTaskError:
        return cls(f"The 'script' attribute is not defined. [{task_name}]")


class FileContentError(ParserError):
    """The content of a configuration file is unusable."""

    @classmethod
    def illegal_content(cls, error: object) -> FileContentError:
        return cls(f"Illegal yaml content: {error}")

    @classmethod
    def empty(cls, file: str) -> FileContentError:
        return cls(f"File is empty! [{file}]")


class ConfigFileNotFoundError(ParserError):
    """A configuration file could not be opened."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"File not found. [{error}]")
        self.error = error