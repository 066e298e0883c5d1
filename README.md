# dagflow

dagflow provides the building blocks for jobs made of tasks whose
dependencies form a directed graph: tasks with ids, names and predecessors,
the logic they run, the values they pass to one another, shared environment
variables, an action that runs shell commands, and a parser that reads task
definitions from YAML.

## Installation

```
pip install dagflow
```

## Outputs and inputs

A task's logic returns an `Output` (`dagflow.state`):

```python
from dagflow.state import Content, Input, Output

Output.of(10)                           # a value
Output.empty()                          # no value
Output.error("something went wrong")    # an error message
Output.error_with_exit_code(1, ("out", "err"))
```

`Output.is_error()` tells errors apart, `Output.content()` gives the
`Content` of a successful output (or `None`), and `Output.error_message()`
gives the message, or `"code: <n>"` for an exit-code error.

A task receives an `Input`: the contents its predecessors produced, in
order. It is iterable and has a length. `Content.get(kind)` returns the
value if it is an instance of `kind`, otherwise `None`.

```python
inp = Input([Content(1), Content("two")])
[c.get(int) for c in inp]   # [1, None]
```

## Environment

`EnvVar` (`dagflow.env`) holds named values shared by the tasks of a job:

```python
from dagflow.env import EnvVar

env = EnvVar()
env.set("base", 2)
env.get("base", int)    # 2
env.get("base", str)    # None
"base" in env           # True
```

## Tasks and actions

An `Action` (`dagflow.action`) wraps either a callable
`(input, env) -> Output` or an object that subclasses `Complex` and
implements `run(input, env)`. `Action.run` raises `TypeError` if the logic
does not return an `Output`.

`DefaultTask` (`dagflow.task`) is a general-purpose task. Each task gets a
process-wide unique id from `alloc_id()`; a task created without a name is
called `"Task <id>"`, and one created without logic returns an empty output.

```python
from dagflow.env import EnvVar
from dagflow.state import Input, Output
from dagflow.task import DefaultTask


def compute(start):
    def run(input, env):
        base = env.get("base", int)
        return Output.of(start + sum(c.get(int) * base for c in input))
    return run


a = DefaultTask("Compute A", compute(1))
b = DefaultTask("Compute B", compute(2))
b.set_predecessors([a])          # or b.set_predecessors_by_id([a.id])
b.precursors                     # (a.id,)

env = EnvVar()
env.set("base", 2)
out_a = a.action.run(Input(), env)                     # Output.of(1)
out_b = b.action.run(Input([out_a.content()]), env)    # Output.of(4)
```

`name` and `action` of a `DefaultTask` can be reassigned. Other task types
can be written by subclassing `Task` and providing the `id`, `name`,
`precursors` and `action` properties.

## Shell commands

`CommandAction` (`dagflow.cmd`) runs a command through `sh -c` (PowerShell
on Windows). String values in its input are passed as extra arguments. On
success it returns `Output.of((stdout_lines, stderr_lines))`; on a non-zero
exit it returns an exit-code error carrying the same pair.

```python
from dagflow.cmd import CommandAction
from dagflow.env import EnvVar
from dagflow.state import Input

CommandAction("echo hello").run(Input(), EnvVar()).content().value
# (['hello'], [])
```

## Tasks from YAML

```yaml
dagrs:
  a:
    name: "Task 1"
    after: [b, c]
    cmd: echo a
  b:
    name: "Task 2"
    after: [c]
    cmd: echo b
  c:
    name: "Task 3"
    cmd: echo c
```

```python
from dagflow.yaml_parser import YamlParser

tasks = YamlParser().parse_tasks("tasks.yaml", {})
```

Each entry becomes a `YamlTask` whose action is a `CommandAction` for its
`cmd`, and whose `precursors` are the ids of the entries listed in `after`.
The second argument maps entry identifiers to logic (a callable, a
`Complex` or an `Action`) that replaces `cmd` for those entries.
`parse_tasks_from_str` does the same for YAML text.

Parsing raises subclasses of `ParserError` (`dagflow.errors`):
`ConfigFileNotFoundError` when the file cannot be read, `FileContentError`
for invalid YAML, and `YamlTaskError` when the root key `dagrs` is missing,
an entry has no `name`, an entry without replacement logic has no `cmd`, or
`after` names an unknown entry.

Other configuration formats can be supported by subclassing `Parser`
(`dagflow.parser`) and implementing `parse_tasks_from_str`; `parse_tasks`
reads the file with `load_file` and hands its text on.

## What this package does not do

There is no scheduler here: nothing orders tasks by their dependencies,
checks the graph for cycles or missing predecessors, or runs tasks
concurrently and feeds each one its predecessors' outputs. Running a task
means calling its action yourself, as above. `ExecState` (`dagflow.state`)
holds one task's output, success flag and an asyncio semaphore for waiting
on it, but nothing in the package drives it. The error classes
`RelyTaskIllegalError`, `LoopGraphError`, `EmptyJobError` and `TaskError`
are defined for such use but nothing in the package raises them. There is
no command-line tool.