"""A to-do list kept in a JSON file."""

from __future__ import annotations

import argparse
import dataclasses
import json
import re
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

DEFAULT_PATH = "tasks.json"

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


@dataclasses.dataclass
class Task:
    """One entry of the to-do list."""

    id: int
    description: str
    completed: bool = False


class TodoList:
    """An ordered collection of tasks."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = [] if tasks is None else list(tasks)

    def add(self, description: str) -> Task:
        """Append a new open task; its id is the list length after adding."""
        task = Task(len(self._tasks) + 1, description.strip(), False)
        self._tasks.append(task)
        return task

    def _find(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise KeyError(task_id)

    def mark_complete(self, task_id: int) -> Task:
        """Mark the first task with task_id as completed; KeyError if none."""
        task = self._tasks[self._find(task_id)]
        task.completed = True
        return task

    def delete(self, task_id: int) -> Task:
        """Remove and return the first task with task_id; KeyError if none."""
        return self._tasks.pop(self._find(task_id))

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)


def format_task(task: Task) -> str:
    """Render a task as a line of the list view."""
    status = "✅" if task.completed else "❌"
    return f"{task.id} - {status}: {task.description}"


def _task_from_json(item: object) -> Task:
    if not isinstance(item, dict):
        raise ValueError("task is not an object")
    task_id = item.get("id")
    description = item.get("description")
    completed = item.get("completed")
    if (
        not isinstance(task_id, int)
        or isinstance(task_id, bool)
        or not 0 <= task_id <= _USIZE_MAX
    ):
        raise ValueError("bad task id")
    if not isinstance(description, str):
        raise ValueError("bad task description")
    if not isinstance(completed, bool):
        raise ValueError("bad task status")
    return Task(task_id, description, completed)


def load_tasks(path: str | Path = DEFAULT_PATH) -> list[Task]:
    """Read tasks from a JSON file; a missing or malformed file gives no tasks."""
    try:
        content = Path(path).read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return []
    if not isinstance(data, list):
        return []
    try:
        return [_task_from_json(item) for item in data]
    except ValueError:
        return []


def save_tasks(tasks: Iterable[Task], path: str | Path = DEFAULT_PATH) -> None:
    """Write tasks to a JSON file as a pretty-printed array."""
    payload = [dataclasses.asdict(task) for task in tasks]
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    Path(path).write_text(text, encoding="utf-8")


def _prompt(message: str) -> str:
    print(message, end="", flush=True)
    return sys.stdin.readline()


def _parse_id(text: str) -> int:
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not a task id: {text!r}")
    value = int(stripped)
    if value > _USIZE_MAX:
        raise ValueError(f"task id too large: {text!r}")
    return value


def _add(todo: TodoList) -> None:
    todo.add(_prompt("Enter task description"))
    print("Task added")


def _view(todo: TodoList) -> None:
    if not len(todo):
        print("No task found ")
        return
    for task in todo:
        print(format_task(task))


def _mark(todo: TodoList) -> None:
    try:
        task_id = _parse_id(_prompt("Enter  task Id to mark as completed:"))
    except ValueError:
        print("Invalid task Id")
        return
    try:
        todo.mark_complete(task_id)
    except KeyError:
        print("Task not found ")
    else:
        print("Task marked as completed ")


def _delete(todo: TodoList) -> None:
    try:
        task_id = _parse_id(_prompt("Enter task ID to delete :"))
    except ValueError:
        print("Invalid task id.")
        return
    try:
        todo.delete(task_id)
    except KeyError:
        print("Task not found")
    else:
        print("Task deleted")


_ACTIONS = {"1": _add, "2": _view, "3": _mark, "4": _delete}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive to-do menu on standard input."""
    parser = argparse.ArgumentParser(prog="todo", description="Keep a to-do list.")
    parser.add_argument(
        "--file", default=DEFAULT_PATH, help="JSON file holding the tasks"
    )
    args = parser.parse_args(argv)

    todo = TodoList(load_tasks(args.file))
    while True:
        print("\n To-do List Menu")
        print("1. Add Task")
        print("2. view Task")
        print("3. mark Task as complete")
        print("4. Delete Task")
        print("5. Exit")

        choice = _prompt("Enter your choice ")
        if not choice:
            return 1
        choice = choice.strip()
        if choice == "5":
            save_tasks(todo, args.file)
            print("task saved goodbye ")
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            print("Invalid choice. pls try again ")
        else:
            action(todo)