"""Task-list review logic: display ordering, editing, validation and cycle checks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle state of a planned task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


VALID_COMPLEXITIES = frozenset({"small", "medium", "large"})


class TaskEditError(ValueError):
    """Raised when a review edit on the task list cannot be applied."""


@dataclass
class Task:
    """A single unit of planned work."""

    id: str = ""
    title: str = ""
    description: str = ""
    complexity: str = ""
    status: TaskStatus = TaskStatus.PENDING
    depends_on: list[str] = field(default_factory=list)
    acceptance_criteria: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TaskDisplayItem:
    """A task as shown in the review list."""

    id: str
    title: str
    complexity: str
    status: TaskStatus
    depends_on: list[str]
    editable: bool
    index: int


@dataclass
class TaskStats:
    """Counts of tasks by status."""

    total: int = 0
    done: int = 0
    pending: int = 0
    failed: int = 0
    cancelled: int = 0


def build_task_display_list(tasks: list[Task]) -> list[TaskDisplayItem]:
    """Return display items: done tasks first, then the rest; cancelled tasks hidden."""
    visible = [t for t in tasks if t.status is not TaskStatus.CANCELLED]
    done = [t for t in visible if t.status is TaskStatus.DONE]
    rest = [t for t in visible if t.status is not TaskStatus.DONE]

    items = []
    for index, task in enumerate(done + rest):
        editable = task.status in (TaskStatus.PENDING, TaskStatus.FAILED)
        items.append(
            TaskDisplayItem(
                id=task.id,
                title=task.title,
                complexity=task.complexity,
                status=task.status,
                depends_on=task.depends_on,
                editable=editable,
                index=index,
            )
        )
    return items


def _find_index(tasks: list[Task], task_id: str) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise TaskEditError(f"task {task_id!r} not found")


def reorder_task(tasks: list[Task], task_id: str, direction: int) -> list[Task]:
    """Swap a pending task with the nearest pending task up (direction < 0) or down.

    Returns a new list; the input is not modified.
    """
    task_idx = _find_index(tasks, task_id)
    if tasks[task_idx].status is not TaskStatus.PENDING:
        raise TaskEditError("only pending tasks can be reordered")

    if direction < 0:
        candidates = range(task_idx - 1, -1, -1)
    else:
        candidates = range(task_idx + 1, len(tasks))
    swap_idx = next(
        (i for i in candidates if tasks[i].status is TaskStatus.PENDING), None
    )
    if swap_idx is None:
        raise TaskEditError("cannot move task further in that direction")

    result = list(tasks)
    result[task_idx], result[swap_idx] = result[swap_idx], result[task_idx]
    return result


def delete_task(tasks: list[Task], task_id: str) -> list[Task]:
    """Remove a task that is not done or in progress, dropping it from other tasks' dependencies.

    Returns a new list of copied tasks; the input is not modified.
    """
    target = tasks[_find_index(tasks, task_id)]
    if target.status is TaskStatus.DONE:
        raise TaskEditError(f"cannot delete completed task {task_id!r}")
    if target.status is TaskStatus.IN_PROGRESS:
        raise TaskEditError(f"cannot delete in-progress task {task_id!r}")

    return [
        dataclasses.replace(t, depends_on=[d for d in t.depends_on if d != task_id])
        for t in tasks
        if t.id != task_id
    ]


def validate_new_task(
    tasks: list[Task],
    title: str,
    description: str,
    complexity: str,
    criteria: list[str] | None,
    depends_on: list[str] | None,
) -> None:
    """Raise TaskEditError if a manually added task has invalid fields."""
    if not title.strip():
        raise TaskEditError("title must not be empty")
    if complexity not in VALID_COMPLEXITIES:
        raise TaskEditError(
            f"complexity must be small, medium, or large (got {complexity!r})"
        )
    known = {t.id for t in tasks}
    for dep in depends_on or ():
        if dep not in known:
            raise TaskEditError(f"dependency {dep!r} does not exist")


def format_task_detail(task: Task, all_tasks: list[Task]) -> str:
    """Return the expanded detail text for a task."""
    lines = [f"{task.id}: {task.title}"]
    header = f"Complexity: {task.complexity}"
    if task.depends_on:
        titles = resolve_dependency_titles(task.depends_on, all_tasks)
        header += f" · Depends on: {', '.join(titles)}"
    lines.append(header)
    if task.description:
        lines.append(task.description)
    if task.acceptance_criteria:
        lines.append("Acceptance Criteria:")
        lines.extend(f"• {c}" for c in task.acceptance_criteria)
    return "\n".join(lines) + "\n"


def resolve_dependency_titles(
    depends_on: list[str] | None, all_tasks: list[Task]
) -> list[str]:
    """Map dependency IDs to "id: title" strings, "(unknown)" for missing IDs."""
    titles = {t.id: t.title for t in all_tasks}
    return [f"{dep}: {titles.get(dep, '(unknown)')}" for dep in depends_on or ()]


def compute_task_stats(tasks: list[Task]) -> TaskStats:
    """Count tasks by status."""
    stats = TaskStats(total=len(tasks))
    for task in tasks:
        if task.status is TaskStatus.DONE:
            stats.done += 1
        elif task.status is TaskStatus.PENDING:
            stats.pending += 1
        elif task.status is TaskStatus.FAILED:
            stats.failed += 1
        elif task.status is TaskStatus.CANCELLED:
            stats.cancelled += 1
    return stats


def can_confirm(tasks: list[Task]) -> str:
    """Return a reason the task list cannot proceed to execution, or "" if it can."""
    if not any(t.status is TaskStatus.PENDING for t in tasks):
        return "no pending tasks to execute"
    cycle = detect_circular_dependencies(tasks)
    if cycle:
        return f"circular dependency detected: {' → '.join(cycle)}"
    return ""


def detect_circular_dependencies(tasks: list[Task]) -> list[str]:
    """Return the IDs of a dependency cycle among pending tasks, or an empty list."""
    pending_ids = {t.id for t in tasks if t.status is TaskStatus.PENDING}
    deps: dict[str, list[str]] = {}
    for task in tasks:
        if task.status is TaskStatus.PENDING:
            edges = deps.setdefault(task.id, [])
            edges.extend(d for d in task.depends_on if d in pending_ids)

    if not deps:
        return []

    gray, black = 1, 2
    color: dict[str, int] = {}
    parent: dict[str, str] = {}
    cycle: list[str] = []

    def visit(node: str) -> bool:
        color[node] = gray
        for dep in deps.get(node, ()):
            state = color.get(dep, 0)
            if state == gray:
                cycle[:] = [dep, node]
                cur = node
                while cur != dep:
                    cur = parent.get(cur, "")
                    if cur in ("", dep):
                        break
                    cycle.append(cur)
                return True
            if state == 0:
                parent[dep] = node
                if visit(dep):
                    return True
        color[node] = black
        return False

    for node in deps:
        if color.get(node, 0) == 0 and visit(node):
            return list(cycle)
    return []