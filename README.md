# forgereview

`forgereview` is a small library for reviewing a plan of development tasks
before the plan runs. Each task has a status, a complexity, acceptance
criteria and the IDs of the tasks it depends on. The library provides the
operations that a review screen needs. All of it is in one module,
`forgereview.review`.

## Installation

```
pip install forgereview
```

To run the tests:

```
pip install "forgereview[test]"
pytest
```

## Usage

```python
from forgereview.review import (
    Task,
    TaskStatus,
    TaskEditError,
    build_task_display_list,
    reorder_task,
    delete_task,
    validate_new_task,
    format_task_detail,
    compute_task_stats,
    can_confirm,
)

tasks = [
    Task(id="task-001", title="Init project", status=TaskStatus.DONE),
    Task(
        id="task-002",
        title="Add auth",
        status=TaskStatus.PENDING,
        complexity="medium",
        description="Implement JWT authentication",
        depends_on=["task-001"],
        acceptance_criteria=["Login works", "Token validates"],
    ),
    Task(id="task-003", title="Add API", status=TaskStatus.PENDING),
]

# Done tasks come first. Only pending and failed tasks can be edited.
# Cancelled tasks are hidden.
for item in build_task_display_list(tasks):
    print(item.index, item.id, item.status.value, item.editable)

# Move a pending task up (-1) or down (+1). Tasks that are not pending are skipped over.
# The input list stays as it was. The function returns a new list.
tasks = reorder_task(tasks, "task-003", -1)

# Delete a task. Its ID is also removed from the dependencies of the other tasks.
tasks = delete_task(tasks, "task-003")

# Check a task before you add it by hand.
try:
    validate_new_task(tasks, "Deploy", "", "huge", [], [])
except TaskEditError as exc:
    print(exc)

print(format_task_detail(tasks[1], tasks))
print(compute_task_stats(tasks))

# An empty string means the plan can go ahead.
problem = can_confirm(tasks)
if problem:
    print("Cannot confirm:", problem)
```

## API

- `TaskStatus` is an enum of string values: `pending`, `in_progress`,
  `done`, `failed` and `cancelled`.
- `Task` is a dataclass with the fields `id`, `title`, `description`,
  `complexity`, `status`, `depends_on` and `acceptance_criteria`.
- `build_task_display_list(tasks)` returns a list of `TaskDisplayItem`
  values. Each item has `id`, `title`, `complexity`, `status`,
  `depends_on`, `editable` and `index`.
- `reorder_task(tasks, task_id, direction)` swaps a pending task with the
  nearest pending task in the given direction.
- `delete_task(tasks, task_id)` returns copies of the remaining tasks with
  their dependency lists cleaned up.
- `validate_new_task(tasks, title, description, complexity, criteria, depends_on)`
  returns `None` if the new task is valid and raises an error if it is not.
- `format_task_detail(task, all_tasks)` returns the detail text. The text
  holds the ID and title, the complexity, the dependencies resolved to
  their titles, the description and the acceptance criteria.
- `resolve_dependency_titles(depends_on, all_tasks)` returns strings of the
  form `"task-001: Init project"`. An unknown ID gives `"<id>: (unknown)"`.
- `compute_task_stats(tasks)` returns a `TaskStats` value with the counts
  `total`, `done`, `pending`, `failed` and `cancelled`.
- `can_confirm(tasks)` returns `""` if the plan can proceed. Otherwise it
  returns the reason it cannot.
- `detect_circular_dependencies(tasks)` returns the IDs in a cycle among
  pending tasks. It returns an empty list if there is no cycle.

### Rules

- Only pending tasks can be reordered.
- Done tasks and in-progress tasks cannot be deleted.
- A new task needs a title that is not blank. Its complexity must be
  `small`, `medium` or `large`. Every dependency must name an existing task.
- `can_confirm` needs at least one pending task. It rejects cycles among
  pending tasks. Dependencies on tasks that are not pending are ignored.

Edits that fail raise `TaskEditError`, which is a subclass of `ValueError`.

## What this package does not do

This package contains only the review logic. It does not draw a screen or
read keyboard input. It does not save or load plans and does not run tasks.
The caller keeps the task list and passes it to these functions.