"""Console presentation components for the task list."""

from todai.ui.confirm import ConfirmDialog
from todai.ui.notifications import Notification, Notifier, Severity
from todai.ui.task_form import TaskForm
from todai.ui.task_item import TaskItem
from todai.ui.task_list import ListState, TaskList

__all__ = [
    "ConfirmDialog",
    "ListState",
    "Notification",
    "Notifier",
    "Severity",
    "TaskForm",
    "TaskItem",
    "TaskList",
]
