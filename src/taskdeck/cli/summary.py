"""Summary command: print today's tasks without starting the TUI."""

import logging

from ..errors import TaskDeckError
from ..services import TaskService
from ..utils import weekday_name
from .output import error, header, info, task_line

logger = logging.getLogger(__name__)


def run_summary(task_service: TaskService) -> int:
    """Print today's section and task counts.

    Returns:
        Exit code (0 = success, 1 = task file could not be read)
    """
    try:
        snapshot = task_service.load()
    except TaskDeckError as e:
        logger.debug("Summary failed: %s", e)
        error(str(e))
        return 1

    summary = task_service.summary(snapshot)
    counts = summary.counts
    header(f"{counts.pending} pending · {counts.completed} completed")

    day = summary.today
    if day is None:
        info("No day sections in task file")
    else:
        if day.day_name != weekday_name(task_service.today()):
            info(f"No section for {weekday_name(task_service.today())}, showing first day")
        header(day.title)
        for label, tasks in (
            ("Must do", day.must_do),
            ("Should do", day.should_do),
            ("Other", day.normal_tasks),
        ):
            if not tasks:
                continue
            print(f" {label}:")
            for task in tasks:
                task_line(task.text, task.category, task.completed)

    if summary.backlog:
        info(f"{summary.backlog} task(s) in backlog")
    return 0
