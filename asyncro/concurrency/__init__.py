from ._tasks import KeyedTasks, OrderedTasks, TaskList, tasks_of
from .parallel import parallel, parallel_r, parallel_w, parallelM
from .series import series, series_r, series_w, seriesM

__all__ = (
    # Task lists
    "KeyedTasks",
    "OrderedTasks",
    "TaskList",
    "tasks_of",
    # Parallel
    "parallel",
    "parallel_r",
    "parallel_w",
    "parallelM",
    # Series
    "series",
    "series_r",
    "series_w",
    "seriesM",
)
