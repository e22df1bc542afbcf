# ABOUTME: Transient Rich spinner displayed on stderr while a page range is being scraped
# ABOUTME: Vanishes when the run ends so the summary table is the last thing on screen

from typing import Any

from rich.progress import Progress, SpinnerColumn, TextColumn


class SimpleProgressTracker:
    """Context manager that keeps the spinner running for the duration of a scrape."""

    def __init__(self, progress: Progress, task_id: Any):
        self.progress = progress
        self.task_id = task_id

    def update(self, description: str) -> None:
        self.progress.update(self.task_id, description=description)

    def __enter__(self):
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()


def create_smart_progress(
    console, initial_description: str = "🕷️ Scraping missing person posters..."
) -> tuple[Progress, Any, SimpleProgressTracker]:
    """Build the scrape spinner on ``console``.

    The task has no total: pages finish in any order and the pipeline only
    reports back once all of them are done.

    Returns:
        Tuple of (progress, task_id, tracker); use the tracker as a context manager
    """
    progress = Progress(
        SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console, transient=True
    )
    task_id = progress.add_task(initial_description, total=None)
    return progress, task_id, SimpleProgressTracker(progress, task_id)
