"""Concurrent fan-out/fan-in of independent store reads."""

from collections.abc import Callable, Mapping
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any


def run_concurrently(
    tasks: Mapping[str, Callable[[], Any]],
    max_workers: int,
) -> dict[str, Any]:
    """Run independent callables on a thread pool and join their results.

    The join fails fast: as soon as one task raises, the error is
    re-raised and tasks that have not started yet are cancelled.

    Args:
        tasks: Callables keyed by name.
        max_workers: Thread pool size.

    Returns:
        dict[str, Any]: Task results keyed like ``tasks``.

    Raises:
        Exception: The first exception raised by a task.
    """
    if not tasks:
        return {}
    executor = ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, len(tasks))),
        thread_name_prefix="balance-sheet",
    )
    try:
        futures = {name: executor.submit(task) for name, task in tasks.items()}
        done, _ = wait(futures.values(), return_when=FIRST_EXCEPTION)
        for future in futures.values():
            if future in done and future.exception() is not None:
                future.result()
        return {name: future.result() for name, future in futures.items()}
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


__all__ = ["run_concurrently"]
