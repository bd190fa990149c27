"""Threads sharing one counter, guarded by a semaphore."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence

DEFAULT_ITERATIONS = 5
DEFAULT_PAUSE = 1.0


def create_and_manage_threads(
    num_threads: int,
    iterations: int = DEFAULT_ITERATIONS,
    pause: float = DEFAULT_PAUSE,
) -> int:
    """Run ``num_threads`` threads that each bump a shared counter; return it."""
    semaphore = threading.BoundedSemaphore(1)
    shared = 0

    def work(thread_id: int) -> None:
        nonlocal shared
        for _ in range(iterations):
            with semaphore:
                print(f"Thread {thread_id} is accessing the shared variable.")
                shared += 1
                print(f"Shared variable is now: {shared}")
            time.sleep(pause)

    threads = [
        threading.Thread(target=work, args=(thread_id,))
        for thread_id in range(1, num_threads + 1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared


def handle_manage_threads_command(args: Sequence[str]) -> int | None:
    """Run ``manage_threads <numThreads>``."""
    if len(args) != 1:
        print("Usage: manage_threads <numThreads>")
        return None
    try:
        num_threads = int(args[0])
    except ValueError:
        print("Usage: manage_threads <numThreads>")
        return None
    return create_and_manage_threads(num_threads)