"""Shared and recursive data: cons lists, threaded offset sums, polled job progress."""

from __future__ import annotations

import itertools
import threading
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons-list cell; the end of the list is None."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        node: Cons | None = self
        while node is not None:
            yield node.value
            node = node.next


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0)


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number from each offset, one thread per offset.

    The threads share the sequence without copying it; the sums are returned
    in order of offset.
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")

    def sum_from(offset: int) -> int:
        return sum(itertools.islice(numbers, offset, None, workers))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs on a worker thread while polling for progress.

    Prints "waiting... " on each poll that finds work outstanding and
    returns how many such polls there were.
    """
    if jobs < 0:
        raise ValueError("the number of jobs cannot be negative")
    lock = threading.Lock()
    completed = 0

    def work() -> None:
        nonlocal completed
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                completed += 1

    def jobs_completed() -> int:
        with lock:
            return completed

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    polls = 0
    while jobs_completed() < jobs:
        print("waiting... ")
        polls += 1
        time.sleep(poll_delay)
    worker.join()
    return polls