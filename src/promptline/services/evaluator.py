"""Parallel-but-ordered evaluation of independent module computations.

Work is dispatched to a bounded thread pool; results are collected by
submission index, so output order is always the input order regardless
of which computation finishes first. There is no per-task timeout and
no cancellation: every dispatched computation runs to completion.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class OrderedEvaluator:
    """Map a function over items concurrently, returning results in input order.

    Args:
        max_workers: Pool bound. None lets ``ThreadPoolExecutor`` choose;
            1 evaluates sequentially on the calling thread.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        if max_workers is not None and max_workers < 1:
            msg = f"max_workers must be positive, got {max_workers}"
            raise ValueError(msg)
        self.max_workers = max_workers

    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        if len(items) <= 1 or self.max_workers == 1:
            return [fn(item) for item in items]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(fn, item) for item in items]
            logger.debug("Dispatched %d computations", len(futures))
            return [future.result() for future in futures]

    def flat_map(self, fn: Callable[[T], Sequence[R]], items: Sequence[T]) -> list[R]:
        """Like :meth:`map`, concatenating each item's results in input order."""
        return [result for results in self.map(fn, items) for result in results]
