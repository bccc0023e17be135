"""Concurrency-safe accumulation of task results."""

import asyncio
import logging

from kubectl_mc.core.execution.result_types import TaskResult


class ResultCollector:
    """Collects the result of every task under a lock.

    Results are keyed by compound key; a key can only be written once.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._results: dict[str, TaskResult] = {}
        self._lock = asyncio.Lock()

    async def add(self, result: TaskResult) -> None:
        """Store *result*.

        Raises:
            ValueError: If a result with the same key was already stored
        """
        async with self._lock:
            if result.key in self._results:
                raise ValueError(f"duplicate result for {result.key!r}")
            self._results[result.key] = result
            self._logger.debug(
                "collected result %d for %s", len(self._results), result.key
            )

    def __len__(self) -> int:
        return len(self._results)

    def results(self) -> dict[str, TaskResult]:
        """Return the collected results ordered by key."""
        return {key: self._results[key] for key in sorted(self._results)}

    def outputs(self) -> dict[str, bytes]:
        """Return the raw output of every result ordered by key."""
        return {key: result.output for key, result in self.results().items()}

    def failures(self) -> list[TaskResult]:
        """Return the results of failed tasks ordered by key."""
        return [result for result in self.results().values() if result.failed]
