"""Bounded-concurrency fan-out of kubectl invocations across contexts."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from kubectl_mc.core.config.settings import DEFAULT_MAX_PROCESSES
from kubectl_mc.core.execution.command_runner import CommandRunner
from kubectl_mc.core.execution.output_formatter import format_block
from kubectl_mc.core.execution.result_collector import ResultCollector
from kubectl_mc.core.execution.result_types import FanOutTask, TaskResult, plan_tasks
from kubectl_mc.errors import CommandError


class FanOutScheduler:
    """Runs one task per context and namespace with a concurrency cap.

    Coordination happens on the event loop; the blocking runner calls are
    handed to a thread pool sized to the cap. A failing task never aborts
    the others: its error text becomes its result.
    """

    def __init__(
        self,
        runner: CommandRunner,
        max_processes: int = DEFAULT_MAX_PROCESSES,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            runner: Command runner used for every task
            max_processes: Maximum number of tasks in flight at once
            logger: Logger for trace output, defaults to the module logger
        """
        if max_processes < 1:
            raise ValueError("max_processes must be at least 1")
        self._runner = runner
        self._max_processes = max_processes
        self._logger = logger or logging.getLogger(__name__)

    async def run(
        self,
        contexts: Sequence[str],
        namespaces: Sequence[str],
        args: Sequence[str],
        emit: Callable[[str], None] | None = None,
    ) -> ResultCollector:
        """Execute *args* against every context and namespace.

        Tasks are launched context-major, namespace-minor; completion order
        is whatever the invocations take.

        Args:
            contexts: Contexts to target, in discovery order
            namespaces: Namespaces per context, ``[""]`` for the default
            args: kubectl arguments as given by the user
            emit: Writer for per-task blocks; None collects silently

        Returns:
            Collector holding exactly one result per task
        """
        tasks = plan_tasks(contexts, namespaces, args)
        collector = ResultCollector(logger=self._logger)
        semaphore = asyncio.Semaphore(self._max_processes)
        write_lock = asyncio.Lock()

        self._logger.debug(
            "preparing %d tasks with max-processes=%d",
            len(tasks),
            self._max_processes,
        )

        with ThreadPoolExecutor(
            max_workers=self._max_processes, thread_name_prefix="kubectl-mc"
        ) as pool:
            running: list[asyncio.Task[None]] = []
            for task in tasks:
                self._logger.debug(
                    "waiting for next free spot (context=%s, namespace=%s)",
                    task.context,
                    task.namespace,
                )
                await semaphore.acquire()
                self._logger.debug(
                    "executing (context=%s, namespace=%s)",
                    task.context,
                    task.namespace,
                )
                running.append(
                    asyncio.create_task(
                        self._execute_task(
                            task, semaphore, pool, collector, emit, write_lock
                        )
                    )
                )
            outcomes = await asyncio.gather(*running, return_exceptions=True)

        self._logger.debug("all %d tasks finished", len(collector))
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return collector

    async def _execute_task(
        self,
        task: FanOutTask,
        semaphore: asyncio.Semaphore,
        pool: ThreadPoolExecutor,
        collector: ResultCollector,
        emit: Callable[[str], None] | None,
        write_lock: asyncio.Lock,
    ) -> None:
        """Run one task, record its result and release its slot."""
        try:
            result = await self._invoke(task, pool)
            await collector.add(result)
            if emit is not None:
                block = format_block(result.context, result.namespace, result.output)
                async with write_lock:
                    emit(block)
        finally:
            semaphore.release()

    async def _invoke(self, task: FanOutTask, pool: ThreadPoolExecutor) -> TaskResult:
        loop = asyncio.get_running_loop()
        try:
            output = await loop.run_in_executor(
                pool, self._runner.run, list(task.args)
            )
        except CommandError as e:
            self._logger.debug("task %s failed: %s", task.key, e)
            return TaskResult(
                context=task.context,
                namespace=task.namespace,
                output=str(e).encode("utf-8"),
                failed=True,
            )
        return TaskResult(context=task.context, namespace=task.namespace, output=output)
