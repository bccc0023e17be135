"""Typed task and result models for the fan-out engine."""

from collections.abc import Sequence
from dataclasses import dataclass

from kubectl_mc.core.execution.arguments import rewrite_args


def compound_key(context: str, namespace: str = "") -> str:
    """Key identifying one context/namespace pair in the results."""
    if namespace:
        return f"{context}: {namespace}"
    return context


@dataclass(frozen=True)
class FanOutTask:
    """One kubectl invocation against a single context and namespace."""

    context: str
    namespace: str
    args: tuple[str, ...]

    @property
    def key(self) -> str:
        return compound_key(self.context, self.namespace)


@dataclass(frozen=True)
class TaskResult:
    """Outcome of one task.

    ``output`` holds the combined kubectl output on success and the error
    text on failure.
    """

    context: str
    namespace: str
    output: bytes
    failed: bool = False

    @property
    def key(self) -> str:
        return compound_key(self.context, self.namespace)


def plan_tasks(
    contexts: Sequence[str], namespaces: Sequence[str], args: Sequence[str]
) -> list[FanOutTask]:
    """Build one task per context and namespace, context-major."""
    return [
        FanOutTask(
            context=context,
            namespace=namespace,
            args=tuple(rewrite_args(args, context, namespace)),
        )
        for context in contexts
        for namespace in namespaces
    ]
