"""Scripted command runner for tests."""

import threading
import time
from collections.abc import Sequence

from kubectl_mc.core.execution.context_lister import DISCOVERY_ARGS
from kubectl_mc.core.execution.result_types import compound_key
from kubectl_mc.errors import CommandError


def _flag_value(args: Sequence[str], flag: str) -> str:
    if flag not in args:
        return ""
    return args[list(args).index(flag) + 1]


class FakeRunner:
    """Command runner returning scripted responses instead of running kubectl.

    Discovery calls return ``contexts_output``. Every other call is matched
    by the compound key of its ``--context``/``--namespace`` flags against
    ``failures`` first, then ``responses``, then ``default``.
    """

    def __init__(
        self,
        contexts_output: bytes = b"",
        responses: dict[str, bytes] | None = None,
        failures: dict[str, str] | None = None,
        default: bytes = b"",
        discovery_error: str | None = None,
        delay: float = 0.0,
    ) -> None:
        self.contexts_output = contexts_output
        self.responses = responses or {}
        self.failures = failures or {}
        self.default = default
        self.discovery_error = discovery_error
        self.delay = delay
        self.calls: list[list[str]] = []
        self.active = 0
        self.peak_active = 0
        self._lock = threading.Lock()

    @property
    def task_calls(self) -> list[list[str]]:
        """Calls other than context discovery."""
        return [call for call in self.calls if tuple(call) != DISCOVERY_ARGS]

    def run(self, args: Sequence[str]) -> bytes:
        with self._lock:
            self.calls.append(list(args))
            self.active += 1
            self.peak_active = max(self.peak_active, self.active)
        try:
            if tuple(args) == DISCOVERY_ARGS:
                if self.discovery_error is not None:
                    raise CommandError(self.discovery_error)
                return self.contexts_output

            if self.delay:
                time.sleep(self.delay)
            key = compound_key(
                _flag_value(args, "--context"), _flag_value(args, "--namespace")
            )
            if key in self.failures:
                raise CommandError(self.failures[key])
            return self.responses.get(key, self.default)
        finally:
            with self._lock:
                self.active -= 1
