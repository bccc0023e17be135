"""Command runner capability and its kubectl implementation."""

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from kubectl_mc.errors import CommandError

logger = logging.getLogger(__name__)

_NOISY_PREFIXES = ("error: ", "Error: ")


@runtime_checkable
class CommandRunner(Protocol):
    """Runs an external program and returns its combined output."""

    def run(self, args: Sequence[str]) -> bytes:
        """Run the program with *args*.

        Raises:
            CommandError: If the program fails; the message holds its output
        """
        ...


def clean_error_output(output: str) -> str:
    """Strip the prefixes kubectl puts in front of its error messages."""
    for prefix in _NOISY_PREFIXES:
        output = output.replace(prefix, "")
    return output


class KubectlRunner:
    """Command runner that spawns the kubectl binary."""

    def __init__(self, kubectl: str = "kubectl") -> None:
        self._kubectl = kubectl

    def run(self, args: Sequence[str]) -> bytes:
        """Run kubectl with stdout and stderr merged into one stream.

        Stdin is not inherited so that concurrent children never read the caller's
        terminal or pipe.
        """
        command = [self._kubectl, *args]
        logger.debug("running %s", command)
        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as e:
            raise CommandError(f"failed to run {self._kubectl}: {e}") from e

        if result.returncode != 0:
            text = result.stdout.decode("utf-8", errors="replace")
            raise CommandError(clean_error_output(text))
        return result.stdout
