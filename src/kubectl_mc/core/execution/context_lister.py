"""Discovery and filtering of kubeconfig contexts."""

import logging
import re

from kubectl_mc.core.execution.command_runner import CommandRunner
from kubectl_mc.errors import CommandError, DiscoveryError, RegexError

logger = logging.getLogger(__name__)

DISCOVERY_ARGS = ("config", "get-contexts", "-o", "name")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a context filter, turning compile errors into RegexError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RegexError(pattern, str(e)) from e


def filter_contexts(
    names: list[str], regex: str = "", negative_regex: str = ""
) -> list[str]:
    """Keep the names matching *regex* and not matching *negative_regex*.

    An empty *negative_regex* disables exclusion. Order is preserved.
    """
    include = compile_pattern(regex)
    exclude = compile_pattern(negative_regex) if negative_regex else None
    return [
        name
        for name in names
        if include.search(name) and not (exclude and exclude.search(name))
    ]


class ContextLister:
    """Lists the contexts to operate on."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list_contexts(self, regex: str = "", negative_regex: str = "") -> list[str]:
        """List the kubeconfig contexts matching the filters.

        Args:
            regex: Pattern a context name must match, empty matches all
            negative_regex: Pattern excluding context names, empty disables it

        Returns:
            Matching context names in kubeconfig order

        Raises:
            RegexError: If either pattern does not compile
            DiscoveryError: If kubectl cannot list the contexts
        """
        # Compile first so that a bad pattern never reaches kubectl.
        compile_pattern(regex)
        if negative_regex:
            compile_pattern(negative_regex)

        try:
            output = self._runner.run(list(DISCOVERY_ARGS))
        except CommandError as e:
            raise DiscoveryError(str(e)) from e

        names = [
            line
            for line in output.decode("utf-8", errors="replace").splitlines()
            if line.strip()
        ]
        contexts = filter_contexts(names, regex, negative_regex)
        logger.debug(
            "matched %d of %d contexts: %s", len(contexts), len(names), contexts
        )
        return contexts
