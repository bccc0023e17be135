"""Exception hierarchy for kubectl-mc."""

SUPPORTED_OUTPUTS = ("json", "yaml")


class KubectlMcError(Exception):
    """Base class for all errors raised by kubectl-mc."""


class ConfigurationError(KubectlMcError):
    """Raised when the configuration file cannot be read or validated."""


class RegexError(KubectlMcError):
    """Raised when a context filter pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid regex {pattern!r}: {reason}")
        self.pattern = pattern


class DiscoveryError(KubectlMcError):
    """Raised when kubectl fails to list the available contexts."""


class UnknownOutputError(KubectlMcError):
    """Raised when an unsupported output format is requested."""

    def __init__(self, output: str) -> None:
        super().__init__(
            f"this output format is unknown: {output!r}. "
            f"Choose one of {'|'.join(SUPPORTED_OUTPUTS)}"
        )
        self.output = output


class AggregationError(KubectlMcError):
    """Raised when the collected results cannot be rendered as one document."""

    def __init__(self) -> None:
        super().__init__(
            "couldn't parse this output. Are you sure your kubectl command "
            "allows for json output? Run command with -d to see debug output"
        )


class CommandError(KubectlMcError):
    """Raised by a command runner when the invoked program fails.

    The message is the captured output of the failed invocation.
    """
