"""Rewriting of kubectl arguments for a single context and namespace."""

from collections.abc import Sequence

SEPARATOR = "--"


def target_flags(context: str, namespace: str = "") -> list[str]:
    """Build the flags that select *context* and, if given, *namespace*."""
    flags = ["--context", context]
    if namespace:
        flags.extend(["--namespace", namespace])
    return flags


def rewrite_args(args: Sequence[str], context: str, namespace: str = "") -> list[str]:
    """Inject the context and namespace flags into a kubectl argument vector.

    The flags go right before the first ``--`` so that the arguments of a
    sub-invocation (``kubectl exec ... -- ls``) stay untouched. Without a
    separator they are appended at the end.

    Args:
        args: Arguments as given by the user
        context: Context name to target
        namespace: Namespace to target, empty for the context default

    Returns:
        New argument list; *args* is not modified
    """
    local_args: list[str] = []
    inserted = False
    for arg in args:
        if arg == SEPARATOR and not inserted:
            local_args.extend(target_flags(context, namespace))
            inserted = True
        local_args.append(arg)
    if not inserted:
        local_args.extend(target_flags(context, namespace))
    return local_args


def force_json_output(args: Sequence[str]) -> list[str]:
    """Ask kubectl for JSON output so the results can be aggregated."""
    return [*args, "-o", "json"]


def parse_namespaces(value: str | None) -> list[str]:
    """Split a comma-separated namespace list.

    Duplicates are dropped and an empty list means the context default,
    represented by a single empty namespace.
    """
    if not value:
        return [""]
    namespaces = list(dict.fromkeys(part.strip() for part in value.split(",")))
    return namespaces or [""]
