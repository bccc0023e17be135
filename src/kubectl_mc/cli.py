"""Command line interface for kubectl-mc."""

import asyncio
from typing import Any

import click

from kubectl_mc.core.config import ConfigurationManager, Settings
from kubectl_mc.core.execution import (
    CommandRunner,
    ContextLister,
    FanOutScheduler,
    KubectlRunner,
    force_json_output,
    outputs_string,
    parse_namespaces,
    parse_output_format,
    render_aggregated,
)
from kubectl_mc.errors import KubectlMcError
from kubectl_mc.logging_config import configure_logging

EXAMPLES = """\b
Examples:

\b
  # list all kind contexts
  kubectl mc -r kind -l

\b
  # list the pods in the kube-system namespace of all dev clusters
  kubectl mc -r dev -- get pods -n kube-system

\b
  # run a debug container on every kind cluster in the context
  kubectl mc --regex kind -- run debug --image=markeijsermans/debug \\
    --command -- sleep infinity

\b
  # list all contexts with 'dev' in the name, but not '-test-' in the name
  kubectl mc -r dev -l -x '-test-'

\b
  # list the gatekeeper audit pods of all gke clusters that are not dev,
  # run max 5 processes in parallel and enable debug output
  kubectl mc -r gke -x dev -p 5 -d -- get pods -n gatekeeper-system \\
    -l app.kubernetes.io/name=audit

\b
  # print the context and the pod names in kube-system using jq
  kubectl mc -r kind -o json -- get pods -n kube-system \\
    | jq 'keys[] as $k | "\\($k) \\(.[$k] | .items[].metadata.name)"'
"""


def _resolve_runner(ctx: click.Context, settings: Settings) -> CommandRunner:
    """Use the runner handed in through the context object, else kubectl."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    runner = obj.get("runner")
    if runner is not None:
        return runner
    return KubectlRunner(settings.kubectl)


def _echo_block(block: str) -> None:
    click.echo(block, nl=False)


@click.command(
    options_metavar="[flags]",
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    },
    epilog=EXAMPLES,
)
@click.version_option(package_name="kubectl-mc")
@click.option(
    "-r",
    "--regex",
    default="",
    help="A regex to filter the list of context names in kubeconfig. "
    "If not given all contexts are used.",
)
@click.option(
    "-x",
    "--negative-regex",
    default="",
    help="A regex to exclude matches from the result set. "
    "Evaluated succeeding to the including regex filter.",
)
@click.option(
    "-n",
    "--namespaces",
    default="",
    help="Comma-separated list of namespaces. Overrides namespace(s) specified "
    "in the kubectl command. The default is the current namespace of the context.",
)
@click.option(
    "-l",
    "--list-only",
    is_flag=True,
    help="Just list the contexts matching the regex. Good for testing your regex.",
)
@click.option(
    "-p",
    "--max-processes",
    type=click.IntRange(min=1),
    default=None,
    help="Max amount of parallel kubectl to be executed. "
    "Can be used to limit cpu activity.  [default: 5]",
)
@click.option("-d", "--debug", is_flag=True, help="Enable debug output.")
@click.option(
    "-o",
    "--output",
    default=None,
    help="Specify the output format. Useful for parsing with another tool "
    f"like jq or yq. One of {outputs_string()}.",
)
@click.argument(
    "kubectl_args",
    nargs=-1,
    type=click.UNPROCESSED,
    metavar="-- [KUBECTL COMMAND]",
)
@click.pass_context
def cli(
    ctx: click.Context,
    regex: str,
    negative_regex: str,
    namespaces: str,
    list_only: bool,
    max_processes: int | None,
    debug: bool,
    output: str | None,
    kubectl_args: tuple[str, ...],
) -> None:
    """Run kubectl commands against multiple clusters at once."""
    logger = configure_logging(debug)

    try:
        settings = ConfigurationManager().load()
        output_format = parse_output_format(
            output if output is not None else settings.output
        )
    except KubectlMcError as e:
        raise click.ClickException(str(e)) from e

    args = list(kubectl_args)
    if output_format is not None:
        args = force_json_output(args)

    if not kubectl_args and not list_only:
        click.echo(ctx.get_help())
        return

    runner = _resolve_runner(ctx, settings)

    try:
        contexts = ContextLister(runner).list_contexts(regex, negative_regex)
    except KubectlMcError as e:
        raise click.ClickException(str(e)) from e

    if list_only:
        for context in contexts:
            click.echo(context)
        return

    scheduler = FanOutScheduler(
        runner,
        max_processes=max_processes or settings.max_processes,
        logger=logger,
    )
    emit = None if output_format is not None else _echo_block

    collector = asyncio.run(
        scheduler.run(contexts, parse_namespaces(namespaces), args, emit=emit)
    )
    logger.debug("%d of %d tasks failed", len(collector.failures()), len(collector))

    if output_format is None:
        logger.debug("done")
        return

    logger.debug("parsing output...")
    try:
        rendered = render_aggregated(collector.outputs(), output_format, logger)
    except KubectlMcError as e:
        raise click.ClickException(str(e)) from e
    click.echo(rendered, nl=False)
    logger.debug("done")
