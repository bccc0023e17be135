"""Fan-out execution components."""

from kubectl_mc.core.execution.arguments import (
    force_json_output,
    parse_namespaces,
    rewrite_args,
)
from kubectl_mc.core.execution.command_runner import CommandRunner, KubectlRunner
from kubectl_mc.core.execution.context_lister import ContextLister
from kubectl_mc.core.execution.fan_out_scheduler import FanOutScheduler
from kubectl_mc.core.execution.output_formatter import (
    OutputFormat,
    format_block,
    outputs_string,
    parse_output_format,
    render_aggregated,
)
from kubectl_mc.core.execution.result_collector import ResultCollector
from kubectl_mc.core.execution.result_types import (
    FanOutTask,
    TaskResult,
    compound_key,
    plan_tasks,
)

__all__ = [
    "CommandRunner",
    "ContextLister",
    "FanOutScheduler",
    "FanOutTask",
    "KubectlRunner",
    "OutputFormat",
    "ResultCollector",
    "TaskResult",
    "compound_key",
    "force_json_output",
    "format_block",
    "outputs_string",
    "parse_namespaces",
    "parse_output_format",
    "plan_tasks",
    "render_aggregated",
    "rewrite_args",
]
