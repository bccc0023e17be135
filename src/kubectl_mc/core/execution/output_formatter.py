"""Rendering of task results for streaming and aggregated output."""

import json
import logging
import math
from enum import Enum
from typing import Any

import yaml

from kubectl_mc.core.execution.result_types import compound_key
from kubectl_mc.errors import SUPPORTED_OUTPUTS, AggregationError, UnknownOutputError


class OutputFormat(Enum):
    """Formats of the aggregated output document."""

    JSON = "json"
    YAML = "yaml"


def outputs_string() -> str:
    """Supported formats separated by ``|``, for help texts."""
    return "|".join(SUPPORTED_OUTPUTS)


def parse_output_format(value: str | None) -> OutputFormat | None:
    """Validate the requested output format.

    Returns:
        The format, or None for streaming output

    Raises:
        UnknownOutputError: If the format is not supported
    """
    if not value:
        return None
    try:
        return OutputFormat(value)
    except ValueError:
        raise UnknownOutputError(value) from None


def format_block(context: str, namespace: str, output: bytes) -> str:
    """Format one result for streaming output.

    A blank line, the key, a divider as long as the key, then the output.
    """
    key = compound_key(context, namespace)
    text = output.decode("utf-8", errors="replace")
    return f"\n{key}\n{'-' * len(key)}\n{text}"


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not a JSON value: {name}")


def build_document(
    outputs: dict[str, bytes], logger: logging.Logger | None = None
) -> dict[str, Any]:
    """Parse every output as JSON and key the documents by result key.

    Numbers that do not fit a finite float and the NaN/Infinity constants
    are rejected; they would not render back to valid JSON.

    Raises:
        AggregationError: If any output is not a JSON document
    """
    logger = logger or logging.getLogger(__name__)
    document: dict[str, Any] = {}
    for key in sorted(outputs):
        try:
            document[key] = json.loads(
                outputs[key],
                parse_float=_parse_finite_float,
                parse_constant=_reject_constant,
            )
        except (ValueError, UnicodeDecodeError) as e:
            logger.debug("failed to parse output of %s: %r", key, outputs[key])
            raise AggregationError() from e
    return document


def render_aggregated(
    outputs: dict[str, bytes],
    output_format: OutputFormat,
    logger: logging.Logger | None = None,
) -> str:
    """Render all outputs as a single JSON or YAML document."""
    document = build_document(outputs, logger)
    if output_format is OutputFormat.YAML:
        return yaml.safe_dump(document, default_flow_style=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False)
