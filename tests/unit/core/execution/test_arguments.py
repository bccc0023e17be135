"""Tests for kubectl argument rewriting."""

import pytest

from kubectl_mc.core.execution.arguments import (
    force_json_output,
    parse_namespaces,
    rewrite_args,
    target_flags,
)

CONTEXT = "kind-kind"


class TestRewriteArgs:
    """Test injection of the context and namespace flags."""

    def test_appends_flags_without_separator(self) -> None:
        """Test that the context flag goes last when there is no separator."""
        args = ["get", "pods", "-n", "kube-system"]

        result = rewrite_args(args, CONTEXT)

        assert result == ["get", "pods", "-n", "kube-system", "--context", CONTEXT]

    def test_inserts_flags_before_separator(self) -> None:
        """Test that exec arguments after the separator stay untouched."""
        args = [
            "exec",
            "deployment/local-path-provisioner",
            "-n",
            "local-path-storage",
            "-it",
            "--",
            "ls",
            "/usr",
        ]

        result = rewrite_args(args, CONTEXT)

        assert result == [
            "exec",
            "deployment/local-path-provisioner",
            "-n",
            "local-path-storage",
            "-it",
            "--context",
            CONTEXT,
            "--",
            "ls",
            "/usr",
        ]

    def test_only_first_separator_triggers_insertion(self) -> None:
        """Test that a second separator is passed through literally."""
        args = ["run", "debug", "--", "sh", "-c", "--", "true"]

        result = rewrite_args(args, CONTEXT, "default")

        assert result == [
            "run",
            "debug",
            "--context",
            CONTEXT,
            "--namespace",
            "default",
            "--",
            "sh",
            "-c",
            "--",
            "true",
        ]

    def test_namespace_flag_follows_context_flag(self) -> None:
        """Test that a namespace adds its own flag pair."""
        result = rewrite_args(["get", "pods"], CONTEXT, "kube-system")

        assert result == [
            "get",
            "pods",
            "--context",
            CONTEXT,
            "--namespace",
            "kube-system",
        ]

    def test_empty_args(self) -> None:
        """Test that empty args still select the context."""
        assert rewrite_args([], CONTEXT) == ["--context", CONTEXT]

    def test_does_not_modify_input(self) -> None:
        """Test that the user's argument list is left as it was."""
        args = ["get", "pods", "--", "x"]

        rewrite_args(args, CONTEXT, "ns")

        assert args == ["get", "pods", "--", "x"]


def test_target_flags_without_namespace() -> None:
    """Test that an empty namespace adds no namespace flag."""
    assert target_flags(CONTEXT) == ["--context", CONTEXT]


def test_force_json_output_appends_output_flag() -> None:
    """Test that JSON output is requested at the end of the args."""
    assert force_json_output(["get", "pods"]) == ["get", "pods", "-o", "json"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, [""]),
        ("", [""]),
        ("default", ["default"]),
        ("default,kube-system", ["default", "kube-system"]),
        (" default , kube-system ", ["default", "kube-system"]),
        ("default,default", ["default"]),
    ],
)
def test_parse_namespaces(value: str | None, expected: list[str]) -> None:
    """Test splitting of the comma-separated namespace list."""
    assert parse_namespaces(value) == expected
