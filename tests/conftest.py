"""Shared test fixtures and configuration."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from kubectl_mc.core.config.settings import CONFIG_ENV_VAR
from kubectl_mc.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point the configuration file at an empty temporary location.

    Keeps a developer's own ``~/.config/kubectl-mc/config.yaml`` out of the
    tests. Tests that need a configuration file write to the yielded path.
    """
    config_path = tmp_path / "kubectl-mc" / "config.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    yield config_path


@pytest.fixture
def contexts_output() -> bytes:
    """Discovery output of a kubeconfig with kind and gke contexts."""
    return (
        b"kind-kind\n"
        b"gke_project-dev_cluster-dev\n"
        b"gke_project-dev-test_cluster-test\n"
        b"gke_project-prod_cluster-prod\n"
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI attached to streams that tests close."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
