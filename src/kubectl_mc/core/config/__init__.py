"""Configuration loading for kubectl-mc."""

from kubectl_mc.core.config.settings import ConfigurationManager, Settings

__all__ = ["ConfigurationManager", "Settings"]
