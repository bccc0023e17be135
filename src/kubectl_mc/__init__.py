"""kubectl-mc - Run kubectl commands against multiple clusters at once."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kubectl-mc")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
