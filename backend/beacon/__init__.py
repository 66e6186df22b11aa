"""Beacon: analytics identity resolution for multi-tenant deployments."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("beacon")
except PackageNotFoundError:
    __version__ = "0.0.0"
