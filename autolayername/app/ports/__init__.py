"""Ports the host environment implements for the command surface."""

from autolayername.app.ports.host import HostPort

__all__ = ["HostPort"]
