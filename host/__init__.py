"""Dealer host package: wraps the stud engine with networking."""

from .server import DealerServer, ServerConfig

__all__ = ["DealerServer", "ServerConfig"]
