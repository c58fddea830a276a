"""
rdelf Shared Module
===================

Common configuration, logging, console and result models shared by the
rdelf command-line tools.
"""

from shared.config import RdelfConfig

__all__ = ["RdelfConfig"]
