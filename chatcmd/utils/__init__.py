"""
Utility modules for chatcmd.
"""

from chatcmd.utils.logging import InterceptHandler, setup_logging

__all__ = [
    "InterceptHandler",
    "setup_logging",
]
