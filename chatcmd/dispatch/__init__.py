"""
Dispatch Module.

Dispatch loop and the per-message request passed to handlers.
"""

from chatcmd.dispatch.dispatcher import DispatchConfig, Dispatcher
from chatcmd.dispatch.request import Request, RequestContext

__all__ = [
    "DispatchConfig",
    "Dispatcher",
    "Request",
    "RequestContext",
]
