"""
Core modules that must remain source neutral.

Keep config dump acquisition out of this package.
The MCP server lives in core.server and is imported from there, it depends
on the configdump package which in turn depends on these modules.
"""

from .models import Filter, FilterChain, Listener, SocketAddress
from .errors import ConfigDumpError
from .filters import ListenerFilter
from .classify import retrieve_listener_type
from .store import ConfigDumpStore

__all__ = [
    "Filter",
    "FilterChain",
    "Listener",
    "SocketAddress",
    "ConfigDumpError",
    "ListenerFilter",
    "retrieve_listener_type",
    "ConfigDumpStore",
]
