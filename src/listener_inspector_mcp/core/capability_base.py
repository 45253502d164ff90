from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol


@dataclass
class CapabilityContext:
    """
    What the server hands every config dump source at registration.

    store
      The ConfigDumpStore the listener tools read from. A source primes it
      with each dump it loads, replacing the previous snapshot.

    log
      Line logger, the server sends these to stderr.
    """

    store: Any
    log: Callable[[str], None]


class Capability(Protocol):
    """
    A config dump source.

    Sources fetch a dump, parse it with ConfigWriter.prime so a broken dump
    is rejected before it reaches the store, then prime ctx.store.
    They are loaded by import string through CapabilityRegistry.
    """

    name: str

    def register_tools(self, mcp: Any, ctx: CapabilityContext) -> None:
        """
        Register the source's MCP tools, load_config_dump for file_dump.
        """
        ...

    def status(self) -> Dict[str, Any]:
        """
        Load and failure counters plus what was loaded last.
        """
        ...
