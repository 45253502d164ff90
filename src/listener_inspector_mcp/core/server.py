from __future__ import annotations
import io
import sys
from typing import Any, Dict, List

from mcp.server.fastmcp import FastMCP

from listener_inspector_mcp.configdump.writer import ConfigWriter
from .store import ConfigDumpStore
from .errors import ConfigDumpError
from .filters import ListenerFilter
from .capability_base import CapabilityContext
from .registry import CapabilityRegistry


class ListenerMCPServer:
    """
    Source neutral MCP server.

    Responsibilities:
      Load configured config dump source capabilities
      Register capability tools
      Expose listener summary and dump tools over the current snapshot
    """

    def __init__(self, capability_imports: List[str]):
        self.store = ConfigDumpStore()
        self.registry = CapabilityRegistry()
        self.mcp = FastMCP("listener_inspector_mcp")

        self._load_capabilities(capability_imports)
        self._register_core_tools()

    def _log(self, msg: str) -> None:
        # stdout carries the MCP stdio transport
        print(msg, file=sys.stderr)

    def _load_capabilities(self, imports: List[str]) -> None:
        self.registry.load_from_import_paths(imports)
        ctx = CapabilityContext(store=self.store, log=self._log)

        for name in self.registry.list():
            cap = self.registry.get(name)
            cap.register_tools(self.mcp, ctx)

    def _inspect(self, mode: str, filter: ListenerFilter) -> str:
        out = io.StringIO()
        writer = ConfigWriter(stdout=out)
        snapshot = self.store.current()
        if snapshot is not None:
            writer.prime(snapshot.dump)

        try:
            if mode == "dump":
                writer.print_listener_dump(filter)
            else:
                writer.print_listener_summary(filter)
        except ConfigDumpError as e:
            return f"error: {e}"
        return out.getvalue()

    def listener_summary(self, address: str = "", port: int = 0, type: str = "") -> str:
        return self._inspect("summary", ListenerFilter(address=address, port=int(port), type=type))

    def listener_dump(self, address: str = "", port: int = 0, type: str = "") -> str:
        return self._inspect("dump", ListenerFilter(address=address, port=int(port), type=type))

    def _register_core_tools(self) -> None:
        @self.mcp.tool()
        def list_capabilities() -> List[str]:
            return self.registry.list()

        @self.mcp.tool()
        def capability_status(name: str) -> Dict[str, Any]:
            cap = self.registry.get(name)
            return cap.status()

        @self.mcp.tool()
        def snapshot_info() -> Dict[str, Any]:
            return self.store.info()

        @self.mcp.tool()
        def listener_summary(address: str = "", port: int = 0, type: str = "") -> str:
            """
            ADDRESS PORT TYPE table of the listeners in the loaded config dump.
            Empty address or type and port 0 match any listener.
            """
            return self.listener_summary(address=address, port=port, type=type)

        @self.mcp.tool()
        def listener_dump(address: str = "", port: int = 0, type: str = "") -> str:
            """
            Full JSON of the listeners in the loaded config dump that match.
            """
            return self.listener_dump(address=address, port=port, type=type)

    def run(self) -> None:
        self.mcp.run()
