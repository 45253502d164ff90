from __future__ import annotations
import time
from pathlib import Path
from typing import Any, Dict, Optional

from listener_inspector_mcp.configdump.writer import ConfigWriter
from listener_inspector_mcp.core.capability_base import Capability, CapabilityContext
from listener_inspector_mcp.core.errors import ConfigDumpError


class FileDumpCapability:
    """
    Config dump file capability.

    Loads a config dump saved from the Envoy admin endpoint, for example:
      curl -s localhost:15000/config_dump > dump.json

    The file is parsed once on load. A file that does not parse as a
    config dump is rejected and the previous snapshot stays in place.
    """

    name = "file_dump"

    def __init__(self):
        self._ctx: Optional[CapabilityContext] = None
        self._last_path = ""
        self._last_loaded: Optional[float] = None
        self._loaded = 0
        self._failed = 0

    def register_tools(self, mcp: Any, ctx: CapabilityContext) -> None:
        self._ctx = ctx

        @mcp.tool()
        def load_config_dump(capability: str, path: str) -> str:
            if capability != self.name:
                return f"wrong capability, expected {self.name}"
            return self.load(path)

    def load(self, path: str) -> str:
        if not self._ctx:
            return "not registered"

        try:
            data = Path(path).read_bytes()
        except OSError as e:
            self._failed += 1
            self._ctx.log(f"file_dump: cannot read {path}: {e}")
            return f"error: cannot read {path}: {e}"

        writer = ConfigWriter()
        try:
            writer.prime(data)
        except ConfigDumpError as e:
            self._failed += 1
            self._ctx.log(f"file_dump: rejected {path}: {e}")
            return f"error: {e}"

        self._ctx.store.prime(writer.config_dump, source=path)
        self._last_path = path
        self._last_loaded = time.time()
        self._loaded += 1
        self._ctx.log(f"file_dump: loaded config dump from {path}")
        return f"config dump loaded from {path}"

    def status(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "last_path": self._last_path,
            "last_loaded": self._last_loaded,
            "loaded": self._loaded,
            "failed": self._failed,
        }


def build_capability() -> Capability:
    return FileDumpCapability()
