from __future__ import annotations
import os
import json
import sys
from listener_inspector_mcp.core.registry import DEFAULT_CAPABILITIES
from listener_inspector_mcp.core.server import ListenerMCPServer


def main() -> None:
    """
    Load capabilities from LISTENER_CAPABILITIES env var.

    Example:
      export LISTENER_CAPABILITIES='[
        "listener_inspector_mcp.capabilities.file_dump.capability:build_capability"
      ]'
      export LISTENER_CONFIG_DUMP=/tmp/config_dump.json
      python -m listener_inspector_mcp.cli.run_server

    LISTENER_CONFIG_DUMP is optional. When set, the file_dump capability
    loads it before the server starts. Without file_dump loaded the server
    starts unprimed.
    """
    raw = os.environ.get("LISTENER_CAPABILITIES")
    imports = json.loads(raw) if raw else list(DEFAULT_CAPABILITIES)

    server = ListenerMCPServer(capability_imports=imports)

    dump_path = os.environ.get("LISTENER_CONFIG_DUMP")
    if dump_path:
        if "file_dump" in server.registry.list():
            result = server.registry.get("file_dump").load(dump_path)
        else:
            result = f"LISTENER_CONFIG_DUMP ignored, file_dump capability not loaded: {dump_path}"
        print(result, file=sys.stderr)

    server.run()


if __name__ == "__main__":
    main()
