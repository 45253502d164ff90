"""
listener_inspector_mcp

Inspect the listeners of an Envoy style proxy from a config dump snapshot.

Core ideas
1. Capabilities load config dump snapshots from some source
2. The extractor normalizes dynamic and static listeners into Listener
3. Classification, filtering and rendering never know where a snapshot came from
"""

__all__ = ["core", "configdump", "capabilities", "cli"]
