"""
Capabilities are pluggable config dump sources that can be loaded at runtime.

Each capability must expose a build_capability factory in its capability module.
"""

__all__ = [
    "file_dump",
]
