from __future__ import annotations
import importlib
from typing import Dict, List
from .capability_base import Capability

DEFAULT_CAPABILITIES = [
    "listener_inspector_mcp.capabilities.file_dump.capability:build_capability",
]


class CapabilityRegistry:
    """
    Holds loaded config dump source capabilities by name.

    Core never imports source modules directly, they are loaded from
    import strings of the form "some.module.path:factory_function".
    """

    def __init__(self):
        self._caps: Dict[str, Capability] = {}

    def register(self, cap: Capability) -> None:
        if cap.name in self._caps:
            raise ValueError(f"duplicate capability name {cap.name}")
        self._caps[cap.name] = cap

    def get(self, name: str) -> Capability:
        if name not in self._caps:
            raise KeyError(f"capability not loaded {name}")
        return self._caps[name]

    def list(self) -> List[str]:
        return sorted(self._caps.keys())

    def load_from_import_paths(self, import_paths: List[str]) -> None:
        for path in import_paths:
            module_path, sep, factory_name = path.partition(":")
            if not sep or not module_path or not factory_name:
                raise ValueError(f"capability import must look like module:factory, got {path!r}")
            module = importlib.import_module(module_path)
            factory = getattr(module, factory_name)
            self.register(factory())
