from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Snapshot:
    """
    One config dump as loaded by a capability.

    source
      Free form label of where the dump came from, a file path for file_dump.
    """

    dump: Dict[str, Any]
    source: str
    loaded_at: float


class ConfigDumpStore:
    """
    Holds the config dump snapshot the server currently inspects.

    Only one snapshot is kept. Loading a new one replaces the old one,
    listeners are never cached, every inspection decodes the snapshot again.
    """

    def __init__(self):
        self._snapshot: Optional[Snapshot] = None

    def prime(self, dump: Dict[str, Any], source: str = "unknown") -> Snapshot:
        """
        Capabilities call this with a parsed config dump.
        """
        self._snapshot = Snapshot(dump=dump, source=source, loaded_at=time.time())
        return self._snapshot

    def current(self) -> Optional[Snapshot]:
        return self._snapshot

    def clear(self) -> None:
        self._snapshot = None

    def info(self) -> Dict[str, Any]:
        if self._snapshot is None:
            return {"primed": False}
        return {
            "primed": True,
            "source": self._snapshot.source,
            "loaded_at": self._snapshot.loaded_at,
        }
