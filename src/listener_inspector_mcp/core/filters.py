from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from .classify import retrieve_listener_type
from .models import Listener


@dataclass(frozen=True)
class ListenerFilter:
    """
    Match specification handed to the listener print functions.

    address
      Case insensitive exact match on the bound address, empty means any.

    port
      Exact match on the bound port, 0 means any.

    type
      Case insensitive exact match on the classification label, empty means any.
    """

    address: str = ""
    port: int = 0
    type: str = ""

    def is_empty(self) -> bool:
        return self.address == "" and self.port == 0 and self.type == ""

    def verify(self, listener: Listener) -> bool:
        """
        True if the listener passes every field that is set.
        """
        # Checked first so an empty filter never pays for classification.
        if self.is_empty():
            return True
        if self.address and listener.bound_address().lower() != self.address.lower():
            return False
        if self.port != 0 and listener.bound_port() != self.port:
            return False
        if self.type and retrieve_listener_type(listener).lower() != self.type.lower():
            return False
        return True

    matches = verify

    def apply(self, listeners: Iterable[Listener]) -> List[Listener]:
        return [listener for listener in listeners if self.verify(listener)]
