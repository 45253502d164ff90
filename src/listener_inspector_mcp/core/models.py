from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SocketAddress:
    """
    Bound socket of a listener.

    port_value
      0 when the dump does not carry one, same as the proto default.
    """

    address: str
    port_value: int = 0


@dataclass
class Filter:
    """
    One named protocol handler in a filter chain.

    typed_config is the opaque type tagged payload, kept as decoded from the
    dump. None when the filter carries no typed config.
    """

    name: str
    typed_config: Optional[Dict[str, Any]] = None


@dataclass
class FilterChain:
    filters: List[Filter] = field(default_factory=list)


@dataclass
class Listener:
    """
    Normalized listener that the extractor outputs for both dynamic and
    static entries of a config dump.

    Fields:
      name
        Listener name, empty if the dump does not carry one.

      address
        Bound socket address, None for listeners without a socket address
        such as pipe listeners.

      filter_chains
        Ordered filter chains, used by classification.

      raw
        The full listener mapping without the Any type tag.
        Dump output renders this so no field of the original is lost.
    """

    name: str
    address: Optional[SocketAddress]
    filter_chains: List[FilterChain]
    raw: Dict[str, Any] = field(default_factory=dict)

    def bound_address(self) -> str:
        return self.address.address if self.address else ""

    def bound_port(self) -> int:
        return self.address.port_value if self.address else 0
