from __future__ import annotations
import json
from typing import Any, Dict, Optional

from .models import Listener

# HTTP_LISTENER identifies a listener as HTTP by the presence of an HTTP connection manager filter
HTTP_LISTENER = "envoy.http_connection_manager"

# TCP_LISTENER identifies a listener as TCP by the presence of a TCP proxy filter
TCP_LISTENER = "envoy.tcp_proxy"

# Fallback cluster injected by the mesh control plane when nothing else matches.
# A tcp proxy pointing at it is plumbing, not user traffic.
BLACK_HOLE_CLUSTER = "BlackHoleCluster"

LISTENER_TYPES = ("HTTP", "TCP", "HTTP+TCP", "UNKNOWN")


def typed_config_text(typed_config: Optional[Dict[str, Any]]) -> str:
    """
    Text form of an opaque filter payload, used for marker lookups only.
    """
    if not typed_config:
        return ""
    return json.dumps(typed_config, sort_keys=True, default=str)


def retrieve_listener_type(listener: Listener) -> str:
    """
    Classify a listener as HTTP, TCP, HTTP+TCP or UNKNOWN.

    Only filter names in the small recognized set count. Anything else is
    ignored, so new protocol filters fall into UNKNOWN.
    """
    n_http = 0
    n_tcp = 0

    for chain in listener.filter_chains:
        for f in chain.filters:
            if f.name == HTTP_LISTENER:
                n_http += 1
            elif f.name == TCP_LISTENER:
                if BLACK_HOLE_CLUSTER not in typed_config_text(f.typed_config):
                    n_tcp += 1

    if n_http > 0:
        if n_tcp == 0:
            return "HTTP"
        return "HTTP+TCP"
    if n_tcp > 0:
        return "TCP"

    return "UNKNOWN"
