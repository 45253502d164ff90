from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional

from listener_inspector_mcp.core.errors import (
    DecodeError,
    EmptyResultError,
    NotPrimedError,
    RetrievalError,
)
from listener_inspector_mcp.core.models import Filter, FilterChain, Listener, SocketAddress

# Envoy admin /config_dump, JSON rendering.
# Any values carry their type URL in an "@type" key next to the message fields.
TYPE_KEY = "@type"

LISTENER_TYPE_URL = "type.googleapis.com/envoy.config.listener.v3.Listener"
LISTENER_TYPE_URL_V2 = "type.googleapis.com/envoy.api.v2.Listener"

LISTENERS_DUMP_TYPE_URLS = (
    "type.googleapis.com/envoy.admin.v3.ListenersConfigDump",
    "type.googleapis.com/envoy.admin.v2alpha.ListenersConfigDump",
)

_MAX_PORT = 2**32 - 1


def get_listener_config_dump(dump: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return the listeners section of a config dump.

    Raises RetrievalError if the dump does not have one.
    """
    if not isinstance(dump, Mapping):
        raise RetrievalError(f"listener dump: config dump is a {type(dump).__name__}, expected an object")

    configs = dump.get("configs")
    if not isinstance(configs, list):
        raise RetrievalError("listener dump: config dump has no configs list")

    for section in configs:
        if isinstance(section, Mapping) and section.get(TYPE_KEY) in LISTENERS_DUMP_TYPE_URLS:
            return dict(section)

    raise RetrievalError(
        f"listener dump: config dump has no configuration type {LISTENERS_DUMP_TYPE_URLS[0]}"
    )


def normalize_listener_any(payload: Any) -> Dict[str, Any]:
    """
    Force the type tag of a listener Any to the v3 listener type.

    v2 and v3 listeners are wire compatible for what we read, so a single
    decode path handles both. The caller's mapping is left untouched.
    """
    if not isinstance(payload, Mapping):
        raise DecodeError(f"unmarshal listener: payload is a {type(payload).__name__}, expected an object")
    out = dict(payload)
    out[TYPE_KEY] = LISTENER_TYPE_URL
    return out


def _field(raw: Mapping[str, Any], name: str, json_name: str = "", default: Any = None) -> Any:
    """
    Read a field by its proto name, then by its lowerCamelCase JSON name.

    proto3 JSON parsers accept both spellings, and an explicit null means
    the default value.
    """
    value = raw.get(name)
    if value is None and json_name:
        value = raw.get(json_name)
    return default if value is None else value


def _expect_mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} is a {type(value).__name__}, expected an object")
    return dict(value)


def _expect_list(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{what} is a {type(value).__name__}, expected a list")
    return value


def _decode_port(value: Any) -> int:
    # proto3 JSON allows uint32 as a number or a decimal string
    if isinstance(value, bool):
        raise ValueError("port_value is a bool")
    if isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"port_value {value!r} is not a number")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"port_value is a {type(value).__name__}, expected an integer")
    if value < 0 or value > _MAX_PORT:
        raise ValueError(f"port_value {value} out of range")
    return value


def _decode_address(value: Any) -> Optional[SocketAddress]:
    if value is None:
        return None
    addr = _expect_mapping(value, "address")
    sock = _field(addr, "socket_address", "socketAddress")
    if sock is None:
        return None
    sock = _expect_mapping(sock, "socket_address")
    address = _field(sock, "address", default="")
    if not isinstance(address, str):
        raise ValueError("socket_address.address is not a string")
    port = _decode_port(_field(sock, "port_value", "portValue", 0))
    return SocketAddress(address=address, port_value=port)


def _decode_filter(value: Any) -> Filter:
    raw = _expect_mapping(value, "filter")
    name = _field(raw, "name", default="")
    if not isinstance(name, str):
        raise ValueError("filter name is not a string")
    typed_config = _field(raw, "typed_config", "typedConfig")
    if typed_config is not None:
        typed_config = _expect_mapping(typed_config, f"typed_config of filter {name}")
    return Filter(name=name, typed_config=typed_config)


def _decode_filter_chain(value: Any) -> FilterChain:
    raw = _expect_mapping(value, "filter chain")
    filters = _expect_list(_field(raw, "filters", default=[]), "filters")
    return FilterChain(filters=[_decode_filter(f) for f in filters])


def decode_listener(payload: Mapping[str, Any]) -> Listener:
    """
    Decode a listener Any into a Listener.

    The payload must already carry the v3 listener tag, see normalize_listener_any.
    Any malformed field raises DecodeError.
    """
    type_url = payload.get(TYPE_KEY)
    if type_url != LISTENER_TYPE_URL:
        raise DecodeError(f"unmarshal listener: mismatched message type {type_url!r}")

    raw = {k: v for k, v in payload.items() if k != TYPE_KEY}
    try:
        name = _field(raw, "name", default="")
        if not isinstance(name, str):
            raise ValueError("name is not a string")
        chains = _expect_list(_field(raw, "filter_chains", "filterChains", []), "filter_chains")
        return Listener(
            name=name,
            address=_decode_address(_field(raw, "address")),
            filter_chains=[_decode_filter_chain(c) for c in chains],
            raw=raw,
        )
    except ValueError as e:
        raise DecodeError(f"unmarshal listener: {e}") from e


def _listener_payloads(section: Mapping[str, Any]) -> Iterator[Any]:
    """
    Yield listener Any payloads, dynamic active listeners first then static ones.
    """
    try:
        dynamic = _expect_list(_field(section, "dynamic_listeners", "dynamicListeners", []), "dynamic_listeners")
        static = _expect_list(_field(section, "static_listeners", "staticListeners", []), "static_listeners")
    except ValueError as e:
        raise RetrievalError(f"listener dump: {e}") from e

    for entry in dynamic:
        if not isinstance(entry, Mapping):
            raise DecodeError("unmarshal listener: dynamic listener entry is not an object")
        active = _field(entry, "active_state", "activeState")
        if isinstance(active, Mapping) and active.get("listener") is not None:
            yield active["listener"]

    for entry in static:
        if not isinstance(entry, Mapping):
            raise DecodeError("unmarshal listener: static listener entry is not an object")
        if entry.get("listener") is not None:
            yield entry["listener"]


def retrieve_sorted_listeners(dump: Optional[Mapping[str, Any]]) -> List[Listener]:
    """
    Extract every listener of a config dump.

    Despite the name, no sorting happens. Order is dynamic listeners then
    static listeners, each in encounter order.

    Raises:
      NotPrimedError    dump is None
      RetrievalError    no listeners section
      DecodeError       first listener that fails to decode, nothing is skipped
      EmptyResultError  section holds no listeners
    """
    if dump is None:
        raise NotPrimedError("config writer has not been primed")

    section = get_listener_config_dump(dump)

    listeners: List[Listener] = []
    for payload in _listener_payloads(section):
        listeners.append(decode_listener(normalize_listener_any(payload)))

    if not listeners:
        raise EmptyResultError("no listeners found")
    return listeners
