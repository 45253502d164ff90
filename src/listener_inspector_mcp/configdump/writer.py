from __future__ import annotations
import json
import sys
from typing import Any, Dict, List, Mapping, Optional, TextIO, Union

from listener_inspector_mcp.core.errors import DecodeError, RenderError
from listener_inspector_mcp.core.filters import ListenerFilter
from listener_inspector_mcp.core.models import Listener
from .extractor import retrieve_sorted_listeners
from .render import render_listener_dump, render_listener_summary


RawDump = Union[bytes, str, Mapping[str, Any]]


def parse_config_dump(data: RawDump) -> Dict[str, Any]:
    """
    Turn raw config dump bytes or text into a mapping.

    Mappings pass through unchanged.
    """
    if isinstance(data, Mapping):
        return dict(data)
    try:
        obj = json.loads(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"error unmarshalling config dump response from Envoy: {e}") from e
    if not isinstance(obj, dict):
        raise DecodeError(
            f"error unmarshalling config dump response from Envoy: got a {type(obj).__name__}, expected an object"
        )
    return obj


class ConfigWriter:
    """
    Prints the listeners of one primed config dump.

    Usage:
      cw = ConfigWriter(stdout=sys.stdout)
      cw.prime(raw_bytes)
      cw.print_listener_summary(ListenerFilter(type="http"))

    Every print call extracts listeners again from the primed snapshot.
    Output is produced completely before it is written, on any error
    nothing is written.
    """

    def __init__(self, stdout: Optional[TextIO] = None):
        self.stdout = stdout if stdout is not None else sys.stdout
        self._config_dump: Optional[Dict[str, Any]] = None

    def prime(self, data: RawDump) -> None:
        self._config_dump = parse_config_dump(data)

    @property
    def primed(self) -> bool:
        return self._config_dump is not None

    @property
    def config_dump(self) -> Optional[Dict[str, Any]]:
        return self._config_dump

    def retrieve_listeners(self, filter: ListenerFilter) -> List[Listener]:
        listeners = retrieve_sorted_listeners(self._config_dump)
        return filter.apply(listeners)

    def print_listener_summary(self, filter: ListenerFilter) -> None:
        """
        Print an ADDRESS PORT TYPE table of the listeners matching filter.
        """
        self._write(render_listener_summary(self.retrieve_listeners(filter)))

    def print_listener_dump(self, filter: ListenerFilter) -> None:
        """
        Print the listeners matching filter as an indented JSON array.
        """
        self._write(render_listener_dump(self.retrieve_listeners(filter)))

    def _write(self, text: str) -> None:
        try:
            self.stdout.write(text)
            self.stdout.flush()
        except (OSError, ValueError) as e:
            raise RenderError(f"failed to write listener output: {e}") from e
