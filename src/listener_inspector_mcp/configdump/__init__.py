"""
Config dump decoding and listener output.

extractor turns a config dump mapping into Listener objects,
render formats them, writer ties both to an output stream.
"""

from .extractor import retrieve_sorted_listeners
from .writer import ConfigWriter

__all__ = ["retrieve_sorted_listeners", "ConfigWriter"]
