from __future__ import annotations


class ConfigDumpError(Exception):
    """
    Base for every failure of the listener inspection pipeline.

    Messages name the stage that failed, callers print them as is.
    """


class NotPrimedError(ConfigDumpError):
    """No config dump was handed to the writer."""


class RetrievalError(ConfigDumpError):
    """The dump has no listeners section of the expected shape."""


class DecodeError(ConfigDumpError):
    """A snapshot or one of its listener payloads could not be decoded."""


class EmptyResultError(ConfigDumpError):
    """The dump decoded fine but holds no listeners."""


class RenderError(ConfigDumpError):
    """Serialization or writing of the output failed."""
