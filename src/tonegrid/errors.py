"""
Exception types raised by tonegrid.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""


class TonegridError(Exception):
    """Base class for tonegrid errors."""


class InvalidParameterError(TonegridError, ValueError):
    """
    A parameter has no sane fallback value.
    
    Raised for an unsupported beat unit in zoom-ratio selection or a
    non-positive grid resolution.
    """


class TuningImportError(TonegridError):
    """A tuning file could not be parsed. Existing tuning stays in place."""
