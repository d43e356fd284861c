"""
Custom exception hierarchy for the ext-helpers library.

All public exceptions inherit from :class:`ExtHelpersError`, allowing callers
to catch a single base class for any helper-related failure while still being
able to differentiate specific error conditions when needed.
"""

from typing import Any, Optional


class ExtHelpersError(Exception):
    """Base exception for all ext-helpers-specific errors."""

    pass


class InvalidArgumentError(ExtHelpersError, ValueError):
    """
    Raised when a required input is ``None``, empty or malformed.

    Attributes
    ----------
    param_name : Optional[str]
        Name of the offending parameter (e.g. ``"source"`` or ``"paths"``).
    """

    def __init__(self, message: str, param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name


class OutOfRangeError(InvalidArgumentError):
    """Raised when a numeric input violates a stated bound."""

    def __init__(
        self, message: str, param_name: Optional[str] = None, value: Any = None
    ):
        super().__init__(message, param_name=param_name)
        self.value = value


class SerializationError(ExtHelpersError):
    """Raised when a structural conversion (object <-> tree, JSON) fails."""

    pass
