"""
core/exceptions.py
------------------
Errors raised while configuring a template's runtime policy.
"""

from __future__ import annotations


class InvalidOption(ValueError):
    """
    Raised when an option string cannot be resolved.

    Attributes:
        option: The offending option string, verbatim.
    """

    def __init__(self, option: str, message: str = "") -> None:
        self.option = option
        super().__init__(message or f"unrecognized option: {option}")
