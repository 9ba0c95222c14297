"""
core/options.py
---------------
Policy values attached to every template object.

The rendering engine consults these at two points:

* ``missing_key`` — when a mapping is indexed with a key it does not hold.
* ``on_fault``    — when a user-supplied template function raises.

Both fields always hold a valid enum member; the defaults reproduce the
engine's historical behaviour (``<no value>`` placeholder, faults recovered
into render errors).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


NO_VALUE_TEXT = "<no value>"


class MissingKeyPolicy(str, Enum):
    """How to respond to indexing a mapping with a key that is not present."""

    INVALID = "invalid"  # yield NO_VALUE and keep rendering
    ZERO_VALUE = "zero"  # yield the zero value of the mapping's element type
    ERROR = "error"  # abort the render


class OnFaultPolicy(str, Enum):
    """How to handle an exception raised by a template function."""

    RECOVER = "recover"  # convert it into a render error
    NO_RECOVER = "nop"  # let it reach the engine's caller unmodified


class _NoValue:
    """Marker returned for a missing key under :attr:`MissingKeyPolicy.INVALID`."""

    _instance = None

    def __new__(cls) -> "_NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self) -> str:
        return NO_VALUE_TEXT

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


@dataclass
class PolicyStore:
    """
    Runtime policy of a single template object.

    Attributes:
        missing_key: Behaviour on a missing mapping key.
        on_fault:    Behaviour on a fault inside a template function.
    """

    missing_key: MissingKeyPolicy = MissingKeyPolicy.INVALID
    on_fault: OnFaultPolicy = OnFaultPolicy.RECOVER

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate that both fields hold members of their enums."""
        if not isinstance(self.missing_key, MissingKeyPolicy):
            raise ValueError(
                f"missing_key must be a MissingKeyPolicy, got {self.missing_key!r}"
            )
        if not isinstance(self.on_fault, OnFaultPolicy):
            raise ValueError(
                f"on_fault must be an OnFaultPolicy, got {self.on_fault!r}"
            )

    def to_dict(self) -> Dict[str, str]:
        """
        Serialise to a plain dictionary keyed by option name.

        Returns:
            ``{"missingkey": ..., "onpanic": ...}`` with canonical values.
        """
        return {
            "missingkey": self.missing_key.value,
            "onpanic": self.on_fault.value,
        }

    def to_options(self) -> List[str]:
        """
        Return the canonical option strings describing this store.

        Applying them to a fresh store reproduces this one.
        """
        return [f"{key}={value}" for key, value in self.to_dict().items()]
