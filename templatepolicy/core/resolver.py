"""
core/resolver.py
----------------
Resolution of ``key=value`` option strings into :class:`PolicyStore` updates.

Known options::

    missingkey=default | missingkey=invalid
        The default: continue rendering; a missing key prints as "<no value>".
    missingkey=zero
        A missing key yields the zero value for the mapping's element type.
    missingkey=error
        Rendering stops immediately with an error.

    onpanic=recover
        The default: a fault in a template function becomes a render error.
    onpanic=nop
        The fault propagates to the caller untouched.

Anything else raises :class:`InvalidOption`.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from templatepolicy.core.exceptions import InvalidOption
from templatepolicy.core.options import MissingKeyPolicy, OnFaultPolicy, PolicyStore

logger = logging.getLogger(__name__)


# option key -> (PolicyStore field, {option value -> enum member})
OPTION_TABLE: Mapping[str, Tuple[str, Mapping[str, Enum]]] = MappingProxyType({
    "missingkey": (
        "missing_key",
        MappingProxyType({
            "invalid": MissingKeyPolicy.INVALID,
            "default": MissingKeyPolicy.INVALID,
            "zero": MissingKeyPolicy.ZERO_VALUE,
            "error": MissingKeyPolicy.ERROR,
        }),
    ),
    "onpanic": (
        "on_fault",
        MappingProxyType({
            "recover": OnFaultPolicy.RECOVER,
            "nop": OnFaultPolicy.NO_RECOVER,
        }),
    ),
})


def parse_option(option: str) -> Tuple[str, Enum]:
    """
    Resolve a single option string without touching any store.

    The string is split at the first ``=``; there are no bare-keyword options.

    Args:
        option: Raw option string, e.g. ``"missingkey=zero"``.

    Returns:
        ``(field_name, value)`` — the :class:`PolicyStore` attribute to set and
        the enum member to set it to.

    Raises:
        InvalidOption: If the string is empty or not in the option table.
        TypeError:     If *option* is not a ``str``.
    """
    if not isinstance(option, str):
        raise TypeError(f"option must be a str, got {type(option).__name__}")
    if option == "":
        raise InvalidOption(option, "empty option string")

    key, sep, value = option.partition("=")
    if sep:
        entry = OPTION_TABLE.get(key)
        if entry is not None:
            field_name, values = entry
            if value in values:
                return field_name, values[value]
    raise InvalidOption(option)


def apply_options(store: PolicyStore, options: Iterable[str]) -> PolicyStore:
    """
    Apply option strings to *store* in order.

    Later settings for the same field overwrite earlier ones.  Processing stops
    at the first invalid string; options applied before it stay applied, and
    the store is never left half-updated by the failing string itself.

    Args:
        store:   The policy store to update in place.
        options: Option strings, processed left to right.

    Returns:
        The same *store*, for convenience.

    Raises:
        InvalidOption: On the first string that cannot be resolved.
        TypeError:     If *options* is a single ``str`` rather than a sequence.
    """
    if isinstance(options, str):
        raise TypeError("options must be a sequence of strings, not a str")
    for option in options:
        field_name, value = parse_option(option)
        setattr(store, field_name, value)
        logger.debug("Applied option %r -> %s=%s", option, field_name, value.value)
    return store
