"""core sub-package — policy values, option resolution, and the template object."""

from templatepolicy.core.exceptions import InvalidOption
from templatepolicy.core.options import (
    NO_VALUE,
    NO_VALUE_TEXT,
    MissingKeyPolicy,
    OnFaultPolicy,
    PolicyStore,
)
from templatepolicy.core.resolver import OPTION_TABLE, apply_options, parse_option
from templatepolicy.core.template import Template

__all__ = [
    "InvalidOption",
    "NO_VALUE",
    "NO_VALUE_TEXT",
    "MissingKeyPolicy",
    "OnFaultPolicy",
    "PolicyStore",
    "OPTION_TABLE",
    "apply_options",
    "parse_option",
    "Template",
]
