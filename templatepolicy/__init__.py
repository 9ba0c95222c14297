"""
templatepolicy — runtime-policy configuration for a text-templating engine.
"""

__version__ = "0.1.0"
__author__ = "templatepolicy"

from templatepolicy.core.exceptions import InvalidOption
from templatepolicy.core.options import NO_VALUE, MissingKeyPolicy, OnFaultPolicy, PolicyStore
from templatepolicy.core.resolver import apply_options, parse_option
from templatepolicy.core.template import Template

__all__ = [
    "InvalidOption",
    "NO_VALUE",
    "MissingKeyPolicy",
    "OnFaultPolicy",
    "PolicyStore",
    "Template",
    "apply_options",
    "parse_option",
    "__version__",
]
