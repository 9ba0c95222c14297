"""
core/template.py
----------------
The template object as seen by the policy layer.

Parsing and rendering live elsewhere; this class only owns the
:class:`PolicyStore` and exposes the read accessors the rendering engine
consults at a missing key or a template-function fault.

Configure a template completely before handing it to concurrent renderers;
the store carries no locking of its own.
"""

from __future__ import annotations

import dataclasses

from templatepolicy.core.options import MissingKeyPolicy, OnFaultPolicy, PolicyStore
from templatepolicy.core.resolver import apply_options


class Template:
    """
    A named template carrying its runtime policy.

    Args:
        name: Template name.

    Example::

        tmpl = Template("page").option("missingkey=error", "onpanic=nop")
        tmpl.current_missing_key_policy()  # MissingKeyPolicy.ERROR
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._policy = PolicyStore()

    def __repr__(self) -> str:
        return f"Template({self.name!r}, {self._policy.to_dict()!r})"

    @property
    def policy(self) -> PolicyStore:
        """A copy of the current policy; change it through :meth:`option`."""
        return dataclasses.replace(self._policy)

    def option(self, *options: str) -> "Template":
        """
        Set runtime options, each a ``key=value`` string.

        Raises:
            InvalidOption: If any option is unrecognised.  Options preceding
                the bad one remain applied.
        """
        apply_options(self._policy, options)
        return self

    def current_missing_key_policy(self) -> MissingKeyPolicy:
        return self._policy.missing_key

    def current_fault_policy(self) -> OnFaultPolicy:
        return self._policy.on_fault
