"""
cli.py
------
Command-line interface for the templatepolicy package.

Entry point: ``templatepolicy``

Commands
--------
* ``resolve``  — apply option strings to a fresh template and print the result.
* ``options``  — list every recognised ``key=value`` option.
"""

from __future__ import annotations

import json
import sys
from typing import Optional, Tuple

import click

from templatepolicy import __version__
from templatepolicy.core.exceptions import InvalidOption
from templatepolicy.core.options import PolicyStore
from templatepolicy.core.resolver import OPTION_TABLE
from templatepolicy.core.template import Template
from templatepolicy.policies.file_policy import load_option_file


# ---------------------------------------------------------------------------
# Helpers — rendering
# ---------------------------------------------------------------------------

def _value_style(value: str, default: str) -> str:
    """Highlight values that differ from the default."""
    if value == default:
        return click.style(value, fg="green")
    return click.style(value, fg="yellow", bold=True)


def _print_policy(name: str, store: PolicyStore) -> None:
    """Render a resolved policy to stdout."""
    w = 40
    divider = click.style("─" * w, fg="bright_black")
    defaults = PolicyStore().to_dict()

    click.echo(divider)
    click.echo(click.style(f"  TEMPLATE POLICY ({name})", bold=True, fg="bright_white"))
    click.echo(divider)
    for key, value in store.to_dict().items():
        click.echo(f"  {key:<12} {_value_style(value, defaults[key])}")
    click.echo(divider)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(
    version=__version__, prog_name="templatepolicy", message="%(prog)s %(version)s"
)
def cli():
    """templatepolicy — template runtime-policy toolkit."""


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("options", nargs=-1)
@click.option(
    "--file", "option_file", type=click.Path(dir_okay=False), default=None,
    help="YAML option file applied before the positional OPTIONS.",
)
@click.option(
    "--name", default="cli", show_default=True,
    help="Template name shown in the report.",
)
@click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format: pretty (default) or json.",
)
def resolve(
    options: Tuple[str, ...],
    option_file: Optional[str],
    name: str,
    output_format: str,
):
    """
    Resolve option strings and print the resulting policy.

    \b
    OPTIONS  key=value strings, e.g. missingkey=error onpanic=nop.
    """
    collected = []
    if option_file:
        try:
            collected.extend(load_option_file(option_file))
        except (FileNotFoundError, ValueError) as exc:
            click.echo(click.style(f"✗  Could not load option file: {exc}", fg="red"), err=True)
            sys.exit(1)
    collected.extend(options)

    tmpl = Template(name)
    try:
        tmpl.option(*collected)
    except InvalidOption as exc:
        click.echo(click.style(f"✗  {exc}", fg="red"), err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({"template": name, "policy": tmpl.policy.to_dict()}, indent=2))
        return

    _print_policy(name, tmpl.policy)


# ---------------------------------------------------------------------------
# options command
# ---------------------------------------------------------------------------

@cli.command("options")
def list_options():
    """List every recognised option string."""
    defaults = PolicyStore().to_options()
    for key, (_, values) in OPTION_TABLE.items():
        for value, member in values.items():
            opt = f"{key}={value}"
            marker = "  (default)" if f"{key}={member.value}" in defaults else ""
            click.echo(f"  {opt:<20} -> {member.name}{marker}")
