"""CLI entry point for cssb.

Invoked as::

    cssb [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m cssb.cli.main

Commands
--------
build       Build a selector from fragment and combinator tokens
render      Render a serialized (JSON or YAML) selector document
grammar     Print the grammar of the emitted selector text
version     Show version information
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from cssb.selectors.base import Stringifiable
    from cssb.selectors.compound import CompoundSelector

console = Console()
err_console = Console(stderr=True)

# CLI spelling of each fragment kind → CompoundSelector method name.
_FRAGMENT_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "attribute": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _read_source(path: str) -> str:
    """Read a selector document, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _combinator_token(token: str) -> str | None:
    """Return the combinator text for ``token``, or None if it is not one."""
    from cssb.grammar import COMBINATOR_TOKENS, COMBINATORS

    if token in COMBINATORS:
        return COMBINATORS[token]
    if token in COMBINATOR_TOKENS:
        return token
    return None


def _build_selector(tokens: tuple[str, ...]) -> "Stringifiable":
    """Assemble a selector from CLI tokens.

    Fragment tokens (``kind=value``) accumulate into the current compound
    selector; combinator tokens close it.  Compounds are joined
    right-associatively, as nested ``combine`` calls would be written.
    """
    from cssb.facade import builder

    compounds: list[CompoundSelector] = [builder.new()]
    combinators: list[str] = []

    for token in tokens:
        combinator = _combinator_token(token)
        if combinator is not None:
            if not compounds[-1].fragments:
                raise click.UsageError(f"Combinator {token!r} must follow a fragment")
            combinators.append(combinator)
            compounds.append(builder.new())
            continue

        kind, sep, value = token.partition("=")
        if not sep or kind not in _FRAGMENT_METHODS:
            raise click.UsageError(
                f"Invalid token {token!r}: expected KIND=VALUE "
                f"(KIND is one of {', '.join(_FRAGMENT_METHODS)}) or a combinator"
            )
        getattr(compounds[-1], _FRAGMENT_METHODS[kind])(value)

    if not compounds[-1].fragments:
        raise click.UsageError("Selector must end with a fragment")

    result: Stringifiable = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = builder.combine(left, combinator, result)
    return result


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="cssb")
def cli() -> None:
    """CSS compound selector builder with ordering and cardinality checks."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from cssb import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]cssb[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
def grammar_command() -> None:
    """Print the grammar of the selector text cssb emits."""
    from cssb.grammar import FULL_GRAMMAR

    console.print(Text(FULL_GRAMMAR.strip("\n")), soft_wrap=True)


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


@cli.command(name="build")
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def build_command(tokens: tuple[str, ...], output_format: str) -> None:
    """Build a selector from fragment and combinator tokens.

    Each TOKEN is either KIND=VALUE, where KIND is one of element, id,
    class, attr (or attribute), pseudo-class or pseudo-element, or a
    combinator: +, ~, >, or one of descendant, adjacent, sibling, child.

    Examples:

    \b
        cssb build id=main class=container class=editable
        cssb build element=div + element=table id=data
        cssb build element=ul child element=li pseudo-class=first-child --format json
    """
    from cssb.serializer import SelectorSerializer
    from cssb.validator import SelectorError

    try:
        selector = _build_selector(tokens)
    except SelectorError as exc:
        err_console.print(f"[red]Selector error:[/red] {escape(str(exc))}")
        sys.exit(1)

    output_format = output_format.lower()
    if output_format == "text":
        console.print(Text(selector.stringify()), soft_wrap=True)
        return

    serializer = SelectorSerializer()
    if output_format == "json":
        console.print(Syntax(serializer.to_json(selector), "json"))
    else:
        console.print(Syntax(serializer.to_yaml(selector), "yaml"))


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


@cli.command(name="render")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default=None,
    help="Document format (default: inferred from the file extension)",
)
@click.option(
    "--strict-combinators",
    is_flag=True,
    default=False,
    help="Reject combinators other than ' ', '+', '~' and '>'",
)
def render_command(file: str, input_format: str | None, strict_combinators: bool) -> None:
    """Render a serialized selector document as CSS text.

    FILE is the path to a JSON or YAML selector document.
    """
    from cssb.facade import SelectorBuilder
    from cssb.serializer import SelectorSerializer
    from cssb.validator import SelectorError

    source = _read_source(file)
    if input_format is None:
        input_format = "yaml" if Path(file).suffix.lower() in (".yaml", ".yml") else "json"

    serializer = SelectorSerializer(SelectorBuilder(strict_combinators=strict_combinators))
    try:
        if input_format.lower() == "yaml":
            selector = serializer.from_yaml(source)
        else:
            selector = serializer.from_json(source)
    except SelectorError as exc:
        err_console.print(f"[red]Selector error[/red] in {escape(file)}: {escape(str(exc))}")
        sys.exit(1)

    console.print(Text(selector.stringify()), soft_wrap=True)


if __name__ == "__main__":
    cli()
