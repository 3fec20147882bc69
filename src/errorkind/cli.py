"""errorkind CLI — inspect error kinds and render sample instances."""

from __future__ import annotations

import importlib
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from errorkind import __version__
from errorkind.arguments import kind_of

console = Console()
app = typer.Typer(
    name="errorkind",
    help="errorkind — Hierarchical error kinds",
    no_args_is_help=True,
)


def _load_kind(target: str) -> type:
    """Resolve a ``module:attr`` reference to an error kind class."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        console.print(f"[red]Invalid target: {target}. Use MODULE:ATTR.[/red]")
        raise typer.Exit(1)
    try:
        obj = importlib.import_module(module_name)
        for part in attr.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as e:
        console.print(f"[red]Cannot load {target}: {e}[/red]")
        raise typer.Exit(1)
    if not isinstance(obj, type) or kind_of(obj) is None:
        console.print(f"[red]{target} is not an error kind.[/red]")
        raise typer.Exit(1)
    return obj


def _initializer_label(kind) -> str:
    if not kind.has_initializer:
        return "-"
    return getattr(kind.initializer, "__qualname__", repr(kind.initializer))


# --- Version ---

def _version_callback(value: bool):
    if value:
        console.print(f"errorkind {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", callback=_version_callback, is_eager=True),
):
    pass


# --- Commands ---

@app.command("show")
def show(
    target: str = typer.Argument(..., help="Error kind as MODULE:ATTR"),
):
    """Show the chain of an error kind, leaf first."""
    kind = kind_of(_load_kind(target))
    table = Table(title=f"{kind.name} chain")
    table.add_column("Depth", justify="right")
    table.add_column("Name")
    table.add_column("Defaults")
    table.add_column("Initializer")
    for depth, item in enumerate(kind.chain):
        defaults = ", ".join(f"{k}={v!r}" for k, v in item.properties.items())
        table.add_row(str(depth), item.name, defaults or "-", _initializer_label(item))
    console.print(table)


@app.command("render")
def render(
    target: str = typer.Argument(..., help="Error kind as MODULE:ATTR"),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Instance message"),
    code: Optional[str] = typer.Option(None, "--code", "-c", help="Instance code"),
    stack_length: Optional[int] = typer.Option(None, "--stack-length", help="Frames to capture"),
):
    """Construct an instance of an error kind and print its stack."""
    cls = _load_kind(target)
    props = {}
    if message is not None:
        props["message"] = message
    if code is not None:
        props["code"] = code
    config = {"stack_length": stack_length} if stack_length is not None else None
    error = cls(props, config)
    stack = getattr(error, "stack", None)
    console.print(
        stack if stack is not None else str(error),
        markup=False, highlight=False, emoji=False, soft_wrap=True,
    )
