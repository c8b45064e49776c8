"""
Command-line interface for selectbox.

Builds a widget from a JSON catalog, replays intents against it and prints
the resulting state, VDOM or static HTML.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

import typer

from selectbox.config import ViewConfig
from selectbox.errors import CatalogError
from selectbox.html import render_html
from selectbox.intents import (
    Clear,
    ConfirmSearch,
    Intent,
    ReplaceItems,
    Search,
    Select,
    ToggleOpen,
)
from selectbox.state import Item, SelectState, empty, init
from selectbox.update import transition
from selectbox.view import render

cli = typer.Typer(
    name="selectbox",
    help="selectbox - searchable select widget: replay intents and render the result",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    state = "state"
    vdom = "vdom"
    html = "html"


def load_catalog(path: str | Path) -> list[Item]:
    """Read `[label, payload]` pairs or `{"label", "payload"}` objects from JSON."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CatalogError(f"File not found: {path}")
    except IsADirectoryError:
        raise CatalogError(f"Not a file: {path}")
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e.strerror or e}")
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid UTF-8: {e.reason}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}")

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog must be a JSON list, got {type(raw).__name__}")

    items: list[Item] = []
    for index, entry in enumerate(raw):
        if isinstance(entry, dict) and "label" in entry:
            label, payload = entry["label"], entry.get("payload")
        elif isinstance(entry, list) and len(entry) == 2:
            label, payload = entry
        else:
            raise CatalogError(f"Entry {index} is not a (label, payload) pair: {entry!r}")
        if not isinstance(label, str):
            raise CatalogError(f"Entry {index} has a non-string label: {label!r}")
        items.append(Item(label, payload))
    return items


def parse_intent(token: str, state: SelectState) -> Intent:
    """
    Parse an intent token: `toggle`, `clear`, `confirm`, `search:<text>` or
    `select:<label>` (first catalog item with that label).
    """
    name, sep, arg = token.partition(":")
    name = name.strip().lower()
    if name == "toggle" and not sep:
        return ToggleOpen()
    if name == "clear" and not sep:
        return Clear()
    if name == "confirm" and not sep:
        return ConfirmSearch()
    if name == "search" and sep:
        return Search(arg)
    if name == "select" and sep:
        for item in state.items:
            if item.label == arg:
                return Select(item)
        raise typer.BadParameter(f"No item labelled {arg!r} in the catalog")
    raise typer.BadParameter(f"Unknown intent: {token!r}")


def state_to_json(state: SelectState) -> dict[str, Any]:
    return {
        "items": [list(item) for item in state.items],
        "visible_items": [list(item) for item in state.visible_items],
        "value": list(state.value) if state.value is not None else None,
        "is_open": state.is_open,
        "search_value": state.search_value,
        "can_clear": state.can_clear,
    }


def summarize(state: SelectState) -> str:
    return (
        f"open={state.is_open} search={state.search_value!r} "
        f"visible={len(state.visible_items)}/{len(state.items)} "
        f"value={state.selected_label or None!r}"
    )


def build_state(catalog: str, default: Optional[str], start_empty: bool) -> SelectState:
    items = load_catalog(catalog)
    if start_empty:
        if default is not None:
            typer.echo(
                f"⚠️  Ignoring --default {default!r}: --empty starts with no selection",
                err=True,
            )
        return transition(ReplaceItems(items, None), empty())
    default_item = None
    if default is not None:
        default_item = next((item for item in items if item.label == default), None)
        if default_item is None:
            typer.echo(f"⚠️  Default {default!r} is not in the catalog", err=True)
            default_item = Item(default, None)
    return init(items, default_item)


def _load_or_exit(catalog: str, default: Optional[str], start_empty: bool) -> SelectState:
    try:
        return build_state(catalog, default, start_empty)
    except CatalogError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)


@cli.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("render")
def render_cmd(
    catalog: str = typer.Argument(..., help="JSON file with the (label, payload) catalog"),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Label of the initial selection"
    ),
    intents: Optional[List[str]] = typer.Option(
        None, "--intent", "-i", help="Intent to apply, e.g. 'search:av' (repeatable)"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.state, "--format", "-f", help="What to print"
    ),
    placeholder: Optional[str] = typer.Option(
        None, "--placeholder", help="Placeholder of the search input"
    ),
    start_empty: bool = typer.Option(
        False, "--empty", help="Start from an empty, non-clearable widget"
    ),
):
    """Apply intents to a widget and print the final state, VDOM or HTML."""
    state = _load_or_exit(catalog, default, start_empty)
    for token in intents or []:
        state = transition(parse_intent(token, state), state)

    if output == OutputFormat.state:
        typer.echo(json.dumps(state_to_json(state), indent=2))
        return

    config = ViewConfig(placeholder=placeholder) if placeholder is not None else None
    node = render(state, config)
    if output == OutputFormat.vdom:
        vdom, _ = node.render()
        typer.echo(json.dumps(vdom, indent=2))
    else:
        typer.echo(render_html(node))


@cli.command("inspect")
def inspect_cmd(
    catalog: str = typer.Argument(..., help="JSON file with the (label, payload) catalog"),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Label of the initial selection"
    ),
    intents: Optional[List[str]] = typer.Option(
        None, "--intent", "-i", help="Intent to apply, e.g. 'search:av' (repeatable)"
    ),
    start_empty: bool = typer.Option(
        False, "--empty", help="Start from an empty, non-clearable widget"
    ),
):
    """Print the state after each intent."""
    state = _load_or_exit(catalog, default, start_empty)
    typer.echo(f"{'(initial)':<20} {summarize(state)}")
    for token in intents or []:
        state = transition(parse_intent(token, state), state)
        typer.echo(f"{token:<20} {summarize(state)}")


def main():
    """Main CLI entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        typer.echo("\n👋 Interrupted")
        raise typer.Exit(0)


if __name__ == "__main__":
    main()
