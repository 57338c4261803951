#!/usr/bin/env python3
"""Instrumentarium CLI: serve the API and browse the catalog."""

import argparse

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from instrumentarium.browse import CatalogClient, CatalogError, filter_instruments
from instrumentarium.browse.cards import render_card, render_grid, render_header
from instrumentarium.instrument.sentinels import CategorySentinel

console = Console()


def notify_error(title: str, error: CatalogError) -> None:
    """Report a failed fetch without leaving the current view."""
    console.print(f"[red]{escape(title)}:[/] {escape(error.message)}")


def serve(host: str, port: int, debug: bool) -> None:
    """Run the instruments API on Flask's development server."""
    from instrumentarium.app import create_app

    app = create_app()
    app.run(host=host, port=port, debug=debug)


def select_category(categories: list[str]):
    """Prompt for a category; None means the user cancelled."""
    return questionary.select(
        "Category:",
        choices=[questionary.Choice(title="All categories", value=CategorySentinel.ALL)]
        + [questionary.Choice(title=c, value=c) for c in categories],
    ).ask()


def browse(client: CatalogClient) -> None:
    """Fetch the catalog once, then filter it locally until the user quits."""
    instruments: list[dict] = []
    categories: list[str] = []

    with console.status("Loading instruments..."):
        try:
            instruments = client.fetch_instruments()
        except CatalogError as e:
            notify_error("Error loading instruments", e)
        try:
            categories = client.fetch_categories()
        except CatalogError as e:
            notify_error("Error fetching categories", e)

    console.print(render_header(len(instruments), len(categories)))

    category = CategorySentinel.ALL
    search = ""
    while True:
        render_grid(console, filter_instruments(instruments, category, search))

        action = questionary.select(
            "What next?",
            choices=["Search", "Change category", "Clear filters", "Quit"],
        ).ask()
        if action in (None, "Quit"):
            return
        if action == "Search":
            answer = questionary.text("Search instruments:", default=search).ask()
            if answer is not None:
                search = answer
        elif action == "Change category":
            answer = select_category(categories)
            if answer is not None:
                category = answer
        else:
            category, search = CategorySentinel.ALL, ""


def show_categories(client: CatalogClient) -> None:
    try:
        categories = client.fetch_categories()
    except CatalogError as e:
        notify_error("Error fetching categories", e)
        return
    for name in categories:
        console.print(Text(name))


def show_stats(client: CatalogClient) -> None:
    try:
        stats = client.fetch_stats()
    except CatalogError as e:
        notify_error("Error fetching stats", e)
        return

    table = Table(title=f"{stats['total']} instruments")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    for name, count in sorted(stats["by_category"].items()):
        table.add_row(Text(name), str(count))
    console.print(table)


def show_instrument(client: CatalogClient, instrument_id: str) -> None:
    try:
        instrument = client.fetch_instrument(instrument_id)
    except CatalogError as e:
        notify_error("Error loading instrument", e)
        return
    console.print(render_card(instrument))


def main(argv: list[str] = None):
    parser = argparse.ArgumentParser(description="Instrumentarium CLI")
    parser.add_argument("--api-url", help="Base URL of the instruments API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the instruments API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=5000)
    serve_parser.add_argument("--debug", action="store_true")

    subparsers.add_parser("browse", help="Browse and filter the catalog")
    subparsers.add_parser("categories", help="List distinct categories")
    subparsers.add_parser("stats", help="Show instrument counts per category")
    show_parser = subparsers.add_parser("show", help="Show one instrument")
    show_parser.add_argument("instrument_id")

    args = parser.parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port, args.debug)
        return

    client = CatalogClient(base_url=args.api_url)
    if args.command == "browse":
        browse(client)
    elif args.command == "categories":
        show_categories(client)
    elif args.command == "stats":
        show_stats(client)
    elif args.command == "show":
        show_instrument(client, args.instrument_id)


if __name__ == "__main__":
    main()
