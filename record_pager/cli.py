#!/usr/bin/env python3
"""
Command-line interface for record_pager.
Prints condensed page links, single pages of a table, and page counts.
"""

import argparse
import logging
import sqlite3
import sys
from typing import List, Optional

from rich.console import Console

from record_pager.config import load_config
from record_pager.di import build_container
from record_pager.errors import PagerError
from record_pager.models.filter_spec import Query
from record_pager.models.page_range import PageRangeConfig
from record_pager.pagination.page_range import compute_page_range
from record_pager.pagination.window import coerce_page_number
from record_pager.ui.page_links import render_page_links, render_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="record-pager",
        description="Page through SQLite tables and print condensed page links",
    )
    parser.add_argument(
        '--config',
        help='Path to a JSON config file (default: ~/.record_pager_config.json)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Enable verbose logging'
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    links = subparsers.add_parser('links', help='Print the condensed page range')
    links.add_argument('--num-pages', type=int, required=True, help='Total number of pages')
    links.add_argument('--current', default="1", help='Current page number')
    links.add_argument('--leading', type=int, default=None, help='Pages always shown at the start')
    links.add_argument('--trailing', type=int, default=None, help='Pages always shown at the end')
    links.add_argument('--around', type=int, default=None, help='Pages shown around the current page')

    commands = (
        ('page', 'Print one page of a table'),
        ('count', 'Print record and page counts'),
        ('browse', 'Browse a table interactively'),
    )
    for name, help_text in commands:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('--db', dest='db_path', default=None, help='Path to SQLite database file')
        sub.add_argument('--table', required=True, help='Table to read')
        sub.add_argument('--key-column', default='id', help='Unique, ordered key column')
        sub.add_argument('--where', default='', help='SQL filter, e.g. "status = \'open\'"')
        sub.add_argument('--per-page', type=int, default=None, help='Records per page (default from config)')
        if name in ('page', 'browse'):
            sub.add_argument('--page', default="1", help='Page number to show')
            sub.add_argument('--order-by', default='', help='SQL ordering, e.g. "created_at DESC"')

    return parser


def _links(args, config, console: Console) -> int:
    pagination = config["pagination"]
    page_range = compute_page_range(PageRangeConfig(
        num_pages=args.num_pages,
        current_page=args.current,
        page_param=pagination["page_param"],
        min_leading_pages=args.leading if args.leading is not None else pagination["min_leading_pages"],
        min_trailing_pages=args.trailing if args.trailing is not None else pagination["min_trailing_pages"],
        range_about_current_page=args.around if args.around is not None else pagination["range_about_current_page"],
    ))
    if page_range is None:
        console.print("(single page, no links)", style="dim")
    else:
        console.print(render_page_links(page_range))
    return 0


def _page(args, container, console: Console) -> int:
    service = container.pager_service(args.table, key_column=args.key_column)
    query = Query(where=args.where, order_by=args.order_by)
    page = service.page(page=args.page, per_page=args.per_page, query=query)

    console.print(f"{args.table}: page {page.page} of {page.pages} ({page.total} records)", style="bold")
    console.print(render_records(list(page.items)))
    page_range = service.page_links(page)
    if page_range is not None:
        console.print(render_page_links(page_range))
    return 0


def _browse(args, container) -> int:
    from record_pager.ui.app import RecordBrowserApp

    service = container.pager_service(args.table, key_column=args.key_column)
    if args.per_page is not None:
        service.dataset.per_page = args.per_page
    query = Query(where=args.where, order_by=args.order_by)
    app = RecordBrowserApp(
        service,
        query,
        page=coerce_page_number(args.page),
        title=f"record-pager: {args.table}",
    )
    app.run()
    return 0


def _count(args, container, console: Console) -> int:
    repo = container.record_repo(args.table, key_column=args.key_column)
    if args.per_page is not None:
        repo.per_page = args.per_page
    query = Query(where=args.where)
    total = repo.resolve_total(query)
    console.print(f"{total} records, {repo.page_count(total)} pages of {repo.per_page}")
    return 0


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=log_format)

    try:
        config = load_config(args.config)
        if args.command == 'links':
            return _links(args, config, console)

        if args.db_path:
            config["sqlite"]["db_path"] = args.db_path
        container = build_container(config)
        try:
            if args.command == "page":
                return _page(args, container, console)
            if args.command == "browse":
                return _browse(args, container)
            return _count(args, container, console)
        finally:
            container.close()
    except (PagerError, sqlite3.Error) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
