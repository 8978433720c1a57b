"""remindersflow entry point.

Changes:
  - 2026-03-04: Added ``lists`` subcommand (list search from the terminal).
  - 2026-03-03: Added ``run`` subcommand to execute a node once and print its output.
  - 2026-03-02: Initial ``serve`` command and Rich logging.
"""

import argparse
import asyncio
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Any

from remindersflow.config import get_settings
from remindersflow.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_param_args(pairs: list[str]) -> dict[str, Any]:
    """Turn ``["listName=Work", "filterOptions.completed=all"]`` into a nested dict.

    Values are read as JSON when they parse (``true``, ``5``, ``["a"]``) and
    kept as plain strings otherwise.
    """
    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        *parents, leaf = key.split(".")
        target = values
        for part in parents:
            target = target.setdefault(part, {})
        target[leaf] = _parse_value(raw)
    return values


async def _run_node(args: argparse.Namespace) -> int:
    from remindersflow.client import RemindersClient
    from remindersflow.errors import RemindersError
    from remindersflow.nodes import NODE_TYPES, get_node_class
    from remindersflow.resolver import StaticNodeParameters

    node_cls = get_node_class(args.node)
    if node_cls is None:
        print(f"Unknown node: {args.node}. Available: {', '.join(NODE_TYPES)}", file=sys.stderr)
        return 2

    try:
        values = parse_param_args(args.param or [])
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    if args.operation:
        values[node_cls.operation_field] = args.operation

    items = json.loads(args.input) if args.input else [{}]
    if isinstance(items, dict):
        items = [items]

    settings = get_settings()
    continue_on_fail = args.continue_on_fail or settings.continue_on_fail
    node = node_cls(RemindersClient(settings), StaticNodeParameters(values), continue_on_fail)
    try:
        results = await node.execute(items)
    except RemindersError as e:
        logger.error("%s failed: %s", node_cls.name, e)
        return 1

    print(json.dumps([item.to_dict() for item in results], indent=2, default=str))
    return 0


async def _search_lists(filter_text: str | None) -> int:
    from remindersflow.client import RemindersClient
    from remindersflow.lookups import search_lists

    for entry in await search_lists(RemindersClient(get_settings()), filter_text):
        print(f"{entry['name']}\t{entry['url']}")
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run macOS Reminders workflow nodes against a Reminders API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  remindersflow serve                                   Start the local REST API
  remindersflow run remindersList                       Print all reminder lists
  remindersflow run remindersTask --operation create \\
      --param title="Buy milk" --param listName=Groceries
  remindersflow run remindersSearch --input '{"query": "milk", "limit": 5}'
  remindersflow lists gro                               Find lists matching "gro"
""",
    )
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")
    parser.add_argument("--log-level", default=None, help="Override REMINDERS_LOG_LEVEL")

    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Start the local REST API")
    serve.add_argument("--host", default=None, help="Host to bind (default: settings.api_host)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: settings.api_port)")
    serve.add_argument("--dev", action="store_true", help="Auto-reload on code changes")

    run = sub.add_parser("run", help="Execute a node once and print its output items")
    run.add_argument("node", help="Node type, e.g. remindersTask")
    run.add_argument("--operation", "-o", default=None, help="Operation (or action) to run")
    run.add_argument(
        "--param",
        "-p",
        action="append",
        metavar="KEY=VALUE",
        help="Configured node parameter; dotted keys address collections",
    )
    run.add_argument("--input", "-i", default=None, help="Input items as JSON (object or array)")
    run.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Emit an error record for a failing item instead of aborting",
    )

    lists = sub.add_parser("lists", help="Search reminder lists by name")
    lists.add_argument("filter", nargs="?", default=None, help="Case-insensitive name filter")

    args = parser.parse_args()

    if args.version:
        try:
            print(f"remindersflow {get_version('remindersflow')}")
        except PackageNotFoundError:
            from remindersflow import __version__

            print(f"remindersflow {__version__}")
        return

    settings = get_settings()
    setup_logging(level=args.log_level or settings.log_level)

    if args.command == "serve":
        from remindersflow.api.serve import run_api_server

        run_api_server(
            host=args.host or settings.api_host,
            port=args.port or settings.api_port,
            dev=args.dev,
        )
    elif args.command == "run":
        sys.exit(asyncio.run(_run_node(args)))
    elif args.command == "lists":
        sys.exit(asyncio.run(_search_lists(args.filter)))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
