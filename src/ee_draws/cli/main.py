"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Optional


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="ee-draws", description="Express Entry draws snapshot and statistics")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML (source_url, snapshot_path, timeout)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        metavar="SNAPSHOT_PATH",
        help="Snapshot JSON file (default: database/draws.json)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ingest
    ingest_parser = subparsers.add_parser("ingest", help="Fetch draws from IRCC and replace the snapshot")
    ingest_parser.add_argument(
        "--source",
        default="ircc",
        choices=["ircc"],
        help="Source to ingest from",
    )
    ingest_parser.add_argument("--url", type=str, default=None, help="Override the feed URL")
    ingest_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also write the normalized snapshot JSON to this file",
    )

    # draws
    draws_parser = subparsers.add_parser("draws", help="List draws, newest first")
    draws_parser.add_argument("--year", type=str, default=None, help="Filter by year (e.g. 2025)")
    draws_parser.add_argument(
        "--category",
        type=str,
        default=None,
        help="Filter by category substring (e.g. French, Healthcare, CEC)",
    )
    draws_parser.add_argument("--limit", type=str, default=None, help="Max number of draws")

    # draw
    draw_parser = subparsers.add_parser("draw", help="Show one draw by round number")
    draw_parser.add_argument("id", help="Round number")

    # latest
    subparsers.add_parser("latest", help="Show the most recent draw")

    # stats
    stats_parser = subparsers.add_parser("stats", help="Statistical summary of draws")
    stats_parser.add_argument("--year", type=str, default=None, help="Restrict to one year")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    handlers: dict[str, Callable[[argparse.Namespace], None]] = {
        "ingest": _run_ingest,
        "draws": _run_draws,
        "draw": _run_draw,
        "latest": _run_latest,
        "stats": _run_stats,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return

    from ee_draws.errors import EeDrawsError
    from ee_draws.service import error_payload

    try:
        handler(args)
    except EeDrawsError as e:
        status, body = error_payload(e)
        print(json.dumps({"status": status, **body}, indent=2), file=sys.stderr)
        raise SystemExit(1)


def _settings(args: argparse.Namespace):
    from ee_draws.models.settings import Settings

    settings = Settings.load(args.config)
    if getattr(args, "db", None) is not None:
        settings = settings.model_copy(update={"snapshot_path": args.db})
    return settings


def _service(args: argparse.Namespace):
    from ee_draws.service import DrawsService
    from ee_draws.store import JsonSnapshotStore

    return DrawsService(JsonSnapshotStore(_settings(args).snapshot_path))


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def _run_ingest(args: argparse.Namespace) -> None:
    """Run ingest command."""
    from ee_draws.connectors.registry import ConnectorRegistry
    from ee_draws.pipeline import run_ingest
    from ee_draws.store import JsonSnapshotStore

    settings = _settings(args)
    store = JsonSnapshotStore(settings.snapshot_path)
    with ConnectorRegistry.get(
        args.source,
        url=args.url or settings.source_url,
        timeout=settings.timeout,
    ) as connector:
        result = run_ingest(connector, store)
    print(
        f"Store: {result.fetched} fetched, {result.saved} saved, {result.dropped} dropped "
        f"({settings.snapshot_path})",
        file=sys.stderr,
    )

    if args.output:
        collection = store.load()
        args.output.write_text(json.dumps(collection.to_snapshot(), indent=2), encoding="utf-8")
        print(f"Wrote {result.saved} draws to {args.output}", file=sys.stderr)

    _print_json(result.model_dump(mode="json"))


def _run_draws(args: argparse.Namespace) -> None:
    """Run draws command."""
    _print_json(_service(args).list_draws(year=args.year, category=args.category, limit=args.limit))


def _run_draw(args: argparse.Namespace) -> None:
    """Run draw command."""
    _print_json(_service(args).get_draw(args.id))


def _run_latest(args: argparse.Namespace) -> None:
    """Run latest command."""
    _print_json(_service(args).latest_draw())


def _run_stats(args: argparse.Namespace) -> None:
    """Run stats command."""
    _print_json(_service(args).stats(year=args.year))


if __name__ == "__main__":
    main()
