#!/usr/bin/env python3
"""
CleanSheet fixture difficulty report CLI

Fetches FPL data, prints the league-wide fixture difficulty grid and, when a
team id is known, your squad's upcoming fixtures.

The team id is remembered between runs (see entry_cache_path in
data/dashboard_config.json); pass --team once and later runs pick it up.

Usage:
    python cleansheet_report.py
    python cleansheet_report.py --team 123456
    python cleansheet_report.py --width 600 --xlsx out/fixtures.xlsx --json out/fixtures.json
"""

import argparse
import logging
import sys

from cleansheet import (
    Dashboard,
    EntryIdStore,
    FPLClient,
    export_views_json,
    export_workbook,
    render_text_table,
)
from cleansheet.identity import entry_id_from_url, parse_entry_id
from cleansheet.logging_config import setup_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="CleanSheet FPL fixture difficulty report")
    parser.add_argument(
        "--team", "-t",
        default=None,
        help="FPL team (entry) id, or a share link containing ?team=<id>",
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        default=1024,
        help="Viewport width; below 768 only 4 gameweeks are shown",
    )
    parser.add_argument(
        "--json",
        default=None,
        help="Also write both views to this JSON file",
    )
    parser.add_argument(
        "--xlsx",
        default=None,
        help="Also write both views to this Excel workbook",
    )
    parser.add_argument(
        "--forget-team",
        action="store_true",
        help="Forget the remembered team id and exit",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )

    args = parser.parse_args(argv)

    setup_logging(level=logging.WARNING if args.quiet else logging.INFO)

    store = EntryIdStore()
    if args.forget_team:
        store.clear()
        print("Remembered team id cleared.")
        return 0

    notifications = []

    def notify(message: str) -> None:
        notifications.append(message)
        print(f"❌ {message}", file=sys.stderr)

    team = None
    if args.team:
        try:
            team = entry_id_from_url(args.team) if "://" in args.team else parse_entry_id(args.team)
        except ValueError:
            team = None
        if team is None:
            notify(f"No valid team id in {args.team!r}")
            return 1

    with FPLClient() as client:
        dashboard = Dashboard(
            client,
            store=store,
            notifier=notify,
            viewport_width=args.width,
            location_param=team,
        )
        if not dashboard.refresh():
            return 1

    # An explicit --team that loaded becomes the remembered one
    if team and dashboard.squad_view is not None:
        store.save(dashboard.entry_id)

    print(f"Current Gameweek: GW{dashboard.state.current_gameweek}")
    print()
    print(render_text_table(dashboard.grid_view))

    if dashboard.squad_view is not None:
        entry = dashboard.state.entry
        print()
        if entry.manager_name:
            print(f"Manager: {entry.manager_name}")
        print(render_text_table(dashboard.squad_view))
        if dashboard.share_url:
            print(f"\nShare: {dashboard.share_url}")
    elif dashboard.needs_entry_prompt:
        print("\nTip: pass --team <id> to see your squad's fixtures.")

    if args.json:
        export_views_json(args.json, dashboard.grid_view, dashboard.squad_view, dashboard.share_url)
    if args.xlsx:
        export_workbook(args.xlsx, dashboard.grid_view, dashboard.squad_view)

    return 1 if notifications else 0


if __name__ == "__main__":
    sys.exit(main())
