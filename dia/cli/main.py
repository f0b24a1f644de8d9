"""
CLI entry point.

  dia [gui] [FILE]              open the editor window (optionally with FILE)
  dia recent list [--json]      print the recent-files list, most recent first
  dia recent add PATH...        register paths as recently opened
  dia recent remove PATH        drop a path from the list
  dia recent clear              empty the list
  dia version
"""
import argparse
import json
import logging
import sys

import dia
from dia.config import load_config
from dia.utils.logger import configure_logging
from dia.core.recent_files import RecentFiles
from dia.exceptions import DiaError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dia", description="dia — Mermaid diagram editor")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level (default: INFO or DIA_LOG_LEVEL)")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for dia.log (default: DIA_LOG_DIR or console only)")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config (overrides config.yaml and DIA_CONFIG)")
    subparsers = parser.add_subparsers(dest="command")

    gui_parser = subparsers.add_parser("gui", help="Open the editor window")
    gui_parser.add_argument("file", nargs="?", default=None, help="Diagram file to open")

    recent_parser = subparsers.add_parser("recent", help="Manage the recent-files list")
    recent_sub = recent_parser.add_subparsers(dest="action", required=True)
    list_parser = recent_sub.add_parser("list", help="Print recent files, most recent first")
    list_parser.add_argument("--json", action="store_true", help="Print as a JSON array")
    add_parser = recent_sub.add_parser("add", help="Register paths as recently opened")
    add_parser.add_argument("paths", nargs="+")
    remove_parser = recent_sub.add_parser("remove", help="Drop a path from the list")
    remove_parser.add_argument("path")
    recent_sub.add_parser("clear", help="Empty the list")

    subparsers.add_parser("version", help="Print the version")
    return parser


def run_recent(args, recent: RecentFiles = None) -> int:
    recent = recent if recent is not None else RecentFiles()
    try:
        recent.load()
    except DiaError as e:
        # A corrupt list can still be cleared or overwritten
        if args.action in ("list", "remove"):
            print("ERROR: %s" % e, file=sys.stderr)
            return 1
        logging.getLogger("dia.cli").warning("ignoring unreadable recent list: %s", e)

    if args.action == "list":
        if args.json:
            print(json.dumps(recent.files, indent=2))
        else:
            for path in recent.files:
                print(path)
        return 0

    if args.action == "add":
        # Oldest first so the first argument ends up most recent
        for path in reversed(args.paths):
            recent.add(path)
    elif args.action == "remove":
        if not recent.remove(args.path):
            print("Not in recent files: %s" % args.path, file=sys.stderr)
            return 1
    elif args.action == "clear":
        recent.clear()

    try:
        recent.save()
    except DiaError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_config(override_path=args.config)
    configure_logging(level=args.log_level, log_dir=args.log_dir)

    if args.command == "version":
        print(dia.__version__)
        return 0
    if args.command == "recent":
        return run_recent(args)

    from dia.app import main as gui_main
    return gui_main(path=getattr(args, "file", None))


if __name__ == "__main__":
    sys.exit(main())
