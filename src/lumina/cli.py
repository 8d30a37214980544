"""Command-line access to the lumina service layer."""

from __future__ import annotations

import argparse
import json
import sys

from lumina.commands import CommandError, CommandSurface
from lumina.config import DEFAULT_SETTINGS_PATH, load_settings
from lumina.logging_setup import setup_logging
from lumina.store import ConfigStore, default_data_dir


def _playlist_item(surface: CommandSurface, path: str) -> dict:
    info = surface.get_file_info(path)
    return {
        "path": path,
        "name": info.name,
        "metadata": {"title": info.title, "artist": info.artist},
    }


def _run(surface: CommandSurface, args: argparse.Namespace) -> int:
    cmd = args.command

    if cmd == "scan":
        for path in surface.scan_folder(args.directory):
            print(path)
    elif cmd == "info":
        print(json.dumps(surface.get_file_info(args.path).to_dict(), indent=2))
    elif cmd == "read":
        buf = surface.read_file_buffer(args.path)
        if buf is None:
            print(f"Not found: {args.path}", file=sys.stderr)
            return 1
        print(f"  name: {buf.name}  mime: {buf.mime_type}  encoded: {len(buf.buffer)}")
    elif cmd == "exists":
        exists = surface.file_exists(args.path)
        print("yes" if exists else "no")
        return 0 if exists else 1
    elif cmd == "api-key":
        if args.set is not None:
            surface.set_api_key(args.set)
        elif surface.has_api_key():
            print(surface.get_api_key())
        else:
            print("No API key stored.", file=sys.stderr)
            return 1
    elif cmd == "playlist":
        if args.save is not None:
            surface.save_playlist([_playlist_item(surface, p) for p in args.save])
        else:
            print(json.dumps(surface.get_playlist(), indent=2, ensure_ascii=False))
    elif cmd == "index":
        if args.set is not None:
            surface.save_current_index(args.set)
        else:
            print(surface.get_current_index())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumina",
        description="lumina – audio file catalog and player state store",
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_SETTINGS_PATH),
        help=f"Path to TOML settings file (default: {DEFAULT_SETTINGS_PATH})",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding config.json (default: per-user data directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or INFO (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("scan", help="List the audio files in a folder")
    p.add_argument("directory")

    p = sub.add_parser("info", help="Show name-derived info for a file")
    p.add_argument("path")

    p = sub.add_parser("read", help="Load a file and show its transport details")
    p.add_argument("path")

    p = sub.add_parser("exists", help="Check whether a path exists")
    p.add_argument("path")

    p = sub.add_parser("api-key", help="Show or store the API key")
    p.add_argument("--set", default=None, metavar="KEY")

    p = sub.add_parser("playlist", help="Show or replace the saved playlist")
    p.add_argument("--save", nargs="*", default=None, metavar="FILE")

    p = sub.add_parser("index", help="Show or store the current song index")
    p.add_argument("--set", type=int, default=None, metavar="N")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load settings file (silently skip if not found)
    settings = load_settings(args.config)

    # CLI flags override settings (only when explicitly provided)
    data_dir = args.data_dir if args.data_dir is not None else settings.data_dir
    log_level = args.log_level if args.log_level is not None else settings.log_level

    try:
        setup_logging(log_level)
    except ValueError as exc:
        parser.error(str(exc))

    store = ConfigStore(data_dir if data_dir is not None else default_data_dir())
    surface = CommandSurface(store)

    try:
        status = _run(surface, args)
    except CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        status = 1
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
