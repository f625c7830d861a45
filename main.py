"""Command-line access to a settings file."""

from __future__ import annotations

import argparse
import json
from typing import Any

from loguru import logger

from core.errors import SettingsError
from infrastructure.logging import get_log_directory, init_logging
from infrastructure.settings import SettingsStore


def _parse_value(raw: str) -> Any:
    # Bare words like `dark` are stored as strings.
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keypath-settings",
        description="Read and write values in a JSON settings file by key path.",
    )
    parser.add_argument("--dir", help="settings directory (default: user data directory)")
    parser.add_argument("--file-name", default="settings.json", help="settings file name")
    parser.add_argument("--prettify", action="store_true", help="indent the JSON output")
    parser.add_argument("--num-spaces", type=int, default=2, help="indent width for --prettify")
    parser.add_argument(
        "--no-atomic-save", action="store_true", help="write the file in place"
    )
    parser.add_argument("--encryption-key", help="encrypt the file with this password")
    parser.add_argument(
        "--encryption-algorithm", default="aes-256-cbc", help="cipher used with --encryption-key"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument(
        "--log-to-file", action="store_true", help="also write logs to the user log directory"
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("file", help="print the settings file path")
    p_get = sub.add_parser("get", help="print the value at a key path")
    p_get.add_argument("key_path", nargs="?", help="dotted key path (default: whole document)")
    p_has = sub.add_parser("has", help="exit 0 if the key path holds a value")
    p_has.add_argument("key_path")
    p_set = sub.add_parser("set", help="store a value at a key path")
    p_set.add_argument("key_path")
    p_set.add_argument("value", help="JSON value; plain text is stored as a string")
    p_delete = sub.add_parser("delete", help="remove the value at a key path")
    p_delete.add_argument("key_path")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    level = "DEBUG" if args.verbose else "WARNING"
    init_logging(get_log_directory() if args.log_to_file else None, level=level)

    try:
        store = SettingsStore(
            dir=args.dir,
            file_name=args.file_name,
            prettify=args.prettify,
            num_spaces=args.num_spaces,
            atomic_save=not args.no_atomic_save,
            encryption_key=args.encryption_key,
            encryption_algorithm=args.encryption_algorithm,
        )
        if args.command == "file":
            print(store.file())
        elif args.command == "get":
            value = store.get_sync(args.key_path)
            print(json.dumps(value, ensure_ascii=False, indent=2 if args.prettify else None))
        elif args.command == "has":
            exists = store.has_sync(args.key_path)
            print("true" if exists else "false")
            return 0 if exists else 1
        elif args.command == "set":
            store.set_sync(args.key_path, _parse_value(args.value))
        elif args.command == "delete":
            store.delete_sync(args.key_path)
    except (SettingsError, ValueError) as ex:
        logger.error("{} failed: {}", args.command, ex)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
