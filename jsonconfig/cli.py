"""Inspect and edit JSON config files.

Usage: jsonconfig show ~/.claude/settings.json
       jsonconfig set ~/.claude/settings.json theme '"dark"'
       jsonconfig path --home-subdir .claude settings.json
"""
from __future__ import annotations

import argparse, json, logging, sys
from pathlib import Path
from typing import Any, List, Optional

from jsonconfig.env_loader import load_env, log_level
from jsonconfig.errors import ConfigError
from jsonconfig.json_store import dumps_pretty, load_json_config, save_json_config
from jsonconfig.paths import ConfigPathBuilder

log = logging.getLogger(__name__)

EXIT_MISSING_KEY = 1
EXIT_CONFIG_ERROR = 2


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _file(arg: str) -> Path:
    return Path(arg).expanduser()


def cmd_path(args: argparse.Namespace) -> int:
    if args.base_dir:
        builder = ConfigPathBuilder(Path(args.base_dir).expanduser())
    else:
        builder = ConfigPathBuilder.from_home_subdir(args.home_subdir)
    print(builder.build(args.filename))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    cfg = load_json_config(_file(args.file), dict)
    print(dumps_pretty(cfg))
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    cfg = load_json_config(_file(args.file), dict)
    if args.key not in cfg:
        print(f"[jsonconfig] key not found: {args.key}", file=sys.stderr)
        return EXIT_MISSING_KEY
    print(dumps_pretty(cfg[args.key]))
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    path = _file(args.file)
    cfg = load_json_config(path, dict)
    cfg[args.key] = _parse_value(args.value)
    save_json_config(cfg, path)
    log.info("Set %s in %s", args.key, path)
    return 0


def cmd_unset(args: argparse.Namespace) -> int:
    path = _file(args.file)
    cfg = load_json_config(path, dict)
    if args.key not in cfg:
        print(f"[jsonconfig] key not found: {args.key}", file=sys.stderr)
        return EXIT_MISSING_KEY
    del cfg[args.key]
    save_json_config(cfg, path)
    log.info("Removed %s from %s", args.key, path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="jsonconfig", description="Inspect and edit JSON config files.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--env-file", default=None, help="Load variables from this .env file first")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("path", help="Print a config path built from a base directory")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--home-subdir", default=".claude", help="Subdirectory of the home directory (default: .claude)")
    src.add_argument("--base-dir", default=None, help="Explicit base directory")
    p.add_argument("filename")
    p.set_defaults(func=cmd_path)

    p = sub.add_parser("show", help="Print a config file as pretty JSON ({} if missing)")
    p.add_argument("file")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("get", help="Print one top-level value")
    p.add_argument("file")
    p.add_argument("key")
    p.set_defaults(func=cmd_get)

    p = sub.add_parser("set", help="Set one top-level value (VALUE parsed as JSON, else string)")
    p.add_argument("file")
    p.add_argument("key")
    p.add_argument("value")
    p.set_defaults(func=cmd_set)

    p = sub.add_parser("unset", help="Remove one top-level key")
    p.add_argument("file")
    p.add_argument("key")
    p.set_defaults(func=cmd_unset)
    return ap


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level()
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")
    logging.getLogger().setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    if args.env_file or Path(".env").exists():
        load_env(args.env_file)
        # .env may set JSONCONFIG_LOG_LEVEL
        _configure_logging(args.verbose)
    try:
        return args.func(args)
    except ConfigError as e:
        print(f"[jsonconfig] {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
