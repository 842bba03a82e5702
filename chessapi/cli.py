from __future__ import annotations

import argparse
import json

from chessapi.client import MoveQueryClient
from chessapi.errors import ChessApiError
from chessapi.infra.config import ConfigError, resolve_config
from chessapi.infra.env import load_dotenv
from chessapi.infra.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chessapi")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    move_parser = subparsers.add_parser("best-move")
    move_parser.add_argument("fen")
    move_parser.add_argument("--move", action="append", dest="moves", default=[])
    move_parser.add_argument("--depth", type=int)
    move_parser.add_argument("--config")
    move_parser.add_argument("--set", action="append", dest="overrides")

    config_parser = subparsers.add_parser("show-config")
    config_parser.add_argument("--config")
    config_parser.add_argument("--set", action="append", dest="overrides")
    return parser


def _best_move_command(args: argparse.Namespace) -> int:
    load_dotenv()
    try:
        config = resolve_config(config_path=args.config, cli_overrides=args.overrides)
    except ConfigError as exc:
        print(f"Config error: {exc}")
        return 2

    depth = args.depth if args.depth is not None else config["query"].get("depth")
    client = MoveQueryClient.from_config(config)
    try:
        san = client.get_best_move(args.fen, args.moves, depth)
    except ChessApiError as exc:
        print(f"Request failed: {exc}")
        return 2
    print(san)
    return 0


def _show_config_command(args: argparse.Namespace) -> int:
    load_dotenv()
    try:
        config = resolve_config(config_path=args.config, cli_overrides=args.overrides)
    except ConfigError as exc:
        print(f"Config error: {exc}")
        return 2
    print(json.dumps(config, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "best-move":
        return _best_move_command(args)
    if args.command == "show-config":
        return _show_config_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
