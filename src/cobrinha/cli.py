"""Command-line entry point for Cobrinha."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from cobrinha.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cobrinha",
        description="Wrap-around snake game served to the browser.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the game server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument(
        "--storage", type=str, default=None,
        help="Path of the best-score store (overrides the config).",
    )

    # --- best ---
    best_p = sub.add_parser("best", help="Print the stored best score.")
    best_p.add_argument("--config", type=str, default=None)
    best_p.add_argument("--storage", type=str, default=None)

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default configuration as JSON.",
    )
    config_p.add_argument(
        "output", nargs="?", default="cobrinha.json",
        help="Destination path.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.storage is not None:
        config = dataclasses.replace(config, storage_path=args.storage)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from cobrinha.server.app import create_app

    config = _load_config(args)
    logger.info(
        "Serving %dx%d board on %s:%d (store %s).",
        config.cols, config.rows, args.host, args.port, config.storage_path,
    )
    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _run_best(args: argparse.Namespace) -> int:
    from cobrinha.storage import BestScore, JsonFileStore

    config = _load_config(args)
    best = BestScore(JsonFileStore(config.storage_path), key=config.best_key)
    print(best.load())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``cobrinha`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "best": _run_best,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
