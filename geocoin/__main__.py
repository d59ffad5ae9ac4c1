"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``            → Launch the FastAPI server
  - ``python -m geocoin cli``        → Headless scripted walk printed to stdout
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_MOVE_CODES = {"N": "NORTH", "E": "EAST", "S": "SOUTH", "W": "WEST"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocoin Carrier")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=0)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a scripted walk without a server")
    cli.add_argument("--seed", type=int, default=0)
    cli.add_argument("--moves", type=str, default="NNNEEESSSWWW", help="Steps as a string of N/E/S/W")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app
    from geocoin.config import GameConfig

    config = GameConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    # Logging is configured in the app lifespan; keep uvicorn off its own dictConfig
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower(), log_config=None)


def _run_cli(args: argparse.Namespace) -> None:
    from geocoin.config import GameConfig
    from geocoin.core.enums import Direction
    from geocoin.engine.session import GameSession
    from geocoin.utils.logging import setup_logging

    config = GameConfig(world_seed=args.seed, log_level=args.log_level)
    setup_logging(config)

    session = GameSession(config)
    logger.info("World ready: %d caches, %d coins", len(session.board), session.ledger.total_minted())

    for code in args.moves.upper():
        if code not in _MOVE_CODES:
            raise SystemExit(f"Unknown move {code!r}; use N, E, S or W.")
        session.move(Direction[_MOVE_CODES[code]])
        # Greedy collector: empty the cache under the player, if any
        i, j = session.player_indices
        if session.board.is_known(i, j):
            while session.ledger.count(session.cache_at(i, j)):
                coin = session.take(i, j)
                logger.info("Turn %d: took %s", session.turn, coin.label)

    snap = session.snapshot()
    print(f"Turn {snap.turn} at cell {snap.player_cell[0]},{snap.player_cell[1]}")
    print(f"Carrying {len(snap.inventory)} coins: {', '.join(c.label for c in snap.inventory) or '-'}")
    print(f"{len(snap.caches)} caches in view ({snap.known_cells} known, {snap.total_minted} coins minted):")
    for view in snap.caches:
        labels = ", ".join(c.label for c in view.coins) or "empty"
        print(f"  {view.cell.key:>8}  {labels}")


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
