from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional, Sequence

from scoundrel.engine.game import new_game
from scoundrel.paths import get_paths
from scoundrel.services.content import ContentService
from scoundrel.services.telemetry import TelemetryService

from .app import ConsoleApp, ConsoleContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scoundrel", description="Play Scoundrel in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed (random if omitted)")
    parser.add_argument(
        "--tutorial",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="show or skip the tutorial without asking",
    )
    parser.add_argument("--telemetry", type=Path, default=None, help="append game records to this JSONL file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    seed = args.seed if args.seed is not None else random.SystemRandom().randrange(2**32)
    paths = get_paths()
    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    telemetry = TelemetryService(args.telemetry) if args.telemetry is not None else None

    ctx = ConsoleContext(content=content, telemetry=telemetry)
    print("********** Welcome to Scoundrel! **********")
    print("PRESS 'Ctrl + C' ANYTIME TO EXIT THE CONSOLE")

    app = ConsoleApp(ctx, new_game(seed=seed))
    try:
        return app.run(show_tutorial=args.tutorial)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
