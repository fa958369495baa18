import argparse
import sys

from .config import GameConfig
from .logger import setup_logging


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flap a block through a stream of obstacles.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle offsets (default: random)")
    parser.add_argument("--show-score-zones", action="store_true",
                        help="Paint the hidden score zones behind each obstacle")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(level=args.log_level)
    config = GameConfig(seed=args.seed, show_score_zones=args.show_score_zones)

    # Imported here so --help works without a display
    from .flappy_client import FlappyClient
    return FlappyClient(config).run()


if __name__ == "__main__":
    sys.exit(main())
