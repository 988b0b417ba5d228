"""Headless chase runner.

Plays one session with a seeded random steering script and logs every
capture, e.g.::

    python -m maze_chase --layout small --ticks 600 --seed 7

Configuration comes from ``MAZE_CHASE_*`` environment variables (see
:mod:`maze_chase.config`); command-line flags take precedence.
"""

import argparse
import logging
import random
from typing import Any, Dict, Optional, Sequence

from maze_chase.config import GameConfig
from maze_chase.directions import Direction
from maze_chase.levels import LAYOUT_REGISTRY, generate
from maze_chase.step import step
from maze_chase.systems.encounter import is_captured
from maze_chase.types import CommitMode

logger = logging.getLogger("maze_chase")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless maze chase simulation")
    parser.add_argument("--layout", choices=sorted(LAYOUT_REGISTRY), help="Maze to load")
    parser.add_argument("--ticks", type=int, help="Maximum number of ticks to run")
    parser.add_argument("--tick-seconds", type=float, help="Simulated seconds per tick")
    parser.add_argument(
        "--commit-mode",
        choices=[mode.value for mode in CommitMode],
        help="Motion overflow policy",
    )
    parser.add_argument("--seed", type=int, default=0, help="Steering script seed")
    parser.add_argument(
        "--steer-every",
        type=int,
        default=15,
        help="Ticks between random steering requests",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Keep playing after a capture instead of stopping",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    overrides: Dict[str, Any] = {}
    if args.layout is not None:
        overrides["layout"] = args.layout
    if args.ticks is not None:
        overrides["max_ticks"] = args.ticks
    if args.tick_seconds is not None:
        overrides["tick_seconds"] = args.tick_seconds
    if args.commit_mode is not None:
        overrides["commit_mode"] = CommitMode(args.commit_mode)
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return GameConfig.from_env(**overrides)


def run(config: GameConfig, seed: int, steer_every: int, keep_going: bool) -> int:
    """Run one session and return the number of captures detected."""
    rng = random.Random(seed)
    directions = list(Direction)
    state = generate(config)
    logger.info(
        "Starting %r with %d pursuer(s) for up to %d ticks",
        config.layout,
        len(state.pursuer),
        config.max_ticks,
    )

    for tick in range(config.max_ticks):
        steer = rng.choice(directions) if tick % max(steer_every, 1) == 0 else None
        state = step(state, steer, config.tick_seconds)
        if is_captured(state) and not keep_going:
            break

    logger.info(
        "Finished after %d ticks (%.2fs simulated), %d capture(s)",
        state.tick,
        state.time,
        state.captures,
    )
    return state.captures


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    config = config_from_args(args)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(config, args.seed, args.steer_every, args.keep_going)


if __name__ == "__main__":
    main()
