"""Session configuration.

``GameConfig`` collects every tunable of a chase session: which maze to load,
entity speeds and spawns, the motion overflow policy and the host loop's tick
length. Defaults mirror the arcade game (player 11.5 tiles/s, pursuer
7.0 tiles/s, both starting upward).

:meth:`GameConfig.from_env` overrides the defaults from ``MAZE_CHASE_*``
environment variables, reading a ``.env`` file first if one exists:

=============================  ======================================
Variable                       Field
=============================  ======================================
``MAZE_CHASE_LAYOUT``          ``layout``
``MAZE_CHASE_PLAYER_SPEED``    ``player_speed``
``MAZE_CHASE_PURSUER_SPEED``   ``pursuer_speed``
``MAZE_CHASE_COMMIT_MODE``     ``commit_mode`` (``single``/``carry``)
``MAZE_CHASE_TICK_SECONDS``    ``tick_seconds``
``MAZE_CHASE_MAX_TICKS``       ``max_ticks``
``MAZE_CHASE_LOG_LEVEL``       ``log_level``
=============================  ======================================
"""

import math
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv

from maze_chase.directions import Direction
from maze_chase.types import CommitMode

Coord = Tuple[int, int]


@dataclass(frozen=True)
class GameConfig:
    """Tunables for one chase session.

    Attributes:
        layout: Name in ``LAYOUT_REGISTRY``.
        player_speed: Player tiles per second.
        pursuer_speed: Pursuer tiles per second.
        player_start: Overrides the layout's player spawn.
        pursuer_starts: Overrides the layout's pursuer spawns.
        start_direction: Initial heading of every entity.
        commit_mode: Motion overflow policy.
        tick_seconds: Elapsed time fed to each tick by fixed-step hosts.
        max_ticks: Episode length cap for fixed-step hosts.
        log_level: Level the CLI configures logging with.
    """

    layout: str = "classic"
    player_speed: float = 11.5
    pursuer_speed: float = 7.0
    player_start: Optional[Coord] = None
    pursuer_starts: Optional[Tuple[Coord, ...]] = None
    start_direction: Direction = Direction.UP
    commit_mode: CommitMode = CommitMode.SINGLE
    tick_seconds: float = 1.0 / 60.0
    max_ticks: int = 3600
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for speed in (self.player_speed, self.pursuer_speed):
            if not math.isfinite(speed) or speed <= 0:
                raise ValueError(f"Speeds must be finite and positive: {speed}")
        if not math.isfinite(self.tick_seconds) or self.tick_seconds < 0:
            raise ValueError(
                f"tick_seconds must be finite and non-negative: {self.tick_seconds}"
            )
        if self.max_ticks < 1:
            raise ValueError(f"max_ticks must be at least 1: {self.max_ticks}")

    @classmethod
    def from_env(cls, **overrides: Any) -> "GameConfig":
        """Build a config from ``MAZE_CHASE_*`` variables plus explicit overrides."""
        load_dotenv()
        values: Dict[str, Any] = {}
        if (layout := os.getenv("MAZE_CHASE_LAYOUT")) is not None:
            values["layout"] = layout
        if (player_speed := os.getenv("MAZE_CHASE_PLAYER_SPEED")) is not None:
            values["player_speed"] = float(player_speed)
        if (pursuer_speed := os.getenv("MAZE_CHASE_PURSUER_SPEED")) is not None:
            values["pursuer_speed"] = float(pursuer_speed)
        if (commit_mode := os.getenv("MAZE_CHASE_COMMIT_MODE")) is not None:
            values["commit_mode"] = CommitMode(commit_mode.lower())
        if (tick_seconds := os.getenv("MAZE_CHASE_TICK_SECONDS")) is not None:
            values["tick_seconds"] = float(tick_seconds)
        if (max_ticks := os.getenv("MAZE_CHASE_MAX_TICKS")) is not None:
            values["max_ticks"] = int(max_ticks)
        if (log_level := os.getenv("MAZE_CHASE_LOG_LEVEL")) is not None:
            values["log_level"] = log_level.upper()
        return replace(cls(), **{**values, **overrides})
