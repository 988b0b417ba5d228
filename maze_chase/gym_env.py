"""Gymnasium environment wrapper for the chase core.

The agent steers the player; pursuers follow their greedy chase policy. Each
environment step is one fixed-length tick of ``config.tick_seconds``.

Observation schema (all numpy arrays, entities ordered players first, then
pursuers, each group by entity id):

``{"grid": (H, W) int8, "positions": (N, 2) int64, "targets": (N, 2) int64,
"progress": (N,) float32, "directions": (N,) int64}``

``grid`` holds tile kind codes (0 open, 1 wall, 2 pursuer-only barrier) and
``directions`` holds indices into :class:`maze_chase.directions.Direction`.

Actions are ``Discrete(5)``: 0 = no steering request, 1..4 = up, down, left,
right. Reward is the survived time of the tick; ``terminated`` is ``True``
once a pursuer captures the player and ``truncated`` when ``max_ticks`` is
reached.

The environment has no rendering; collaborators can read ``env.state``.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from maze_chase.config import GameConfig
from maze_chase.directions import Direction
from maze_chase.grid import Grid, TileKind
from maze_chase.levels import generate
from maze_chase.state import State
from maze_chase.step import step
from maze_chase.systems.encounter import is_captured
from maze_chase.types import EntityID
from maze_chase.utils.ecs import first_player_id

logger = logging.getLogger(__name__)

ObsType = Dict[str, np.ndarray]

STEER_ACTIONS: List[Optional[Direction]] = [
    None,
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
]

TILE_CODES: Dict[TileKind, int] = {
    TileKind.OPEN: 0,
    TileKind.WALL: 1,
    TileKind.PURSUER_ONLY_BARRIER: 2,
}

DIRECTION_CODES: Dict[Direction, int] = {d: i for i, d in enumerate(Direction)}


def grid_array(grid: Grid) -> np.ndarray:
    """Tile kind codes as an ``(H, W)`` array."""
    return np.array(
        [[TILE_CODES[tile.kind] for tile in row] for row in grid.rows],
        dtype=np.int8,
    )


def entity_order(state: State) -> List[EntityID]:
    """Observation row order: players first, then pursuers, each by id."""
    return sorted(state.movable, key=lambda eid: (eid not in state.player, eid))


class ChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` steering the player through the chase.

    The action space is ``Discrete(len(STEER_ACTIONS))``.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        initial_state_fn: Callable[[GameConfig], State] = generate,
    ):
        """Create a new environment instance.

        Arguments:
            config: Session configuration; defaults to ``GameConfig()``.
            initial_state_fn: Callable building the initial ``State`` from
                ``config`` (the level generator by default).
        """
        self.config = config or GameConfig()
        self._initial_state_fn = initial_state_fn

        # Runtime state
        self.state: Optional[State] = None
        self.player_id: Optional[EntityID] = None
        self._order: List[EntityID] = []

        sample = initial_state_fn(self.config)
        self._grid = grid_array(sample.grid)
        height, width = self._grid.shape
        count = len(sample.movable)
        max_coord = max(width, height) - 1

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=max(TILE_CODES.values()),
                    shape=(height, width),
                    dtype=np.int8,
                ),
                "positions": spaces.Box(
                    low=0, high=max_coord, shape=(count, 2), dtype=np.int64
                ),
                "targets": spaces.Box(
                    low=0, high=max_coord, shape=(count, 2), dtype=np.int64
                ),
                "progress": spaces.Box(
                    low=0.0, high=1.0, shape=(count,), dtype=np.float32
                ),
                "directions": spaces.Box(
                    low=0, high=len(Direction) - 1, shape=(count,), dtype=np.int64
                ),
            }
        )
        self.action_space = spaces.Discrete(len(STEER_ACTIONS))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode from a freshly generated level.

        Arguments:
            seed: Seeds ``self.np_random``; level generation is deterministic.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = self._initial_state_fn(self.config)
        self.player_id = first_player_id(self.state)
        if self.player_id is None:
            raise ValueError("State contains no player")
        self._order = entity_order(self.state)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one steering action and advance one tick.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(STEER_ACTIONS):
            raise ValueError(f"Invalid action: {action}")

        elapsed = self.config.tick_seconds
        self.state = step(self.state, STEER_ACTIONS[int(action)], elapsed)
        terminated = is_captured(self.state)
        truncated = not terminated and self.state.tick >= self.config.max_ticks
        reward = 0.0 if terminated else float(elapsed)
        if terminated:
            logger.info("Episode ended by capture at tick %s", self.state.tick)
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        state = self.state
        movables = [state.movable[eid] for eid in self._order]
        return {
            "grid": self._grid.copy(),
            "positions": np.array(
                [[state.position[eid].x, state.position[eid].y] for eid in self._order],
                dtype=np.int64,
            ).reshape(-1, 2),
            "targets": np.array(
                [[m.target_tile.x, m.target_tile.y] for m in movables], dtype=np.int64
            ).reshape(-1, 2),
            "progress": np.array([m.progress for m in movables], dtype=np.float32),
            "directions": np.array(
                [DIRECTION_CODES[m.direction] for m in movables], dtype=np.int64
            ),
        }

    def _get_info(self) -> Dict[str, object]:
        assert self.state is not None
        return {
            "tick": self.state.tick,
            "time": self.state.time,
            "captures": self.state.captures,
            "captured_by": sorted(self.state.captured),
        }

    def close(self) -> None:
        """Nothing to release."""
        pass
