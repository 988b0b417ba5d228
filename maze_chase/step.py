"""State reducer and tick orchestration.

This module wires the systems together to implement one *tick* of the chase
given at most one steering request and the elapsed simulated time. The
exported :func:`step` is the only public transition entry point and is pure:
it returns a *new* :class:`maze_chase.state.State`.

Ordering:

1. The previous tick's capture events are cleared.
2. ``steering_system`` applies the input request to the player's heading.
3. ``motion_system`` advances every entity (players, then pursuers); commits
    consult each entity's decision policy.
4. ``encounter_system`` compares committed tiles and records captures.
5. Tick counter and clock advance.
"""

import math
from dataclasses import replace
from typing import Optional

from pyrsistent import pset

from maze_chase.directions import Direction
from maze_chase.state import State
from maze_chase.systems.encounter import encounter_system
from maze_chase.systems.motion import motion_system
from maze_chase.systems.steering import steering_system


def step(
    state: State, steer: Optional[Direction] = None, elapsed: float = 0.0
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.
        steer (Direction | None): This tick's steering request, if any.
        elapsed (float): Simulated seconds since the previous tick.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If ``elapsed`` is negative or not finite.
    """
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValueError(f"Elapsed time must be finite and non-negative: {elapsed}")

    state = replace(state, captured=pset())
    state = steering_system(state, steer)
    state = motion_system(state, elapsed)
    state = encounter_system(state)
    return replace(state, tick=state.tick + 1, time=state.time + elapsed)
