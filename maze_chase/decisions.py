"""Decision policy registry.

Each *decision function* maps ``(state, entity id)`` to the
``(tile, direction)`` the entity should head for next, or ``None`` to stay
put. The motion system calls the function named by ``Movable.policy`` every
time the entity commits to a tile. This indirection keeps the motion
integrator identical for players and pursuers; only the policy differs.

Contract (``DecisionFn``):

* Must return a tile adjacent to (or equal to) the entity's committed
  position, or ``None``.
* Should not mutate ``State``.
* Need not check passability; the motion system rejects illegal tiles.
"""

from typing import Dict

from maze_chase.systems.chase import greedy_chase_decision
from maze_chase.systems.steering import steering_decision
from maze_chase.types import DecisionFn, DecisionPolicy


DECISION_FN_REGISTRY: Dict[DecisionPolicy, DecisionFn] = {
    DecisionPolicy.STEERING: steering_decision,
    DecisionPolicy.GREEDY_CHASE: greedy_chase_decision,
}
"""Registry of decision policies to callables.

Extend this registry to add new behaviors (e.g. a pursuer aiming ahead of
the player) without touching the motion system.
"""
