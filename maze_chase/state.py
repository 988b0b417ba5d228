"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the whole
chase simulation at a single tick. All systems are pure functions that take a
previous ``State`` plus inputs (a steering request, elapsed time) and return a
*new* ``State``; no mutation happens in-place. This keeps the engine
deterministic and easy to test.

Design notes:

* The maze is a single immutable :class:`maze_chase.grid.Grid` carried by
    reference from state to state. Systems query it but never replace it.
* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component. "Player" and "pursuer" are just the presence of the
    matching marker; both move through the same ``Movable`` store.
* ``captured`` is a per-tick event: the encounter system fills it with the
    pursuers that share a committed tile with a player and the reducer clears
    it at the start of the next tick.

See :mod:`maze_chase.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import PMap, PSet, pmap, pset

from maze_chase.components import Movable, Player, Position, Pursuer
from maze_chase.entity import Entity
from maze_chase.grid import Grid
from maze_chase.types import CommitMode, EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        grid (Grid): Shared read-only maze topology.
        commit_mode (CommitMode): Overflow policy of the motion system.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        player (PMap[EntityID, Player]): Controlled entity markers.
        pursuer (PMap[EntityID, Pursuer]): Chase AI state per pursuer.
        movable (PMap[EntityID, Movable]): Motion state per moving entity.
        position (PMap[EntityID, Position]): Last committed tile per entity.
        captured (PSet[EntityID]): Pursuers that captured a player this tick.
        tick (int): Tick counter (0-based).
        time (float): Simulated seconds elapsed.
        captures (int): Total capture events detected so far.
    """

    # Level
    grid: Grid
    commit_mode: CommitMode = CommitMode.SINGLE

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    player: PMap[EntityID, Player] = pmap()
    pursuer: PMap[EntityID, Pursuer] = pmap()
    movable: PMap[EntityID, Movable] = pmap()
    position: PMap[EntityID, Position] = pmap()

    # Events
    captured: PSet[EntityID] = pset()

    # Status
    tick: int = 0
    time: float = 0.0
    captures: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Field name to value for populated fields, skipping
            empty component maps and the grid.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "grid":
                continue
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pset()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
