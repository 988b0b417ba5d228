"""ECS convenience queries.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`maze_chase.state.State` snapshot.

Performance: ``entities_at`` uses a cached reverse index of the immutable
``State.position`` PMap, so repeated lookups against one snapshot are O(1).
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List, Mapping, Optional, Set

from maze_chase.components import Position
from maze_chase.state import State
from maze_chase.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from committed position to entity IDs.

    The argument is a persistent PMap, which is hashable and thus safe to use
    with ``lru_cache``. Every commit produces a new position store and so a
    distinct cache key.
    """
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> Set[EntityID]:
    """Return entity IDs whose committed position equals ``pos``."""
    idx = _position_index(state.position)
    return set(idx.get(pos, ()))


def entities_with_components_at(
    state: State, pos: Position, *component_stores: Mapping[EntityID, object]
) -> List[EntityID]:
    """Return IDs at ``pos`` possessing all provided component stores, sorted."""
    ids_at_pos: Set[EntityID] = entities_at(state, pos)
    for store in component_stores:
        ids_at_pos &= set(store.keys())
    return sorted(ids_at_pos)


def first_player_id(state: State) -> Optional[EntityID]:
    """Lowest player entity id, or ``None`` when the state has no player."""
    return min(state.player.keys(), default=None)
