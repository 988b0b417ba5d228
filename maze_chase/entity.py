"""Entity primitives & ID allocation.

The engine models each moving *thing* as an ``EntityID`` (an integer) plus
zero or more component dataclasses stored in persistent maps on
:class:`maze_chase.state.State`.

IDs come from a process-local counter and are *not* recycled. A session
spawns a handful of entities once at startup, so a simple incrementing
counter is sufficient.
"""

from dataclasses import dataclass
from itertools import count

from maze_chase.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Marker (no fields)."""

    pass


_entity_ids = count()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_ids)
