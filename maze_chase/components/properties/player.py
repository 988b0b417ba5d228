"""Player marker component.

Presence of :class:`Player` designates the controlled entity. Steering input
is routed to it and the encounter detector compares it against every
pursuer. This component carries no data but enables queries / system routing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marker (no fields)."""

    pass
