"""Tile-grid maze chase engine.

A player steers through a fixed maze while pursuers greedily close in. The
package provides the tile-stepping motion system, input-buffered steering,
the greedy chase decision engine and tile-level capture detection, all as
pure functions over an immutable :class:`maze_chase.state.State`.

Typical loop::

    from maze_chase.levels import generate
    from maze_chase.step import step

    state = generate()
    state = step(state, steer=None, elapsed=1 / 60)
"""

__version__ = "0.1.0"
