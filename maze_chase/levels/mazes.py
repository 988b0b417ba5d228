"""Authored mazes and the layout registry."""

from typing import Dict, List


# Arcade maze with the side tunnel walled off and the home area gate on
# row 12. Spawns match the arcade start tiles (pursuer above the gate).
CLASSIC: List[str] = [
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "######.##### ## #####.######",
    "######.##    G     ##.######",
    "######.## ===^^=== ##.######",
    "######.## =      = ##.######",
    "######.   =      =   .######",
    "######.## =      = ##.######",
    "######.## ======== ##.######",
    "######.##    P     ##.######",
    "######.## ######## ##.######",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
]

SMALL: List[str] = [
    "#########",
    "#P......#",
    "#.##.##.#",
    "#...G...#",
    "#.##.##.#",
    "#.......#",
    "#########",
]

# Loop corridor above a one-tile home area whose gate only opens upward.
HOME: List[str] = [
    "#########",
    "#P......#",
    "#.#####.#",
    "#...^...#",
    "###=G=###",
    "#########",
]

LAYOUT_REGISTRY: Dict[str, List[str]] = {
    "classic": CLASSIC,
    "small": SMALL,
    "home": HOME,
}
"""Registry of built-in maze names to ASCII rows.

Extend it before building a level to make a custom maze selectable by name.
"""
