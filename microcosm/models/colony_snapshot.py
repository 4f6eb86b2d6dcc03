"""
Read-only copy of what a view paints for one committed generation.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class ColonySnapshot:
    """
    Attributes:
        generation: Generation the snapshot was taken at.
        depth: Number of rows.
        width: Number of columns.
        colors: One tuple per row; each slot holds the living occupant's
            colour or None for a dead or empty slot.
        population_details: ``"Name: count"`` pairs, species sorted by name.
        viable: More than one species is alive.
    """
    generation: int
    depth: int
    width: int
    colors: Tuple[Tuple[Optional[Color], ...], ...]
    population_details: str
    viable: bool
