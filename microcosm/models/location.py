"""
Grid location model.

A Location names one slot of the field. It is a frozen dataclass so it can
key dictionaries and be shared between cells without defensive copies.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Location:
    """
    Immutable (row, col) pair.

    Attributes:
        row: Zero-based row index, counted from the top of the field.
        col: Zero-based column index, counted from the left of the field.
    """
    row: int
    col: int

    def get_row(self) -> int:
        return self.row

    def get_col(self) -> int:
        return self.col

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
