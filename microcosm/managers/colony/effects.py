"""
Queued cross-cell effects.

While a generation is being computed a cell may change another cell: disease
spreads to a neighbour, a Phasophyta kills an adjacent Chromacystis. Those
changes are not applied on the spot. They are recorded here against the
target's arena index (``row * width + col``) and applied in one pass after
every cell has acted and revival is resolved, right before the roster
commits. The outcome is then independent of roster iteration order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from utils.logger.logger import Logger


class EffectKind(Enum):
    INFECT = 1
    FORCE_NEXT_STATE = 2
    KILL = 3


@dataclass(frozen=True)
class CellEffect:
    """
    One pending change to the cell occupying ``target_index``.

    Attributes:
        kind: What to do to the target.
        target_index: Arena index of the target slot.
        source_index: Arena index of the cell that caused the effect.
        value: Staged liveness for FORCE_NEXT_STATE, unused otherwise.
    """
    kind: EffectKind
    target_index: int
    source_index: Optional[int] = None
    value: bool = False


class EffectQueue:
    """Ordered list of pending effects for one field."""

    def __init__(self):
        self.pending: List[CellEffect] = []

    def __len__(self):
        return len(self.pending)

    def infect(self, target_index, source_index=None):
        self.pending.append(CellEffect(EffectKind.INFECT, target_index, source_index))

    def force_next_state(self, target_index, value, source_index=None):
        self.pending.append(
            CellEffect(EffectKind.FORCE_NEXT_STATE, target_index, source_index, value)
        )

    def kill(self, target_index, source_index=None):
        """Stage the target dead and latch it as killed."""
        self.force_next_state(target_index, False, source_index)
        self.pending.append(CellEffect(EffectKind.KILL, target_index, source_index))

    def clear(self):
        self.pending = []

    def apply(self, field) -> int:
        """
        Apply and drain every pending effect in the order it was queued.

        Effects whose slot is empty are dropped.

        Returns:
            Number of effects applied.
        """
        applied = 0
        pending, self.pending = self.pending, []
        for effect in pending:
            target = field.get_object_at_index(effect.target_index)
            if target is None:
                Logger.log(f"Dropped {effect.kind.name} at empty slot {field.location_of(effect.target_index)}")
                continue
            if effect.kind is EffectKind.INFECT:
                target.set_infected()
            elif effect.kind is EffectKind.FORCE_NEXT_STATE:
                target.set_next_state(effect.value)
            elif effect.kind is EffectKind.KILL:
                target.set_killed()
                if effect.source_index is not None:
                    Logger.log(f"Kill at {field.location_of(effect.target_index)} "
                               f"caused by {field.location_of(effect.source_index)}")
            applied += 1
        return applied
