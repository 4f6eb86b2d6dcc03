from microcosm.models import palette
from .base_cell import BaseCell

class Mycoplasma(BaseCell):
    """
    Simplest form of life, following Conway's rules.

    Survives with 2 or 3 living Mycoplasma neighbours, revives with exactly 3.
    """

    species_name = "Mycoplasma"
    symbol = "M"
    populate_color = palette.ORANGE
    revival_color = palette.ORANGE

    SURVIVAL_COUNTS = (2, 3)
    REVIVAL_COUNT = 3

    def act(self):
        self.neighbours = self.get_living_neighbours(Mycoplasma)
        self.update_infection_state()

        if self.is_alive() and not self.is_infected():
            self.set_next_state(len(self.neighbours) in self.SURVIVAL_COUNTS)
        elif not self.is_alive() and not self.is_infected():
            self.set_next_state(False)

    def can_revive(self):
        self.neighbours = self.get_living_neighbours(Mycoplasma)
        return len(self.neighbours) == self.REVIVAL_COUNT
