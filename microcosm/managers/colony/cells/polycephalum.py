from microcosm.config.feature_flags import FeatureFlags
from microcosm.models import palette
from .base_cell import BaseCell
from .mycoplasma import Mycoplasma

class Polycephalum(BaseCell):
    """
    Non-deterministic slime mould.

    Survival draws one number p: p <= 0.20 needs exactly 1 neighbour,
    p <= 0.50 needs exactly 2, otherwise exactly 3. A second draw then keeps
    it alive anyway 65% of the time and flips its hue.

    Revival (legacy rule) draws one number, compares it with 75 and so
    always requires exactly 2 living Mycoplasma neighbours. With
    FeatureFlags.CORRECTED_POLYCEPHALUM_REVIVAL it requires 2 Polycephalum
    neighbours 75% of the time and refuses otherwise.
    """

    species_name = "Polycephalum"
    symbol = "S"
    populate_color = palette.DARK_CYAN
    revival_color = palette.DARK_CYAN

    # (upper bound of the draw, neighbours required), checked in order
    SURVIVAL_TABLE = ((0.20, 1), (0.50, 2), (1.0, 3))
    CHANGE_COLOUR_PROBABILITY = 0.65
    LEGACY_REVIVAL_THRESHOLD = 75
    REVIVAL_COUNT = 2

    def act(self):
        self.neighbours = self.get_living_neighbours(Polycephalum)
        self.update_infection_state()

        if self.is_alive() and not self.is_infected():
            self.set_next_state(False)

            probability = self.rng.random()
            for upper_bound, required in self.SURVIVAL_TABLE:
                if probability <= upper_bound:
                    if len(self.neighbours) == required:
                        self.set_next_state(True)
                    break

            if self.rng.random() <= self.CHANGE_COLOUR_PROBABILITY:
                self.toggle_color()
                self.set_next_state(True)
        elif not self.is_alive() and not self.is_infected():
            self.set_next_state(False)

    def can_revive(self):
        if FeatureFlags.CORRECTED_POLYCEPHALUM_REVIVAL:
            self.neighbours = self.get_living_neighbours(Polycephalum)
            threshold = FeatureFlags.POLYCEPHALUM_REVIVAL_PROBABILITY
        else:
            self.neighbours = self.get_living_neighbours(Mycoplasma)
            threshold = self.LEGACY_REVIVAL_THRESHOLD

        if self.rng.random() <= threshold:
            return len(self.neighbours) == self.REVIVAL_COUNT
        return False

    def toggle_color(self):
        """Alternate between the two cyan hues; infection colours are left alone."""
        if self.color == palette.DARK_CYAN:
            self.set_color(palette.CYAN)
        elif self.color == palette.CYAN:
            self.set_color(palette.DARK_CYAN)
