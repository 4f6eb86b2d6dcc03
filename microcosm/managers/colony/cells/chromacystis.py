from microcosm.models import palette
from .base_cell import BaseCell

class Chromacystis(BaseCell):
    """
    Bioluminescent organism whose glow follows its crowding.

    Lonely (1 neighbour) glows blue, content (2) light green, stressed (3)
    red; more than 3 neighbours or none kills it. A dead slot comes back as a
    yellow Chromacystis when exactly 3 are adjacent, unless one was killed
    there. Prey of Phasophyta.
    """

    species_name = "Chromacystis"
    symbol = "C"
    populate_color = palette.SKY_BLUE
    revival_color = palette.YELLOW

    MOOD_COLORS = {
        1: palette.BLUE,
        2: palette.LIGHT_GREEN,
        3: palette.RED,
    }
    REVIVAL_COUNT = 3

    def act(self):
        self.neighbours = self.get_living_neighbours(Chromacystis)
        self.update_infection_state()

        if self.is_alive() and not self.is_infected():
            self.update_color()
            self.set_next_state(len(self.neighbours) in self.MOOD_COLORS)
        elif not self.is_alive() and not self.is_infected():
            self.set_next_state(False)

    def can_revive(self):
        self.neighbours = self.get_living_neighbours(Chromacystis)
        if self.get_killed():
            return False
        return len(self.neighbours) == self.REVIVAL_COUNT

    def update_color(self):
        """Recolour by the current neighbour count; display only."""
        color = self.MOOD_COLORS.get(len(self.neighbours))
        if color is not None:
            self.set_color(color)
