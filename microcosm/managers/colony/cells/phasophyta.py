from microcosm.models import palette
from .base_cell import BaseCell
from .chromacystis import Chromacystis

class Phasophyta(BaseCell):
    """
    Ageing organism whose survival threshold drops as it matures.

    Young (age 1-4) needs 2 or more Phasophyta neighbours, mature (5-14)
    needs 1 or more and can reproduce, old (15-20) survives alone, anything
    else dies. It feeds on Chromacystis: every adjacent Chromacystis that
    stays in contact for 3 generations is killed and takes 2 years off the
    Phasophyta's age.
    """

    species_name = "Phasophyta"
    symbol = "P"
    populate_color = palette.SEED_PURPLE
    revival_color = palette.SEED_PURPLE

    # (first age, last age, neighbours needed, display colour)
    YOUNG = (1, 4, 2, palette.LIGHT_PURPLE)
    MATURE = (5, 14, 1, palette.PURPLE)
    OLD = (15, 20, 0, palette.DARK_PURPLE)
    AGE_BANDS = (YOUNG, MATURE, OLD)

    CONTACT_GENERATIONS_TO_KILL = 3
    AGE_RESTORED_PER_KILL = 2
    MATURE_NEIGHBOURS_TO_REVIVE = 2

    def __init__(self, field, location, color=None, rng=None, disease=None, alive=True):
        super().__init__(field, location, color, rng, disease, alive)
        self.age = 0
        self.reproduce = False
        # Chromacystis -> consecutive generations of contact; kept across gaps
        self.contact_durations = {}

    def act(self):
        self.age += 1
        self.neighbours = self.get_living_neighbours(Phasophyta)
        self.update_infection_state()
        self.update_contact_durations()
        self.restore_age()
        self.reproduce = False

        if self.is_alive() and not self.is_infected():
            band = self.get_age_band()
            if band is None:
                self.set_next_state(False)
                return
            first_age, last_age, needed, color = band
            self.set_color(color)
            if band is self.MATURE:
                self.reproduce = True
            self.set_next_state(len(self.neighbours) >= needed)
        elif not self.is_alive() and not self.is_infected():
            self.set_next_state(False)

    def get_age_band(self):
        """Return the band containing the current age, or None past 20 or below 1."""
        for band in self.AGE_BANDS:
            if band[0] <= self.age <= band[1]:
                return band
        return None

    def can_reproduce(self):
        return self.reproduce

    def can_revive(self):
        self.neighbours = self.get_living_neighbours(Phasophyta)
        if len(self.neighbours) != self.MATURE_NEIGHBOURS_TO_REVIVE:
            return False
        mature = sum(1 for cell in self.neighbours if cell.can_reproduce())
        return mature == self.MATURE_NEIGHBOURS_TO_REVIVE

    def update_contact_durations(self):
        """Count one more generation of contact for every living adjacent Chromacystis."""
        for prey in self.get_living_neighbours(Chromacystis):
            self.contact_durations[prey] = self.contact_durations.get(prey, 0) + 1

    def restore_age(self):
        """Kill every Chromacystis in contact long enough and get younger for each."""
        source_index = self.field.index_of(self.location)
        victims = [prey for prey, duration in self.contact_durations.items()
                   if duration >= self.CONTACT_GENERATIONS_TO_KILL]
        for prey in victims:
            self.age -= self.AGE_RESTORED_PER_KILL
            self.field.effects.kill(self.field.index_of(prey.location), source_index)
            del self.contact_durations[prey]
