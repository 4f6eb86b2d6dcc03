from microcosm.config.simulation_config import DiseaseConfig
from microcosm.managers.colony.randomizer import Randomizer
from microcosm.models import palette
from microcosm.models.exceptions import CellPlacementError
from utils.logger.logger import Logger

class BaseCell:
    """
    Shared state of every life form.

    Liveness is double-buffered: ``alive`` is what neighbours observe during a
    generation, ``next_alive`` is staged by ``act()`` and only becomes visible
    through ``update_state()`` once the whole roster has acted.

    The disease overlay lives here as well. An infected cell that is alive
    progresses one step per generation; after ``lethal_after`` generations it
    dies and is latched as killed. Infected dead cells are inert.
    """

    species_name = "Cell"
    symbol = "?"
    populate_color = palette.WHITE
    revival_color = palette.WHITE

    def __init__(self, field, location, color=None, rng=None, disease=None, alive=True):
        """
        Create a cell and register it with the field at ``location``.

        Args:
            field: Field the cell lives in, or None for a detached cell.
            location: Slot the cell occupies.
            color: Initial display colour; the species populate colour if omitted.
            rng: Random source with a ``random()`` method.
            disease: DiseaseConfig with spread probability and thresholds.
            alive: Initial committed liveness.
        """
        self.alive = alive
        self.next_alive = False
        self.infected = False
        self.infected_duration = 0
        self.can_spread = False
        self.killed = False
        self.neighbours = []
        self.field = field
        self.rng = rng if rng is not None else Randomizer.get_random()
        self.disease = disease or DiseaseConfig()
        self.color = color or self.populate_color
        self.location = None
        self.set_location(location)

    def __repr__(self):
        return (f"{self.species_name}(location={self.location}, alive={self.alive}, "
                f"infected={self.infected}, killed={self.killed})")

    # RULES
    def act(self):
        """Decide the state of the cell in the next generation."""
        raise NotImplementedError()

    def can_revive(self):
        """Return True if a cell of this species would be viable at its location right now."""
        raise NotImplementedError()

    def get_living_neighbours(self, species=None):
        """Query the field for living neighbours, optionally of one species."""
        if self.field is None:
            raise CellPlacementError(f"{self.species_name} at {self.location} is not placed in a field.")
        return self.field.get_living_neighbours(self.location, species)

    # DISEASE OVERLAY
    def update_infection_state(self):
        """
        Advance the infection of a living host by one generation.
        Must run after ``neighbours`` has been refreshed.
        """
        if self.is_infected() and self.is_alive():
            self.infected_duration += 1
            self.spread_disease()
            self.set_next_state(True)

            if self.disease.contagious_after <= self.infected_duration <= self.disease.lethal_after:
                self.set_color(palette.DARK_GRAY)
                self.can_spread = True
            elif self.infected_duration > self.disease.lethal_after:
                self.set_killed()
                self.set_next_state(False)

    def spread_disease(self):
        """Queue an infection for each neighbour that loses its independent draw."""
        if not self.can_spread:
            return
        source_index = self.field.index_of(self.location)
        for cell in self.neighbours:
            if self.rng.random() <= self.disease.spread_probability:
                self.field.effects.infect(self.field.index_of(cell.location), source_index)

    def set_infected(self):
        if not self.infected:
            self.infected = True
            self.set_color(palette.LIGHT_GRAY)

    def is_infected(self):
        return self.infected

    def get_killed(self):
        return self.killed

    def set_killed(self):
        """Latch the cell as killed; its species may never be revived at this location again."""
        if not self.killed:
            Logger.log(f"{self.species_name} killed at {self.location}")
        self.killed = True
        if self.field is not None:
            self.field.mark_killed(self.location, type(self))

    # DOUBLE BUFFER
    def is_alive(self):
        return self.alive

    def set_next_state(self, value):
        self.next_alive = value

    def get_next_state(self):
        return self.next_alive

    def update_state(self):
        """Commit the staged state. Only call once every roster cell has acted."""
        self.alive = self.next_alive

    # DISPLAY
    def set_color(self, color):
        self.color = color

    def get_color(self):
        return self.color

    # PLACEMENT
    def get_location(self):
        return self.location

    def set_location(self, location):
        self.location = location
        if self.field is not None:
            self.field.place(self, location)

    def get_field(self):
        return self.field
