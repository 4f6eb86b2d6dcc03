from utils.logger.logger import Logger
from microcosm.config.feature_flags import FeatureFlags
from microcosm.config.simulation_config import SimulationConfig
from microcosm.models.location import Location
from .cell_factory import CellFactory
from .fields.field import Field
from .randomizer import Randomizer

class Simulator:
    """
    Generation orchestrator.

    Owns the field and the live-cell roster. One generation lets every roster
    cell act on the committed state of its neighbours, tries to revive each
    dead slot right after its occupant acted, applies the queued cross-cell
    effects and finally commits every staged state at once.
    """

    def __init__(self, config: SimulationConfig = None, rng=None, populate=True):
        """
        Args:
            config: Grid, population and disease parameters; defaults if omitted.
            rng: Random source shared by the field and every cell. A generator
                seeded from ``config.run.seed`` is created if omitted.
            populate: Fill the field randomly right away.

        Raises:
            ValueError: If a feature flag holds an invalid value.
        """
        Logger.log("start Simulator __init__(self, config, rng)")
        FeatureFlags.validate()

        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else Randomizer.create(self.config.run.seed)
        self.field = Field(self.config.grid.depth, self.config.grid.width, self.rng)
        self.cells = []
        self.generation = 0
        self.reset(populate)

        Logger.log("end Simulator __init__(self, config, rng)")

    def sim_one_generation(self):
        """Advance the colony by exactly one generation."""
        self.generation += 1
        replaced = set()
        successors = []

        for cell in self.cells:
            cell.act()

            if not cell.is_alive():
                successor = self.revive(cell)
                if successor is not None:
                    successor.set_next_state(True)
                    successors.append(successor)
                    replaced.add(id(cell))

        applied = self.field.effects.apply(self.field)

        self.cells = [cell for cell in self.cells if id(cell) not in replaced]
        self.cells.extend(successors)

        for cell in self.cells:
            cell.update_state()

        Logger.log(
            f"Generation {self.generation}: {len(successors)} revived, {applied} effects applied",
            Logger.LogPriority.INFO,
        )

    def revive(self, cell):
        """
        Try to bring a dead slot back to life.

        Every living neighbour, in neighbour order, proposes its own species
        unless that species was killed at this location. The first proposed
        trial cell that can revive is returned; it is not committed yet.

        Returns:
            The successor cell, or None if nothing could revive here.
        """
        location = cell.get_location()
        neighbours = self.field.get_living_neighbours(location)
        successor = None

        for neighbour in neighbours:
            species_class = type(neighbour)
            if self._was_killed_here(cell, species_class):
                continue

            # trials stay invisible to neighbour queries until the commit
            trial = CellFactory.create_cell(
                species_class, self.field, location,
                rng=self.rng, disease=self.config.disease, revived=True, alive=False,
            )
            if trial.can_revive():
                successor = trial
                break
            trial.set_next_state(False)
            trial.update_state()

        if successor is None:
            self.field.place(cell, location)
        return successor

    def _was_killed_here(self, cell, species_class):
        if isinstance(cell, species_class) and cell.get_killed():
            return True
        return self.field.was_killed(cell.get_location(), species_class)

    def reset(self, populate=True):
        """Clear the field and roster and start again from generation 0."""
        Logger.log("start Simulator reset(self)")
        self.generation = 0
        self.cells = []
        self.field.clear()
        if populate:
            self.populate()
        Logger.log("end Simulator reset(self)")

    def populate(self):
        """
        Fill every slot with a random species.

        Per slot: one draw picks the species, one decides infection at birth,
        one decides whether the cell starts alive. Every cell joins the roster.
        """
        Logger.log("start Simulator populate(self)")
        population = self.config.population

        for row in range(self.field.get_depth()):
            for col in range(self.field.get_width()):
                location = Location(row, col)
                cell = CellFactory.create_random_cell(
                    self.field, location, self.rng, disease=self.config.disease
                )

                if self.rng.random() <= population.disease_probability:
                    cell.set_infected()

                if self.rng.random() > population.alive_probability:
                    cell.set_next_state(False)
                    cell.update_state()
                self.cells.append(cell)

        Logger.log(f"end Simulator populate(self): {len(self.cells)} cells")

    def add_cell(self, species, location, alive=True, infected=False):
        """
        Place a cell by hand and add it to the roster.

        Any previous occupant of the slot leaves the roster.
        """
        previous = self.field.get_object_at_location(location)
        cell = CellFactory.create_cell(
            species, self.field, location, rng=self.rng, disease=self.config.disease, alive=alive
        )
        if infected:
            cell.set_infected()

        if previous is not None and previous in self.cells:
            self.cells[self.cells.index(previous)] = cell
        else:
            self.cells.append(cell)
        return cell

    def get_cells(self):
        return list(self.cells)

    def get_field(self):
        return self.field

    def get_generation(self):
        return self.generation
