from utils.logger.logger import Logger
from microcosm.config.simulation_config import SimulationConfig
from microcosm.models.colony_snapshot import ColonySnapshot
from .cell_factory import CellFactory
from .field_stats import FieldStats, PopulationHistory
from .simulator import Simulator

class ColonyManager:
    """Manage the simulator, its statistics and the population history."""
    def __init__(self, config: SimulationConfig = None, rng=None):
        """Build a populated colony and record generation 0."""
        Logger.log(f"start ColonyManager __init__(self)")
        self.config = config or SimulationConfig()
        self.simulator = Simulator(self.config, rng)
        self.stats = FieldStats()
        self.history = PopulationHistory(CellFactory.get_registered_species())
        self._record()
        Logger.log(f"end ColonyManager __init__(self)")

    def _record(self):
        # the only place statistics are regenerated
        self.stats.generate_counts(self.simulator.get_field())
        self.history.record(self.simulator.get_generation(), self.stats)

    def step(self):
        """Advance one generation and refresh the statistics."""
        Logger.log(f"start step(self)")
        self.simulator.sim_one_generation()
        self._record()
        Logger.log(f"end step(self)")

    def run(self, generations, stop_when_not_viable=True):
        """
        Advance up to ``generations`` generations.

        Args:
            generations: Maximum number of generations to run.
            stop_when_not_viable: Stop early once at most one species is alive.

        Returns:
            Number of generations actually run.
        """
        Logger.log(f"start run(self, {generations}, {stop_when_not_viable})")
        completed = 0
        for _ in range(generations):
            if stop_when_not_viable and not self.is_viable():
                Logger.log(f"Colony no longer viable at generation {self.get_generation()}", Logger.LogPriority.INFO)
                break
            self.step()
            completed += 1
        Logger.log(f"end run(self, generations, stop_when_not_viable): {completed} run")
        return completed

    def reset(self):
        """Repopulate the field and restart the history."""
        Logger.log(f"start reset(self)")
        self.simulator.reset()
        self.history.clear()
        self._record()
        Logger.log(f"end reset(self)")

    def is_viable(self):
        return self.stats.is_viable()

    def get_population_details(self):
        return self.stats.get_population_details()

    def get_counts(self):
        return self.stats.get_counts()

    def get_history(self):
        return self.history

    def get_generation(self):
        return self.simulator.get_generation()

    def get_field(self):
        return self.simulator.get_field()

    def snapshot(self) -> ColonySnapshot:
        """Copy the committed grid colours and statistics."""
        field = self.simulator.get_field()
        colors = []
        for row in range(field.get_depth()):
            row_colors = []
            for col in range(field.get_width()):
                cell = field.get_object_at(row, col)
                row_colors.append(tuple(cell.get_color()) if cell is not None and cell.is_alive() else None)
            colors.append(tuple(row_colors))
        return ColonySnapshot(
            generation=self.simulator.get_generation(),
            depth=field.get_depth(),
            width=field.get_width(),
            colors=tuple(colors),
            population_details=self.stats.get_population_details(),
            viable=self.stats.is_viable(),
        )
