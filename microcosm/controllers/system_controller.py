import threading
from pathlib import Path
from microcosm.managers.view.view_manager import ViewManager
from microcosm.managers.export.export_manager import ExportManager
from microcosm.managers.colony.colony_manager import ColonyManager
from microcosm.config.simulation_config import SimulationConfig, load_config
from utils.logger.logger import Logger
from utils.logger.local_file_strategy import LocalFileStrategy
from utils.logger.memory_strategy import MemoryStrategy
from microcosm.models.system_state import SystemState
from microcosm.models.exceptions import StateTransitionError

class SystemController:
    """Coordinates colony, view, export, and logging layers."""
    def __init__(self):
        """Initialize managers and shared state."""
        Logger.log("start SystemController __init__(self)")
        self.view_manager = ViewManager(self)
        self.export_manager = ExportManager()
        self.colony_manager = None
        self.system_state = SystemState()
        # one generation at a time, whichever thread asks
        self._step_lock = threading.Lock()
        self._run_lock = threading.Lock()
        Logger.log("end SystemController __init__(self)")

    def create_colony(self, config=None, rng=None):
        """
        Build and populate a new colony, replacing the current one.

        Args:
            config: SimulationConfig, a path to a YAML config, or None for defaults.
            rng: Optional random source injected into the simulator.
        """
        Logger.log(f"start create_colony(self, {config})")
        if self.system_state.simulation_running:
            Logger.log("StateTransitionError: Cannot create colony while a run is in progress.", Logger.LogPriority.ERROR)
            raise StateTransitionError("Cannot create a colony while a run is in progress.")

        config_path = None
        if isinstance(config, (str, Path)):
            config_path = str(config)
            config = load_config(Path(config))
        elif config is None:
            config = SimulationConfig()

        with self._step_lock:
            self.colony_manager = ColonyManager(config, rng)
        self.system_state.colony_loaded = True
        self.system_state.config_path = config_path
        Logger.log(f"Colony created: {config.grid.depth} x {config.grid.width}", Logger.LogPriority.INFO)
        Logger.log(f"end create_colony(self, config)")

    def _require_colony(self, operation):
        if not self.system_state.colony_loaded or self.colony_manager is None:
            Logger.log(f"StateTransitionError: Cannot {operation}, colony not loaded.", Logger.LogPriority.ERROR)
            raise StateTransitionError(f"Cannot {operation}, colony not loaded.")

    def step(self):
        """Advance the colony by one generation."""
        Logger.log(f"start controller step(self)")
        self._require_colony("step")
        with self._step_lock:
            self.colony_manager.step()
        Logger.log(f"end controller step(self)")

    def simulate(self, generations, stop_when_not_viable=True):
        """
        Run several generations synchronously.

        Raises:
            StateTransitionError: If no colony is loaded or a run is already in progress.

        Returns:
            Number of generations actually run.
        """
        Logger.log(f"start simulate(self, {generations})")
        self._require_colony("simulate")
        if not self._run_lock.acquire(blocking=False):
            Logger.log("StateTransitionError: A run is already in progress.", Logger.LogPriority.ERROR)
            raise StateTransitionError("A run is already in progress.")
        self.system_state.simulation_running = True
        try:
            with self._step_lock:
                completed = self.colony_manager.run(generations, stop_when_not_viable)
        finally:
            self.system_state.simulation_running = False
            self._run_lock.release()
        Logger.log(f"end simulate(self, generations): {completed} run")
        return completed

    def reset(self):
        """Repopulate the current colony from generation 0."""
        Logger.log(f"start controller reset(self)")
        self._require_colony("reset")
        if self.system_state.simulation_running:
            Logger.log("StateTransitionError: Cannot reset while a run is in progress.", Logger.LogPriority.ERROR)
            raise StateTransitionError("Cannot reset while a run is in progress.")
        with self._step_lock:
            self.colony_manager.reset()
        Logger.log(f"end controller reset(self)")

    # Readers take the step lock too, so a view thread never sees a
    # generation half way through being committed or recorded.
    def is_viable(self):
        self._require_colony("check viability")
        with self._step_lock:
            return self.colony_manager.is_viable()

    def get_population_details(self):
        self._require_colony("read population")
        with self._step_lock:
            return self.colony_manager.get_population_details()

    def get_generation(self):
        self._require_colony("read generation")
        with self._step_lock:
            return self.colony_manager.get_generation()

    def get_field(self):
        """The live field; iterate it only from the thread that steps the colony."""
        self._require_colony("read field")
        with self._step_lock:
            return self.colony_manager.get_field()

    def snapshot(self):
        """Consistent ColonySnapshot of the committed generation, safe to use from any thread."""
        self._require_colony("read colony")
        with self._step_lock:
            return self.colony_manager.snapshot()

    def export_data(self, export_request):
        """Export population history and/or a grid snapshot of the current colony."""
        Logger.log(f"start export_data(self, {export_request})")
        self._require_colony("export data")
        with self._step_lock:
            folder = self.export_manager.handle_export_request(self.colony_manager, export_request)
        Logger.log("Export request processed successfully.")
        Logger.log(f"end export_data(self, export_request)")
        return folder

    def initiate_view(self, view_strategy):
        """Submit a view request to the view manager."""
        Logger.log(f"start initiate_view(self, {view_strategy})")
        self.view_manager.initiate_view_strategy(view_strategy, self)
        Logger.log(f"end initiate_view(self, view_strategy)")

    def configure_logger(self, enabled, **kwargs):
        """
        Enable/disable logging and optionally swap the storage strategy.

        Keyword Args:
            storage_strategy: "file" (needs file_location) or "memory".
            file_location: Log file path for the "file" strategy.
        """
        Logger.log(f"start configure_logger(self, {enabled}, {kwargs})")
        if enabled: Logger.enable_logging()
        else: Logger.disable_logging()
        storage_strategy = kwargs.get("storage_strategy", None)
        if storage_strategy == "file":
            file_location = kwargs.get("file_location", None)
            if not file_location:
                raise ValueError("file_location must be provided for 'file' storage strategy.")
            Logger.set_log_storage_strategy(LocalFileStrategy(file_location))
            Logger.log(f"Logger set to file storage at {file_location}.")
        elif storage_strategy == "memory":
            Logger.set_log_storage_strategy(MemoryStrategy())
            Logger.log("Logger set to memory storage.")
        elif storage_strategy is not None:
            raise ValueError(f"Unknown storage strategy: '{storage_strategy}'.")
        Logger.log(f"end configure_logger(self, **kwargs)")
