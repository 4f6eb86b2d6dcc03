class SystemState:
    """Lightweight container for global UI/runtime flags."""

    def __init__(self):
        """Initialize defaults."""
        self.colony_loaded = False
        self.simulation_running = False   # True while a multi-generation run is in progress
        self.config_path = None           # YAML file the colony was built from, if any
