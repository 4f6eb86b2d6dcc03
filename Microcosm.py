from microcosm.controllers.system_controller import SystemController
from utils.logger.logger import Logger
from pathlib import Path
import sys


def main():
    """Microcosm application entry point. Optional argument: YAML config path."""
    Logger.initialize()
    Logger.set_minimum_priority(Logger.LogPriority.INFO)

    controller = SystemController()
    controller.create_colony(Path(sys.argv[1]) if len(sys.argv) > 1 else None)

    controller.initiate_view("tkinter")

if __name__ == "__main__":
    main()
