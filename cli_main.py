from microcosm.controllers.system_controller import SystemController
from microcosm.models.exceptions import InvalidConfigurationError
from utils.logger.logger import Logger
from pathlib import Path
import argparse
import sys

def main():
    """
    Entry point to the Microcosm CLI Application.
    """
    parser = argparse.ArgumentParser(
        description="Four-species cellular automaton with disease"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (defaults: 80 x 100 grid)"
    )
    args = parser.parse_args()

    try:
        # CONFIGURES LOGGER WITH DEFAULT FILE STORAGE
        Logger.initialize()
        Logger.log("Microcosm CLI starting...")

        controller = SystemController()
        controller.create_colony(args.config)
        Logger.log("System controller initialized successfully")

        controller.initiate_view("cli")

    except KeyboardInterrupt:
        print("\n>>> Application interrupted by user")
        sys.exit(0)
    except FileNotFoundError:
        print(f">>> Error: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    except InvalidConfigurationError as ex:
        print(f">>> Error: {ex}", file=sys.stderr)
        Logger.log(f"Fatal error in CLI main: {ex}", Logger.LogPriority.ERROR)
        sys.exit(1)

if __name__ == "__main__":
    main()
