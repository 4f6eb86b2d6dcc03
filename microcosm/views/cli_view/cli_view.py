from microcosm.managers.view.view_strategy import ViewStrategy
from microcosm.models.exceptions import StateTransitionError, InvalidConfigurationError
from utils.logger.logger import Logger
import os
import platform
import shlex
from typing import List

class CommandLineView(ViewStrategy):
    """Command-line interface for Microcosm."""

    DEAD_SYMBOL = "."

    # name: (description, usage, examples)
    COMMANDS = {
        'help': ("List commands, or describe one", 'help [command]', ['help', 'help run']),
        'exit': ("Leave Microcosm", 'exit', ['exit']),
        'quit': ("Leave Microcosm", 'quit', ['quit']),
        'clear': ("Clear the screen and reprint the banner", 'clear', ['clear']),
        'status': ("Show colony, generation and run state", 'status', ['status']),
        'new': ("Create a new colony, optionally from a YAML config", 'new [config_path]',
                ['new', 'new examples/default_colony.yaml']),
        'step': ("Advance the colony by one or more generations", 'step [count]', ['step', 'step 5']),
        'run': ("Run generations until the count is reached or one species is left", 'run <count>',
                ['run 100']),
        'reset': ("Repopulate the colony from generation 0", 'reset', ['reset']),
        'render': ("Print the grid, one symbol per slot (lowercase when infected)", 'render', ['render']),
        'population': ("Show living cells per species", 'population', ['population']),
        'export': ("Write population history and/or a grid image",
                   'export <data_strategy> <image_strategy> <folder_path>',
                   ['export csv_population_export_strategy none ./exports',
                    'export none png_grid_export_strategy ./exports']),
        'configure_logger': ("Turn logging on or off, optionally into a file",
                             'configure_logger <on|off> [file_location]',
                             ['configure_logger off', 'configure_logger on ./microcosm_log.txt']),
        'switch_view': ("Open another view", 'switch_view <view_type>', ['switch_view tkinter']),
        'history': ("List recently entered commands", 'history [count]', ['history', 'history 5']),
    }

    def __init__(self, controller):
        self.controller = controller
        self.running = True
        self.command_history = []
        self.max_history = 50
        self._handlers = {
            'exit': lambda args: self.stop_view(),
            'quit': lambda args: self.stop_view(),
            'clear': lambda args: (self.clear_view(), self._print_welcome()),
            'help': self._handle_help,
            'status': lambda args: self._handle_status(),
            'history': self._handle_history,
            'new': self._handle_new,
            'step': self._handle_step,
            'run': self._handle_run,
            'reset': lambda args: self._handle_reset(),
            'render': lambda args: self._handle_render(),
            'population': lambda args: self._handle_population(),
            'export': self._handle_export,
            'configure_logger': self._handle_configure_logger,
            'switch_view': self._handle_switch_view,
        }

    def clear_view(self):
        """Clear the terminal screen."""
        Logger.log("start clear_view()")
        if platform.system() == 'Windows':
            os.system('cls')
        else:
            os.system('clear')
        Logger.log("end clear_view()")

    def start_view(self):
        """Start the CLI."""
        Logger.log("start start_view()")
        self.clear_view()
        self._print_welcome()
        self.run()
        Logger.log("end start_view()")

    def stop_view(self):
        """Stop the CLI."""
        Logger.log("start stop_view()")
        self.running = False
        print("\n>>> Microcosm CLI stopped. Goodbye!\n")
        Logger.log("end stop_view()")

    def _print_welcome(self):
        print("=" * 60)
        print("           MICROCOSM COMMAND LINE INTERFACE")
        print("=" * 60)
        print("Four-species cellular automaton with disease")
        print("Type 'help' to see available commands")
        print("Type 'exit' or 'quit' to exit")
        print("=" * 60)

    def run(self):
        """Main command loop."""
        Logger.log("start run()")

        while self.running:
            try:
                command = input("\nMicrocosm> ").strip()
                if not command:
                    continue
                self._add_to_history(command)
                self._process_command(command)
            except KeyboardInterrupt:
                print("\n>>> Use 'exit' or 'quit' to exit the application.")
            except EOFError:
                print("\n>>> End of input. Exiting...")
                self.stop_view()
                break

        Logger.log("end run()")

    def _add_to_history(self, command: str):
        # repeated commands move to the end instead of being stored twice
        if command in self.command_history:
            self.command_history.remove(command)
        self.command_history.append(command)
        del self.command_history[:-self.max_history]

    def _process_command(self, command: str):
        """Split a command line and hand it to its handler."""
        try:
            parts = shlex.split(command)
        except ValueError as ex:
            print(f">>> Could not parse '{command}': {ex}")
            Logger.log(f"Unparseable command '{command}': {ex}", Logger.LogPriority.ERROR)
            return
        if not parts:
            return
        name, args = parts[0].lower(), parts[1:]
        handler = self._handlers.get(name)
        if handler is None:
            print(f">>> Unknown command: '{name}' (see 'help')")
            return
        Logger.log(f"Dispatching '{name}' {args}")
        handler(args)

    def _handle_help(self, args: List[str]):
        if args:
            self._describe_command(args[0].lower())
            return
        print("\nMicrocosm commands:")
        width = max(len(name) for name in self.COMMANDS)
        for name, (description, _, _) in self.COMMANDS.items():
            print(f"  {name:<{width}}  {description}")
        print("\n'help <command>' shows usage and examples.")

    def _describe_command(self, name: str):
        if name not in self.COMMANDS:
            print(f">>> Unknown command: '{name}'")
            return
        description, usage, examples = self.COMMANDS[name]
        print(f"\n{name}: {description}")
        print(f"Usage: {usage}")
        for example in examples:
            print(f"  e.g. {example}")

    def _handle_status(self):
        """Show system status."""
        state = self.controller.system_state
        print("\n" + "-" * 40)
        print(f"Colony Loaded: {'Yes' if state.colony_loaded else 'No'}")
        if state.colony_loaded:
            field = self.controller.get_field()
            print(f"Grid: {field.get_depth()} x {field.get_width()}")
            print(f"Generation: {self.controller.get_generation()}")
            print(f"Population: {self.controller.get_population_details()}")
            print(f"Viable: {'Yes' if self.controller.is_viable() else 'No'}")
            if state.config_path:
                print(f"Config: {state.config_path}")
        print(f"Run In Progress: {'Yes' if state.simulation_running else 'No'}")
        print("-" * 40)

    def _handle_history(self, args: List[str]):
        try:
            count = self._parse_count(args, default=len(self.command_history))
        except ValueError:
            print(">>> Error: Count must be a positive integer")
            return
        recent = self.command_history[-count:] if count else []
        if not recent:
            print(">>> History is empty")
            return
        for position, command in enumerate(recent, 1):
            print(f"  {position}. {command}")

    def _handle_new(self, args: List[str]):
        """Create a colony from defaults or a config file."""
        config_path = args[0] if args else None
        try:
            self.controller.create_colony(config_path)
            field = self.controller.get_field()
            print(f">>> Colony created: {field.get_depth()} x {field.get_width()}")
            print(f">>> Population: {self.controller.get_population_details()}")
        except FileNotFoundError:
            print(f">>> Error: File not found: {config_path}")
        except (InvalidConfigurationError, StateTransitionError) as ex:
            print(f">>> Error: {ex}")

    def _parse_count(self, args: List[str], default=None):
        if not args:
            return default
        count = int(args[0])
        if count <= 0:
            raise ValueError("Count must be positive")
        return count

    def _handle_step(self, args: List[str]):
        """Advance one or more generations regardless of viability."""
        try:
            count = self._parse_count(args, default=1)
            for _ in range(count):
                self.controller.step()
            print(f">>> Generation: {self.controller.get_generation()}")
            print(f">>> Population: {self.controller.get_population_details()}")
        except ValueError:
            print(">>> Error: Count must be a positive integer")
        except StateTransitionError as ex:
            print(f">>> Error: {ex}")

    def _handle_run(self, args: List[str]):
        """Run up to N generations, stopping once the colony is no longer viable."""
        if not args:
            print(">>> Error: Generation count required")
            print(">>> Usage: run <count>"); return
        try:
            count = self._parse_count(args)
            completed = self.controller.simulate(count)
            print(f">>> Ran {completed} generation(s), now at generation {self.controller.get_generation()}")
            print(f">>> Population: {self.controller.get_population_details()}")
            if not self.controller.is_viable():
                print(">>> Colony is no longer viable")
        except ValueError:
            print(">>> Error: Count must be a positive integer")
        except StateTransitionError as ex:
            print(f">>> Error: {ex}")

    def _handle_reset(self):
        """Repopulate the colony."""
        try:
            self.controller.reset()
            print(">>> Colony reset successfully")
            print(f">>> Population: {self.controller.get_population_details()}")
        except StateTransitionError as ex:
            print(f">>> Error: {ex}")

    def render_grid(self, field) -> str:
        """Return the committed grid as text, one row per line."""
        lines = []
        for row in range(field.get_depth()):
            symbols = []
            for col in range(field.get_width()):
                cell = field.get_object_at(row, col)
                if cell is None or not cell.is_alive():
                    symbols.append(self.DEAD_SYMBOL)
                elif cell.is_infected():
                    symbols.append(cell.symbol.lower())
                else:
                    symbols.append(cell.symbol)
            lines.append("".join(symbols))
        return "\n".join(lines)

    def _handle_render(self):
        try:
            field = self.controller.get_field()
        except StateTransitionError as ex:
            print(f">>> Error: {ex}"); return
        print(f"\nGeneration {self.controller.get_generation()}")
        print(self.render_grid(field))

    def _handle_population(self):
        try:
            print(f">>> Population: {self.controller.get_population_details()}")
        except StateTransitionError as ex:
            print(f">>> Error: {ex}")

    def _handle_export(self, args: List[str]):
        if len(args) != 3:
            print(f">>> Usage: {self.COMMANDS['export'][1]}")
            print(">>> Pass 'none' for a strategy you do not need")
            return
        export_request = "export_request " + " ".join(args)
        try:
            folder = self.controller.export_data(export_request)
            print(f">>> Exported to {folder}")
        except StateTransitionError as ex:
            print(f">>> Error: {ex}")
        except (ValueError, OSError) as ex:
            print(f">>> Export failed: {ex}")

    def _handle_configure_logger(self, args: List[str]):
        switch = args[0].lower() if args else None
        if switch not in ('on', 'off'):
            print(f">>> Usage: {self.COMMANDS['configure_logger'][1]}")
            return
        options = {}
        if switch == 'on' and len(args) > 1:
            options = {'storage_strategy': 'file', 'file_location': args[1]}
        try:
            self.controller.configure_logger(switch == 'on', **options)
            print(f">>> Logging {switch}")
        except (ValueError, OSError) as ex:
            print(f">>> Logger not changed: {ex}")

    def _handle_switch_view(self, args: List[str]):
        if not args:
            print(f">>> Usage: {self.COMMANDS['switch_view'][1]}")
            return
        try:
            self.controller.initiate_view(args[0])
        except ValueError as ex:
            print(f">>> Error: {ex}")
