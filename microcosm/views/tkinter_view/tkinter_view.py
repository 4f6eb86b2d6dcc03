import tkinter as tk
import threading
from microcosm.managers.view.view_strategy import ViewStrategy
from microcosm.models import palette
from microcosm.models.exceptions import StateTransitionError
from utils.logger.logger import Logger
from .grid_canvas_manager import GridCanvasManager


class TkinterView(ViewStrategy):
    """Tkinter window showing the colony and driving it generation by generation."""

    # NOTE: Do not instantiate the view class at import time. The controller
    # constructs and starts the view via ViewManager.

    # GENERAL STYLE
    FONT_FAMILY = "Arial"
    LABEL_FONT = (FONT_FAMILY, 14)
    BUTTON_FONT = (FONT_FAMILY, 12)
    BG_COLOR = palette.to_hex(palette.BACKGROUND)
    FG_COLOR = "white"

    GENERATION_PREFIX = "Generation: "
    POPULATION_PREFIX = "Population: "
    POLL_INTERVAL_MS = 50

    def __init__(self, controller):
        """Initialize window, labels, canvas and buttons."""
        Logger.log(f"start TkinterView __init__(self, controller)")
        super().__init__(controller)
        self.running = False
        self.worker = None
        self.stop_event = threading.Event()
        # set by the worker thread, consumed on the Tk thread
        self.needs_redraw = threading.Event()

        if not self.controller.system_state.colony_loaded:
            self.controller.create_colony()

        self.root = tk.Tk()
        self.root.title("Life Simulation")
        self.root.configure(bg=self.BG_COLOR)
        self.root.resizable(False, False)
        self.root.protocol("WM_DELETE_WINDOW", self.stop_view)

        info_pane = tk.Frame(self.root, bg=self.BG_COLOR)
        info_pane.pack(fill=tk.X, padx=10, pady=(10, 0))
        self.generation_label = self._label(info_pane, self.GENERATION_PREFIX)
        self.generation_label.pack(side=tk.LEFT)
        self.info_label = self._label(info_pane, "")
        self.info_label.pack(side=tk.LEFT, padx=20)

        snapshot = self.controller.snapshot()
        self.canvas_manager = GridCanvasManager(self)
        self.canvas_manager.setup_canvas(self.root, snapshot.depth, snapshot.width)

        self.population_label = self._label(self.root, self.POPULATION_PREFIX)
        self.population_label.pack(fill=tk.X, padx=10)

        button_pane = tk.Frame(self.root, bg=self.BG_COLOR)
        button_pane.pack(pady=10)
        for text, command in (("Step", self.on_step), ("Run", self.on_run),
                              ("Pause", self.on_pause), ("Reset", self.on_reset)):
            tk.Button(button_pane, text=text, font=self.BUTTON_FONT, width=8,
                      command=command).pack(side=tk.LEFT, padx=5)

        Logger.log(f"end TkinterView __init__(self, controller)")

    def _label(self, parent, text):
        return tk.Label(parent, text=text, font=self.LABEL_FONT,
                        bg=self.BG_COLOR, fg=self.FG_COLOR, anchor="w")

    # START VIEW
    def start_view(self):
        """Paint the initial colony and enter the Tk main loop."""
        Logger.log("start start_view(self)")
        self.update_canvas()
        self.root.after(self.POLL_INTERVAL_MS, self._poll)
        self.root.mainloop()
        Logger.log(f"end start_view(self)")

    # STOP VIEW
    def stop_view(self):
        """Stop any background run and close the window."""
        Logger.log("start stop_view(self)")
        self.stop_event.set()
        self.root.quit()
        self.root.destroy()
        Logger.log(f"end stop_view(self)")

    def set_info_text(self, text):
        self.info_label.config(text=text)

    def update_canvas(self):
        """Repaint grid and labels from a snapshot of the committed colony."""
        snapshot = self.controller.snapshot()
        self.generation_label.config(text=f"{self.GENERATION_PREFIX}{snapshot.generation}")
        self.canvas_manager.draw_snapshot(snapshot)
        self.population_label.config(text=f"{self.POPULATION_PREFIX}{snapshot.population_details}")
        return snapshot

    def _poll(self):
        if self.needs_redraw.is_set():
            self.needs_redraw.clear()
            snapshot = self.update_canvas()
            if not self.running and not snapshot.viable:
                self.set_info_text("Colony is no longer viable")
        self.root.after(self.POLL_INTERVAL_MS, self._poll)

    # BUTTONS
    def on_step(self):
        if self.running:
            return
        self.controller.step()
        self.update_canvas()

    def on_run(self):
        """Run the configured number of generations on a background thread."""
        if self.running:
            return
        config = self.controller.colony_manager.config.run
        self.stop_event.clear()
        self.running = True
        self.set_info_text("Running...")
        self.worker = threading.Thread(
            target=self._run_generations, args=(config.generations, config.delay_ms), daemon=True
        )
        self.worker.start()

    def _run_generations(self, generations, delay_ms):
        Logger.log(f"start _run_generations(self, {generations}, {delay_ms})")
        try:
            for _ in range(generations):
                if self.stop_event.is_set():
                    break
                self.controller.step()
                self.needs_redraw.set()
                if self.stop_event.wait(delay_ms / 1000.0):
                    break
        except StateTransitionError as ex:
            Logger.log(f"Background run stopped: {ex}", Logger.LogPriority.ERROR)
        finally:
            self.running = False
            self.needs_redraw.set()
        Logger.log("end _run_generations(self, generations, delay_ms)")

    def on_pause(self):
        if self.running:
            self.stop_event.set()
            self.set_info_text("Paused")

    def on_reset(self):
        self.stop_event.set()
        if self.worker is not None:
            self.worker.join()
            self.worker = None
        self.controller.reset()
        self.set_info_text("")
        self.update_canvas()
