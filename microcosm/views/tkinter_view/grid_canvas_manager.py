import tkinter as tk
from utils.logger.logger import Logger
from microcosm.models import palette

class GridCanvasManager:
    """Paint colony snapshots onto a Tk canvas, one rectangle per slot."""

    def __init__(self, containing_page, cell_size=5):
        self.containing_page = containing_page
        self.canvas = None
        self.cell_size = cell_size
        self.rectangles = {}  # (row, col) -> canvas item id
        self.current_colors = {}  # (row, col) -> last painted hex colour
        self.EMPTY_COLOR = palette.to_hex(palette.EMPTY)
        self.CANVAS_BG_COLOR = palette.to_hex(palette.BACKGROUND)
        Logger.log("GridCanvasManager initialized")

    def setup_canvas(self, container, depth, width):
        """Create the canvas and one rectangle per slot."""
        Logger.log(f"start setup_canvas(self, container, {depth}, {width})")
        self.canvas = tk.Canvas(
            container,
            width=width * self.cell_size,
            height=depth * self.cell_size,
            bg=self.CANVAS_BG_COLOR,
            highlightthickness=0
        )
        self.canvas.pack(padx=10, pady=10)
        self.build_grid(depth, width)
        Logger.log("end setup_canvas(self, container, depth, width)")

    def build_grid(self, depth, width):
        """(Re)create the slot rectangles for a field of the given size."""
        self.canvas.delete("all")
        self.rectangles = {}
        self.current_colors = {}
        self.canvas.config(width=width * self.cell_size, height=depth * self.cell_size)
        for row in range(depth):
            for col in range(width):
                x = col * self.cell_size
                y = row * self.cell_size
                self.rectangles[(row, col)] = self.canvas.create_rectangle(
                    x, y, x + self.cell_size, y + self.cell_size,
                    fill=self.EMPTY_COLOR, outline=""
                )
                self.current_colors[(row, col)] = self.EMPTY_COLOR

    def draw_snapshot(self, snapshot):
        """Recolour every slot whose colour changed since the last paint."""
        if self.canvas is None:
            return
        if len(self.rectangles) != snapshot.depth * snapshot.width:
            self.build_grid(snapshot.depth, snapshot.width)

        for row, row_colors in enumerate(snapshot.colors):
            for col, rgb in enumerate(row_colors):
                color = palette.to_hex(rgb) if rgb is not None else self.EMPTY_COLOR
                if self.current_colors[(row, col)] != color:
                    self.canvas.itemconfig(self.rectangles[(row, col)], fill=color)
                    self.current_colors[(row, col)] = color
