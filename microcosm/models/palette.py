"""
Display colours.

Colours are plain (r, g, b) tuples so that the engine stays independent of
any GUI toolkit. Views convert them with ``to_hex``.
"""

WHITE = (255, 255, 255)
EMPTY = (50, 50, 50)
BACKGROUND = (40, 40, 40)

# Disease overlay
LIGHT_GRAY = (160, 160, 160)  # infected
DARK_GRAY = (96, 96, 96)      # contagious

ORANGE = (255, 165, 0)
YELLOW = (255, 255, 0)
SKY_BLUE = (50, 150, 255)
BLUE = (0, 0, 255)
LIGHT_GREEN = (0, 255, 51)
RED = (255, 0, 0)

LIGHT_PURPLE = (255, 204, 255)
SEED_PURPLE = (255, 180, 255)
PURPLE = (255, 0, 255)
DARK_PURPLE = (153, 0, 153)

DARK_CYAN = (0, 204, 204)
CYAN = (0, 255, 255)


def to_hex(color):
    """Return a Tk style '#rrggbb' string."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"
