import numbers
from microcosm.config.feature_flags import FeatureFlags
from microcosm.managers.colony.effects import EffectQueue
from microcosm.models.exceptions import InvalidGridDimensionsError, LocationOutOfBoundsError
from microcosm.models.location import Location
from utils.logger.logger import Logger


def _is_dimension(value):
    # bool is an Integral too
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0


class Field:
    """Rectangular grid of cell slots with Moore-neighbourhood queries."""

    def __init__(self, depth, width, rng=None):
        """Allocate an empty depth x width grid."""
        Logger.log(f"start Field __init__(self, {depth}, {width})")

        if not (_is_dimension(depth) and _is_dimension(width)):
            Logger.log(f"InvalidGridDimensionsError: {depth!r} x {width!r}", Logger.LogPriority.ERROR)
            raise InvalidGridDimensionsError(
                f"Grid depth and width must be integers greater than zero, got {depth!r} x {width!r}."
            )

        self.depth = int(depth)
        self.width = int(width)
        self.rng = rng
        self.effects = EffectQueue()
        self.slots = [None] * (self.depth * self.width)
        # (arena index, species class) pairs whose occupant was killed there
        self.killed_species = set()

        Logger.log(f"end Field __init__(self, depth, width)")

    def get_depth(self):
        return self.depth

    def get_width(self):
        return self.width

    def clear(self):
        """Empty every slot and forget pending effects and killed latches."""
        Logger.log("start Field clear(self)")
        self.slots = [None] * (self.depth * self.width)
        self.killed_species = set()
        self.effects.clear()
        Logger.log("end Field clear(self)")

    def contains(self, location):
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def index_of(self, location):
        """Return the arena index of a location."""
        if not self.contains(location):
            raise LocationOutOfBoundsError(
                f"Location ({location}) is outside the {self.depth} x {self.width} field."
            )
        return location.row * self.width + location.col

    def location_of(self, index):
        """Inverse of index_of."""
        return Location(index // self.width, index % self.width)

    def place(self, cell, location):
        """Put a cell at a location, replacing any previous occupant."""
        self.slots[self.index_of(location)] = cell

    def get_object_at(self, row, col):
        """Return the cell at (row, col) or None."""
        return self.get_object_at_location(Location(row, col))

    def get_object_at_location(self, location):
        return self.slots[self.index_of(location)]

    def get_object_at_index(self, index):
        return self.slots[index]

    def adjacent_locations(self, location):
        """
        Return the in-bounds Moore neighbours of a location, excluding itself.
        Row-major order unless FeatureFlags.SHUFFLE_NEIGHBOURS is set.
        """
        locations = []
        for row_offset in (-1, 0, 1):
            next_row = location.row + row_offset
            if next_row < 0 or next_row >= self.depth:
                continue
            for col_offset in (-1, 0, 1):
                next_col = location.col + col_offset
                if next_col < 0 or next_col >= self.width:
                    continue
                if row_offset == 0 and col_offset == 0:
                    continue
                locations.append(Location(next_row, next_col))

        if FeatureFlags.SHUFFLE_NEIGHBOURS and self.rng is not None:
            self.rng.shuffle(locations)
        return locations

    def get_living_neighbours(self, location, species=None):
        """
        Return the living cells adjacent to a location.

        Args:
            location: Centre of the query.
            species: Optional species class; only its instances are returned.

        Returns:
            list of cells whose committed state is alive.
        """
        neighbours = []
        for adjacent in self.adjacent_locations(location):
            cell = self.get_object_at_location(adjacent)
            if cell is None or not cell.is_alive():
                continue
            if species is not None and not isinstance(cell, species):
                continue
            neighbours.append(cell)
        return neighbours

    def mark_killed(self, location, species):
        """Remember that an occupant of this species was killed here."""
        self.killed_species.add((self.index_of(location), species))

    def was_killed(self, location, species):
        return (self.index_of(location), species) in self.killed_species

    def iter_cells(self):
        """Yield every occupant in row-major order."""
        for cell in self.slots:
            if cell is not None:
                yield cell
