class StateTransitionError(Exception):
    """Invalid system state transition."""
    def __init__(self, message="Invalid state transition attempted."):
        super().__init__(message)

class InvalidGridDimensionsError(Exception):
    """Field depth or width is zero or negative."""
    def __init__(self, message="Grid depth and width must be greater than zero."):
        super().__init__(message)

class LocationOutOfBoundsError(Exception):
    """Location lies outside the field."""
    def __init__(self, message="Location is outside the field."):
        super().__init__(message)

class CellPlacementError(Exception):
    """Cell rule invoked on a cell that was never placed in a field."""
    def __init__(self, message="Cell is not placed in a field."):
        super().__init__(message)

class UnknownSpeciesError(Exception):
    """Species is not registered with the cell factory."""
    def __init__(self, message="Unknown species."):
        super().__init__(message)

class InvalidConfigurationError(Exception):
    """Simulation configuration failed validation."""
    def __init__(self, message="Invalid simulation configuration."):
        super().__init__(message)
