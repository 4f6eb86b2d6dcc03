from utils.logger.logger import Logger

class ViewStrategy():
    """
    Base class for the ways a colony can be presented and driven.
    Subclasses start and stop their own event loop.
    """

    def __init__(self, controller):
        """
        Parameters:
        controller (SystemController): The controller that owns the colony.
        """
        Logger.log(f"start ViewStrategy __init__(self, {controller})")
        self.controller = controller
        Logger.log(f"end ViewStrategy __init__(self, controller)")

    # STARTS THE VIEW, INITIALIZING NECESSARY RESOURCES OR DISPLAY MECHANISMS.
    def start_view(self):
        """
        Raises:
        NotImplementedError: If not implemented in a subclass.
        """
        raise NotImplementedError()

    # STOPS THE VIEW, RELEASING RESOURCES OR HIDING THE DISPLAY.
    def stop_view(self):
        """
        Raises:
        NotImplementedError: If not implemented in a subclass.
        """
        raise NotImplementedError()
