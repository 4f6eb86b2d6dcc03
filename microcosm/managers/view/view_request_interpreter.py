from microcosm.views.cli_view.cli_view import CommandLineView
from microcosm.views.tkinter_view.optional_gui_loader import get_gui_view_class
from utils.logger.logger import Logger

class ViewRequestInterpreter:
    """Maps a view name to a view strategy bound to the controller."""

    VIEW_NAMES = ("cli", "tkinter")

    def get_view_strategy(self, view_request, controller):
        """
        Args:
            view_request (str): "cli" or "tkinter", case insensitive.

        Raises:
            ValueError: If the name is unknown or Tk cannot be loaded.
        """
        name = view_request.lower()
        Logger.log(f"start get_view_strategy({name})")
        if name == "cli":
            return CommandLineView(controller)
        if name == "tkinter":
            view_class = get_gui_view_class()
            if view_class is not None:
                return view_class(controller)
            message = "Tkinter view is not available on this system."
        else:
            message = f"Unknown view '{view_request}'. Choose one of: {', '.join(self.VIEW_NAMES)}."
        Logger.log(f"ValueError: {message}", Logger.LogPriority.ERROR)
        raise ValueError(message)
