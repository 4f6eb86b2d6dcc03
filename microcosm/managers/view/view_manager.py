from microcosm.managers.view.view_request_interpreter import ViewRequestInterpreter
from utils.logger.logger import Logger

class ViewManager:
    """Owns the active view; at most one runs at a time."""

    def __init__(self, controller):
        self.view_request_interpreter = ViewRequestInterpreter()
        self.view_strategy = None

    def initiate_view_strategy(self, view, controller):
        """
        Build the requested view, stop the current one, then start the new one.

        Raises:
            ValueError: If the view request is invalid. The current view keeps running.
        """
        Logger.log(f"start initiate_view_strategy({view})")
        next_view = self.view_request_interpreter.get_view_strategy(view, controller)
        previous, self.view_strategy = self.view_strategy, next_view
        if previous is not None:
            Logger.log(f"Stopping {type(previous).__name__}")
            previous.stop_view()
        next_view.start_view()
        Logger.log(f"end initiate_view_strategy({view})")
