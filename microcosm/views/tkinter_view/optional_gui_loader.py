from utils.logger.logger import Logger

def get_gui_view_class():
    """Return TkinterView, or None when Tk cannot be imported on this system."""
    try:
        from microcosm.views.tkinter_view.tkinter_view import TkinterView
        Logger.log("TkinterView successfully loaded.", Logger.LogPriority.DEBUG)
        return TkinterView
    except ImportError as e:
        Logger.log(f"Tkinter not available: {e}", Logger.LogPriority.WARNING)
        return None
