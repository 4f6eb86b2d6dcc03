from .csv_export_strategy import CsvExportStrategy
from .png_export_strategy import PngExportStrategy
from utils.logger.logger import Logger

class ExportRequestInterpreter:
    """
    Turns ``export_request <data_strategy|none> <image_strategy|none> <folder>``
    into strategy instances. The folder is the rest of the line, so it may
    contain spaces.
    """

    PREFIX = "export_request"
    NONE = "none"

    VALID_DATA_STRATEGIES = {
        "csv_population_export_strategy": CsvExportStrategy
    }

    VALID_IMAGE_STRATEGIES = {
        "png_grid_export_strategy": PngExportStrategy
    }

    def parse_request(self, request_str: str):
        """
        Returns:
            dict with ``data_export_strategy`` and ``image_export_strategy``
            (instances or None) and ``folder_location``.

        Raises:
            ValueError: Wrong prefix or part count, both strategies none,
                folder none, or an unknown strategy name.
        """
        Logger.log(f"start parse_request({request_str})")
        head, _, rest = request_str.strip().partition(" ")
        if head != self.PREFIX:
            self._reject(f"The request must start with '{self.PREFIX}'")

        parts = rest.split(maxsplit=2)
        if len(parts) != 3:
            self._reject(f"Expected data strategy, image strategy and folder, got {len(parts)} part(s).")
        data_name, image_name, folder_location = parts

        if self._is_none(data_name) and self._is_none(image_name):
            self._reject("At least one of the data or image export strategies must be given.")
        if self._is_none(folder_location):
            self._reject("Folder location must be provided and cannot be 'none'.")

        request = {
            'data_export_strategy': self._resolve(data_name, self.VALID_DATA_STRATEGIES, "data"),
            'image_export_strategy': self._resolve(image_name, self.VALID_IMAGE_STRATEGIES, "image"),
            'folder_location': folder_location,
        }
        Logger.log("end parse_request()")
        return request

    def _is_none(self, part):
        return part.lower() == self.NONE

    def _resolve(self, name, registry, kind):
        if self._is_none(name):
            return None
        if name not in registry:
            self._reject(f"Invalid {kind} export strategy: '{name}'.")
        return registry[name]()

    def _reject(self, message):
        Logger.log(f"ValueError: {message}", Logger.LogPriority.ERROR)
        raise ValueError(message)
