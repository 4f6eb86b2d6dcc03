import os
from datetime import datetime
from .export_request_interpreter import ExportRequestInterpreter
from utils.logger.logger import Logger

class ExportManager:
    """
    Runs the strategies named in an export request against a colony and
    writes their files under ``<folder>/export_<timestamp>/``, with data files
    in ``data_export/`` and images in ``image_export/``.
    """

    SUBFOLDERS = (('data_export_strategy', 'data_export'), ('image_export_strategy', 'image_export'))

    def __init__(self):
        self.interpreter = ExportRequestInterpreter()

    def handle_export_request(self, colony, export_request):
        """
        Returns:
            The timestamped folder the files were written to.

        Raises:
            ValueError: Malformed request, or the target exists and is not a directory.
            OSError: Writing failed.
        """
        Logger.log(f"start handle_export_request({export_request})")
        try:
            request = self.interpreter.parse_request(export_request)
            base_folder = request['folder_location']
            self._verify_folder(base_folder)

            # generate everything before touching the disk
            outputs = []
            for strategy_key, subfolder in self.SUBFOLDERS:
                strategy = request.get(strategy_key)
                if strategy is not None:
                    outputs.append((subfolder, strategy.generate_export(colony)))

            root_folder = os.path.join(base_folder, f"export_{datetime.now():%Y%m%d_%H%M%S_%f}")
            os.makedirs(root_folder, exist_ok=True)
            for subfolder, files in outputs:
                if files:
                    self._write_files(files, os.path.join(root_folder, subfolder))
        except (ValueError, OSError) as ex:
            Logger.log(f"Export failed: {ex}", Logger.LogPriority.ERROR)
            raise

        Logger.log(f"end handle_export_request(): {root_folder}")
        return root_folder

    def _write_files(self, files, folder):
        os.makedirs(folder, exist_ok=True)
        for filename, content in files:
            path = os.path.join(folder, filename)
            with open(path, 'wb') as handle:
                handle.write(content)
            Logger.log(f"Wrote {path}")

    def _verify_folder(self, folder_path):
        if os.path.exists(folder_path) and not os.path.isdir(folder_path):
            raise ValueError(f"{folder_path} exists but is not a directory.")
        os.makedirs(folder_path, exist_ok=True)
