from .export_strategy import ExportStrategy

class DataExportStrategy(ExportStrategy):
    def generate_export(self, colony):
        """Implemented by concrete data exporters."""
        raise NotImplementedError()
