from .export_strategy import ExportStrategy

class ImageExportStrategy(ExportStrategy):
    def generate_export(self, colony):
        """Implemented by concrete image exporters."""
        raise NotImplementedError()
