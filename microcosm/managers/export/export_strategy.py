class ExportStrategy():
    def generate_export(self, colony):
        """Return a list[(filename, bytes)] for this export."""
        raise NotImplementedError()
