from .data_export_strategy import DataExportStrategy
from utils.logger.logger import Logger
import time

class CsvExportStrategy(DataExportStrategy):
    def generate_export(self, colony):
        """Write the population history, one row per generation, as CSV."""
        Logger.log("Starting CSV export generation")

        history_df = colony.get_history().to_dataframe()
        Logger.log(f"Processed population dataframe with {len(history_df)} rows")

        content = history_df.to_csv(index=False).encode("utf-8")

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        filename = f"population_{timestamp}_gen{colony.get_generation()}.csv"

        Logger.log(f"CSV export generated successfully. Saved as {filename}")
        return [(filename, content)]
