"""
Population statistics for a committed field.

FieldStats counts living cells per species after a generation has been
committed. PopulationHistory keeps one row per generation and hands the
series to pandas for export and inspection.
"""

from collections import OrderedDict
from typing import Dict, List

import pandas as pd


class FieldStats:
    """
    Per-species living counts for one snapshot of the field.

    ``generate_counts`` is the only method that looks at the field; the
    getters read the last published snapshot and never recount.
    """

    def __init__(self):
        self.counts: Dict[str, int] = OrderedDict()
        self.infected = 0
        self.counts_valid = False

    def reset(self):
        self.counts = OrderedDict()
        self.infected = 0
        self.counts_valid = False

    def generate_counts(self, field):
        """Count every living cell of the field, then publish the new totals."""
        counts = OrderedDict()
        infected = 0
        for cell in field.iter_cells():
            if cell.is_alive():
                counts[cell.species_name] = counts.get(cell.species_name, 0) + 1
                if cell.is_infected():
                    infected += 1
        # counts are built off to the side so readers never see a half-filled dict
        self.counts = counts
        self.infected = infected
        self.counts_valid = True

    def get_counts(self) -> Dict[str, int]:
        return dict(self.counts)

    def get_infected_count(self) -> int:
        return self.infected

    def get_population_details(self) -> str:
        """e.g. ``"Chromacystis: 12 Mycoplasma: 40"``, species sorted by name."""
        counts = self.counts
        return " ".join(f"{name}: {counts[name]}" for name in sorted(counts))

    def is_viable(self) -> bool:
        """True while more than one species has living members."""
        return sum(1 for count in self.counts.values() if count > 0) > 1


class PopulationHistory:
    """One row of living counts per recorded generation."""

    def __init__(self, species_names: List[str]):
        self.species_names = list(species_names)
        self.rows = []

    def __len__(self):
        return len(self.rows)

    def clear(self):
        self.rows = []

    def record(self, generation, stats: FieldStats):
        """Append the counts ``stats`` last generated."""
        counts = stats.get_counts()
        row = {"generation": generation}
        for name in self.species_names:
            row[name] = counts.get(name, 0)
        row["total"] = sum(counts.values())
        row["infected"] = stats.get_infected_count()
        self.rows.append(row)

    def to_dataframe(self) -> pd.DataFrame:
        columns = ["generation"] + self.species_names + ["total", "infected"]
        return pd.DataFrame(self.rows, columns=columns)
