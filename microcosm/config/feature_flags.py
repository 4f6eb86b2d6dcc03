"""
Feature Flag System for Microcosm.

Controls runtime behavior switches that change rule outcomes.
Default: all flags OFF (legacy rule behavior preserved).

Usage:
    from microcosm.config.feature_flags import FeatureFlags

    if FeatureFlags.CORRECTED_POLYCEPHALUM_REVIVAL:
        # Polycephalum counts its own species and revives 75% of the time
    else:
        # Legacy rule: counts Mycoplasma neighbours, threshold 75 always passes
"""


class FeatureFlags:
    """
    Global feature flag registry.

    All flags default to False to preserve legacy behavior.
    Flags are toggleable at runtime for testing.

    Invariant: flags are read at rule-evaluation time, so flipping one
    mid-run changes the next generation only.
    """

    CORRECTED_POLYCEPHALUM_REVIVAL = False
    """
    Fix the two defects of the Polycephalum revival predicate.

    When False (default):
    - Counts living Mycoplasma neighbours, not Polycephalum
    - Compares the random draw against 75, so the 25% refusal never happens
    - One draw is still consumed per call

    When True:
    - Counts living Polycephalum neighbours
    - Compares the random draw against 0.75

    Default: False (legacy rule)
    """

    POLYCEPHALUM_REVIVAL_PROBABILITY = 0.75
    """
    Threshold used by the corrected Polycephalum revival predicate.

    Range: [0, 1]
    Default: 0.75
    """

    SHUFFLE_NEIGHBOURS = False
    """
    Randomise the order of neighbour lists.

    When False (default):
    - Neighbours are returned in row-major order around the location

    When True:
    - Each query shuffles the adjacent locations with the field's generator,
      so the revival species picked among several candidates varies

    Default: False (stable order)
    """

    # --- Static Methods for Safe Flag Management ---

    @classmethod
    def enable_corrected_polycephalum_revival(cls):
        """Use the corrected Polycephalum revival predicate."""
        cls.CORRECTED_POLYCEPHALUM_REVIVAL = True

    @classmethod
    def legacy_mode(cls):
        """Reset all flags to legacy defaults."""
        cls.CORRECTED_POLYCEPHALUM_REVIVAL = False
        cls.POLYCEPHALUM_REVIVAL_PROBABILITY = 0.75
        cls.SHUFFLE_NEIGHBOURS = False

    @classmethod
    def validate(cls) -> bool:
        """
        Validate flag consistency.

        Returns:
            True if flags are in valid state.

        Raises:
            ValueError if an inconsistent value is detected.
        """
        if not 0.0 <= cls.POLYCEPHALUM_REVIVAL_PROBABILITY <= 1.0:
            raise ValueError(
                "Invalid flag value: POLYCEPHALUM_REVIVAL_PROBABILITY "
                "must lie in [0, 1]"
            )
        return True
