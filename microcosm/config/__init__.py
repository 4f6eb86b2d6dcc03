"""
Microcosm Configuration Module

Contains feature flags and simulation configuration.
"""

from .feature_flags import FeatureFlags
from .simulation_config import (
    SimulationConfig,
    GridConfig,
    PopulationConfig,
    DiseaseConfig,
    RunConfig,
    load_config,
)

__all__ = [
    "FeatureFlags",
    "SimulationConfig",
    "GridConfig",
    "PopulationConfig",
    "DiseaseConfig",
    "RunConfig",
    "load_config",
]
