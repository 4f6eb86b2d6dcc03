"""
Configuration loading and validation for colony simulations.

Loads a YAML config and validates every parameter. Defaults reproduce the
classic 80 x 100 colony.
"""

import yaml
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from microcosm.models.exceptions import InvalidConfigurationError


def _is_int(value) -> bool:
    # YAML true/false load as bool, which is also an int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class GridConfig:
    """Field dimensions."""
    depth: int = 80
    width: int = 100

    def validate(self) -> tuple[bool, Optional[str]]:
        if not _is_int(self.depth) or not _is_int(self.width):
            return False, "depth and width must be integers"
        if self.depth <= 0:
            return False, "depth must be positive"
        if self.width <= 0:
            return False, "width must be positive"
        return True, None


@dataclass
class PopulationConfig:
    """Probabilities used when the field is (re)populated."""
    alive_probability: float = 0.25
    disease_probability: float = 0.05

    def validate(self) -> tuple[bool, Optional[str]]:
        if not _is_number(self.alive_probability) or not _is_number(self.disease_probability):
            return False, "alive_probability and disease_probability must be numbers"
        if not 0.0 <= self.alive_probability <= 1.0:
            return False, "alive_probability must lie in [0, 1]"
        if not 0.0 <= self.disease_probability <= 1.0:
            return False, "disease_probability must lie in [0, 1]"
        return True, None


@dataclass
class DiseaseConfig:
    """Infection lifecycle shared by every species."""
    spread_probability: float = 0.15
    contagious_after: int = 5
    lethal_after: int = 10

    def validate(self) -> tuple[bool, Optional[str]]:
        if not _is_number(self.spread_probability):
            return False, "spread_probability must be a number"
        if not _is_int(self.contagious_after) or not _is_int(self.lethal_after):
            return False, "contagious_after and lethal_after must be integers"
        if not 0.0 <= self.spread_probability <= 1.0:
            return False, "spread_probability must lie in [0, 1]"
        if self.contagious_after < 0:
            return False, "contagious_after must be non-negative"
        if self.lethal_after < self.contagious_after:
            return False, "lethal_after must be >= contagious_after"
        return True, None


@dataclass
class RunConfig:
    """Stepping cadence for the views."""
    seed: Optional[int] = None
    delay_ms: int = 500
    generations: int = 100

    def validate(self) -> tuple[bool, Optional[str]]:
        if self.seed is not None and not _is_int(self.seed):
            return False, "seed must be an integer or null"
        if not _is_int(self.delay_ms) or not _is_int(self.generations):
            return False, "delay_ms and generations must be integers"
        if self.seed is not None and self.seed < 0:
            return False, "seed must be non-negative"
        if self.delay_ms < 0:
            return False, "delay_ms must be non-negative"
        if self.generations < 1:
            return False, "generations must be >= 1"
        return True, None


@dataclass
class SimulationConfig:
    """Complete simulation configuration."""
    grid: GridConfig = field(default_factory=GridConfig)
    population: PopulationConfig = field(default_factory=PopulationConfig)
    disease: DiseaseConfig = field(default_factory=DiseaseConfig)
    run: RunConfig = field(default_factory=RunConfig)

    def validate(self) -> tuple[bool, Optional[str]]:
        for section_name in SECTIONS:
            section = getattr(self, section_name)
            is_valid, error = section.validate()
            if not is_valid:
                return False, f"{section_name}: {error}"
        return True, None


SECTIONS = {
    "grid": GridConfig,
    "population": PopulationConfig,
    "disease": DiseaseConfig,
    "run": RunConfig,
}


def load_config(path: Path) -> SimulationConfig:
    """
    Load and validate configuration from YAML file.

    Missing sections and keys fall back to the dataclass defaults.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated SimulationConfig.

    Raises:
        InvalidConfigurationError: If config is invalid.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise InvalidConfigurationError("Top level of the config must be a mapping")
    unknown = sorted(set(raw) - set(SECTIONS))
    if unknown:
        raise InvalidConfigurationError(f"Unknown configuration section(s): {', '.join(map(str, unknown))}")

    sections = {}
    for section_name, section_class in SECTIONS.items():
        values = raw.get(section_name) or {}
        if not isinstance(values, dict):
            raise InvalidConfigurationError(f"Section '{section_name}' must be a mapping")
        try:
            sections[section_name] = section_class(**values)
        except TypeError as ex:
            raise InvalidConfigurationError(f"Unknown configuration key in '{section_name}': {ex}") from ex
    config = SimulationConfig(**sections)

    is_valid, error = config.validate()
    if not is_valid:
        raise InvalidConfigurationError(f"Invalid configuration: {error}")

    return config
