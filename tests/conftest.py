"""
Pytest configuration for Microcosm tests.

Puts the project root on sys.path, keeps logging in memory and restores
feature flags between tests.
"""

import sys
import os

import pytest

# Add project root to sys.path for imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from microcosm.config.feature_flags import FeatureFlags
from utils.logger.logger import Logger
from utils.logger.memory_strategy import MemoryStrategy


class SequenceRandom:
    """
    Scripted stand-in for numpy.random.Generator.

    ``random()`` returns the queued values in order and fails loudly when the
    script runs out, so tests also pin down how many draws a rule makes.
    """

    def __init__(self, values=(), integers=()):
        self.values = list(values)
        self.integer_values = list(integers)
        self.draws = 0

    def push(self, *values):
        self.values.extend(values)

    def random(self):
        if not self.values:
            raise AssertionError("SequenceRandom ran out of scripted values")
        self.draws += 1
        return self.values.pop(0)

    def integers(self, high):
        if not self.integer_values:
            raise AssertionError("SequenceRandom ran out of scripted integers")
        value = self.integer_values.pop(0)
        assert 0 <= value < high
        return value

    def shuffle(self, items):
        items.reverse()


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture(autouse=True)
def memory_logger():
    """Route logs to memory for the duration of a test."""
    previous = Logger.log_storage_strategy
    strategy = MemoryStrategy()
    Logger.set_log_storage_strategy(strategy)
    Logger.enable_logging()
    Logger.set_minimum_priority(Logger.LogPriority.DEBUG)
    # tests start from an empty log
    strategy.flush_logs()
    yield strategy
    Logger.set_log_storage_strategy(previous)


@pytest.fixture(autouse=True)
def legacy_flags():
    FeatureFlags.legacy_mode()
    yield
    FeatureFlags.legacy_mode()
