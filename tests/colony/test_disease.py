"""
Disease overlay: lifecycle of an infected host and spreading.
"""

import pytest

from microcosm.config.simulation_config import DiseaseConfig
from microcosm.managers.colony.cells.chromacystis import Chromacystis
from microcosm.managers.colony.cells.mycoplasma import Mycoplasma
from microcosm.managers.colony.fields.field import Field
from microcosm.models import palette
from microcosm.models.location import Location


@pytest.fixture
def host_and_target(sequence_random):
    rng = sequence_random()
    field = Field(3, 3)
    host = Mycoplasma(field, Location(1, 1), rng=rng)
    target = Chromacystis(field, Location(0, 0), rng=rng)
    host.set_infected()
    return field, rng, host, target


def advance(host, target):
    host.neighbours = [target]
    host.update_infection_state()


class TestInfectionLifecycle:
    """Infected, contagious from 5 to 10, dead after 11."""

    def test_not_contagious_before_five(self, host_and_target):
        field, rng, host, target = host_and_target
        for duration in range(1, 5):
            advance(host, target)
            assert host.infected_duration == duration
            assert not host.can_spread
            assert host.get_next_state() is True
            assert host.get_color() == palette.LIGHT_GRAY
        assert rng.draws == 0

    def test_contagious_window(self, host_and_target):
        field, rng, host, target = host_and_target
        for _ in range(4):
            advance(host, target)

        advance(host, target)

        assert host.infected_duration == 5
        assert host.can_spread
        assert host.get_color() == palette.DARK_GRAY
        # the first draw happens one generation after turning contagious
        assert rng.draws == 0

        rng.push(*[0.9] * 5)
        for _ in range(5):
            advance(host, target)
            assert host.get_next_state() is True
        assert host.infected_duration == 10
        assert not host.get_killed()

    def test_dies_after_lethal_threshold(self, host_and_target):
        field, rng, host, target = host_and_target
        rng.push(*[0.9] * 6)
        for _ in range(11):
            advance(host, target)

        assert host.infected_duration == 11
        assert host.get_killed()
        assert host.get_next_state() is False
        assert field.was_killed(Location(1, 1), Mycoplasma)

    def test_infected_overrides_species_rule(self, host_and_target):
        field, rng, host, target = host_and_target
        # alone, a healthy Mycoplasma would die
        host.act()
        assert host.get_next_state() is True

    def test_dead_infected_cell_is_inert(self, sequence_random):
        rng = sequence_random()
        cell = Mycoplasma(Field(3, 3), Location(1, 1), rng=rng, alive=False)
        cell.set_infected()
        cell.act()
        assert cell.infected_duration == 0
        assert cell.get_next_state() is False


class TestSpreading:
    """One draw per neighbour, infection on or below the spread probability."""

    def _contagious(self, host, target):
        for _ in range(5):
            advance(host, target)

    def test_draw_at_threshold_infects(self, host_and_target):
        field, rng, host, target = host_and_target
        self._contagious(host, target)
        rng.push(0.15)

        advance(host, target)

        assert len(field.effects) == 1
        effect = field.effects.pending[0]
        assert effect.target_index == 0
        assert effect.source_index == 4
        # deferred until the effects are applied
        assert not target.is_infected()
        field.effects.apply(field)
        assert target.is_infected()
        assert target.infected_duration == 0

    def test_draw_above_threshold_spares(self, host_and_target):
        field, rng, host, target = host_and_target
        self._contagious(host, target)
        rng.push(0.1500001)

        advance(host, target)

        assert len(field.effects) == 0

    def test_one_draw_per_neighbour(self, sequence_random):
        rng = sequence_random()
        field = Field(3, 3)
        host = Mycoplasma(field, Location(1, 1), rng=rng)
        neighbours = [Mycoplasma(field, Location(0, col), rng=rng) for col in range(3)]
        host.set_infected()
        host.infected_duration = 5
        host.can_spread = True
        rng.push(0.9, 0.0, 0.9)

        host.neighbours = neighbours
        host.update_infection_state()

        assert rng.draws == 3
        assert [effect.target_index for effect in field.effects.pending] == [1]

    def test_configurable_thresholds(self, sequence_random):
        rng = sequence_random()
        field = Field(3, 3)
        host = Mycoplasma(field, Location(1, 1), rng=rng,
                          disease=DiseaseConfig(spread_probability=0.5, contagious_after=1, lethal_after=2))
        host.set_infected()
        host.act()
        assert host.can_spread
        host.act()
        host.act()
        assert host.get_killed()
