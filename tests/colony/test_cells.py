"""
Species rules, checked one cell at a time.

Cells are placed by hand on small fields and ``act()`` / ``can_revive()``
are called directly, so only staged states are inspected here. Stepping
whole generations is covered in test_simulator.py.
"""

import pytest

from microcosm.config.feature_flags import FeatureFlags
from microcosm.managers.colony.cells.base_cell import BaseCell
from microcosm.managers.colony.cells.chromacystis import Chromacystis
from microcosm.managers.colony.cells.mycoplasma import Mycoplasma
from microcosm.managers.colony.cells.phasophyta import Phasophyta
from microcosm.managers.colony.cells.polycephalum import Polycephalum
from microcosm.managers.colony.fields.field import Field
from microcosm.models import palette
from microcosm.models.exceptions import CellPlacementError
from microcosm.models.location import Location


CENTRE = Location(2, 2)
# ring around CENTRE in row-major order
RING = [Location(1, 1), Location(1, 2), Location(1, 3), Location(2, 1),
        Location(2, 3), Location(3, 1), Location(3, 2), Location(3, 3)]


def surround(field, species, count, rng, alive=True):
    return [species(field, location, rng=rng, alive=alive) for location in RING[:count]]


class TestBaseCell:
    """Shared contract of every species."""

    def test_rules_are_abstract(self, sequence_random):
        cell = BaseCell(Field(3, 3), Location(1, 1), rng=sequence_random())
        with pytest.raises(NotImplementedError):
            cell.act()
        with pytest.raises(NotImplementedError):
            cell.can_revive()

    def test_unplaced_cell_cannot_act(self, sequence_random):
        cell = Mycoplasma(None, Location(0, 0), rng=sequence_random())
        with pytest.raises(CellPlacementError):
            cell.act()

    def test_construction_places_cell(self, sequence_random):
        field = Field(3, 3)
        cell = Mycoplasma(field, Location(1, 2), rng=sequence_random())
        assert field.get_object_at(1, 2) is cell
        assert cell.get_color() == palette.ORANGE

    def test_staged_state_invisible_until_commit(self, sequence_random):
        cell = Mycoplasma(Field(3, 3), Location(1, 1), rng=sequence_random())
        cell.set_next_state(False)
        assert cell.is_alive()
        cell.update_state()
        assert not cell.is_alive()


class TestMycoplasma:
    """Conway rule: survive on 2 or 3, revive on exactly 3."""

    @pytest.mark.parametrize("neighbours,survives", [
        (0, False), (1, False), (2, True), (3, True), (4, False), (8, False),
    ])
    def test_survival(self, sequence_random, neighbours, survives):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Mycoplasma(field, CENTRE, rng=rng)
        surround(field, Mycoplasma, neighbours, rng)

        cell.act()

        assert cell.get_next_state() is survives

    def test_other_species_do_not_count(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Mycoplasma(field, CENTRE, rng=rng)
        surround(field, Chromacystis, 3, rng)

        cell.act()

        assert cell.get_next_state() is False

    def test_dead_neighbours_do_not_count(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Mycoplasma(field, CENTRE, rng=rng)
        surround(field, Mycoplasma, 3, rng, alive=False)

        cell.act()

        assert cell.get_next_state() is False

    @pytest.mark.parametrize("neighbours,revives", [(2, False), (3, True), (4, False)])
    def test_revival(self, sequence_random, neighbours, revives):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Mycoplasma(field, CENTRE, rng=rng, alive=False)
        surround(field, Mycoplasma, neighbours, rng)

        assert trial.can_revive() is revives


class TestChromacystis:
    """Mood colour by crowding, dies alone or above 3."""

    @pytest.mark.parametrize("neighbours,color", [
        (1, palette.BLUE), (2, palette.LIGHT_GREEN), (3, palette.RED),
    ])
    def test_survives_with_mood_colour(self, sequence_random, neighbours, color):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Chromacystis(field, CENTRE, rng=rng)
        surround(field, Chromacystis, neighbours, rng)

        cell.act()

        assert cell.get_next_state() is True
        assert cell.get_color() == color

    @pytest.mark.parametrize("neighbours", [0, 4, 5])
    def test_dies_alone_or_crowded(self, sequence_random, neighbours):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Chromacystis(field, CENTRE, rng=rng)
        surround(field, Chromacystis, neighbours, rng)

        cell.act()

        assert cell.get_next_state() is False
        assert cell.get_color() == palette.SKY_BLUE

    def test_revives_on_three(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Chromacystis(field, CENTRE, rng=rng, alive=False)
        surround(field, Chromacystis, 3, rng)

        assert trial.can_revive() is True

    def test_killed_instance_never_revives(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Chromacystis(field, CENTRE, rng=rng, alive=False)
        surround(field, Chromacystis, 3, rng)
        trial.set_killed()

        assert trial.can_revive() is False


class TestPhasophyta:
    """Ageing bands and parasitism on Chromacystis."""

    def test_age_increments_every_act(self, sequence_random):
        cell = Phasophyta(Field(3, 3), Location(1, 1), rng=sequence_random())
        for expected in range(1, 4):
            cell.act()
            assert cell.age == expected

    def test_young_needs_two_neighbours(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Phasophyta(field, CENTRE, rng=rng)
        surround(field, Phasophyta, 1, rng)

        cell.act()

        assert cell.age == 1
        assert cell.get_next_state() is False
        assert cell.get_color() == palette.LIGHT_PURPLE
        assert not cell.can_reproduce()

    def test_young_survives_with_two(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Phasophyta(field, CENTRE, rng=rng)
        surround(field, Phasophyta, 2, rng)

        cell.act()

        assert cell.get_next_state() is True

    def test_mature_needs_one_and_can_reproduce(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Phasophyta(field, CENTRE, rng=rng)
        cell.age = 4
        surround(field, Phasophyta, 1, rng)

        cell.act()

        assert cell.age == 5
        assert cell.get_next_state() is True
        assert cell.can_reproduce()
        assert cell.get_color() == palette.PURPLE

    def test_mature_alone_dies(self, sequence_random):
        cell = Phasophyta(Field(3, 3), Location(1, 1), rng=sequence_random())
        cell.age = 9

        cell.act()

        assert cell.get_next_state() is False

    def test_old_survives_alone(self, sequence_random):
        cell = Phasophyta(Field(3, 3), Location(1, 1), rng=sequence_random())
        cell.age = 14

        cell.act()

        assert cell.age == 15
        assert cell.get_next_state() is True
        assert not cell.can_reproduce()
        assert cell.get_color() == palette.DARK_PURPLE

    def test_dies_past_twenty(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        cell = Phasophyta(field, CENTRE, rng=rng)
        cell.age = 20
        surround(field, Phasophyta, 3, rng)

        cell.act()

        assert cell.age == 21
        assert cell.get_next_state() is False

    def test_kills_chromacystis_after_three_generations_of_contact(self, sequence_random):
        rng = sequence_random()
        field = Field(3, 3)
        cell = Phasophyta(field, Location(1, 1), rng=rng)
        prey = Chromacystis(field, Location(0, 0), rng=rng)

        cell.act()
        cell.act()
        assert len(field.effects) == 0
        assert cell.contact_durations[prey] == 2

        cell.act()

        # three years of ageing minus the two restored by the kill
        assert cell.age == 1
        assert prey not in cell.contact_durations
        field.effects.apply(field)
        assert prey.get_killed()
        assert prey.get_next_state() is False
        assert field.was_killed(Location(0, 0), Chromacystis)

    def test_parasitism_runs_while_dead(self, sequence_random):
        rng = sequence_random()
        field = Field(3, 3)
        cell = Phasophyta(field, Location(1, 1), rng=rng, alive=False)
        prey = Chromacystis(field, Location(2, 2), rng=rng)

        for _ in range(3):
            cell.act()

        field.effects.apply(field)
        assert prey.get_killed()
        assert cell.get_next_state() is False

    def test_dead_chromacystis_is_not_counted(self, sequence_random):
        rng = sequence_random()
        field = Field(3, 3)
        cell = Phasophyta(field, Location(1, 1), rng=rng)
        prey = Chromacystis(field, Location(0, 1), rng=rng, alive=False)

        for _ in range(3):
            cell.act()

        assert prey not in cell.contact_durations
        assert len(field.effects) == 0

    def test_revives_between_two_mature(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Phasophyta(field, CENTRE, rng=rng, alive=False)
        for parent in surround(field, Phasophyta, 2, rng):
            parent.reproduce = True

        assert trial.can_revive() is True

    def test_does_not_revive_with_one_young_parent(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Phasophyta(field, CENTRE, rng=rng, alive=False)
        parents = surround(field, Phasophyta, 2, rng)
        parents[0].reproduce = True

        assert trial.can_revive() is False

    def test_does_not_revive_with_three_parents(self, sequence_random):
        rng = sequence_random()
        field = Field(5, 5)
        trial = Phasophyta(field, CENTRE, rng=rng, alive=False)
        for parent in surround(field, Phasophyta, 3, rng):
            parent.reproduce = True

        assert trial.can_revive() is False


class TestPolycephalum:
    """Two ordered draws: survival table, then the colour change."""

    def test_low_draw_needs_one_neighbour(self, sequence_random):
        rng = sequence_random([0.1, 0.9])
        field = Field(5, 5)
        cell = Polycephalum(field, CENTRE, rng=rng)
        surround(field, Polycephalum, 1, rng)

        cell.act()

        assert cell.get_next_state() is True
        assert rng.draws == 2
        assert cell.get_color() == palette.DARK_CYAN

    def test_middle_draw_needs_exactly_two(self, sequence_random):
        rng = sequence_random([0.5, 0.9])
        field = Field(5, 5)
        cell = Polycephalum(field, CENTRE, rng=rng)
        surround(field, Polycephalum, 1, rng)

        cell.act()

        assert cell.get_next_state() is False

    def test_middle_draw_boundary_with_two(self, sequence_random):
        rng = sequence_random([0.5, 0.9])
        field = Field(5, 5)
        cell = Polycephalum(field, CENTRE, rng=rng)
        surround(field, Polycephalum, 2, rng)

        cell.act()

        assert cell.get_next_state() is True

    def test_high_draw_needs_exactly_three(self, sequence_random):
        rng = sequence_random([0.51, 0.9])
        field = Field(5, 5)
        cell = Polycephalum(field, CENTRE, rng=rng)
        surround(field, Polycephalum, 2, rng)

        cell.act()

        assert cell.get_next_state() is False

    def test_colour_change_keeps_it_alive(self, sequence_random):
        rng = sequence_random([0.1, 0.5])
        cell = Polycephalum(Field(3, 3), Location(1, 1), rng=rng)

        cell.act()

        assert cell.get_next_state() is True
        assert cell.get_color() == palette.CYAN

    def test_colour_toggles_back(self, sequence_random):
        rng = sequence_random([0.9, 0.65, 0.9, 0.1])
        cell = Polycephalum(Field(3, 3), Location(1, 1), rng=rng)

        cell.act()
        assert cell.get_color() == palette.CYAN
        cell.act()
        assert cell.get_color() == palette.DARK_CYAN

    def test_dead_cell_draws_nothing(self, sequence_random):
        rng = sequence_random()
        cell = Polycephalum(Field(3, 3), Location(1, 1), rng=rng, alive=False)

        cell.act()

        assert rng.draws == 0
        assert cell.get_next_state() is False

    def test_legacy_revival_counts_mycoplasma(self, sequence_random):
        rng = sequence_random([0.99])
        field = Field(5, 5)
        trial = Polycephalum(field, CENTRE, rng=rng, alive=False)
        surround(field, Mycoplasma, 2, rng)

        assert trial.can_revive() is True
        assert rng.draws == 1

    def test_legacy_revival_ignores_own_species(self, sequence_random):
        rng = sequence_random([0.1])
        field = Field(5, 5)
        trial = Polycephalum(field, CENTRE, rng=rng, alive=False)
        surround(field, Polycephalum, 2, rng)

        assert trial.can_revive() is False
        assert rng.draws == 1

    def test_corrected_revival(self, sequence_random):
        FeatureFlags.enable_corrected_polycephalum_revival()
        field = Field(5, 5)
        rng = sequence_random([0.75, 0.76])
        trial = Polycephalum(field, CENTRE, rng=rng, alive=False)
        surround(field, Polycephalum, 2, rng)

        assert trial.can_revive() is True
        assert trial.can_revive() is False

    def test_corrected_revival_ignores_mycoplasma(self, sequence_random):
        FeatureFlags.enable_corrected_polycephalum_revival()
        rng = sequence_random([0.1])
        field = Field(5, 5)
        trial = Polycephalum(field, CENTRE, rng=rng, alive=False)
        surround(field, Mycoplasma, 2, rng)

        assert trial.can_revive() is False
