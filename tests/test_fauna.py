import random
from types import SimpleNamespace

import pytest

from evolve.messages import Events
from evolve.models import Bug, Clock, Fauna, Flora, Options, Species
from evolve.space import (
    BABY_ENERGY,
    BIRTH_ENERGY,
    BIRTH_ENERGY_COST,
    BUGS_MAX,
    FLORA_ENERGY,
    GENES_MAX,
    LOCATION_COUNT,
    MAX_ENERGY,
    MOVE_COST,
    SPACE_HEIGHT,
    SPACE_WIDTH,
    to_index_from_xy,
    to_x_from_index,
    to_y_from_index,
)
from evolve.updaters.fauna import FaunaUpdater, classify, make_bug


def _bug(energy=BABY_ENERGY, position=0, gx=None, gy=None):
    gx = gx if gx is not None else [True] * GENES_MAX
    gy = gy if gy is not None else [True] * GENES_MAX
    return Bug(energy=energy, genes_x=gx, genes_y=gy, position=position,
               species=classify(gx, gy))


def _make(bugs=(), bug_requested=None, reset=False, tick=True, pause=False, seed=1):
    fauna = Fauna(bugs=list(bugs))
    flora = Flora()
    events = Events()
    inputs = SimpleNamespace(
        bug_requested=bug_requested, reset_requested=reset, time_to_update=tick
    )
    updater = FaunaUpdater(
        Clock(), events, fauna, flora, inputs, Options(pause=pause),
        random.Random(seed),
    )
    return fauna, flora, events, updater


def test_classify_all_same_direction_is_cruiser():
    assert classify([True] * GENES_MAX, [False] * GENES_MAX) == Species.CRUISER


def test_classify_balanced_is_twirlie():
    alternating = [i % 2 == 0 for i in range(GENES_MAX)]
    assert classify(alternating, alternating) == Species.TWIRLIE


def test_classify_moderate_is_normal():
    genes_x = [True] * (GENES_MAX - 2) + [False] * 2
    balanced = [i % 2 == 0 for i in range(GENES_MAX)]
    assert classify(genes_x, balanced) == Species.NORMAL


def test_make_bug_is_newborn_at_position():
    bug = make_bug(42, random.Random(3))
    assert bug.energy == BABY_ENERGY
    assert bug.position == 42
    assert bug.species == classify(bug.genes_x, bug.genes_y)
    assert len(bug.genes_x) == GENES_MAX


@pytest.mark.parametrize("position", [-1, LOCATION_COUNT])
def test_make_bug_rejects_bad_position(position):
    with pytest.raises(ValueError):
        make_bug(position, random.Random(0))


def test_reset_fills_population_at_centre():
    fauna, _, events, updater = _make(bugs=[_bug()], reset=True)
    updater.update()
    centre = to_index_from_xy(SPACE_WIDTH // 2, SPACE_HEIGHT // 2)
    assert len(fauna.bugs) == BUGS_MAX
    assert all(bug.position == centre for bug in fauna.bugs)
    assert events.updated is True


def test_requested_bug_is_added_without_tick():
    fauna, _, events, updater = _make(bug_requested=77, tick=False)
    updater.update()
    assert [bug.position for bug in fauna.bugs] == [77]
    assert events.updated is True


def test_grazing_eats_flora_and_gains_energy():
    fauna, flora, _, updater = _make(bugs=[_bug(energy=5, position=10)])
    flora.flora_present[10] = True
    updater.update()
    assert flora.flora_present[10] is False
    assert fauna.bugs[0].energy == 5 + FLORA_ENERGY - MOVE_COST


def test_energy_capped_then_spawns():
    fauna, flora, _, updater = _make(bugs=[_bug(energy=MAX_ENERGY - 1, position=10)])
    flora.flora_present[10] = True
    updater.update()
    parent, baby = fauna.bugs
    assert parent.energy == MAX_ENERGY - BIRTH_ENERGY_COST - MOVE_COST
    assert baby.energy == BABY_ENERGY
    assert baby.position == 10


def test_baby_genes_differ_by_at_most_one():
    for seed in range(30):
        parent = _bug(energy=BIRTH_ENERGY, position=5)
        original_x, original_y = list(parent.genes_x), list(parent.genes_y)
        fauna, _, _, updater = _make(bugs=[parent], seed=seed)
        updater.update()
        baby = fauna.bugs[1]
        diffs = sum(a != b for a, b in zip(baby.genes_x, original_x))
        diffs += sum(a != b for a, b in zip(baby.genes_y, original_y))
        assert diffs <= 1
        assert baby.species == classify(baby.genes_x, baby.genes_y)


def test_starving_bug_dies():
    fauna, _, events, updater = _make(bugs=[_bug(energy=1)])
    updater.update()
    assert fauna.bugs == []
    assert events.updated is True


def test_paused_changes_nothing():
    bug = _bug(energy=5, position=10)
    fauna, flora, events, updater = _make(bugs=[bug], pause=True)
    flora.flora_present[10] = True
    updater.update()
    assert fauna.bugs[0].position == 10
    assert fauna.bugs[0].energy == 5
    assert flora.flora_present[10] is True
    assert events.updated is False


def test_move_wraps_around_edges():
    start = to_index_from_xy(SPACE_WIDTH - 1, SPACE_HEIGHT - 1)
    for seed in range(20):
        fauna, _, _, updater = _make(bugs=[_bug(energy=5, position=start)], seed=seed)
        updater.update()
        position = fauna.bugs[0].position
        assert to_x_from_index(position) in (SPACE_WIDTH - 1, 0)
        assert to_y_from_index(position) in (SPACE_HEIGHT - 1, 0)


def test_move_goes_backwards_for_false_genes():
    start = to_index_from_xy(0, 0)
    falses = [False] * GENES_MAX
    for seed in range(20):
        fauna, _, _, updater = _make(
            bugs=[_bug(energy=5, position=start, gx=falses, gy=falses)], seed=seed
        )
        updater.update()
        position = fauna.bugs[0].position
        assert to_x_from_index(position) in (0, SPACE_WIDTH - 1)
        assert to_y_from_index(position) in (0, SPACE_HEIGHT - 1)