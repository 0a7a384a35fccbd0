import random
from collections import Counter

import pytest

from core.exceptions import EmptyRosterError, OddRosterError, RosterValidationError
from services.doubles_service import draw_doubles


def test_empty_roster_is_rejected():
    with pytest.raises(EmptyRosterError) as exc_info:
        draw_doubles([])
    assert str(exc_info.value) == "Add players to draw the doubles"


@pytest.mark.parametrize("names", [["A"], ["A", "B", "C"]])
def test_odd_roster_is_rejected(names):
    with pytest.raises(OddRosterError) as exc_info:
        draw_doubles(names)
    assert exc_info.value.message == "Add an even number of players to draw the doubles"


def test_validation_errors_share_a_base():
    assert issubclass(EmptyRosterError, RosterValidationError)
    assert issubclass(OddRosterError, RosterValidationError)


def test_validation_happens_before_any_draw(scripted_random):
    rng = scripted_random([])
    with pytest.raises(EmptyRosterError):
        draw_doubles([], rng)
    with pytest.raises(OddRosterError):
        draw_doubles(["A", "B", "C"], rng)
    assert rng.calls == []


def test_four_players_make_two_doubles():
    doubles = draw_doubles(["A", "B", "C", "D"])
    assert len(doubles) == 2
    assert all(len(pair) == 2 for pair in doubles)
    assert sorted(name for pair in doubles for name in pair) == ["A", "B", "C", "D"]


@pytest.mark.parametrize("size", [2, 6, 10, 32])
def test_result_is_an_exact_partition(size):
    names = [f"P{i}" for i in range(size)]
    doubles = draw_doubles(names, random.Random(size))
    assert len(doubles) == size // 2
    assert Counter(name for pair in doubles for name in pair) == Counter(names)


def test_input_is_not_mutated():
    names = ["A", "B", "C", "D"]
    draw_doubles(names)
    assert names == ["A", "B", "C", "D"]


def test_tuple_input_is_accepted():
    doubles = draw_doubles(("A", "B"))
    assert sorted(doubles[0]) == ["A", "B"]


def test_pool_shrinks_after_every_single_draw(scripted_random):
    rng = scripted_random([3, 0, 1, 0])
    doubles = draw_doubles(["A", "B", "C", "D"], rng)
    assert doubles == [("D", "A"), ("C", "B")]
    assert rng.calls == [4, 3, 2, 1]


def test_first_index_draws_keep_order(scripted_random):
    rng = scripted_random([0] * 6)
    doubles = draw_doubles(["A", "B", "C", "D", "E", "F"], rng)
    assert doubles == [("A", "B"), ("C", "D"), ("E", "F")]


def test_same_seed_gives_same_doubles():
    names = [f"P{i}" for i in range(12)]
    first = draw_doubles(names, random.Random(123))
    second = draw_doubles(names, random.Random(123))
    assert first == second


def test_every_pairing_of_four_is_reachable():
    names = ["A", "B", "C", "D"]
    rng = random.Random(7)
    seen = set()
    for _ in range(300):
        doubles = draw_doubles(names, rng)
        seen.add(frozenset(frozenset(pair) for pair in doubles))
    assert len(seen) == 3


def test_falsy_generator_is_still_used(scripted_random):
    class EmptyLookingRandom(scripted_random):
        def __len__(self):
            return 0

    rng = EmptyLookingRandom([1, 0])
    assert not rng
    assert draw_doubles(["A", "B"], rng) == [("B", "A")]
    assert rng.calls == [2, 1]
