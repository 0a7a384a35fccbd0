import pytest

from core.roster import Roster


def test_new_roster_is_empty():
    roster = Roster()
    assert len(roster) == 0
    assert roster.names == ()


def test_add_uppercases_and_trims():
    roster = Roster()
    assert roster.add("  ana ") is True
    assert roster.names == ("ANA",)


def test_add_prepends_newest_first():
    roster = Roster()
    roster.add("ana")
    roster.add("bia")
    roster.add("caio")
    assert roster.names == ("CAIO", "BIA", "ANA")


def test_add_ignores_empty_and_blank_names():
    roster = Roster()
    assert roster.add("") is False
    assert roster.add("   ") is False
    assert len(roster) == 0


def test_add_collapses_case_insensitive_duplicates():
    roster = Roster()
    roster.add("ana")
    assert roster.add("ANA") is False
    assert roster.names == ("ANA",)


def test_duplicate_keeps_existing_position():
    roster = Roster(["A", "B", "C"])
    roster.add("b")
    assert roster.names == ("A", "B", "C")


def test_initial_names_keep_order_and_dedupe():
    roster = Roster(["a", "B", "A", "", "c"])
    assert roster.names == ("A", "B", "C")


def test_remove_shifts_following_players():
    roster = Roster(["A", "B", "C"])
    roster.remove(1)
    assert roster.names == ("A", "C")


def test_remove_out_of_range_raises_index_error():
    roster = Roster(["A"])
    with pytest.raises(IndexError):
        roster.remove(1)
    with pytest.raises(IndexError):
        roster.remove(-1)
    assert roster.names == ("A",)


def test_membership_uses_normalized_name():
    roster = Roster(["ana"])
    assert "Ana" in roster
    assert " ana " in roster
    assert "bia" not in roster
    assert 3 not in roster


def test_names_is_a_snapshot():
    roster = Roster(["A"])
    snapshot = roster.names
    roster.add("B")
    assert snapshot == ("A",)
    assert list(roster) == ["B", "A"]


def test_upper_only_no_accent_folding():
    roster = Roster(["josé"])
    roster.add("JOSE")
    assert roster.names == ("JOSE", "JOSÉ")
