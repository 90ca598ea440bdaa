import pytest

from labkit.dilemma.history import History


def test_new_history_is_empty():
    history = History(["A", "B", "C"])
    assert history.rounds == []
    assert len(history) == 0


def test_add_round_and_last_moves():
    history = History(["A", "B", "C"])
    history.add_round(["C", "D", "C"])
    history.add_round(["D", "D", "C"])
    assert history.last_moves() == ("D", "D", "C")
    assert len(history) == 2


def test_add_round_wrong_size():
    history = History(["A", "B", "C"])
    with pytest.raises(ValueError):
        history.add_round(["C", "D"])


def test_last_moves_of_empty_history():
    with pytest.raises(IndexError):
        History(["A", "B", "C"]).last_moves()


def test_initial_rounds_are_copied():
    initial = [["C", "C", "D"]]
    history = History(["A", "B", "C"], initial)
    initial.append(["D", "D", "D"])
    assert history.rounds == [("C", "C", "D")]


def test_opponents_moves_leave_out_second_position():
    history = History(["A", "B", "C"])
    history.add_round(["C", "D", "C"])
    history.add_round(["D", "C", "D"])
    assert history.opponents_moves("A") == [("C", "C"), ("D", "D")]
    assert history.opponents_moves("C") == history.opponents_moves("A")


def test_opponents_moves_have_one_fewer_decision():
    history = History(["A", "B", "C"], [["C", "D", "D"], ["D", "C", "C"]])
    view = history.opponents_moves("B")
    assert len(view) == len(history)
    assert all(len(round_) == 2 for round_ in view)


def test_format():
    history = History(["A", "B", "C"])
    history.add_round(["C", "D", "C"])
    lines = history.format().splitlines()
    assert lines[0] == "A B C "
    assert lines[1] == "Round 1: C D C "