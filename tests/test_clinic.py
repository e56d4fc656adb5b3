import pytest

from dstructs.clinic import Clinic, main


def _feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_patients_are_called_in_arrival_order():
    clinic = Clinic()
    arrivals = [7, 3, 9]
    for no in arrivals:
        clinic.join(no)
    assert clinic.waiting() == arrivals
    assert [clinic.call_next() for _ in arrivals] == arrivals
    assert clinic.waiting() == []


def test_duplicate_number_rejected():
    clinic = Clinic()
    clinic.join(5)
    with pytest.raises(ValueError):
        clinic.join(5)
    assert clinic.waiting() == [5]


def test_call_with_nobody_waiting():
    with pytest.raises(IndexError):
        Clinic().call_next()


def test_close_returns_remaining_and_empties():
    clinic = Clinic()
    clinic.join(1)
    clinic.join(2)
    clinic.call_next()
    clinic.join(4)
    assert clinic.close() == [2, 4]
    assert clinic.waiting() == []
    clinic.join(2)
    assert clinic.waiting() == [2]


def test_main_session(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "11", "1", "11", "12", "3", "2", "4"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "waiting: 11 12" in out
    assert "patient 11 sees the doctor" in out
    assert "seen in this order: 12" in out


def test_main_close_with_waiting_patients(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "8", "5"])
    assert main([]) == 0
    assert "come back tomorrow" in capsys.readouterr().out