import pytest
from mastermind.engine import ALL_CODES, Feedback
from mastermind.harness import Session


def test_new_session_state():
    s = Session()
    assert s.remaining() == list(ALL_CODES)
    assert s.recommendation() == (1, 1, 2, 2)
    assert not s.is_solved() and not s.is_contradiction()


def test_add_accepts_text_and_tuples():
    s = Session()
    step = s.add("1122", (1, 0))
    assert step.guess == (1, 1, 2, 2) and step.feedback == Feedback(1, 0)
    s.add((1, 3, 4, 4), (0, 2))
    assert len(s.steps) == 2
    assert 0 < len(s.remaining()) < 1296


@pytest.mark.parametrize("guess,fb", [
    ("1127", (0, 0)),
    ((1, 1, 2), (0, 0)),
    ((11, 2, 2), (0, 0)),
    ("1122", (3, 2)),
    ("1122", (-1, 0)),
    ("1122", ("1", 0)),
])
def test_add_rejects_invalid(guess, fb):
    s = Session()
    with pytest.raises(ValueError):
        s.add(guess, fb)
    assert s.steps == []


def test_solved_and_contradiction():
    s = Session()
    s.add("3456", (4, 0))
    assert s.is_solved()
    assert s.recommendation() == (3, 4, 5, 6)
    s.add("1111", (1, 0))
    assert s.is_contradiction()
    assert s.recommendation() == (1, 1, 2, 2)
    s.undo()
    assert s.is_solved()
    s.reset()
    assert s.steps == [] and s.undo() is None


def test_eliminated_at():
    s = Session()
    s.add("1122", (0, 0))
    elim = s.eliminated_at()
    assert elim[(3, 4, 5, 6)] is None
    assert elim[(1, 3, 4, 5)] == 1
    assert sum(v is None for v in elim.values()) == 256


def test_dict_roundtrip_keeps_notes():
    s = Session(notes="https://example.com/board")
    s.add("1122", (1, 1))
    data = s.to_dict()
    assert data == {"steps": [{"guess": "1122", "black": 1, "white": 1}],
                    "notes": "https://example.com/board"}
    again = Session.from_dict(data)
    assert again.steps == s.steps and again.notes == s.notes


@pytest.mark.parametrize("data", [
    None,
    {},
    {"steps": "1122"},
    {"steps": [{"guess": "1122", "black": 1}]},
    {"steps": [{"guess": "9999", "black": 0, "white": 0}]},
    {"steps": [], "notes": 0},
    {"steps": [], "notes": ["link"]},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        Session.from_dict(data)


@pytest.mark.parametrize("notes", ["", "0", "  spaced  "])
def test_from_dict_keeps_notes_verbatim(notes):
    assert Session.from_dict({"steps": [], "notes": notes}).notes == notes
    assert Session.from_dict({"steps": []}).notes == ""
