"""Tests for clue id assignment, clue bank lookups and the reveal state machine."""

import pytest

from jeopardy.exceptions import ConsistencyError, ValidationError
from jeopardy.game.clue_bank import ClueBank, build_clue_bank
from jeopardy.game.reveal import RevealController
from jeopardy.models import RevealState

from tests.fakes import RecordingRenderer, make_categories


def test_ids_are_dense_and_row_major():
    categories = make_categories(6)

    bank = build_clue_bank(categories, clues_per_category=5)

    assert sorted(bank) == list(range(30))
    for row in range(5):
        for col, category in enumerate(categories):
            assert category.clues[row].id == row * 6 + col


def test_bank_holds_the_board_objects():
    categories = make_categories(6)

    bank = build_clue_bank(categories, clues_per_category=5)

    for category in categories:
        for clue in category.clues:
            assert bank[clue.id] is clue
    for clue_id in bank:
        assert bank.lookup(clue_id).id == clue_id


def test_values_follow_row():
    categories = make_categories(6)

    build_clue_bank(categories, clues_per_category=5, value_step=200)

    assert [clue.value for clue in categories[3].clues] == [200, 400, 600, 800, 1000]


def test_assignment_is_deterministic():
    first = make_categories(6)
    second = make_categories(6)

    build_clue_bank(first, 5)
    build_clue_bank(second, 5)

    assert [[c.id for c in cat.clues] for cat in first] == [[c.id for c in cat.clues] for cat in second]


def test_wrong_shape_is_rejected():
    categories = make_categories(6)
    categories[2].clues.pop()

    with pytest.raises(ValidationError):
        build_clue_bank(categories, clues_per_category=5)


def test_unknown_id_is_a_consistency_error():
    bank = build_clue_bank(make_categories(6), 5)

    with pytest.raises(ConsistencyError):
        bank.lookup(30)
    assert bank.get(30) is None
    assert len(bank) == 30
    assert isinstance(bank, ClueBank)


# -- reveal controller --------------------------------------------------------


def _controller():
    categories = make_categories(6)
    bank = build_clue_bank(categories, 5)
    renderer = RecordingRenderer()
    return RevealController(bank, renderer), bank, renderer


def test_reveal_advances_question_then_answer_then_stays():
    controller, bank, renderer = _controller()
    clue = bank.lookup(7)

    assert clue.showing is RevealState.UNREVEALED
    assert controller.handle_click(7) is RevealState.QUESTION_SHOWN
    assert controller.handle_click(7) is RevealState.ANSWER_SHOWN
    assert controller.handle_click(7) is RevealState.ANSWER_SHOWN

    assert clue.showing is RevealState.ANSWER_SHOWN
    assert renderer.calls == [('show_question', clue.question), ('show_answer', clue.answer)]


def test_reveal_only_touches_clicked_clue():
    controller, bank, _ = _controller()

    controller.handle_click(0)

    assert bank.lookup(0).showing is RevealState.QUESTION_SHOWN
    assert all(bank.lookup(i).showing is RevealState.UNREVEALED for i in range(1, 30))


def test_reveal_of_unknown_id_raises():
    controller, _, renderer = _controller()

    with pytest.raises(ConsistencyError):
        controller.handle_click(99)
    assert renderer.calls == []
