"""Tests for clue text cleaning and board validation."""

from jeopardy.game.clue_bank import build_clue_bank
from jeopardy.utils.text_processor import TextProcessor, clean_clue_text, clean_title
from jeopardy.utils.validation import BoardValidator, validate_board

from tests.fakes import make_categories


# -- text processor -----------------------------------------------------------


def test_clean_clue_text_strips_markup_and_entities():
    assert clean_clue_text('<i>The Bell Jar</i>') == 'The Bell Jar'
    assert clean_clue_text('Rock &amp; roll') == 'Rock & roll'
    assert clean_clue_text('It\\\'s a \\"classic\\"') == 'It\'s a "classic"'
    assert clean_clue_text('  lots   of\n space ') == 'lots of space'


def test_clean_clue_text_handles_missing_and_numeric_values():
    assert clean_clue_text(None) == ''
    assert clean_clue_text(1984) == '1984'
    assert clean_clue_text('<br />') == ''


def test_clean_title():
    assert clean_title('  3-letter   words ') == '3-letter words'
    assert clean_title('<i>"B"</i> movies') == '"B" movies'
    assert clean_title(None) == ''


def test_long_title_is_capped():
    title = clean_title('word ' * 30)

    assert len(title) == 60
    assert title.endswith('...')
    assert clean_title('x' * 60) == 'x' * 60


def test_is_valid_clue():
    assert TextProcessor.is_valid_clue('Q', 'A')
    assert not TextProcessor.is_valid_clue('', 'A')
    assert not TextProcessor.is_valid_clue('Q', '   ')


def test_truncate_text():
    assert TextProcessor.truncate_text('SHAKESPEARE', 8) == 'SHAKE...'
    assert TextProcessor.truncate_text('SHORT', 8) == 'SHORT'


# -- board validator ----------------------------------------------------------


def _board():
    categories = make_categories(6)
    bank = build_clue_bank(categories, 5)
    return categories, bank


def test_valid_board_passes():
    categories, bank = _board()

    is_valid, errors, warnings = validate_board(categories, bank, 6, 5)

    assert is_valid
    assert errors == []
    assert warnings == []


def test_wrong_category_count_fails():
    categories, bank = _board()

    is_valid, errors, _ = BoardValidator(6, 5).validate_board(categories[:5], bank)

    assert not is_valid
    assert any('Expected 6 categories' in error for error in errors)


def test_swapped_ids_fail():
    categories, bank = _board()
    a, b = categories[0].clues[0], categories[1].clues[0]
    a.id, b.id = b.id, a.id

    is_valid, errors, _ = validate_board(categories, bank, 6, 5)

    assert not is_valid
    assert any('row 0, column 0' in error for error in errors)


def test_copied_clue_in_bank_fails():
    categories, bank = _board()
    original = categories[2].clues[4]
    categories[2].clues[4] = type(original)(original.question, original.answer, id=original.id)

    is_valid, errors, _ = validate_board(categories, bank, 6, 5)

    assert not is_valid
    assert any('not the clue shown on the board' in error for error in errors)


def test_blank_clue_fails_and_duplicate_title_warns():
    categories, bank = _board()
    categories[1].clues[2].answer = ''
    categories[4].title = categories[0].title.upper()

    is_valid, errors, warnings = validate_board(categories, bank, 6, 5)

    assert not is_valid
    assert any('empty question or answer' in error for error in errors)
    assert any('Duplicate category title' in warning for warning in warnings)
