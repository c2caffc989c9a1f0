"""
Tests for category fetching, clue loading and clue selection.

Covers the bounded selection loops: duplicate and empty offsets when picking
categories, malformed clues when sampling, and the errors raised when the
source cannot fill the board.
"""

import asyncio
import random

import pytest

from jeopardy.exceptions import (
    GameAssemblyError, NetworkError, NotFoundError, SourceExhaustedError, ValidationError
)
from jeopardy.game.fetcher import CategoryFetcher
from jeopardy.game.loader import load_category, normalize_clue
from jeopardy.game.selector import ClueSelector
from jeopardy.models import Category, Clue, RevealState

from tests.fakes import FakeTriviaClient, make_raw_category


# -- category fetcher ---------------------------------------------------------


def test_fetcher_returns_requested_number_of_distinct_ids():
    client = FakeTriviaClient.with_categories(10)
    fetcher = CategoryFetcher(client, max_attempts=60, rng=random.Random(1))

    ids = asyncio.run(fetcher.fetch_ids(6))

    assert len(ids) == 6
    assert len(set(ids)) == 6
    assert all(0 <= offset < client.max_offset for offset in client.random_calls)


def test_fetcher_skips_duplicates_and_empty_offsets_keeping_first_seen_order():
    categories = {cid: make_raw_category(cid) for cid in range(1, 8)}
    client = FakeTriviaClient(categories, script=[3, 3, None, 1, 3, 5, 2, None, 7, 6, 4])
    fetcher = CategoryFetcher(client, max_attempts=60, rng=random.Random(2))

    ids = asyncio.run(fetcher.fetch_ids(6))

    assert ids == [3, 1, 5, 2, 7, 6]
    assert len(client.random_calls) == 10


def test_fetcher_gives_up_when_source_is_exhausted():
    """Only three categories exist, so six can never be collected."""
    client = FakeTriviaClient.with_categories(3)
    fetcher = CategoryFetcher(client, max_attempts=20, rng=random.Random(3))

    with pytest.raises(SourceExhaustedError):
        asyncio.run(fetcher.fetch_ids(6))

    assert len(client.random_calls) == 20


def test_source_exhausted_is_a_game_assembly_error():
    client = FakeTriviaClient({}, script=[None])
    fetcher = CategoryFetcher(client, max_attempts=5)

    with pytest.raises(GameAssemblyError, match="Could not assemble game"):
        asyncio.run(fetcher.fetch_ids(6))


# -- clue loader --------------------------------------------------------------


def test_load_category_normalizes_clues_and_drops_source_fields():
    raw = make_raw_category(42, clue_count=3)
    raw['clues'][0]['question'] = 'This <i>Danish</i> prince &amp; his skull'
    raw['clues'][0]['answer'] = '<i>Hamlet</i>'
    raw['clues'][1]['answer'] = None
    client = FakeTriviaClient({42: raw})

    category = asyncio.run(load_category(client, 42))

    assert category.id == 42
    assert category.title == 'Category 42'
    assert len(category.clues) == 3
    first = category.clues[0]
    assert first.question == 'This Danish prince & his skull'
    assert first.answer == 'Hamlet'
    assert first.showing is RevealState.UNREVEALED
    assert first.id is None
    assert not hasattr(first, 'airdate')
    assert category.clues[1].answer == ''


def test_load_category_propagates_not_found():
    client = FakeTriviaClient({1: make_raw_category(1)})

    with pytest.raises(NotFoundError):
        asyncio.run(load_category(client, 99))


def test_load_category_propagates_network_errors():
    client = FakeTriviaClient({1: make_raw_category(1)}, errors={1: NetworkError("boom")})

    with pytest.raises(NetworkError):
        asyncio.run(load_category(client, 1))


def test_normalize_clue_handles_numeric_answers():
    clue = normalize_clue({'question': '2 + 2', 'answer': 4, 'value': 100})

    assert clue.answer == '4'
    assert clue.is_well_formed


# -- clue selector ------------------------------------------------------------


def _category(clue_count, malformed=()):
    clues = [
        Clue(question='' if i in malformed else f"Q{i}", answer='' if i in malformed else f"A{i}")
        for i in range(clue_count)
    ]
    return Category(title='Test', clues=clues, id=1)


@pytest.mark.parametrize('seed', range(20))
def test_selector_picks_five_distinct_well_formed_clues(seed):
    category = _category(12, malformed={0, 3, 4, 9})
    original = list(category.clues)
    selector = ClueSelector(clues_per_category=5, max_attempts=500, rng=random.Random(seed))

    selector.select(category)

    assert len(category.clues) == 5
    assert len({id(clue) for clue in category.clues}) == 5
    assert all(clue.question and clue.answer for clue in category.clues)
    assert all(any(clue is o for o in original) for clue in category.clues)


def test_selector_leaves_exact_size_category_untouched():
    category = _category(5)
    original = list(category.clues)
    selector = ClueSelector(clues_per_category=5, max_attempts=500)

    selector.select(category)

    assert category.clues == original


def test_selector_rejects_short_category():
    selector = ClueSelector(clues_per_category=5, max_attempts=500)

    with pytest.raises(ValidationError, match="only 4 clues"):
        selector.select(_category(4))


def test_selector_rejects_exact_size_category_with_malformed_clue():
    selector = ClueSelector(clues_per_category=5, max_attempts=500)

    with pytest.raises(ValidationError):
        selector.select(_category(5, malformed={2}))


def test_selector_rejects_category_with_too_few_well_formed_clues():
    """Every clue blank would otherwise never finish."""
    selector = ClueSelector(clues_per_category=5, max_attempts=500)

    with pytest.raises(ValidationError, match="well-formed"):
        selector.select(_category(9, malformed=set(range(9))))


def test_selector_stops_at_draw_limit():
    selector = ClueSelector(clues_per_category=5, max_attempts=3, rng=random.Random(0))

    with pytest.raises(GameAssemblyError):
        selector.select(_category(8))


def test_select_all_processes_every_category():
    categories = [_category(8) for _ in range(6)]
    selector = ClueSelector(clues_per_category=5, max_attempts=500, rng=random.Random(7))

    result = selector.select_all(categories)

    assert result == categories
    assert all(len(category.clues) == 5 for category in categories)
