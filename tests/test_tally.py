
import sys
import os
import random

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.evaluate
from votetally.election import Election, Choice
from votetally.evaluate import tally, ChoiceResult
from votetally.vote import Vote

A = Choice(1, 'Option A')
B = Choice(2, 'Option B')
C = Choice(3, 'Option C')


def votes_for(*choice_ids, contest_id=1):
    return [Vote(contest_id, choice_id) for choice_id in choice_ids]


def test_no_choices():
    result = tally(Election(1, 'Empty Election', []), votes_for(1))
    assert result.contest_id == 1
    assert result.total_votes == 0
    assert result.results == ()
    assert result.winner is None


def test_empty_inputs():
    result = tally(Election(1, 'Empty Files Test', []), [])
    assert result.total_votes == 0
    assert not result.results
    assert result.winner is None


def test_tied_votes():
    result = tally(Election(1, 'Tied Election', [A, B]), votes_for(1, 2))
    assert result.total_votes == 2
    assert result.results == (ChoiceResult(1, 1), ChoiceResult(2, 1))
    assert result.winner is None
    assert result.is_tie
    assert result.tied() == [ChoiceResult(1, 1), ChoiceResult(2, 1)]


def test_invalid_choice():
    result = tally(Election(1, 'Invalid', [Choice(1, 'Valid')]), votes_for(99))
    assert result.total_votes == 0
    assert result.results == (ChoiceResult(1, 0), )
    assert result.winner is None


def test_other_contest():
    result = tally(Election(1, 'Nonexistent', [A]), votes_for(1, contest_id=2))
    assert result.total_votes == 0
    assert result.results == (ChoiceResult(1, 0), )
    assert result.winner is None


def test_single_vote():
    result = tally(Election(1, 'Single Vote Test', [A]), votes_for(1))
    assert result.total_votes == 1
    assert result.winner == A
    assert not result.is_tie
    assert result.tied() == []


def test_clear_winner():
    election = Election(7, 'Board', [A, B, C])
    votes = votes_for(3, 2, 3, 1, 3, 2, contest_id=7)
    result = tally(election, votes)
    assert result.contest_id == 7
    assert result.total_votes == 6
    assert result.results == (
        ChoiceResult(3, 3), ChoiceResult(2, 2), ChoiceResult(1, 1),
    )
    assert result.winner == C


def test_all_zero_no_winner():
    result = tally(Election(1, 'Silent', [A, B, C]), [])
    assert [r.total_count for r in result.results] == [0, 0, 0]
    assert [r.choice_id for r in result.results] == [1, 2, 3]
    assert result.winner is None


def test_tie_below_top_has_winner():
    result = tally(Election(1, 'Runners-up', [A, B, C]), votes_for(3, 3, 1, 2))
    assert result.winner == C
    assert result.results[1:] == (ChoiceResult(1, 1), ChoiceResult(2, 1))


def test_stable_order_for_equal_counts():
    election = Election(1, 'Order', [C, A, B])
    result = tally(election, votes_for(2, 2, 3, 1))
    assert [r.choice_id for r in result.results] == [2, 3, 1]


def test_duplicate_choice_ids():
    election = Election(1, 'Duplicate Choices', [
        Choice(1, 'Option A'),
        Choice(1, 'Option B'),
    ])
    result = tally(election, votes_for(1))
    assert result.total_votes == 1
    assert result.results == (ChoiceResult(1, 1), ChoiceResult(1, 1))
    assert result.winner is None


def test_duplicate_choice_ids_below_top():
    election = Election(1, 'Duplicate Losers', [
        Choice(2, 'Option B'),
        Choice(2, 'Option B again'),
        Choice(1, 'Option A'),
    ])
    result = tally(election, votes_for(1, 1, 1, 2))
    assert result.total_votes == 4
    assert len(result.results) == 3
    assert result.winner == Choice(1, 'Option A')


def test_winner_is_copy():
    election = Election(1, 'Copy', [A])
    result = tally(election, votes_for(1))
    assert result.winner == A
    assert result.winner is not A


def test_inputs_unchanged():
    election = Election(1, 'Board', [A, B])
    votes = votes_for(2, 1, 2, 5)
    votes_before = list(votes)
    tally(election, votes)
    assert votes == votes_before
    assert election.choices == (A, B)


def test_accepts_generator():
    election = Election(1, 'Board', [A, B])
    result = tally(election, (Vote(1, i % 2 + 1) for i in range(5)))
    assert result.total_votes == 5
    assert result.winner == A


def test_idempotent():
    election = Election(1, 'Board', [A, B, C])
    votes = votes_for(1, 2, 2, 3, 9) + votes_for(2, contest_id=4)
    assert tally(election, votes) == tally(election, votes)


@pytest.mark.parametrize('seed', range(10))
def test_random_properties(seed):
    rng = random.Random(seed)
    choices = [
        Choice(rng.randint(1, 6), f'Choice {i}')
        for i in range(rng.randint(0, 5))
    ]
    election = Election(3, 'Random', choices)
    votes = [
        Vote(rng.choice([2, 3, 3, 3]), rng.randint(1, 8))
        for i in range(rng.randint(0, 40))
    ]
    result = tally(election, votes)
    choice_ids = {choice.id for choice in choices}
    assert result.total_votes == sum(
        1 for vote in votes
        if vote.contest_id == 3 and vote.choice_id in choice_ids
    )
    assert len(result.results) == len(choices)
    counts = [r.total_count for r in result.results]
    assert counts == sorted(counts, reverse=True)
    if len(counts) >= 2 and counts[0] == counts[1]:
        assert result.winner is None
    if result.winner is not None:
        assert result.winner.id == result.results[0].choice_id
        assert result.winner == election.find_choice(result.winner.id)


def test_rank_results_stable():
    ranked = votetally.evaluate.rank_results([
        ChoiceResult(1, 0), ChoiceResult(2, 5), ChoiceResult(3, 0),
        ChoiceResult(4, 5),
    ])
    assert [r.choice_id for r in ranked] == [2, 4, 1, 3]


@pytest.mark.parametrize('ranked, expected', [
    ([], False),
    ([ChoiceResult(1, 3)], False),
    ([ChoiceResult(1, 3), ChoiceResult(2, 2)], False),
    ([ChoiceResult(1, 3), ChoiceResult(2, 3)], True),
    ([ChoiceResult(1, 0), ChoiceResult(2, 0)], True),
])
def test_is_tie(ranked, expected):
    assert votetally.evaluate.is_tie(ranked) == expected


@pytest.mark.parametrize('ranked, winner', [
    ([], None),
    ([ChoiceResult(1, 0)], None),
    ([ChoiceResult(1, 2)], A),
    ([ChoiceResult(2, 2), ChoiceResult(1, 1)], B),
    ([ChoiceResult(2, 2), ChoiceResult(1, 2)], None),
])
def test_determine_winner(ranked, winner):
    election = Election(1, 'Board', [A, B])
    assert votetally.evaluate.determine_winner(election, ranked) == winner


def test_logs_decision(caplog):
    with caplog.at_level('DEBUG', logger='votetally.evaluate'):
        tally(Election(1, 'Board', [A, B]), votes_for(1, 1, 5) + votes_for(1, contest_id=2))
    assert 'ignoring 1 votes for contests other than 1' in caplog.text
    assert 'ignoring 1 votes for unknown choices' in caplog.text
    assert 'choice 1 wins contest 1 with 2 votes' in caplog.text


def test_to_dict():
    result = tally(Election(1, 'Board', [A, B]), votes_for(2))
    assert result.to_dict() == {
        'contest_id': 1,
        'total_votes': 1,
        'results': [
            {'choice_id': 2, 'total_count': 1},
            {'choice_id': 1, 'total_count': 0},
        ],
        'winner': {'id': 2, 'text': 'Option B'},
    }


def test_to_dict_no_winner():
    result = tally(Election(1, 'Board', []), [])
    assert result.to_dict() == {
        'contest_id': 1,
        'total_votes': 0,
        'results': [],
        'winner': None,
    }
