
import sys
import os
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import votetally.io.election
import votetally.io.result
import votetally.io.votes
from votetally.evaluate import tally, TallyResult, ChoiceResult
from votetally.election import Choice

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def load_data(name, module):
    with open(os.path.join(DATA_DIR, name), encoding='utf8') as infile:
        return module.load(infile)


def test_data_files():
    election = load_data('election.json', votetally.io.election)
    votes = load_data('votes.json', votetally.io.votes)
    result = tally(election, votes)
    with open(os.path.join(DATA_DIR, 'result.json'), encoding='utf8') as infile:
        expected_text = infile.read()
    assert json.loads(votetally.io.result.dumps(result)) == json.loads(expected_text)
    assert load_data('result.json', votetally.io.result) == result


def test_dumps_pretty():
    result = TallyResult(1, 1, [ChoiceResult(1, 1)], Choice(1, 'A'))
    assert votetally.io.result.dumps(result) == '\n'.join([
        '{',
        '  "contest_id": 1,',
        '  "total_votes": 1,',
        '  "results": [',
        '    {',
        '      "choice_id": 1,',
        '      "total_count": 1',
        '    }',
        '  ],',
        '  "winner": {',
        '    "id": 1,',
        '    "text": "A"',
        '  }',
        '}',
        '',
    ])


def test_dumps_no_winner():
    result = TallyResult(4, 0, [], None)
    assert json.loads(votetally.io.result.dumps(result)) == {
        'contest_id': 4,
        'total_votes': 0,
        'results': [],
        'winner': None,
    }


def test_loads_missing_winner():
    result = votetally.io.result.loads(
        '{"contest_id": 1, "total_votes": 0, "results": []}'
    )
    assert result == TallyResult(1, 0)


@pytest.mark.parametrize('text', [
    '{"contest_id": 1, "total_votes": 0}',
    '{"contest_id": 1, "total_votes": 0, "results": [{"choice_id": 1}]}',
    '{"contest_id": 1, "total_votes": 0, "results": [], "winner": {"id": 1}}',
    'null',
])
def test_loads_malformed(text):
    with pytest.raises(votetally.io.result.ResultParseError):
        votetally.io.result.loads(text)
