"""Tally results in JSON.

The result is written as a single pretty-printed JSON object::

    {
      "contest_id": 1,
      "total_votes": 3,
      "results": [
        {
          "choice_id": 2,
          "total_count": 2
        },
        {
          "choice_id": 1,
          "total_count": 1
        }
      ],
      "winner": {
        "id": 2,
        "text": "Option B"
      }
    }

The results are listed in the order of the tally ranking. If there is no
winner, ``winner`` is ``null``.
"""

import json
from typing import Any, Dict, Iterable

import votetally.io.core
from votetally.election import Choice
from votetally.evaluate import ChoiceResult, TallyResult
from votetally.persist import require_fields


class ResultParseError(votetally.io.core.ParseError):
    pass


def dump_lines(result: TallyResult) -> Iterable[str]:
    yield json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


dump, dumps = votetally.io.core.dumpers(dump_lines)


def load_lines(lines: Iterable[str]) -> TallyResult:
    return votetally.io.core.from_json(
        ''.join(lines),
        _result_from_dict,
        error=ResultParseError,
        what='tally result',
    )


load, loads = votetally.io.core.loaders(
    load_lines, error=ResultParseError
)


def _result_from_dict(value: Dict[str, Any]) -> TallyResult:
    fields = require_fields(
        value,
        {'contest_id': int, 'total_votes': int, 'results': list},
        'tally result',
        error=ResultParseError,
    )
    winner = value.get('winner')
    return TallyResult(
        contest_id=fields['contest_id'],
        total_votes=fields['total_votes'],
        results=[
            ChoiceResult(**require_fields(
                item,
                {'choice_id': int, 'total_count': int},
                'choice result',
                error=ResultParseError,
            ))
            for item in fields['results']
        ],
        winner=None if winner is None else Choice.from_dict(winner),
    )
