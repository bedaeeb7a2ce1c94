"""Election definitions in JSON.

The election is a single JSON object::

    {
      "id": 1,
      "description": "Board election",
      "choices": [
        {"id": 1, "text": "Option A"},
        {"id": 2, "text": "Option B"}
      ]
    }

All of ``id``, ``description`` and ``choices`` are required, as are ``id``
and ``text`` of each choice. Other fields are ignored.
"""

import json
from typing import Iterable

import votetally.io.core
from votetally.election import Election


class ElectionParseError(votetally.io.core.ParseError):
    pass


def load_lines(lines: Iterable[str]) -> Election:
    return votetally.io.core.from_json(
        ''.join(lines),
        Election.from_dict,
        error=ElectionParseError,
        what='election definition',
    )


load, loads = votetally.io.core.loaders(
    load_lines, error=ElectionParseError
)


def dump_lines(election: Election) -> Iterable[str]:
    yield json.dumps(election.to_dict(), indent=2, ensure_ascii=False)


dump, dumps = votetally.io.core.dumpers(dump_lines)
