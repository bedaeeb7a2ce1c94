"""Votes in line-delimited JSON.

Every line holds a single vote object with integer ``contest_id`` and
``choice_id`` fields::

    {"contest_id": 1, "choice_id": 2}
    {"contest_id": 1, "choice_id": 1}

A line terminator after the last vote is optional. No line is ever skipped:
an empty or otherwise malformed line anywhere in the input is an error.
"""

import json
from typing import Iterable, List

import votetally.io.core
from votetally.vote import Vote


class VoteParseError(votetally.io.core.ParseError):
    pass


def load_lines(lines: Iterable[str]) -> List[Vote]:
    return [
        _parse_vote(line, line_no)
        for line_no, line in enumerate(lines, start=1)
    ]


load, loads = votetally.io.core.loaders(
    load_lines, error=VoteParseError
)


def _parse_vote(line: str, line_no: int) -> Vote:
    return votetally.io.core.from_json(
        line.rstrip('\r\n'),
        Vote.from_dict,
        error=VoteParseError,
        what=f'vote on line {line_no}',
    )


def dump_lines(votes: Iterable[Vote]) -> Iterable[str]:
    for vote in votes:
        yield json.dumps(vote.to_dict())


dump, dumps = votetally.io.core.dumpers(dump_lines)
