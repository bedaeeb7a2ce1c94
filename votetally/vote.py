'''Vote specification and validity checks.

A vote names a contest and a choice within it. Votes come from untrusted
input, so nothing guarantees that the contest or the choice exists; the
tally simply does not count votes that do not fit the election being
evaluated. :func:`is_valid` states that criterion.
'''

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Collection

from votetally.persist import simple_serialization, require_fields


class VoteError(ValueError):
    '''A vote record is structurally invalid.

    Raised only when constructing votes from their dictionary form; votes
    that are well-formed but refer to unknown contests or choices are not
    errors.
    '''
    pass


@simple_serialization
@dataclasses.dataclass(frozen=True)
class Vote:
    '''A single vote cast for a choice in a contest.

    :param contest_id: Identifier of the election the vote was cast in.
    :param choice_id: Identifier of the choice voted for.
    '''
    contest_id: int
    choice_id: int

    @classmethod
    def from_dict(cls, value: Dict[str, Any]) -> Vote:
        fields = require_fields(
            value,
            {'contest_id': int, 'choice_id': int},
            'vote',
            error=VoteError,
        )
        return cls(**fields)


def is_valid(vote: Vote,
             contest_id: int,
             choice_ids: Collection[int],
             ) -> bool:
    '''Return True if the vote counts in the given contest.

    :param vote: The vote to check.
    :param contest_id: Identifier of the contest being tallied.
    :param choice_ids: Identifiers of the choices defined in the contest.
    '''
    return vote.contest_id == contest_id and vote.choice_id in choice_ids
