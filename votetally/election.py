'''Election and choice specifications.

An :class:`Election` (a contest) is identified by an integer and offers an
ordered sequence of :class:`Choice` objects to vote for. Choice identifiers
are not required to be unique; duplicates are kept as separate entries in the
order they were given, and every lookup by identifier resolves to the first
of them.

Both classes are immutable. Elections are usually loaded from their JSON
form by :mod:`votetally.io.election`; the :meth:`Election.from_dict` and
``to_dict()`` methods convert from and to that form.
'''

from __future__ import annotations

import dataclasses
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from votetally.persist import simple_serialization, require_fields


class ElectionError(ValueError):
    '''An election definition is invalid.'''
    pass


@simple_serialization
@dataclasses.dataclass(frozen=True)
class Choice:
    '''A single option that can be voted for in an election.

    :param id: Identifier of the choice, unique within the election under
        normal circumstances.
    :param text: Text displayed for the choice.
    '''
    id: int
    text: str

    @classmethod
    def from_dict(cls, value: Dict[str, Any]) -> Choice:
        fields = require_fields(
            value, {'id': int, 'text': str}, 'choice', error=ElectionError
        )
        return cls(**fields)


@simple_serialization
@dataclasses.dataclass(frozen=True)
class Election:
    '''A single contest with an ordered sequence of choices.

    :param id: Identifier of the contest; votes refer to it by their
        contest identifier.
    :param description: Free-text description of the contest.
    :param choices: Choices available in the contest, in their display
        order. Any iterable is accepted and stored as a tuple.
    '''
    id: int
    description: str
    choices: Tuple[Choice, ...] = ()

    def __post_init__(self):
        if not isinstance(self.choices, tuple):
            object.__setattr__(self, 'choices', tuple(self.choices))

    def choice_ids(self) -> FrozenSet[int]:
        '''Return identifiers of all choices in the election.'''
        return frozenset(choice.id for choice in self.choices)

    def find_choice(self, choice_id: int) -> Optional[Choice]:
        '''Return the first choice with the given identifier, or None.'''
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None

    @classmethod
    def from_dict(cls, value: Dict[str, Any]) -> Election:
        '''Construct an election from its JSON-like dictionary form.

        Fields other than ``id``, ``description`` and ``choices`` are
        ignored.

        :raises ElectionError: If a required field is missing or has a wrong
            type, in the election itself or in any of its choices.
        '''
        fields = require_fields(
            value,
            {'id': int, 'description': str, 'choices': list},
            'election',
            error=ElectionError,
        )
        return cls(
            id=fields['id'],
            description=fields['description'],
            choices=_choices_from_list(fields['choices']),
        )


def _choices_from_list(values: Iterable[Any]) -> Tuple[Choice, ...]:
    return tuple(Choice.from_dict(value) for value in values)
