'''Tally engine: count votes in a single contest and determine its winner.

The engine is a single pure function, :func:`tally`, operating on an
:class:`votetally.election.Election` and an iterable of
:class:`votetally.vote.Vote` objects. It performs no I/O and keeps no state
between calls.

Votes that refer to a different contest or to a choice not defined in the
election are not counted and do not produce errors. Every choice of the
election is reported in the result, including those with no votes, ranked in
descending order of votes; choices with equal counts keep their order from
the election definition.

The winner is the choice with the highest number of votes, unless

-   there are no choices,
-   the highest number of votes is zero, or
-   two or more choices share the highest number of votes (a tie).

In these cases, the result has no winner.
'''

from __future__ import annotations

import dataclasses
import logging
import operator
from typing import Dict, Iterable, List, Optional, Tuple

import votetally.util
import votetally.vote
from votetally.election import Choice, Election
from votetally.persist import simple_serialization
from votetally.vote import Vote

logger = logging.getLogger(__name__)


@simple_serialization
@dataclasses.dataclass(frozen=True)
class ChoiceResult:
    '''Number of valid votes received by a single choice.

    :param choice_id: Identifier of the choice.
    :param total_count: Number of valid votes cast for the choice.
    '''
    choice_id: int
    total_count: int


@simple_serialization
@dataclasses.dataclass(frozen=True)
class TallyResult:
    '''Outcome of tallying a single contest.

    :param contest_id: Identifier of the contest tallied.
    :param total_votes: Number of valid votes counted.
    :param results: Per-choice vote counts, in descending order of votes.
    :param winner: A copy of the winning choice, or None if there is no
        winner.
    '''
    contest_id: int
    total_votes: int
    results: Tuple[ChoiceResult, ...] = ()
    winner: Optional[Choice] = None

    def __post_init__(self):
        if not isinstance(self.results, tuple):
            object.__setattr__(self, 'results', tuple(self.results))

    @property
    def is_tie(self) -> bool:
        '''Whether two or more choices share the highest number of votes.'''
        return is_tie(self.results)

    def tied(self) -> List[ChoiceResult]:
        '''Return the results sharing the highest count if there is a tie.'''
        if not self.is_tie:
            return []
        top_count = self.results[0].total_count
        return [
            result for result in self.results
            if result.total_count == top_count
        ]


def tally(election: Election, votes: Iterable[Vote]) -> TallyResult:
    '''Count valid votes for each choice and determine the winner.

    :param election: The contest to tally. Its choices may be empty.
    :param votes: Votes to count, consumed once. Votes for other contests
        and for choices not present in the election are ignored.
    :returns: A new result object; the inputs are not modified.
    '''
    counts = count_votes(election, votes)
    results = rank_results([
        ChoiceResult(choice.id, counts.get(choice.id, 0))
        for choice in election.choices
    ])
    return TallyResult(
        contest_id=election.id,
        total_votes=sum(counts.values()),
        results=results,
        winner=determine_winner(election, results),
    )


def count_votes(election: Election,
                votes: Iterable[Vote],
                ) -> Dict[int, int]:
    '''Count valid votes per choice identifier.

    :returns: A mapping of choice identifiers to vote counts. Choices without
        any valid votes are absent.
    '''
    choice_ids = election.choice_ids()
    counts = {}
    n_wrong_contest = 0
    n_unknown_choice = 0
    for vote in votes:
        if vote.contest_id != election.id:
            n_wrong_contest += 1
        elif not votetally.vote.is_valid(vote, election.id, choice_ids):
            n_unknown_choice += 1
        else:
            votetally.util.add_to_count(counts, vote.choice_id)
    if n_wrong_contest:
        logger.debug('ignoring %d votes for contests other than %d',
                     n_wrong_contest, election.id)
    if n_unknown_choice:
        logger.debug('ignoring %d votes for unknown choices', n_unknown_choice)
    return counts


def rank_results(results: Iterable[ChoiceResult]) -> List[ChoiceResult]:
    '''Order choice results by vote count, highest first.

    The ordering is stable, so choices with equal counts stay in their
    input order.
    '''
    return votetally.util.sorted_descending(
        results, key=operator.attrgetter('total_count')
    )


def is_tie(ranked: List[ChoiceResult]) -> bool:
    '''Return True if the two best ranked results have equal counts.'''
    return (
        len(ranked) >= 2
        and ranked[0].total_count == ranked[1].total_count
    )


def determine_winner(election: Election,
                     ranked: List[ChoiceResult],
                     ) -> Optional[Choice]:
    '''Select the winning choice from ranked results.

    :param election: The contest the results belong to; the winner is looked
        up among its choices by identifier, taking the first match.
    :param ranked: Choice results ordered by :func:`rank_results`.
    :returns: A copy of the winning choice, or None if the results are empty,
        have no votes at the top or are tied at the top.
    '''
    if not ranked:
        logger.info('no choices in contest %d, no winner', election.id)
        return None
    best = ranked[0]
    if best.total_count == 0:
        logger.info('no valid votes in contest %d, no winner', election.id)
        return None
    if is_tie(ranked):
        logger.info('choices tied at %d votes in contest %d, no winner',
                    best.total_count, election.id)
        return None
    choice = election.find_choice(best.choice_id)
    logger.info('choice %d wins contest %d with %d votes',
                best.choice_id, election.id, best.total_count)
    return dataclasses.replace(choice)
