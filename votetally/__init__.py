"""Votetally - counting votes in a single-contest election.

An election (contest) offers a number of choices; voters cast votes, each
naming a contest and a choice. Votetally counts the votes valid for the
contest and determines a winner:

-   What the contest looks like is described by the :class:`Election` and
    :class:`Choice` objects from the ``election`` module.
-   Individual votes are :class:`Vote` objects from the ``vote`` module. They
    are not trusted; votes for other contests or unknown choices are simply
    not counted.
-   The counting itself is done by the :func:`tally` function of the
    ``evaluate`` module, producing a :class:`TallyResult` with vote counts of
    all choices ranked from the best, and the winner, if there is one. A tie
    for the first place means there is no winner.

The :mod:`io` subpackage reads elections and votes from their JSON forms and
writes the results, and ``python -m votetally`` wraps it all into a
commandline tool.
"""

from votetally.election import Election, Choice    # noqa: F401
from votetally.vote import Vote    # noqa: F401
from votetally.evaluate import tally, TallyResult, ChoiceResult    # noqa: F401
