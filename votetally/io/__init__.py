"""Input/output of election definitions, votes and tally results.

This subpackage is structured into modules by record type. Each module
provides ``load()`` and ``loads()`` functions to read its format from a file
or a string, and ``dump()`` and ``dumps()`` functions to write it:

-   :mod:`votetally.io.election` - a single JSON object defining the contest
    and its choices.
-   :mod:`votetally.io.votes` - line-delimited JSON, one vote per line.
-   :mod:`votetally.io.result` - a pretty-printed JSON object with the tally
    result.

Malformed input raises a subclass of :class:`votetally.io.core.ParseError`;
errors opening or writing files propagate unchanged.
"""

from votetally.io.core import ParseError    # noqa: F401
