"""A commandline tool to tally votes in a single-contest election.

Reads the election definition and line-delimited votes, counts the valid
votes, ranks the choices and writes the result with the winner, if any,
as JSON.
"""

import argparse
import logging
import sys
from typing import List, Optional

import votetally.io.election
import votetally.io.result
import votetally.io.votes
from votetally.evaluate import tally
from votetally.io.core import ParseError

DEFAULT_ELECTION_FILE = 'election.json'
DEFAULT_VOTES_FILE = 'votes.json'
DEFAULT_OUTPUT_FILE = 'result.json'

argparser = argparse.ArgumentParser(
    prog='votetally',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-e', '--election-file',
    default=DEFAULT_ELECTION_FILE,
    help='file to load the election definition from',
)
argparser.add_argument(
    '-V', '--votes-file',
    default=DEFAULT_VOTES_FILE,
    help='file to load votes from, one JSON object per line',
)
argparser.add_argument(
    '-o', '--output-file',
    default=DEFAULT_OUTPUT_FILE,
    help='file to write the tally result to',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages including ignored votes',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages other than errors',
)

logger = logging.getLogger('votetally')


def main(election_file: str = DEFAULT_ELECTION_FILE,
         votes_file: str = DEFAULT_VOTES_FILE,
         output_file: str = DEFAULT_OUTPUT_FILE,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    with open(election_file, encoding='utf8') as infile:
        election = votetally.io.election.load(infile)
    logger.info('loaded contest %d with %d choices',
                election.id, len(election.choices))
    with open(votes_file, encoding='utf8') as infile:
        votes = votetally.io.votes.load(infile)
    logger.info('loaded %d votes', len(votes))
    result = tally(election, votes)
    result_text = votetally.io.result.dumps(result)
    with open(output_file, 'w', encoding='utf8') as outfile:
        outfile.write(result_text)
    print(f'Tallying completed. Results written to {output_file}.')


def cli(argv: Optional[List[str]] = None) -> int:
    """Run the tool with the given arguments, returning the exit status."""
    args = argparser.parse_args(argv)
    try:
        main(**vars(args))
    except (OSError, ParseError) as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(cli())
