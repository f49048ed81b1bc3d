# generate nonsense paragraphs from a corpus, Mark V. Shaney style

import argparse
import logging
import random
import sys
from itertools import islice

import requests

import corpus
from shaney import Chain

log = logging.getLogger(__name__)


def count(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f'must not be negative: {value}')
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='mvs', description='Generate text from a word-level Markov chain')
    parser.add_argument('sources', nargs='*', metavar='SOURCE',
                        help='text files or http(s) URLs to learn from')
    parser.add_argument('-n', '--paragraphs', type=int, default=5,
                        help='number of paragraphs to output')
    parser.add_argument('--max-words', type=count, default=None,
                        help='cut each paragraph after this many words')
    parser.add_argument('--seed', type=int, help='random seed')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s')

    chain = Chain()
    try:
        corpus.ingest(chain, args.sources)
    except (OSError, requests.RequestException) as err:
        print(err, file=sys.stderr)
        return 1
    log.info('chain has %d prefixes, %d transitions', len(chain), chain.transitions())

    rand = random.Random(args.seed).randrange
    for _ in range(args.paragraphs):
        doc = islice(chain.generate(rand), args.max_words)
        print(' '.join(doc), end='\n\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
