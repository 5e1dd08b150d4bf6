# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exercise several ways of computing the Damerau-Levenshtein distance over corpora of test cases.
Exits with status 0 if the selected algorithm computes the known distance for every case, and 1 otherwise.
'''

from argparse import ArgumentParser
from typing import Sequence

from .. import engines
from ..corpus import load_corpus, TestCase
from ..exceptions import CorpusParseError, SymbolRangeError
from ..io import errL, outL
from ..runner import run_corpus, RunConfig, seed_from_env


algorithms_desc = '; '.join(f'{name}: {engine.desc}' for name, engine in engines.items())


def main(argv:Sequence[str]|None=None) -> None:
  parser = ArgumentParser(description='Compute the Damerau-Levenshtein distance for a corpus of string pairs '
    'and compare it to the known distance.')
  parser.add_argument('-algorithm', default='br', choices=list(engines),
    help=f'Algorithm to apply ({algorithms_desc}); default: br.')
  parser.add_argument('-loops', type=int, default=1, help='Run the corpus N times (for benchmarking).')
  parser.add_argument('-randomize', action='store_true', help='Shuffle the corpus before each loop.')
  parser.add_argument('-timings', action='store_true', help='Print the time spent computing, excluding parsing and shuffling.')
  parser.add_argument('-seed', type=int, default=None, help='Seed for shuffling; defaults to $DL_SEED.')
  parser.add_argument('-verbose', action='store_true', help='Print the internal tables of every comparison.')
  parser.add_argument('corpora', nargs='+', metavar='CORPUS',
    help='Text file with one test case per line: A, B and their distance, separated by tabs.')
  args = parser.parse_args(argv)

  if args.loops < 1: parser.error(f'-loops must be positive: {args.loops}')

  try: seed = args.seed if args.seed is not None else seed_from_env()
  except ValueError as e: parser.error(str(e))

  config = RunConfig(
    algorithm=args.algorithm,
    loops=args.loops,
    randomize=args.randomize,
    timings=args.timings,
    verbose=args.verbose,
    seed=seed)

  if config.verbose:
    outL(f'config: {config}')
    for path in args.corpora: outL(f'corpus: {path}')

  cases:list[TestCase] = []
  try:
    for path in args.corpora:
      cases.extend(load_corpus(path))
    result = run_corpus(cases, config)
  except (CorpusParseError, SymbolRangeError, OSError) as e:
    errL(f'dl: {e}')
    exit(127)

  exit(0 if result.ok else 1)


if __name__ == '__main__': main()
