# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Corpus files of test cases.

Each line holds three tab-separated fields: string A, string B, and their known distance in base 10.
Empty lines and lines beginning with '#' are ignored.
Files are decoded as latin-1, so that every symbol is a single 8-bit code unit.
For example (with "\\t" standing for a tab):

  # Test file:
  a\\tb\\t1
  kitten\\tsitting\\t3
'''

from typing import Iterable, Iterator, NamedTuple

from .exceptions import CorpusParseError
from .seq import shorter_first


class TestCase(NamedTuple):
  'Two strings and the known distance between them.'
  a:str
  b:str
  dist:int


def parse_corpus(name:str, lines:Iterable[str]) -> Iterator[TestCase]:
  '''
  Parse corpus lines into test cases. `name` is used in error messages.
  Each pair is ordered so that the first string is no longer than the second.
  '''
  for line_num, line in enumerate(lines, 1):
    line = line.rstrip('\n\r')
    if not line or line.startswith('#'): continue
    fields = line.split('\t', 2)
    if len(fields) < 3: raise CorpusParseError(f'{name}:{line_num}: expected three tab-separated fields: {line!r}')
    a, b, dist_str = fields
    try: dist = int(dist_str)
    except ValueError: raise CorpusParseError(f'{name}:{line_num}: invalid distance: {dist_str!r}') from None
    if dist < 0: raise CorpusParseError(f'{name}:{line_num}: negative distance: {dist}')
    a, b = shorter_first(a, b)
    yield TestCase(a, b, dist)


def load_corpus(path:str) -> list[TestCase]:
  with open(path, encoding='latin-1', newline='') as f:
    return list(parse_corpus(path, f))


def corpus_max_len(cases:Iterable[TestCase]) -> int:
  'Return the length of the longest string in `cases`.'
  return max((max(len(c.a), len(c.b)) for c in cases), default=0)
