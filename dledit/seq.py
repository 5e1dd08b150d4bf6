# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Sequence utilities shared by the distance engines.'

from typing import Sequence, TypeVar

from .exceptions import SymbolRangeError


_T = TypeVar('_T')


def check_symbols(seq:Sequence) -> None:
  '''
  Raise SymbolRangeError if `seq` contains a symbol that is not an 8-bit code unit.
  `bytes` and `bytearray` always pass; strings must consist of code points below 256.
  Other sequences are accepted as-is, since the engines only compare symbols for equality.
  '''
  if isinstance(seq, (bytes, bytearray)): return
  if isinstance(seq, str):
    for i, c in enumerate(seq):
      if ord(c) > 0xff: raise SymbolRangeError(seq, i)


def shorter_first(seq_a:Sequence[_T], seq_b:Sequence[_T]) -> tuple[Sequence[_T], Sequence[_T]]:
  'Return the pair ordered so that the first sequence is no longer than the second.'
  if len(seq_a) > len(seq_b): return seq_b, seq_a
  return seq_a, seq_b


def osa_distance(seq_a:Sequence[_T], seq_b:Sequence[_T]) -> int:
  '''
  Compute the restricted Damerau-Levenshtein distance ("optimal string alignment") between two sequences.
  Unlike the unrestricted distance computed by `lw_distance`,
  a transposed pair of symbols may not be edited again, so e.g. 'ca' -> 'abc' costs 3 rather than 2.
  This is the distance computed by the banded engines; it is used to cross-check them.
  '''
  la = len(seq_a)
  lb = len(seq_b)
  if la == 0: return lb
  if lb == 0: return la

  seq_a, seq_b = shorter_first(seq_a, seq_b)
  la, lb = len(seq_a), len(seq_b)

  d = [[0] * (lb + 1) for _ in range(la + 1)]
  for i in range(la + 1): d[i][0] = i
  for j in range(lb + 1): d[0][j] = j

  for i in range(1, la + 1):
    for j in range(1, lb + 1):
      cost = 0 if seq_a[i - 1] == seq_b[j - 1] else 1
      d[i][j] = min(
        d[i - 1][j] + 1, # Deletion.
        d[i][j - 1] + 1, # Insertion.
        d[i - 1][j - 1] + cost) # Substitution.
      if i > 1 and j > 1 and seq_a[i - 1] == seq_b[j - 2] and seq_a[i - 2] == seq_b[j - 1]:
        d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1) # Transposition.
  return d[la][lb]
