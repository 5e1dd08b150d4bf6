# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Damerau-Levenshtein distance by the full-matrix method of Lowrance & Wagner,
"An Extension of the String-to-String Correction Problem", JACM 22(2), 1975 ("Algorithm S").

Runs in O(m*n) time and space; it serves as the reference for the banded engines.
This computes the unrestricted distance: symbols between a transposed pair may also be edited.
'''

from typing import Hashable, Iterable, Sequence

from .io import outL


def lw_matrix(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable]) -> list[list[int]]:
  '''
  Compute the full distance matrix H, where H[i][j] is the distance between the first i symbols of `seq_a`
  and the first j symbols of `seq_b`.
  '''
  m = len(seq_a)
  n = len(seq_b)
  inf = m + n + 1

  # For each symbol c, da[c] is the last 1-based row of `seq_a` before the current row that holds c; 0 if none.
  da:dict[Hashable,int] = {}

  h = [[0] * (n + 1) for _ in range(m + 1)]
  for i in range(m + 1): h[i][0] = i
  for j in range(n + 1): h[0][j] = j

  for i in range(1, m + 1):
    a = seq_a[i - 1]
    db = 0 # Last column of this row in which `a` matched.
    row = h[i]
    prev_row = h[i - 1]
    for j in range(1, n + 1):
      b = seq_b[j - 1]
      i1 = da.get(b, 0)
      j1 = db
      if a == b:
        cost = 0
        db = j
      else:
        cost = 1
      dist = min(
        prev_row[j - 1] + cost, # Substitution or match.
        row[j - 1] + 1, # Insertion.
        prev_row[j] + 1) # Deletion.
      if i1 > 0 and j1 > 0: # Transposition, with the symbols in between deleted and inserted.
        dist = min(dist, h[i1 - 1][j1 - 1] + (i - i1 - 1) + 1 + (j - j1 - 1))
      row[j] = dist
    da[a] = i

  return h


def lw_distance(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], verbose=False) -> int:
  h = lw_matrix(seq_a, seq_b)
  dist = h[-1][-1]
  if verbose:
    outL(f'computed distance is {dist}')
    for row in h:
      outL('|', ''.join(f' {el} |' for el in row))
  return dist


def lw_verify(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], exp:int, verbose=False) -> bool:
  'Return True if the Lowrance-Wagner distance between the sequences equals `exp`.'
  return lw_distance(seq_a, seq_b, verbose=verbose) == exp


def lw_verify_all(cases:Iterable[tuple[Sequence[Hashable], Sequence[Hashable], int]], max_len:int, verbose=False) -> bool:
  '''
  Verify every case; return True only if all of them pass.
  `max_len` is unused: the matrix is sized per comparison.
  '''
  ok = True
  for a, b, exp in cases:
    if not lw_verify(a, b, exp, verbose=verbose): ok = False
  return ok
