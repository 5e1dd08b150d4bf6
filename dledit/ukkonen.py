# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Damerau-Levenshtein distance by the expanding-band method of Ukkonen,
"Algorithms for Approximate String Matching", Information and Control 64, 1985 (algorithm 11 over algorithm 8),
with the adjacent transposition step of Berghel & Roach.

Instead of the full matrix, the engine computes f(k,p), the furthest row reached on diagonal k with p differences,
for p = -1, 0, 1, ... until diagonal n-m reaches row m; that p is the distance.
Round p only needs the diagonals |k| <= p, and diagonals closer to 0 than r = p - m have already reached their end.
Time is O(s*min(m,n)) for a distance s.

As with the other banded engine, transposed symbols may not be edited again,
so the result is the restricted distance (see `osa_distance`).
'''

from typing import Hashable, Iterable, Sequence

from .diagonal import DiagonalTable, UNREACHED
from .io import outL
from .seq import shorter_first


def _probe(a:Sequence[Hashable], b:Sequence[Hashable], f:DiagonalTable, k:int, p:int) -> int:
  'Compute f(k,p) from the cells of round p-1.'
  m = len(a)
  n = len(b)
  end = min(m, n - k) # Last row on diagonal k.

  t = f[k, p-1] + 1 # Substitution.
  if 0 < t < m and 0 < k + t < n and a[t-1] == b[k+t] and a[t] == b[k+t-1]:
    t += 1 # Transposition.
  t = max(t,
    f[k-1, p-1], # Insertion.
    f[k+1, p-1] + 1) # Deletion.
  if t > end: t = end
  elif t < 0: return UNREACHED

  while t < end and a[t] == b[t+k]: t += 1 # Snake.
  return t


def ukkonen(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable]) -> tuple[int, DiagonalTable]:
  'Compute the distance between the sequences; return the distance and the diagonal table.'
  a, b = shorter_first(seq_a, seq_b)
  m = len(a)
  n = len(b)
  f = DiagonalTable(n)
  d = n - m # The diagonal that ends at (m, n).

  p = -1
  r = p - m
  while f[d, p] != m:
    p += 1
    r += 1
    if r <= 0:
      bands = [range(-p, p + 1)]
    else:
      bands = [range(-m, -r + 1), range(r, min(n, p) + 1)]
    for band in bands:
      for k in band:
        f[k, p] = _probe(a, b, f, k, p)

  return p, f


def uk_distance(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], verbose=False) -> int:
  dist, f = ukkonen(seq_a, seq_b)
  if verbose:
    m, n = sorted((len(seq_a), len(seq_b)))
    f.write(k_min=-m, k_max=n)
    outL(f'Computed distance: {dist}')
  return dist


def uk_verify(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], exp:int, verbose=False) -> bool:
  'Return True if the Ukkonen distance between the sequences equals `exp`.'
  return uk_distance(seq_a, seq_b, verbose=verbose) == exp


def uk_verify_all(cases:Iterable[tuple[Sequence[Hashable], Sequence[Hashable], int]], max_len:int, verbose=False) -> bool:
  '''
  Verify every case; return True only if all of them pass.
  `max_len` is unused: each comparison allocates its own table.
  '''
  ok = True
  for a, b, exp in cases:
    if not uk_verify(a, b, exp, verbose=verbose): ok = False
  return ok
