# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Damerau-Levenshtein distance by the method of Berghel & Roach,
"An Extension of Ukkonen's Enhanced Dynamic Programming ASM Algorithm", ACM TOIS 14(1), 1996.

Like Ukkonen's method this computes f(k,p), the furthest row reached on diagonal k with p differences,
but it tightens the set of cells probed.
With d = n-m, f(d,p) depends only on the cells (k,q) with |k-d| <= p-q,
so when p grows by one the only new cells are the two diagonals d-(p-q) and d+(p-q) at each q < p.
Cells with |k| > q cannot be reached and are never written;
they keep the seed or sentinel values written when the table was created.
Since the distance is at least d, the rounds start at p = d.

The table may be owned by the caller and reused across comparisons, which avoids reallocating it for each pair;
it must have been created with a capacity no smaller than the longest sequence compared.
Calls sharing a table must not run concurrently.
'''

from typing import Hashable, Iterable, Iterator, NamedTuple, Sequence

from .diagonal import DiagonalTable, UNREACHED
from .io import outL
from .seq import shorter_first


class Band(NamedTuple):
  'The range of diagonals probed in one round.'
  p:int
  lo:int
  hi:int


def round_cells(d:int, p:int) -> Iterator[tuple[int,int]]:
  '''
  Yield the (k, q) cells that are newly needed for f(d,p) once f(d,p-1) is known, in dependency order:
  the two diagonals at distance p-q from d for each q < p, skipping unreachable cells, and finally (d,p).
  '''
  for q in range(p):
    inc = p - q
    for k in (d - inc, d + inc):
      if abs(k) <= q: yield k, q
  yield d, p


def round_band(d:int, p:int) -> Band:
  ks = [k for k, _ in round_cells(d, p)]
  return Band(p=p, lo=min(ks), hi=max(ks))


def _probe(a:Sequence[Hashable], b:Sequence[Hashable], f:DiagonalTable, k:int, p:int) -> int:
  'Compute f(k,p) from the cells of p-1.'
  m = len(a)
  n = len(b)
  end = min(m, n - k) # Last row on diagonal k.

  t = f[k, p-1] + 1 # Substitution.
  if 0 < t < m and k + t - 1 >= 0 and k + t < n and a[t-1] == b[k+t] and a[t] == b[k+t-1]:
    t += 1 # Transposition.
  t = max(t,
    f[k-1, p-1], # Insertion.
    f[k+1, p-1] + 1) # Deletion.
  if t > end: t = end

  while 0 <= t < end and a[t] == b[t+k]: t += 1 # Snake.
  return t if t >= -1 else UNREACHED


def br_distance(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], table:DiagonalTable|None=None, verbose=False) -> int:
  '''
  Compute the distance between the sequences.
  If `table` is provided it is used as scratch space; otherwise a table is allocated for this comparison.
  Raises TableCapacityError if `table` is too small for the pair.
  '''
  a, b = shorter_first(seq_a, seq_b)
  m = len(a)
  n = len(b)
  if table is None:
    table = DiagonalTable(n)
  else:
    table.require(n)
  d = n - m

  if verbose:
    outL(f'Comparing {a!r} ({m}) to {b!r} ({n}) starting k at {d}')
    outL('FKP:')
    table.write(k_min=-m, k_max=n)

  p = d
  while True:
    for k, q in round_cells(d, p):
      table[k, q] = _probe(a, b, table, k, q)
    if verbose:
      band = round_band(d, p)
      outL(f'round {p}: diagonals {band.lo}..{band.hi}; f({d}, {p}) = {table[d, p]}')
    if table[d, p] == m: break
    p += 1

  if verbose:
    outL(f'Computed distance: {p}')
  return p


def br_verify(seq_a:Sequence[Hashable], seq_b:Sequence[Hashable], exp:int, table:DiagonalTable|None=None,
 verbose=False) -> bool:
  'Return True if the Berghel-Roach distance between the sequences equals `exp`.'
  return br_distance(seq_a, seq_b, table=table, verbose=verbose) == exp


def br_verify_all(cases:Iterable[tuple[Sequence[Hashable], Sequence[Hashable], int]], max_len:int, verbose=False) -> bool:
  '''
  Verify every case; return True only if all of them pass.
  A single table with capacity `max_len` is allocated up front and reused for every comparison,
  so `max_len` must be at least the length of the longest sequence in `cases`.
  '''
  table = DiagonalTable(max_len)
  ok = True
  for a, b, exp in cases:
    if not br_verify(a, b, exp, table=table, verbose=verbose): ok = False
  return ok
