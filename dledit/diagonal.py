# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Offset-indexed storage for the diagonal function f(k,p) used by the banded engines.

f(k,p) is the furthest row reached on diagonal k (the cells (i, i+k)) using at most p differences.
Diagonals range over negative integers, and p starts at -1,
so the table stores f(k,p) at the shifted position (k + zero_k, p + 1).
'''

import sys
from typing import Iterator, TextIO

from .exceptions import TableCapacityError
from .io import writeL


UNREACHED = -(1 << 32)
#^ Sentinel for cells that have not been reached; smaller than any real row index, including the -1 seeds.


class DiagonalTable:
  '''
  Dense table of f(k,p) for diagonals k in [-capacity, capacity] and differences p in [-1, capacity].
  A table with capacity L can hold the computation for any pair of sequences no longer than L.

  Reading a cell outside of the declared extent returns UNREACHED;
  writing one raises TableCapacityError.

  On creation (and on `reset`) every cell is UNREACHED except for the seed values
  f(k,|k|-1) = |k|-1 for k < 0, and f(k,|k|-1) = -1 for k >= 0,
  which give the cost of reaching each diagonal by pure deletions or insertions.
  The engines only ever write cells with |k| <= p, so the seeds are never overwritten,
  which lets a single table be reused across comparisons without a reset.
  '''

  def __init__(self, capacity:int) -> None:
    if capacity < 0: raise ValueError(f'DiagonalTable capacity must be non-negative: {capacity}')
    self.capacity = capacity
    self.zero_k = capacity
    self.k_count = 2 * capacity + 1
    self.p_count = capacity + 2
    self.cells:list[int] = []
    self.reset()


  def __repr__(self) -> str:
    return f'{type(self).__qualname__}(capacity={self.capacity})'


  def __getitem__(self, kp:tuple[int,int]) -> int:
    k, p = kp
    ik = k + self.zero_k
    ip = p + 1
    if 0 <= ik < self.k_count and 0 <= ip < self.p_count:
      return self.cells[ik * self.p_count + ip]
    return UNREACHED


  def __setitem__(self, kp:tuple[int,int], val:int) -> None:
    k, p = kp
    ik = k + self.zero_k
    ip = p + 1
    if not (0 <= ik < self.k_count and 0 <= ip < self.p_count):
      raise TableCapacityError(f'cell f({k}, {p}) is outside of the table extent (capacity {self.capacity})',
        capacity=self.capacity, required=max(abs(k), p))
    self.cells[ik * self.p_count + ip] = val


  def reset(self) -> None:
    'Set every cell to UNREACHED, then write the seed values.'
    self.cells = [UNREACHED] * (self.k_count * self.p_count)
    for k in range(-self.capacity, self.capacity + 1):
      self[k, abs(k) - 1] = (-k - 1) if k < 0 else -1


  def require(self, length:int) -> None:
    'Raise TableCapacityError if the table cannot hold a comparison involving a sequence of `length`.'
    if length > self.capacity:
      raise TableCapacityError(f'sequence length {length} exceeds the table capacity {self.capacity}',
        capacity=self.capacity, required=length)


  def diagonal(self, k:int) -> list[int]:
    'Return the values of f(k,p) for p in [-1, capacity].'
    ik = k + self.zero_k
    if not 0 <= ik < self.k_count: raise IndexError(k)
    start = ik * self.p_count
    return self.cells[start:start + self.p_count]


  def reached(self, k:int) -> Iterator[tuple[int,int]]:
    'Yield (p, f(k,p)) pairs for the cells of diagonal `k` that hold a real value.'
    for p, val in enumerate(self.diagonal(k), -1):
      if val != UNREACHED: yield p, val


  def write(self, file:TextIO|None=None, k_min:int|None=None, k_max:int|None=None) -> None:
    'Write the table to `file` (std out by default), one diagonal per line; unreached cells are shown as "-".'
    if file is None: file = sys.stdout
    if k_min is None: k_min = -self.capacity
    if k_max is None: k_max = self.capacity
    width = len(str(self.capacity)) + 1
    header = ' '.join(f'{p:>{width}}' for p in range(-1, self.capacity + 1))
    writeL(file, f'{"k/p":>{width+1}} | ', header)
    for k in range(k_min, k_max + 1):
      row = ' '.join(('-' if val == UNREACHED else str(val)).rjust(width) for val in self.diagonal(k))
      writeL(file, f'{k:>{width+1}} | ', row)
