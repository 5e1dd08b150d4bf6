# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for contract and capacity violations.
A distance that differs from the expected value is not an error; `verify` functions report it by returning False.
'''

from typing import Any


class TableCapacityError(ValueError):
  '''
  Raised when a diagonal table is asked to hold a cell outside of its declared extent,
  e.g. when a reused table is too small for the sequence pair being compared.
  '''
  def __init__(self, msg:str, *, capacity:int, required:int) -> None:
    self.capacity = capacity
    self.required = required
    super().__init__(msg)


class SymbolRangeError(ValueError):
  'Raised when a sequence contains a symbol that is not an 8-bit code unit.'
  def __init__(self, seq:Any, index:int) -> None:
    self.seq = seq
    self.index = index
    super().__init__(f'symbol at index {index} is outside of the 8-bit range: {seq[index]!r}')


class CorpusParseError(ValueError):
  'Raised for a malformed line in a corpus file.'
