# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Batch verification: run one engine over a corpus of test cases, optionally several times in shuffled order,
and report whether every case passed along with the time spent computing.
'''

from os import environ
from random import Random
from time import perf_counter as now
from typing import NamedTuple, Sequence

from . import engines
from .corpus import corpus_max_len, TestCase
from .io import outL
from .seq import check_symbols


class RunConfig(NamedTuple):
  algorithm:str = 'br'
  loops:int = 1
  randomize:bool = False
  timings:bool = False
  verbose:bool = False
  seed:int|None = None


class RunResult(NamedTuple):
  ok:bool
  elapsed:float # Seconds spent in the engine, excluding shuffling.
  case_count:int
  max_len:int


def seed_from_env(name='DL_SEED') -> int|None:
  'Return the shuffle seed from the environment variable `name`, or None if it is not set.'
  val = environ.get(name)
  if not val: return None
  try: return int(val)
  except ValueError: raise ValueError(f'{name} must be an integer: {val!r}') from None


def run_corpus(cases:Sequence[TestCase], config:RunConfig) -> RunResult:
  '''
  Run the engine named by `config.algorithm` over `cases`, `config.loops` times.
  Every case is checked for 8-bit symbols before any computation; SymbolRangeError is raised for a violation.
  '''
  try: engine = engines[config.algorithm]
  except KeyError: raise ValueError(f'unknown algorithm: {config.algorithm!r}') from None
  if config.loops < 1: raise ValueError(f'loops must be positive: {config.loops}')

  for case in cases:
    check_symbols(case.a)
    check_symbols(case.b)

  order = list(cases)
  max_len = corpus_max_len(order)
  if config.verbose:
    outL(f'Testing {engine.desc} over a corpus of {len(order)} string pairs (max length {max_len}).')

  rng = Random(config.seed)
  ok = True
  elapsed = 0.0
  for _ in range(config.loops):
    if config.randomize: rng.shuffle(order)
    start = now()
    if not engine.verify_all(order, max_len, verbose=config.verbose): ok = False
    elapsed += now() - start

  if config.timings:
    outL(f'processing took {elapsed * 1000:.0f}ms')

  return RunResult(ok=ok, elapsed=elapsed, case_count=len(order), max_len=max_len)
