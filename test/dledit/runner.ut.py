# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from contextlib import redirect_stdout
from io import StringIO
from os import environ
from os.path import dirname, join

from dledit.corpus import load_corpus, TestCase
from dledit.exceptions import SymbolRangeError
from dledit.runner import run_corpus, RunConfig, seed_from_env
from utest import utest, utest_call, utest_exc, utest_val


cases = load_corpus(join(dirname(dirname(__file__)), 'corpus', 'basic.tsv'))

for algorithm in ['lw', 'uk', 'br']:
  result = run_corpus(cases, RunConfig(algorithm=algorithm))
  utest_val(True, result.ok, f'{algorithm} ok')
  utest_val(19, result.case_count, f'{algorithm} case count')
  utest_val(19, result.max_len, f'{algorithm} max len')
  result = run_corpus(cases, RunConfig(algorithm=algorithm, loops=3, randomize=True, seed=7))
  utest_val(True, result.ok, f'{algorithm} randomized ok')

# A wrong expected distance is reported as a failed run, not an exception.
bad_cases = [TestCase('a', 'b', 1), TestCase('kitten', 'sitting', 2)]
for algorithm in ['lw', 'uk', 'br']:
  utest_val(False, run_corpus(bad_cases, RunConfig(algorithm=algorithm)).ok, f'{algorithm} wrong distance')

utest_exc(SymbolRangeError, run_corpus, [TestCase('a', 'b', 1), TestCase('a', 'aĀ', 1)], RunConfig())
utest_exc(ValueError("unknown algorithm: 'xx'"), run_corpus, cases, RunConfig(algorithm='xx'))
utest_exc(ValueError('loops must be positive: 0'), run_corpus, cases, RunConfig(loops=0))

utest(True, lambda: run_corpus([], RunConfig()).ok)
utest(0, lambda: run_corpus([], RunConfig()).max_len)


@utest_call
def test_verbose_and_timings() -> None:
  out = StringIO()
  with redirect_stdout(out):
    run_corpus([TestCase('a', 'b', 1)], RunConfig(algorithm='lw', verbose=True, timings=True))
  lines = out.getvalue().splitlines()
  utest_val('Testing Lowrance & Wagner over a corpus of 1 string pairs (max length 1).', lines[0], 'header')
  utest_val(True, lines[-1].startswith('processing took ') and lines[-1].endswith('ms'), 'timings line')


@utest_call
def test_seed_from_env() -> None:
  name = 'DL_SEED_UTEST'
  environ.pop(name, None)
  utest(None, seed_from_env, name)
  environ[name] = '42'
  utest(42, seed_from_env, name)
  environ[name] = 'x'
  utest_exc(ValueError("DL_SEED_UTEST must be an integer: 'x'"), seed_from_env, name)
  del environ[name]
