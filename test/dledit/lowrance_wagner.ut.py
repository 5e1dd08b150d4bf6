# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from contextlib import redirect_stdout
from io import StringIO
from itertools import product
from random import Random

from dledit.lowrance_wagner import lw_distance, lw_matrix, lw_verify, lw_verify_all
from dledit.seq import osa_distance
from utest import utest, utest_call, utest_symmetric, utest_val


utest(0, lw_distance, '', '')
utest(0, lw_distance, 'abc', 'abc')
utest(1, lw_distance, 'a', 'b')
utest(3, lw_distance, 'kitten', 'sitting')
utest(1, lw_distance, 'ab', 'ba')
utest(1, lw_distance, 'abcd', 'acbd')
utest_symmetric(utest, 3, lw_distance, '', 'abc')
utest_symmetric(utest, 2, lw_distance, 'ca', 'abc') # Transpose, then insert between the transposed pair.
utest_symmetric(utest, 3, lw_distance, 'saturday', 'sunday')
utest(3, lw_distance, b'kitten', b'sitting')
utest(1, lw_distance, [1, 2, 3], [1, 3, 2])

utest(True, lw_verify, 'kitten', 'sitting', 3)
utest(False, lw_verify, 'kitten', 'sitting', 2)

utest(True, lw_verify_all, [('a', 'b', 1), ('ab', 'ba', 1)], 2)
utest(False, lw_verify_all, [('a', 'b', 2), ('ab', 'ba', 1)], 2)
utest(True, lw_verify_all, [], 0)


@utest_call
def test_matrix_base_cases() -> None:
  h = lw_matrix('abc', 'de')
  utest_val([0, 1, 2, 3], [row[0] for row in h], 'first column')
  utest_val([0, 1, 2], h[0], 'first row')
  utest_val(3, h[3][2])


@utest_call
def test_verbose() -> None:
  out = StringIO()
  with redirect_stdout(out):
    lw_distance('ab', 'ba', verbose=True)
  lines = out.getvalue().splitlines()
  utest_val('computed distance is 1', lines[0])
  utest_val('| 0 | 1 | 2 |', lines[1])
  utest_val(4, len(lines), 'line count')


@utest_call
def test_metric() -> None:
  rng = Random(1)
  def rand_str() -> str: return ''.join(rng.choice('abc') for _ in range(rng.randrange(7)))
  strs = [rand_str() for _ in range(14)]
  for a, b in product(strs, repeat=2):
    d = lw_distance(a, b)
    utest_val(d, lw_distance(b, a), f'symmetry: {a!r} {b!r}')
    utest_val(a == b, d == 0, f'identity: {a!r} {b!r}')
    if d > osa_distance(a, b): utest_val(osa_distance(a, b), d, f'unrestricted <= restricted: {a!r} {b!r}')
  for a, b, c in product(strs[:8], repeat=3):
    ac = lw_distance(a, c)
    ab_bc = lw_distance(a, b) + lw_distance(b, c)
    if ac > ab_bc: utest_val(ab_bc, ac, f'triangle inequality: {a!r} {b!r} {c!r}')
