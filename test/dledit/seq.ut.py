# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dledit.exceptions import SymbolRangeError
from dledit.seq import check_symbols, osa_distance, shorter_first
from utest import utest, utest_exc, utest_symmetric


utest(None, check_symbols, 'kitten')
utest(None, check_symbols, 'caf\xe9\xff')
utest(None, check_symbols, b'\x00\xff')
utest(None, check_symbols, [1, 2, 3])
utest_exc(SymbolRangeError, check_symbols, 'cafē')
utest_exc(SymbolRangeError('☃', 0), check_symbols, '☃')

utest(('ab', 'abc'), shorter_first, 'ab', 'abc')
utest(('ab', 'abc'), shorter_first, 'abc', 'ab')
utest(('ba', 'ab'), shorter_first, 'ba', 'ab') # Equal lengths keep their order.

utest(0, osa_distance, '', '')
utest_symmetric(utest, 1, osa_distance, 'a', '')
utest(1, osa_distance, 'a', 'b')
utest_symmetric(utest, 1, osa_distance, 'a', 'ab')
utest_symmetric(utest, 1, osa_distance, 'ab', 'b')
utest(1, osa_distance, 'ab', 'ba')
utest(2, osa_distance, 'ab', 'cd')
utest(1, osa_distance, 'abcd', 'acbd')
utest_symmetric(utest, 3, osa_distance, 'ca', 'abc') # The restricted distance cannot edit a transposed pair again.
utest(3, osa_distance, b'kitten', b'sitting')
