# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Damerau-Levenshtein edit distance by three historical algorithms:
* lw: the full matrix of Lowrance & Wagner (1975).
* uk: the expanding diagonal band of Ukkonen (1985).
* br: the tightened band of Berghel & Roach (1996), with a reusable scratch table.

Every engine offers the same contract: `*_distance(a, b)`, `*_verify(a, b, exp)` and `*_verify_all(cases, max_len)`.
'''

from typing import Callable, NamedTuple

from .berghel_roach import br_distance, br_verify, br_verify_all
from .lowrance_wagner import lw_distance, lw_verify, lw_verify_all
from .ukkonen import uk_distance, uk_verify, uk_verify_all


class Engine(NamedTuple):
  name:str
  desc:str
  distance:Callable[..., int]
  verify:Callable[..., bool]
  verify_all:Callable[..., bool]


engines:dict[str,Engine] = {
  'lw': Engine('lw', 'Lowrance & Wagner', lw_distance, lw_verify, lw_verify_all),
  'uk': Engine('uk', 'Ukkonen', uk_distance, uk_verify, uk_verify_all),
  'br': Engine('br', 'Berghel & Roach', br_distance, br_verify, br_verify_all),
}
