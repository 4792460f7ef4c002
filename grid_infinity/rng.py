"""Seeded uniform stream used by board generation.

The stream is a plain MT19937 seeded with the classic ``init_genrand``
routine (the seeding used by C++ ``std::mt19937(seed)``), rather than
CPython's ``init_by_array`` seeding behind ``random.Random(seed)``. Uniform
values are built from two 32-bit outputs the same way libstdc++'s
``generate_canonical<double, 53>`` does, so a seed always maps to the same
board as existing ``*.infinity.json`` saves expect.

CPython's ``random.Random`` is reused as the MT19937 engine: its state is
loaded through ``setstate`` and ``getrandbits(32)`` returns raw engine output.
"""

import random

from grid_infinity.types import RngState

_N = 624
_MASK_32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0
_TWO_POW_64 = 18446744073709551616.0
_BELOW_ONE = 1.0 - 2.0**-53


def _init_genrand(seed: int) -> list[int]:
    mt = [seed & _MASK_32]
    for i in range(1, _N):
        prev = mt[i - 1]
        mt.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK_32)
    return mt


def seeded_state(seed: int) -> RngState:
    """Return the engine state for ``seed`` (reduced modulo 2**32).

    The position index is set to ``N`` so the first draw twists the state,
    exactly as a freshly seeded engine does.
    """
    return (3, tuple(_init_genrand(seed)) + (_N,), None)


def make_rng(state: RngState) -> random.Random:
    """Build a ``random.Random`` positioned at ``state``."""
    rng = random.Random()
    rng.setstate(state)
    return rng


def draw_uniform(rng: random.Random) -> float:
    """Draw one value in [0, 1) consuming two 32-bit engine outputs."""
    low = rng.getrandbits(32)
    high = rng.getrandbits(32)
    value = (low + high * _TWO_POW_32) / _TWO_POW_64
    if value >= 1.0:
        return _BELOW_ONE
    return value
