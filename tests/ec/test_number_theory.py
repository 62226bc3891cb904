#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `simecc.ec.number_theory` module."

import pytest

from simecc.ec.number_theory import equal_mod, inverse, mod_inv, reduce
from simecc.exceptions import SimECCValueError, UndefinedInverseError

primes = [
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2**160 - 2**31 - 1,
    2**192 - 2**64 - 1,
    2**224 - 2**96 + 1,
    2**256 - 2**32 - 977,
    2**256 - 2**224 + 2**192 + 2**96 - 1,
    2**521 - 1,
]


def test_reduce() -> None:
    for p in primes:
        assert reduce(0, p) == 0
        assert reduce(p, p) == 0
        assert reduce(-1, p) == p - 1
        assert reduce(p + 3, p) == 3 % p
        assert reduce(-p - 3, p) == -3 % p
        assert reduce(p * p + p - 1, p) == p - 1
    # 3 is a multiple of the smallest modulus
    assert reduce(6, 3) == 0
    assert reduce(-7, 3) == 2


def test_equal_mod() -> None:
    for p in primes:
        assert equal_mod(1, p + 1, p)
        assert equal_mod(-1, p - 1, p)
        assert equal_mod(0, 0, p)
        assert not equal_mod(1, 2, p)
        assert not equal_mod(1, -1, p)


def test_inverse() -> None:
    for p in primes:
        assert inverse(0, p) is None
        assert inverse(p, p) is None
        assert inverse(-2 * p, p) is None
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = inverse(a, p)
            assert inv is not None
            assert 0 < inv < p
            assert a * inv % p == 1
            assert inverse(a + p, p) == inv
            assert inverse(-a, p) == p - inv


def test_mod_inv() -> None:
    for p in primes:
        with pytest.raises(UndefinedInverseError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        with pytest.raises(SimECCValueError, match="No inverse for 0 mod"):
            mod_inv(p, p)
        for a in range(1, min(p, 100)):
            assert mod_inv(a, p) == inverse(a, p)
