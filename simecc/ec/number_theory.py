#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

All moduli are assumed to be prime: inverses are computed
with Fermat's little theorem, not with the extended Euclidean algorithm.
"""

from typing import Optional

from simecc.exceptions import UndefinedInverseError
from simecc.utils import int_str


def reduce(x: int, p: int) -> int:
    "Return the canonical representative of x (mod p) in [0, p-1]."
    return x % p


def equal_mod(x: int, y: int, p: int) -> bool:
    "Return True if x and y are congruent (mod p)."
    return (y - x) % p == 0


def inverse(x: int, p: int) -> Optional[int]:
    """Return the inverse of x (mod p), or None if x = 0 (mod p).

    p must be a prime: x^(p-2) is the inverse of x
    as x^(p-1) = 1 (mod p) by Fermat's little theorem.
    """

    x %= p
    if x == 0:
        return None
    return pow(x, p - 2, p)


def mod_inv(x: int, p: int) -> int:
    """Return the inverse of x (mod p); p must be a prime.

    Unlike inverse, an UndefinedInverseError is raised if x = 0 (mod p).
    """

    inv = inverse(x, p)
    if inv is None:
        err_msg = f"No inverse for {int_str(x % p)} mod {int_str(p)}"
        raise UndefinedInverseError(err_msg)
    return inv

